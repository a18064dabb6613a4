#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/filter.py
"""Top-level entry points for writing pandoc filters.

A filter script is usually just an action plus one call::

    #!/usr/bin/env python
    from pandoc_filter import Str, to_json_filter

    def caps(elem, fmt, meta):
        if elem["t"] == "Str":
            return Str(elem["c"].upper())

    if __name__ == "__main__":
        to_json_filter(caps)

``to_json_filter`` reads the JSON-formatted document pandoc writes to the
filter's stdin, walks its body with the action, and writes the resulting
document to stdout. The target format is taken from the first command line
argument, which is how pandoc invokes filters.

Only the document body (``blocks``) is walked. The metadata is handed to the
action as context and passed through to the output untouched.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import IO, Any, Callable, Sequence

from pandoc_filter.ast.nodes import Action, PandocDocument
from pandoc_filter.ast.walk import walk, walk_async
from pandoc_filter.constants import BLOCKS_KEY, META_KEY
from pandoc_filter.serialization import read_document, write_document

logger = logging.getLogger(__name__)


def _action_name(action: Callable[..., Any]) -> str:
    return getattr(action, "__qualname__", None) or type(action).__name__


def _format_from_argv(argv: Sequence[str] | None) -> str:
    if argv is None:
        argv = sys.argv
    return argv[1] if len(argv) > 1 else ""


def apply_filter(doc: PandocDocument, action: Action, format: str = "") -> PandocDocument:
    """Filter a decoded document with a single action.

    Parameters
    ----------
    doc : PandocDocument
        Decoded document with ``meta`` and ``blocks``
    action : Action
        Callable ``(element, format, meta)``
    format : str, default ""
        Target output format handed to the action

    Returns
    -------
    PandocDocument
        A new document: every key of ``doc`` is kept, ``blocks`` is replaced
        by the walked body

    """
    meta = doc.get(META_KEY, {})
    logger.debug("Applying action %s (format=%r)", _action_name(action), format)
    result = dict(doc)
    result[BLOCKS_KEY] = walk(doc[BLOCKS_KEY], action, format, meta)
    return result  # type: ignore[return-value]


async def apply_filter_async(doc: PandocDocument, action: Callable[..., Any], format: str = "") -> PandocDocument:
    """Filter a decoded document with an asynchronous action.

    See :func:`apply_filter`; elements are awaited one at a time, in document
    order.
    """
    meta = doc.get(META_KEY, {})
    logger.debug("Applying async action %s (format=%r)", _action_name(action), format)
    result = dict(doc)
    result[BLOCKS_KEY] = await walk_async(doc[BLOCKS_KEY], action, format, meta)
    return result  # type: ignore[return-value]


def apply_filters(doc: PandocDocument, actions: Sequence[Action], format: str = "") -> PandocDocument:
    """Apply several actions, each as a full walk over the previous result."""
    for action in actions:
        doc = apply_filter(doc, action, format)
    return doc


async def apply_filters_async(
    doc: PandocDocument, actions: Sequence[Callable[..., Any]], format: str = ""
) -> PandocDocument:
    """Asynchronous :func:`apply_filters`; actions may mix sync and async callables."""
    for action in actions:
        doc = await apply_filter_async(doc, action, format)
    return doc


def to_json_filters(
    actions: Sequence[Action],
    *,
    argv: Sequence[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Run a list of actions as a stdin-to-stdout JSON filter.

    Parameters
    ----------
    actions : sequence of Action
        Actions applied in order
    argv : sequence of str, optional
        Command line; the target format is ``argv[1]`` when present.
        Defaults to ``sys.argv``.
    stdin, stdout : text streams, optional
        Defaults to ``sys.stdin`` / ``sys.stdout``

    Notes
    -----
    Any exception raised by an action propagates before anything has been
    written, so no partial document is ever emitted.

    """
    format = _format_from_argv(argv)
    doc = read_document(stdin or sys.stdin)
    output = apply_filters(doc, actions, format)
    write_document(output, stdout or sys.stdout)


def to_json_filter(
    action: Action,
    *,
    argv: Sequence[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Convert an action into a JSON filter reading stdin and writing stdout.

    The action is called as ``action(element, format, meta)`` for every
    element of the document body. If it returns None, the element is left
    unchanged. If it returns an element, the element is replaced. If it
    returns a list, the list is spliced in place of the element (so returning
    an empty list deletes it).
    """
    to_json_filters([action], argv=argv, stdin=stdin, stdout=stdout)


def to_json_filters_async(
    actions: Sequence[Callable[..., Any]],
    *,
    argv: Sequence[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Run asynchronous actions as a JSON filter under a fresh event loop."""
    format = _format_from_argv(argv)
    doc = read_document(stdin or sys.stdin)
    output = asyncio.run(apply_filters_async(doc, actions, format))
    write_document(output, stdout or sys.stdout)


def to_json_filter_async(
    action: Callable[..., Any],
    *,
    argv: Sequence[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Asynchronous counterpart of :func:`to_json_filter`."""
    to_json_filters_async([action], argv=argv, stdin=stdin, stdout=stdout)


# Aliases
stdio = to_json_filter
stdio_async = to_json_filter_async


__all__ = [
    "apply_filter",
    "apply_filter_async",
    "apply_filters",
    "apply_filters_async",
    "to_json_filter",
    "to_json_filters",
    "to_json_filter_async",
    "to_json_filters_async",
    "stdio",
    "stdio_async",
]
