#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/ast/utils.py
"""Utility functions built on the tree walker.

Functions
---------
stringify : Concatenate the plain text of a tree, leaving out all formatting
attributes : Build a pandoc ``Attr`` triple from a dictionary

Examples
--------
    >>> from pandoc_filter.ast.nodes import Para, Space, Str, Emph
    >>> stringify(Para([Str("Hello"), Space(), Emph([Str("world")])]))
    'Hello world'
    >>> attributes({"id": "fig1", "classes": ["wide"], "width": "50%"})
    Attr(identifier='fig1', classes=['wide'], keyvals=[['width', '50%']])

"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pandoc_filter.ast.nodes import Attr, Element, get_content, is_element
from pandoc_filter.ast.walk import walk
from pandoc_filter.constants import TAG_KEY

# Element kinds rendered as a single space
_BREAK_TAGS = frozenset({"Space", "SoftBreak", "LineBreak"})


def stringify(x: Any) -> str:
    """Walk the tree ``x`` and return its concatenated text content.

    ``Str`` contributes its text, ``Code`` and ``Math`` their source string,
    and ``Space``, ``SoftBreak`` and ``LineBreak`` a single space. Every other
    element contributes nothing itself, but its descendants are visited.

    Parameters
    ----------
    x : Tree, Element, or MetaString value
        A list of elements, a single element, or any value containing
        elements. A ``MetaString`` is returned verbatim without walking.

    Returns
    -------
    str
        The concatenated text

    """
    if is_element(x) and x[TAG_KEY] == "MetaString":
        return get_content(x, "")

    result: list[str] = []

    def go(elem: Element, format: str, meta: Any) -> None:
        tag = elem[TAG_KEY]
        if tag == "Str":
            result.append(elem["c"])
        elif tag in ("Code", "Math"):
            result.append(elem["c"][1])
        elif tag in _BREAK_TAGS:
            result.append(" ")

    # A bare element is wrapped so the walker offers it to the action too.
    walk([x] if is_element(x) else x, go, "", {})
    return "".join(result)


def attributes(attrs: Optional[Mapping[str, Any]] = None) -> Attr:
    """Return an attribute list, constructed from the dictionary ``attrs``.

    The ``id`` key fills the identifier slot and ``classes`` the class list;
    every other key becomes a ``[key, value]`` pair in mapping order.

    Parameters
    ----------
    attrs : Mapping[str, Any], optional
        Attribute dictionary; None is treated as empty

    Returns
    -------
    Attr
        ``(identifier, classes, keyvals)``, a named tuple

    Examples
    --------
    >>> attributes({})
    Attr(identifier='', classes=[], keyvals=[])

    """
    attrs = attrs or {}
    ident = attrs.get("id") or ""
    classes = list(attrs.get("classes") or [])
    keyvals = [[k, v] for k, v in attrs.items() if k not in ("id", "classes")]
    return Attr(ident, classes, keyvals)


__all__ = ["stringify", "attributes"]
