#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/ast/walk.py
"""Recursive traversal and reconstruction of pandoc JSON trees.

``walk`` visits every tagged element of an arbitrary decoded JSON value,
hands it to a filter action, and rebuilds the value from the action's
results. ``walk_async`` does the same for actions that return awaitables.

What the action returns decides what happens to the element:

- ``None`` (or any other falsy value that is not a list) keeps the element.
- An element replaces it in place.
- A list is spliced into the enclosing list in place of the element. An
  empty list deletes the element; several entries become consecutive
  siblings in the order given. Entries are not validated, so raw values may
  be spliced in next to elements.

Recursion always continues into the *result*: the children of a replacement
are walked, and the children of an element the action left alone are still
visited. A replacement whose kind differs from every kind already produced
for that position is itself offered to the action, so rewrites chain
(``Emph -> Strong -> SmallCaps``) until the action declines or hands back a
kind produced earlier in the chain, in which case the last rewrite stands:
a filter swapping ``Emph`` and ``Strong`` turns each into the other.
Rewriting an element into another of the same kind (e.g. upper-casing a
``Str``) is applied once.

Examples
--------
Drop every emphasis and upper-case all text:

    >>> def action(elem, fmt, meta):
    ...     if elem["t"] == "Emph":
    ...         return []
    ...     if elem["t"] == "Str":
    ...         return {"t": "Str", "c": elem["c"].upper()}
    >>> walk([{"t": "Para", "c": [{"t": "Str", "c": "hi"}, {"t": "Emph", "c": []}]}], action, "", {})
    [{'t': 'Para', 'c': [{'t': 'Str', 'c': 'HI'}]}]

"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from pandoc_filter.ast.nodes import Action, Element, PandocMetaMap, is_element
from pandoc_filter.constants import TAG_KEY


def _members(result: Any, element: Element) -> list[Any]:
    """Turn an action result into the list of values that take the element's place."""
    if isinstance(result, list):
        return result
    return [result or element]


def _settle(member: Any, element: Element, seen: frozenset[str]) -> tuple[Any, bool]:
    """Decide what becomes of one member of an action result.

    Returns the value to keep and whether it must be offered to the action
    again. A member of the element's own kind is final. A member whose kind
    appeared earlier in the rewrite chain is dropped in favour of ``element``.
    """
    if not is_element(member) or member[TAG_KEY] == element[TAG_KEY]:
        return member, False
    if member[TAG_KEY] in seen:
        return element, False
    return member, True


def _resolve(element: Element, action: Action, format: str, meta: PandocMetaMap, seen: frozenset[str]) -> list[Any]:
    resolved = []
    for member in _members(action(element, format, meta), element):
        value, again = _settle(member, element, seen)
        if again:
            resolved.extend(_resolve(value, action, format, meta, seen | {value[TAG_KEY]}))
        else:
            resolved.append(value)
    return resolved


async def _resolve_async(
    element: Element, action: Callable[..., Any], format: str, meta: PandocMetaMap, seen: frozenset[str]
) -> list[Any]:
    result = action(element, format, meta)
    if inspect.isawaitable(result):
        result = await result
    resolved = []
    for member in _members(result, element):
        value, again = _settle(member, element, seen)
        if again:
            resolved.extend(await _resolve_async(value, action, format, meta, seen | {value[TAG_KEY]}))
        else:
            resolved.append(value)
    return resolved


def walk(x: Any, action: Action, format: str, meta: PandocMetaMap) -> Any:
    """Walk a tree, applying an action to every tagged element.

    Parameters
    ----------
    x : Any
        The value to traverse: a list, a dict, or a scalar
    action : Action
        Callable ``(element, format, meta)`` returning None, an element, or
        a list of values to splice in place of the element
    format : str
        Target output format, passed through to the action
    meta : PandocMetaMap
        Document metadata, passed through to the action

    Returns
    -------
    Any
        A newly built value of the same shape. Lists and tuples come back as
        lists, dicts as dicts with the same key order, scalars unchanged.

    Notes
    -----
    Exceptions raised by ``action`` propagate unchanged and abort the walk.
    The input is never modified.

    """
    if isinstance(x, (list, tuple)):
        array = []
        for item in x:
            if is_element(item):
                for z in _resolve(item, action, format, meta, frozenset((item[TAG_KEY],))):
                    array.append(walk(z, action, format, meta))
            else:
                array.append(walk(item, action, format, meta))
        return array
    elif isinstance(x, dict):
        return {k: walk(v, action, format, meta) for k, v in x.items()}
    return x


async def walk_async(x: Any, action: Callable[..., Any], format: str, meta: PandocMetaMap) -> Any:
    """Walk a tree with an asynchronous action.

    Same contract as :func:`walk`. The action may be a coroutine function or
    a plain callable; its result is awaited only when it is awaitable.
    Elements are processed strictly one after another: an element and its
    whole subtree are finished before the next sibling is offered to the
    action. Nothing is scheduled concurrently.

    Parameters
    ----------
    x : Any
        The value to traverse
    action : AsyncAction or Action
        Callable ``(element, format, meta)`` returning (an awaitable of)
        None, an element, or a list
    format : str
        Target output format, passed through to the action
    meta : PandocMetaMap
        Document metadata, passed through to the action

    Returns
    -------
    Any
        The rebuilt value

    """
    if isinstance(x, (list, tuple)):
        array = []
        for item in x:
            if is_element(item):
                for z in await _resolve_async(item, action, format, meta, frozenset((item[TAG_KEY],))):
                    array.append(await walk_async(z, action, format, meta))
            else:
                array.append(await walk_async(item, action, format, meta))
        return array
    elif isinstance(x, dict):
        obj = {}
        for k, v in x.items():
            obj[k] = await walk_async(v, action, format, meta)
        return obj
    return x


__all__ = ["walk", "walk_async"]
