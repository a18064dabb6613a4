#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/ast/nodes.py
"""Element shapes and constructors for pandoc's JSON AST.

Pandoc serializes every document element as a JSON object carrying a
discriminant ``"t"`` (the element kind, e.g. ``"Para"``) and, for most kinds,
a payload ``"c"``. This module keeps those elements as plain ``dict`` objects:
the tree walker only ever asks "is this an element?", never "what does this
element mean?", so no class per kind is needed.

The constructors below build well-formed elements and guard their arity::

    >>> from pandoc_filter.ast.nodes import Para, Str, Space
    >>> Para([Str("Hello"), Space(), Str("world")])
    {'t': 'Para', 'c': [{'t': 'Str', 'c': 'Hello'}, {'t': 'Space'}, {'t': 'Str', 'c': 'world'}]}

"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, NamedTuple, TypedDict, Union

from pandoc_filter.constants import CONTENT_KEY, TAG_KEY
from pandoc_filter.exceptions import ArityError

# Type aliases
Element = Dict[str, Any]
Tree = List[Element]
MetaValue = Dict[str, Any]
PandocMetaMap = Dict[str, MetaValue]
AttrList = List[List[str]]

PandocDocument = TypedDict(
    "PandocDocument",
    {
        "pandoc-api-version": List[int],
        "meta": PandocMetaMap,
        "blocks": Tree,
    },
    total=False,
)


class Attr(NamedTuple):
    """Identifier, classes and key-value pairs carried by many element kinds.

    Being a tuple, it serializes to the three-element JSON array pandoc expects.
    """

    identifier: str
    classes: List[str]
    keyvals: AttrList


# What an action may hand back for one element:
#   None (or another falsy non-list) -> keep the element
#   an element                       -> replace it
#   a list                           -> splice the list in its place
ActionResult = Union[None, Element, List[Any]]
Action = Callable[[Element, str, PandocMetaMap], ActionResult]
AsyncAction = Callable[[Element, str, PandocMetaMap], Awaitable[ActionResult]]


def is_element(value: Any) -> bool:
    """Return True if ``value`` is a tagged element.

    Only the presence of the discriminant key is checked; the tag value and
    the payload are never inspected.

    Parameters
    ----------
    value : Any
        Any decoded JSON value

    Returns
    -------
    bool
        True when ``value`` is a mapping carrying a ``"t"`` key

    """
    return isinstance(value, dict) and TAG_KEY in value


def get_tag(element: Element) -> str:
    """Return the tag of an element."""
    return element[TAG_KEY]


def get_content(element: Element, default: Any = None) -> Any:
    """Return the payload of an element, or ``default`` for zero-arity kinds."""
    return element.get(CONTENT_KEY, default)


def elt(tag: str, numargs: int) -> Callable[..., Element]:
    """Create a constructor function for elements of kind ``tag``.

    The returned function takes exactly ``numargs`` positional arguments.
    With a single argument the payload is that argument itself; with several
    the payload is the list of arguments. Zero-arity kinds carry no payload key at all,
    which is how pandoc itself serializes ``Space`` and friends.

    Parameters
    ----------
    tag : str
        Element kind, e.g. ``"Header"``
    numargs : int
        Number of payload components the kind requires

    Returns
    -------
    Callable[..., Element]
        Constructor raising ``ArityError`` on a wrong argument count

    Examples
    --------
    >>> Header = elt("Header", 3)
    >>> Header(1, ["intro", [], []], [])
    {'t': 'Header', 'c': [1, ['intro', [], []], []]}
    >>> Header(1)
    Traceback (most recent call last):
        ...
    pandoc_filter.exceptions.ArityError: Header expects 3 arguments, but given 1

    """

    def fun(*args: Any) -> Element:
        if len(args) != numargs:
            raise ArityError(tag, numargs, len(args))
        if numargs == 0:
            return {TAG_KEY: tag}
        if numargs == 1:
            return {TAG_KEY: tag, CONTENT_KEY: args[0]}
        return {TAG_KEY: tag, CONTENT_KEY: list(args)}

    fun.__name__ = tag
    fun.__qualname__ = tag
    fun.__doc__ = f"Construct a {tag} element from {numargs} payload argument(s)."
    return fun


# Constructors for block elements

Plain = elt("Plain", 1)
Para = elt("Para", 1)
LineBlock = elt("LineBlock", 1)
CodeBlock = elt("CodeBlock", 2)
RawBlock = elt("RawBlock", 2)
BlockQuote = elt("BlockQuote", 1)
OrderedList = elt("OrderedList", 2)
BulletList = elt("BulletList", 1)
DefinitionList = elt("DefinitionList", 1)
Header = elt("Header", 3)
HorizontalRule = elt("HorizontalRule", 0)
Table = elt("Table", 5)
Div = elt("Div", 2)
Null = elt("Null", 0)

# Constructors for inline elements

Str = elt("Str", 1)
Emph = elt("Emph", 1)
Strong = elt("Strong", 1)
Strikeout = elt("Strikeout", 1)
Superscript = elt("Superscript", 1)
Subscript = elt("Subscript", 1)
SmallCaps = elt("SmallCaps", 1)
Quoted = elt("Quoted", 2)
Cite = elt("Cite", 2)
Code = elt("Code", 2)
Space = elt("Space", 0)
SoftBreak = elt("SoftBreak", 0)
LineBreak = elt("LineBreak", 0)
Math = elt("Math", 2)
Formula = Math
RawInline = elt("RawInline", 2)
Link = elt("Link", 3)
Image = elt("Image", 3)
Note = elt("Note", 1)
Span = elt("Span", 2)

# Constructors for metadata values

MetaMap = elt("MetaMap", 1)
MetaList = elt("MetaList", 1)
MetaBool = elt("MetaBool", 1)
MetaString = elt("MetaString", 1)
MetaInlines = elt("MetaInlines", 1)
MetaBlocks = elt("MetaBlocks", 1)


__all__ = [
    # Type aliases
    "Element",
    "Tree",
    "MetaValue",
    "PandocMetaMap",
    "Attr",
    "AttrList",
    "PandocDocument",
    "ActionResult",
    "Action",
    "AsyncAction",
    # Helpers
    "is_element",
    "get_tag",
    "get_content",
    "elt",
    # Block constructors
    "Plain",
    "Para",
    "LineBlock",
    "CodeBlock",
    "RawBlock",
    "BlockQuote",
    "OrderedList",
    "BulletList",
    "DefinitionList",
    "Header",
    "HorizontalRule",
    "Table",
    "Div",
    "Null",
    # Inline constructors
    "Str",
    "Emph",
    "Strong",
    "Strikeout",
    "Superscript",
    "Subscript",
    "SmallCaps",
    "Quoted",
    "Cite",
    "Code",
    "Space",
    "SoftBreak",
    "LineBreak",
    "Math",
    "Formula",
    "RawInline",
    "Link",
    "Image",
    "Note",
    "Span",
    # Metadata constructors
    "MetaMap",
    "MetaList",
    "MetaBool",
    "MetaString",
    "MetaInlines",
    "MetaBlocks",
]
