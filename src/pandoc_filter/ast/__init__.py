#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/ast/__init__.py
"""Pandoc JSON AST: element shapes, constructors, and the tree walker.

This package provides:
- Element constructors with arity checks (``Para``, ``Str``, ``Header``...)
- The synchronous and asynchronous tree walkers
- Text extraction and attribute helpers built on the walker

Examples
--------
Upper-case every string in a tree:

    >>> from pandoc_filter.ast import Para, Str, walk
    >>> def shout(elem, fmt, meta):
    ...     if elem["t"] == "Str":
    ...         return Str(elem["c"].upper())
    >>> walk([Para([Str("quiet")])], shout, "html", {})
    [{'t': 'Para', 'c': [{'t': 'Str', 'c': 'QUIET'}]}]

"""

from pandoc_filter.ast.nodes import (
    Action,
    ActionResult,
    AsyncAction,
    Attr,
    AttrList,
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    Div,
    Element,
    Emph,
    Formula,
    Header,
    HorizontalRule,
    Image,
    LineBlock,
    LineBreak,
    Link,
    Math,
    MetaBlocks,
    MetaBool,
    MetaInlines,
    MetaList,
    MetaMap,
    MetaString,
    MetaValue,
    Note,
    Null,
    OrderedList,
    PandocDocument,
    PandocMetaMap,
    Para,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    Tree,
    elt,
    get_content,
    get_tag,
    is_element,
)
from pandoc_filter.ast.utils import attributes, stringify
from pandoc_filter.ast.walk import walk, walk_async

__all__ = [
    # Types
    "Action",
    "ActionResult",
    "AsyncAction",
    "Attr",
    "AttrList",
    "Element",
    "MetaValue",
    "PandocDocument",
    "PandocMetaMap",
    "Tree",
    # Helpers
    "elt",
    "get_content",
    "get_tag",
    "is_element",
    # Walking
    "walk",
    "walk_async",
    "stringify",
    "attributes",
    # Blocks
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
    # Inlines
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
    # Metadata
    "MetaMap",
    "MetaList",
    "MetaBool",
    "MetaString",
    "MetaInlines",
    "MetaBlocks",
]
