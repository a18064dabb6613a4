#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the pandoc_filter library.

Constants are organized by category:
1. Element Tags - the discriminant values of pandoc's JSON AST
2. Document Keys - top-level keys of a serialized pandoc document
3. Configuration - file names and environment variables
4. Exit Codes - process exit status for the command line driver
"""

from __future__ import annotations

# =============================================================================
# Element Tags
# =============================================================================

#: Discriminant key carried by every element
TAG_KEY = "t"

#: Payload key (absent for zero-arity elements such as ``Space``)
CONTENT_KEY = "c"

BLOCK_TAGS: frozenset[str] = frozenset(
    {
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
    }
)

INLINE_TAGS: frozenset[str] = frozenset(
    {
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
        "RawInline",
        "Link",
        "Image",
        "Note",
        "Span",
    }
)

META_TAGS: frozenset[str] = frozenset(
    {
        "MetaMap",
        "MetaList",
        "MetaBool",
        "MetaString",
        "MetaInlines",
        "MetaBlocks",
    }
)

# =============================================================================
# Document Keys
# =============================================================================

API_VERSION_KEY = "pandoc-api-version"
META_KEY = "meta"
BLOCKS_KEY = "blocks"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".pandoc-filter.toml", ".pandoc-filter.yaml", ".pandoc-filter.yml", ".pandoc-filter.json"]
PYPROJECT_TOOL_SECTION = "pandoc-filter"

ENV_CONFIG = "PANDOC_FILTER_CONFIG"
ENV_ACTIONS = "PANDOC_FILTER_ACTIONS"
ENV_LOG_LEVEL = "PANDOC_FILTER_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

#: Entry point group scanned by ``load_action`` for named actions
ACTION_ENTRY_POINT_GROUP = "pandoc_filter.actions"

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
