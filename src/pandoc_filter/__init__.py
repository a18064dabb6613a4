"""pandoc_filter - write pandoc filters in Python.

pandoc can hand a document to an external program as JSON, let it rewrite
the document's abstract syntax tree, and read the result back. This library
takes care of everything but the rewriting itself: decoding the document,
walking every element of the tree, applying a user-supplied action to each
one, splicing the action's results back in, and encoding the output.

Key Features
------------
- Synchronous and asynchronous tree walkers with identical semantics
- Replace, delete or expand elements by what the action returns
- Text extraction (``stringify``) and attribute helpers
- Element constructors with arity checks
- Tag-dispatched action registries
- A ``pandoc-filter`` command that runs actions named in configuration

Requirements
------------
- Python 3.10+

Examples
--------
A complete filter script::

    #!/usr/bin/env python
    from pandoc_filter import Str, to_json_filter

    def caps(elem, fmt, meta):
        if elem["t"] == "Str":
            return Str(elem["c"].upper())

    if __name__ == "__main__":
        to_json_filter(caps)

Run it with ``pandoc doc.md --filter ./caps.py -o doc.html``.

See Also
--------
pandoc_filter.ast : element constructors and the tree walker
pandoc_filter.hooks : tag-dispatched actions

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "pandoc_filter requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from pandoc_filter.ast import *  # noqa: E402,F401,F403
from pandoc_filter.ast import __all__ as _ast_all  # noqa: E402
from pandoc_filter.exceptions import (  # noqa: E402
    ActionLoadError,
    ArityError,
    PandocFilterError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from pandoc_filter.filter import (  # noqa: E402
    apply_filter,
    apply_filter_async,
    apply_filters,
    apply_filters_async,
    stdio,
    stdio_async,
    to_json_filter,
    to_json_filter_async,
    to_json_filters,
    to_json_filters_async,
)
from pandoc_filter.hooks import AsyncTagActions, TagActions  # noqa: E402
from pandoc_filter.serialization import dump_document, load_document  # noqa: E402

__all__ = [
    "__version__",
    *_ast_all,
    # Exceptions
    "PandocFilterError",
    "ValidationError",
    "ArityError",
    "ActionLoadError",
    "ParsingError",
    "RenderingError",
    # Entry points
    "apply_filter",
    "apply_filter_async",
    "apply_filters",
    "apply_filters_async",
    "to_json_filter",
    "to_json_filter_async",
    "to_json_filters",
    "to_json_filters_async",
    "stdio",
    "stdio_async",
    # Hooks
    "TagActions",
    "AsyncTagActions",
    # Serialization
    "load_document",
    "dump_document",
]
