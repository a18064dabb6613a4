#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/pandoc_filter/serialization.py
"""Reading and writing pandoc JSON documents.

Pandoc hands a filter the document as a single JSON object::

    {"pandoc-api-version": [1, 23, 1], "meta": {...}, "blocks": [...]}

and expects the same shape back. Only the outer shape is checked here; the
elements themselves are passed through untouched.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any

from pandoc_filter.ast.nodes import PandocDocument
from pandoc_filter.constants import BLOCKS_KEY, META_KEY
from pandoc_filter.exceptions import ParsingError, RenderingError

logger = logging.getLogger(__name__)


def document_from_dict(data: Any) -> PandocDocument:
    """Validate the outer shape of a decoded document.

    Parameters
    ----------
    data : Any
        Decoded JSON value

    Returns
    -------
    PandocDocument
        The same object, with ``meta`` defaulted to ``{}`` when missing

    Raises
    ------
    ParsingError
        If ``data`` is not an object with a ``blocks`` list and a ``meta`` map

    """
    if not isinstance(data, dict):
        raise ParsingError(
            f"Expected a pandoc document object, got {type(data).__name__}", parsing_stage="document"
        )
    if not isinstance(data.get(BLOCKS_KEY), list):
        raise ParsingError("Pandoc document has no 'blocks' list", parsing_stage="document")
    meta = data.setdefault(META_KEY, {})
    if not isinstance(meta, dict):
        raise ParsingError(
            f"Pandoc document 'meta' must be an object, got {type(meta).__name__}", parsing_stage="document"
        )
    return data  # type: ignore[return-value]


def load_document(text: str | bytes) -> PandocDocument:
    """Decode a JSON-formatted pandoc document.

    Raises
    ------
    ParsingError
        If the text is not valid JSON or not a pandoc document

    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParsingError(f"Invalid JSON input: {e}", parsing_stage="json", original_error=e) from e
    doc = document_from_dict(data)
    logger.debug("Loaded pandoc document with %d top-level blocks", len(doc[BLOCKS_KEY]))
    return doc


def dump_document(doc: Any) -> str:
    """Encode a pandoc document as compact JSON.

    Raises
    ------
    RenderingError
        If the document holds values JSON cannot represent

    """
    try:
        return json.dumps(doc, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise RenderingError(f"Could not encode document as JSON: {e}", rendering_stage="json", original_error=e) from e


def read_document(stream: IO[str]) -> PandocDocument:
    """Read and decode a whole document from a text stream."""
    return load_document(stream.read())


def write_document(doc: Any, stream: IO[str]) -> None:
    """Encode ``doc`` and write it to a text stream.

    The document is fully encoded before anything is written, so an encoding
    failure leaves the stream untouched.
    """
    text = dump_document(doc)
    try:
        stream.write(text)
        stream.flush()
    except OSError as e:
        raise RenderingError(f"Could not write output: {e}", rendering_stage="write", original_error=e) from e


__all__ = ["document_from_dict", "load_document", "dump_document", "read_document", "write_document"]
