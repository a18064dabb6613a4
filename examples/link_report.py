#!/usr/bin/env python3
"""Append a numbered list of every link target to the document.

Demonstrates an asynchronous action: each link is handed to ``check_link``,
which stands in for a network lookup, and the walker awaits them one at a
time in document order.

Usage
-----
    pandoc notes.md --filter ./link_report.py -o notes.html
"""

import asyncio
import json
import sys

from pandoc_filter import (
    OrderedList,
    Para,
    Plain,
    Str,
    apply_filter_async,
    dump_document,
    load_document,
    stringify,
)

links: list[tuple[str, str]] = []


async def check_link(url: str) -> str:
    await asyncio.sleep(0)
    return "ok" if url.startswith(("http://", "https://", "#")) else "unchecked"


async def collect(elem, fmt, meta):
    if elem["t"] == "Link":
        _attr, text, (url, _title) = elem["c"]
        status = await check_link(url)
        links.append((stringify(text) or url, f"{url} ({status})"))
    return None


async def main() -> None:
    doc = load_document(sys.stdin.read())
    fmt = sys.argv[1] if len(sys.argv) > 1 else ""
    doc = await apply_filter_async(doc, collect, fmt)
    if links:
        items = [[Plain([Str(f"{label}: {target}")])] for label, target in links]
        doc["blocks"] = [*doc["blocks"], Para([Str("Links")]), OrderedList([1, {"t": "Decimal"}, {"t": "Period"}], items)]
    sys.stdout.write(dump_document(doc))


if __name__ == "__main__":
    asyncio.run(main())
