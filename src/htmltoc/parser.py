"""Heading scanner for single-line HTML headings.

Single-pass algorithm that finds ``<hN>text</hN>`` lines, records them in
document order, remembers where the table of contents belongs and rewrites
each heading to carry its anchor as an ``id`` attribute.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from htmltoc.models import Heading, ScanResult
from htmltoc.slug import slugify

if TYPE_CHECKING:
    from collections.abc import Sequence

TOC_MARKER = "Table of contents"

# Whole line only; the closing tag must repeat the opening level.
_HEADING_RE = re.compile(r"<h([1-6])>(.+)</h\1>")


def match_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, text)`` if ``line`` is exactly one heading element."""
    match = _HEADING_RE.fullmatch(line)
    if not match:
        return None
    return int(match.group(1)), match.group(2)


def render_heading(level: int, text: str) -> str:
    return f"<h{level} id='{slugify(text)}'>{text}</h{level}>"


def scan_headings(lines: Sequence[str], *, toc_marker: str = TOC_MARKER) -> ScanResult:
    """Scan ``lines`` for headings and return the rewritten document.

    The anchor index is the position of the last heading whose text contains
    ``toc_marker``, or 0 when there is none.
    """
    rewritten: list[str] = []
    headings: list[Heading] = []
    anchor_index = 0

    for index, line in enumerate(lines):
        found = match_heading(line)
        if found is None:
            rewritten.append(line)
            continue

        level, text = found
        headings.append(Heading(line=line, index=index, level=level, text=text))

        if toc_marker in text:
            anchor_index = index

        rewritten.append(render_heading(level, text))

    return ScanResult(lines=rewritten, headings=headings, anchor_index=anchor_index)
