"""Nested ``<ul>`` table of contents built from scanned headings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from htmltoc.parser import TOC_MARKER

if TYPE_CHECKING:
    from collections.abc import Iterable

    from htmltoc.models import Heading

TITLE_MARKER = "Vulkan notes"

# The title is level 1, so the outermost list holds level 2 headings.
_BASE_DEPTH = 2


def is_excluded(heading: Heading, *, title_marker: str, toc_marker: str) -> bool:
    """True for the document title and the table of contents heading itself."""
    return title_marker in heading.line or toc_marker in heading.line


def build_toc(
    headings: Iterable[Heading],
    *,
    title_marker: str = TITLE_MARKER,
    toc_marker: str = TOC_MARKER,
) -> str:
    """Return the table of contents markup, one tag per line.

    Lines emitted while walking the headings are indented by the current
    depth; the closes after the last heading are not. Level jumps open or
    close one list per intermediate level, so the result is always balanced.
    """
    parts = ["<ul>\n"]
    depth = _BASE_DEPTH

    for heading in headings:
        if is_excluded(heading, title_marker=title_marker, toc_marker=toc_marker):
            continue

        while heading.level > depth:
            parts.append(f"{' ' * depth}<ul>\n")
            depth += 1

        while heading.level < depth:
            parts.append(f"{' ' * depth}</ul>\n")
            depth -= 1

        parts.append(f"{' ' * depth}<li><a href='#{heading.anchor}'>{heading.text}</a></li>\n")

    # Trailing closes are unindented. A stray level-1 heading has already
    # closed the outermost list, leaving nothing to close here.
    while depth >= _BASE_DEPTH:
        parts.append("</ul>\n")
        depth -= 1

    return "".join(parts)
