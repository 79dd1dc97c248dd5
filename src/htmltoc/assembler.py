"""Document assembly: load, scan, build the table of contents and splice.

Each stage returns a new list of lines; nothing is modified in place.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import structlog

from htmltoc.errors import ErrorCode, HtmlTocError
from htmltoc.parser import TOC_MARKER, scan_headings
from htmltoc.toc import TITLE_MARKER, build_toc, is_excluded

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from htmltoc.models import ScanResult

log = structlog.get_logger()


# ASCII whitespace and NUL only; NBSP and other Unicode spaces are content.
_STRIP_CHARS = " \t\n\v\f\r\0"


def strip_line(line: str) -> str:
    return line.strip(_STRIP_CHARS)


def split_lines(content: str) -> list[str]:
    """Split on LF only and strip each line.

    A trailing LF does not start an extra empty line. Bare CR, form feed and
    Unicode line separators stay inside their line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [strip_line(line) for line in lines]


def load_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read ``path`` in one go and return its lines, stripped."""
    try:
        with path.open("r", encoding=encoding, newline="") as fh:
            content = fh.read()
    except FileNotFoundError as exc:
        raise HtmlTocError(
            code=ErrorCode.INPUT_NOT_FOUND,
            message=f"Input document not found: {path}",
            suggestion="Run from the directory holding the document or pass its path explicitly.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise HtmlTocError(
            code=ErrorCode.INPUT_DECODE_FAILED,
            message=f"Input document is not valid {encoding}: {path}",
            suggestion="Set HTMLTOC__DOCUMENT__ENCODING to the document's encoding.",
        ) from exc
    except OSError as exc:
        raise HtmlTocError(
            code=ErrorCode.INPUT_READ_FAILED,
            message=f"Could not read input document {path}: {exc.strerror or exc}",
            suggestion="Check that the path is a readable file.",
        ) from exc

    lines = split_lines(content)
    log.debug("document_loaded", path=str(path), lines=len(lines))
    return lines


def splice(lines: Sequence[str], toc: str, anchor_index: int) -> list[str]:
    """Return ``lines`` with the stripped lines of ``toc`` after ``anchor_index``."""
    position = anchor_index + 1
    inserted = split_lines(toc)
    return [*lines[:position], *inserted, *lines[position:]]


def _log_scan(scan: ScanResult, *, title_marker: str, toc_marker: str) -> None:
    log.debug(
        "headings_scanned",
        headings=len(scan.headings),
        anchor_index=scan.anchor_index,
    )

    if not any(toc_marker in heading.text for heading in scan.headings):
        log.warning("toc_anchor_missing", marker=toc_marker, anchor_index=scan.anchor_index)

    listed = [
        heading
        for heading in scan.headings
        if not is_excluded(heading, title_marker=title_marker, toc_marker=toc_marker)
    ]
    for heading in listed:
        if not heading.anchor:
            log.warning("empty_anchor", text=heading.text, line=heading.index + 1)

    # Identifiers are left as-is; duplicates only get reported.
    counts = Counter(heading.anchor for heading in scan.headings)
    for anchor, count in counts.items():
        if anchor and count > 1:
            log.warning("duplicate_anchor", anchor=anchor, count=count)


def transform_lines(
    lines: Sequence[str],
    *,
    title_marker: str = TITLE_MARKER,
    toc_marker: str = TOC_MARKER,
) -> list[str]:
    """Anchor every heading and insert the table of contents."""
    scan = scan_headings(lines, toc_marker=toc_marker)
    _log_scan(scan, title_marker=title_marker, toc_marker=toc_marker)

    toc = build_toc(scan.headings, title_marker=title_marker, toc_marker=toc_marker)
    return splice(scan.lines, toc, scan.anchor_index)


def transform_document(
    content: str,
    *,
    title_marker: str = TITLE_MARKER,
    toc_marker: str = TOC_MARKER,
) -> str:
    lines = transform_lines(
        split_lines(content),
        title_marker=title_marker,
        toc_marker=toc_marker,
    )
    return "\n".join(lines)
