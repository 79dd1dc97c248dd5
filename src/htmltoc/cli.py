"""Command-line entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Resolve the input document from arguments and Settings
- Run the transform and write the document to stdout
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from htmltoc import __version__
from htmltoc.assembler import load_lines, transform_lines
from htmltoc.config import Settings
from htmltoc.errors import HtmlTocError

if TYPE_CHECKING:
    from collections.abc import Sequence

log = structlog.get_logger()


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout carries the transformed document
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmltoc",
        description="Anchor HTML headings and insert a nested table of contents.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="HTML document to read (default: document.input_path, vknotes.html)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    _setup_logging(settings)

    document = settings.document
    path: Path = args.input or document.input_path

    try:
        lines = load_lines(path, document.encoding)
    except HtmlTocError as exc:
        log.error("input_read_failed", code=exc.code, path=str(path))
        print(f"error: {exc.message}", file=sys.stderr)
        print(exc.suggestion, file=sys.stderr)
        return 1

    output = transform_lines(
        lines,
        title_marker=document.title_marker,
        toc_marker=document.toc_marker,
    )
    print("\n".join(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
