"""Command-line entry point: print the heading outline of an HTML file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from heading_outline.config import (
    HEADING_OUTLINE_LOG_LEVEL,
    HEADING_OUTLINE_MAX_LEVEL,
    HEADING_OUTLINE_MIN_LEVEL,
)
from heading_outline.exceptions import HeadingOutlineError, InputError
from heading_outline.outline import extract_outline
from heading_outline.output_formatter import format_flat, format_outline

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heading-outline",
        description="Extract h1-h6 headings from rendered HTML and print them as an outline.",
    )
    parser.add_argument("file", nargs="?", default="-", help="HTML file to read ('-' or omitted for stdin)")
    parser.add_argument("--min-level", type=int, default=HEADING_OUTLINE_MIN_LEVEL, help="Shallowest heading level to keep")
    parser.add_argument("--max-level", type=int, default=HEADING_OUTLINE_MAX_LEVEL, help="Deepest heading level to keep")
    parser.add_argument(
        "--format",
        choices=("tree", "flat", "json"),
        default="tree",
        help="Output format (default: tree)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=HEADING_OUTLINE_LOG_LEVEL if HEADING_OUTLINE_LOG_LEVEL in _LOG_LEVELS else "WARNING",
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        markup = load_html(args.file)
        result = extract_outline(markup, min_level=args.min_level, max_level=args.max_level)
    except HeadingOutlineError as exc:
        print(f"heading-outline: error: {exc}", file=sys.stderr)
        return 2

    logger.info("Found %d headings in %s", len(result.headings), args.file)

    if args.format == "json":
        print(result.model_dump_json(indent=2))
    elif args.format == "flat":
        output = format_flat(result)
        if output:
            print(output)
    else:
        print(format_outline(result))
    return 0


def load_html(file_path: str) -> str:
    """Read markup from ``file_path``, or from stdin when it is ``-``."""
    if file_path == "-":
        return sys.stdin.read()

    path = Path(file_path)
    if not path.is_file():
        raise InputError(f"HTML file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Could not read {path}: {exc}") from exc
