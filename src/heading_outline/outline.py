"""Outline pipeline: HTML -> resolved headings -> heading tree."""

from __future__ import annotations

import logging

from heading_outline.config import HEADING_OUTLINE_MAX_LEVEL, HEADING_OUTLINE_MIN_LEVEL
from heading_outline.exceptions import LevelRangeError
from heading_outline.extractor import extract_headings_from_html
from heading_outline.identifiers import ensure_unique_ids
from heading_outline.schemas import OutlineResult
from heading_outline.tree import build_heading_tree, filter_headings_by_level

logger = logging.getLogger(__name__)

_MIN_HEADING_LEVEL = 1
_MAX_HEADING_LEVEL = 6


def extract_outline(
    markup: str,
    *,
    min_level: int | None = None,
    max_level: int | None = None,
) -> OutlineResult:
    """Extract headings from HTML and nest them into an outline.

    Identifiers are made unique across the whole document before the level
    filter runs, so narrowing the range never renames a heading.

    Args:
        markup: Rendered HTML.
        min_level: Shallowest level to keep. Defaults to
            ``HEADING_OUTLINE_MIN_LEVEL``.
        max_level: Deepest level to keep. Defaults to
            ``HEADING_OUTLINE_MAX_LEVEL``.

    Returns:
        The resolved flat headings and the tree built from them.

    Raises:
        LevelRangeError: If a bound is outside 1-6 or min_level > max_level.
    """
    low = HEADING_OUTLINE_MIN_LEVEL if min_level is None else min_level
    high = HEADING_OUTLINE_MAX_LEVEL if max_level is None else max_level
    validate_level_range(low, high)

    headings = ensure_unique_ids(extract_headings_from_html(markup))
    selected = filter_headings_by_level(headings, low, high)
    logger.debug(
        "Extracted %d headings, kept %d in levels %d-%d",
        len(headings),
        len(selected),
        low,
        high,
    )
    return OutlineResult(headings=selected, tree=build_heading_tree(selected))


def validate_level_range(min_level: int, max_level: int) -> None:
    """Raise LevelRangeError unless 1 <= min_level <= max_level <= 6."""
    for name, value in (("min_level", min_level), ("max_level", max_level)):
        if not _MIN_HEADING_LEVEL <= value <= _MAX_HEADING_LEVEL:
            raise LevelRangeError(
                f"{name} must be between {_MIN_HEADING_LEVEL} and {_MAX_HEADING_LEVEL}, got {value}"
            )
    if min_level > max_level:
        raise LevelRangeError(
            f"min_level ({min_level}) must not exceed max_level ({max_level})"
        )
