"""heading_outline: extract headings from HTML and build table-of-contents trees."""

from heading_outline.exceptions import (
    HeadingOutlineError,
    InputError,
    LevelRangeError,
)
from heading_outline.extractor import extract_headings_from_html
from heading_outline.identifiers import ensure_unique_ids, generate_id
from heading_outline.outline import extract_outline
from heading_outline.schemas import FlatHeading, Heading, OutlineResult
from heading_outline.tree import (
    build_heading_tree,
    count_headings,
    filter_headings_by_level,
    flatten_heading_tree,
    max_depth,
)

__all__ = [
    "FlatHeading",
    "Heading",
    "HeadingOutlineError",
    "InputError",
    "LevelRangeError",
    "OutlineResult",
    "build_heading_tree",
    "count_headings",
    "ensure_unique_ids",
    "extract_headings_from_html",
    "extract_outline",
    "filter_headings_by_level",
    "flatten_heading_tree",
    "generate_id",
    "max_depth",
]
