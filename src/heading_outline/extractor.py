"""Extract flat heading records from rendered HTML."""

from __future__ import annotations

import logging

from heading_outline.html_utils import fragment_to_text, scan_headings
from heading_outline.identifiers import generate_id
from heading_outline.schemas import FlatHeading

logger = logging.getLogger(__name__)


def extract_headings_from_html(markup: str) -> list[FlatHeading]:
    """Extract h1-h6 headings from ``markup`` in document order.

    Identifiers come from the element's ``id`` attribute when present and
    are generated from the heading text otherwise. Headings without text
    are skipped. Identifiers are not de-duplicated here; see
    :func:`heading_outline.identifiers.ensure_unique_ids`.
    """
    headings: list[FlatHeading] = []
    if not markup:
        return headings

    for raw in scan_headings(markup):
        text = fragment_to_text(raw.inner_html)
        if not text:
            logger.debug("Skipping empty <h%d> heading", raw.level)
            continue
        anchor = raw.attrs.get("id", "").strip()
        headings.append(
            FlatHeading(id=anchor or generate_id(text), text=text, level=raw.level)
        )

    return headings
