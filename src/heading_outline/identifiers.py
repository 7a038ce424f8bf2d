"""Heading identifier generation and de-duplication."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from heading_outline.schemas import FlatHeading

logger = logging.getLogger(__name__)

_INELIGIBLE_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-{2,}")


def generate_id(text: str) -> str:
    """Generate a URL-safe identifier from heading text.

    The result may be empty when ``text`` has no letters, digits,
    underscores or hyphens. Applying it to its own output is a no-op.
    """
    slug = _INELIGIBLE_RE.sub("", text.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def ensure_unique_ids(headings: Sequence[FlatHeading]) -> list[FlatHeading]:
    """Return copies of ``headings`` whose identifiers are pairwise distinct.

    Repeats of an identifier get ``-1``, ``-2``, ... in order of appearance,
    counted against the identifier as extracted rather than the suffixed
    output. A suffix already taken by an earlier heading is skipped.
    """
    seen: dict[str, int] = {}
    used: set[str] = set()
    result: list[FlatHeading] = []

    for heading in headings:
        base = heading.id
        count = seen.get(base, 0)
        candidate = f"{base}-{count}" if count else base
        while candidate in used:
            count += 1
            candidate = f"{base}-{count}"
        seen[base] = count + 1
        used.add(candidate)

        if candidate != base:
            logger.debug("Renamed duplicate heading id %r to %r", base, candidate)
        result.append(heading.model_copy(update={"id": candidate}))

    return result
