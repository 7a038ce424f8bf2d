"""Shared schemas for heading_outline."""

from heading_outline.schemas.headings import FlatHeading, Heading
from heading_outline.schemas.outline import OutlineResult

__all__ = ["FlatHeading", "Heading", "OutlineResult"]
