"""Outline output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from heading_outline.schemas.headings import FlatHeading, Heading


class OutlineResult(BaseModel):
    """Resolved flat headings and the tree built from them."""

    headings: list[FlatHeading] = Field(default_factory=list)
    tree: list[Heading] = Field(default_factory=list)
