"""Heading models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FlatHeading(BaseModel):
    """One heading occurrence in document order."""

    id: str
    text: str
    level: int = Field(..., ge=1, le=6)


class Heading(FlatHeading):
    """A hierarchical heading node."""

    children: list["Heading"] = Field(default_factory=list)
