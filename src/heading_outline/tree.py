"""Build and walk heading trees."""

from __future__ import annotations

from typing import Iterable, Sequence

from heading_outline.schemas import FlatHeading, Heading


def build_heading_tree(headings: Sequence[FlatHeading]) -> list[Heading]:
    """Nest flat headings by level.

    Each heading becomes a child of the nearest preceding heading with a
    smaller level, or a root when there is none. Skipped levels nest one
    step deeper rather than at their absolute depth.
    """
    roots: list[Heading] = []
    stack: list[Heading] = []

    for heading in headings:
        node = Heading(id=heading.id, text=heading.text, level=heading.level)

        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots


def filter_headings_by_level(
    headings: Sequence[FlatHeading],
    min_level: int = 1,
    max_level: int = 6,
) -> list[FlatHeading]:
    """Keep headings whose level lies in ``[min_level, max_level]``."""
    return [heading for heading in headings if min_level <= heading.level <= max_level]


def flatten_heading_tree(tree: Iterable[Heading]) -> list[FlatHeading]:
    """Walk the tree parent-first and return plain flat headings."""
    flat: list[FlatHeading] = []
    for node in tree:
        flat.append(FlatHeading(id=node.id, text=node.text, level=node.level))
        flat.extend(flatten_heading_tree(node.children))
    return flat


def count_headings(tree: Iterable[Heading]) -> int:
    """Count total headings in the tree."""
    total = 0
    for node in tree:
        total += 1
        total += count_headings(node.children)
    return total


def max_depth(tree: Iterable[Heading]) -> int:
    depth = 0
    for node in tree:
        depth = max(depth, 1 + max_depth(node.children))
    return depth
