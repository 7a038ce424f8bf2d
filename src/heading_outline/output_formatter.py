"""Format outlines into a plain-text summary and tree."""

from __future__ import annotations

from heading_outline.schemas import Heading, OutlineResult
from heading_outline.tree import count_headings, max_depth


def format_outline(result: OutlineResult) -> str:
    """Create a summary block followed by the indented outline."""
    summary_lines = [
        f"Headings: {count_headings(result.tree)}",
        f"Roots: {len(result.tree)}",
        f"Depth: {max_depth(result.tree)}",
    ]
    lines = summary_lines + ["", "Outline:"]
    tree = _create_outline_tree(result.tree)
    if tree:
        lines.append(tree)
    return "\n".join(lines)


def format_flat(result: OutlineResult) -> str:
    """One tab-separated line per heading: level tag, id, text."""
    return "\n".join(
        f"h{heading.level}\t{heading.id}\t{heading.text}" for heading in result.headings
    )


def _create_outline_tree(nodes: list[Heading], indent: int = 0) -> str:
    lines: list[str] = []
    for node in nodes:
        lines.append(" " * (indent * 4) + f"{node.text} (#{node.id})")
        if node.children:
            lines.append(_create_outline_tree(node.children, indent + 1))
    return "\n".join(lines)
