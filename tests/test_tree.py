"""Tests for heading tree building and traversal."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from heading_outline.schemas import FlatHeading, Heading
from heading_outline.tree import (
    build_heading_tree,
    count_headings,
    filter_headings_by_level,
    flatten_heading_tree,
    max_depth,
)


def _flat(*levels: int) -> list[FlatHeading]:
    return [FlatHeading(id=f"h{i}", text=f"H{i}", level=level) for i, level in enumerate(levels)]


def _assert_levels_increase(nodes: list[Heading]) -> None:
    for node in nodes:
        for child in node.children:
            assert child.level > node.level
        _assert_levels_increase(node.children)


class TestBuildHeadingTree:
    """Tests for build_heading_tree function."""

    def test_nests_by_level(self) -> None:
        """h1 > h2 > h3 becomes a single chain."""
        tree = build_heading_tree(_flat(1, 2, 3))

        assert len(tree) == 1
        assert tree[0].text == "H0"
        assert [c.text for c in tree[0].children] == ["H1"]
        assert [c.text for c in tree[0].children[0].children] == ["H2"]

    def test_multiple_roots(self) -> None:
        """A second h1 starts a new root."""
        tree = build_heading_tree(_flat(1, 2, 1))

        assert [n.text for n in tree] == ["H0", "H2"]
        assert [c.text for c in tree[0].children] == ["H1"]
        assert tree[1].children == []

    def test_skipped_level_nests_one_step(self) -> None:
        """h1 followed by h3 puts the h3 directly under the h1."""
        tree = build_heading_tree(_flat(1, 3))

        assert len(tree) == 1
        assert [c.level for c in tree[0].children] == [3]

    def test_shallower_after_deeper_start(self) -> None:
        """A document starting at h3 then h1 yields two roots in order."""
        flat = [
            FlatHeading(id="deep", text="Deep", level=3),
            FlatHeading(id="top", text="Top", level=1),
        ]

        tree = build_heading_tree(flat)

        assert [n.id for n in tree] == ["deep", "top"]
        assert all(not n.children for n in tree)

    def test_same_level_siblings(self) -> None:
        """Headings of the same level are siblings."""
        tree = build_heading_tree(_flat(2, 2, 2))

        assert [n.id for n in tree] == ["h0", "h1", "h2"]

    def test_complex_nesting(self) -> None:
        """Deeper headings attach to the most recent shallower heading."""
        tree = build_heading_tree(_flat(1, 2, 3, 2, 3))

        assert len(tree) == 1
        assert [c.id for c in tree[0].children] == ["h1", "h3"]
        assert [c.id for c in tree[0].children[0].children] == ["h2"]
        assert [c.id for c in tree[0].children[1].children] == ["h4"]

    def test_children_initialized(self) -> None:
        """Every node has a children list, even leaves."""
        tree = build_heading_tree(_flat(1, 2))

        assert isinstance(tree[0].children, list)
        assert tree[0].children[0].children == []

    def test_empty_input(self) -> None:
        """Empty input yields an empty forest."""
        assert build_heading_tree([]) == []

    def test_levels_strictly_increase(self) -> None:
        """Children are always deeper than their parent."""
        tree = build_heading_tree(_flat(2, 4, 3, 6, 5, 1, 3, 2, 2, 6))

        _assert_levels_increase(tree)

    @pytest.mark.parametrize(
        "levels",
        [(1, 2, 3), (3, 1, 2), (2, 4, 3, 6, 5, 1, 3, 2), (6, 5, 4, 3, 2, 1), ()],
    )
    def test_flatten_round_trip(self, levels: tuple[int, ...]) -> None:
        """Pre-order flattening reproduces the input sequence."""
        flat = _flat(*levels)

        assert flatten_heading_tree(build_heading_tree(flat)) == flat

    def test_does_not_mutate_input(self) -> None:
        """Input records are not turned into tree nodes."""
        flat = _flat(1, 2)

        build_heading_tree(flat)

        assert all(type(h) is FlatHeading for h in flat)


class TestFilterHeadingsByLevel:
    """Tests for filter_headings_by_level function."""

    headings = _flat(1, 2, 3, 4, 5, 6)

    def test_filters_range(self) -> None:
        """Only levels within the range are kept, in order."""
        filtered = filter_headings_by_level(self.headings, 2, 4)

        assert [h.level for h in filtered] == [2, 3, 4]

    def test_default_min_level(self) -> None:
        """min_level defaults to 1."""
        filtered = filter_headings_by_level(self.headings, max_level=3)

        assert [h.level for h in filtered] == [1, 2, 3]

    def test_default_max_level(self) -> None:
        """max_level defaults to 6."""
        filtered = filter_headings_by_level(self.headings, 5)

        assert [h.level for h in filtered] == [5, 6]

    def test_no_match(self) -> None:
        """Bounds outside 1-6 simply match nothing."""
        assert filter_headings_by_level(self.headings, 7, 8) == []

    def test_single_level(self) -> None:
        """Equal bounds keep one level."""
        filtered = filter_headings_by_level(self.headings, 3, 3)

        assert [h.id for h in filtered] == ["h2"]

    def test_keeps_identifiers(self) -> None:
        """Filtering never renames headings."""
        filtered = filter_headings_by_level(self.headings, 4, 6)

        assert [h.id for h in filtered] == ["h3", "h4", "h5"]


class TestTreeHelpers:
    """Tests for count_headings and max_depth."""

    def test_count_headings(self) -> None:
        """All nodes in the forest are counted."""
        assert count_headings(build_heading_tree(_flat(1, 2, 3, 2, 1, 2))) == 6

    def test_count_empty(self) -> None:
        """An empty forest has no headings."""
        assert count_headings([]) == 0

    def test_max_depth(self) -> None:
        """Depth counts nesting steps, not absolute levels."""
        assert max_depth(build_heading_tree(_flat(1, 3, 6, 2))) == 3

    def test_max_depth_roots_only(self) -> None:
        """A flat forest has depth one."""
        assert max_depth(build_heading_tree(_flat(2, 2))) == 1

    def test_max_depth_empty(self) -> None:
        """An empty forest has depth zero."""
        assert max_depth([]) == 0


class TestHeadingModels:
    """Tests for heading model validation."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_rejects_out_of_range_level(self, level: int) -> None:
        """Levels must lie between 1 and 6."""
        with pytest.raises(ValidationError):
            FlatHeading(id="x", text="X", level=level)

    def test_heading_defaults_to_no_children(self) -> None:
        """Tree nodes start without children."""
        assert Heading(id="x", text="X", level=1).children == []
