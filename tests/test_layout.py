"""Tests for the depth-first layout — walk order, row and column assignment."""

from __future__ import annotations

import pytest

from dag_ascii.layout import Coordinate, DepthFirstLayout, assign_coordinates, full_layout
from dag_ascii.types import TreeNode

# ─── Helpers ──────────────────────────────────────────────────────────────────


def leaf(text: str) -> TreeNode:
    return TreeNode(text)


def placed(root: TreeNode, spacing: int = 1) -> list[tuple[str, int, int]]:
    """(label, column, row) in layout order."""
    return [(node.label(), coord.column, coord.row) for coord, node in assign_coordinates(root, spacing).items()]


def reference_tree() -> TreeNode:
    """10 -> [12 -> [15], 121 -> [13, 14]]"""
    d = TreeNode("12", [leaf("15")])
    e = TreeNode("121", [leaf("13"), leaf("14")])
    return TreeNode("10", [d, e])


# ─── Walk Order ───────────────────────────────────────────────────────────────


class TestWalkOrder:
    def test_single_node(self):
        assert placed(leaf("A")) == [("A", 0, 0)]

    def test_last_successor_is_leftmost(self):
        root = TreeNode("r", [leaf("A"), leaf("B")])
        assert placed(root) == [("r", 0, 0), ("B", 0, 1), ("A", 3, 1)]

    def test_three_siblings_reversed(self):
        root = TreeNode("r", [leaf("A"), leaf("B"), leaf("C")])
        row1 = [label for label, _, row in placed(root) if row == 1]
        assert row1 == ["C", "B", "A"]

    def test_reference_tree(self):
        assert placed(reference_tree()) == [
            ("10", 0, 0),
            ("121", 0, 1),
            ("12", 8, 1),
            ("14", 0, 2),
            ("13", 4, 2),
            ("15", 8, 2),
        ]

    def test_shared_node_is_placed_once_per_path(self):
        shared = leaf("s")
        root = TreeNode("r", [TreeNode("x", [shared]), TreeNode("y", [shared])])
        layout = assign_coordinates(root, 1)
        assert len(layout) == 5
        assert layout[Coordinate(0, 2)] is shared
        assert layout[Coordinate(3, 2)] is shared

    def test_input_is_not_mutated(self):
        root = reference_tree()
        before = [child.label() for child in root.successors()]
        assign_coordinates(root, 1)
        assert [child.label() for child in root.successors()] == before


# ─── Column Rule ──────────────────────────────────────────────────────────────


class TestColumns:
    def test_single_child_chain_shares_column(self):
        root = TreeNode("a", [TreeNode("bb", [leaf("ccc")])])
        assert [col for _, col, _ in placed(root)] == [0, 0, 0]

    def test_advance_uses_label_of_node_being_placed(self):
        root = TreeNode("r", [leaf("long"), leaf("x")])
        # x is placed first at 0; "long" advances by 1 + 4 + 1
        assert placed(root) == [("r", 0, 0), ("x", 0, 1), ("long", 6, 1)]

    def test_spacing_zero(self):
        root = TreeNode("r", [leaf("A"), leaf("B")])
        assert placed(root, spacing=0)[-1] == ("A", 2, 1)

    def test_spacing_widens_gap(self):
        root = TreeNode("r", [leaf("A"), leaf("B")])
        assert placed(root, spacing=4)[-1] == ("A", 6, 1)

    def test_returning_several_levels_advances_once(self):
        root = TreeNode("r", [leaf("B"), TreeNode("a", [TreeNode("b", [leaf("c")])])])
        row1 = [entry for entry in placed(root) if entry[2] == 1]
        assert row1 == [("a", 0, 1), ("B", 3, 1)]

    def test_every_visit_gets_its_own_coordinate(self):
        root = TreeNode("r", [reference_tree(), TreeNode("m", [leaf("n"), leaf("o")]), leaf("z")])
        layout = assign_coordinates(root, 2)
        assert len(layout) == 11

    def test_empty_label_has_zero_width(self):
        root = TreeNode("r", [leaf(""), leaf("b")])
        assert placed(root) == [("r", 0, 0), ("b", 0, 1), ("", 2, 1)]


# ─── Engine ───────────────────────────────────────────────────────────────────


class TestEngine:
    def test_negative_spacing_rejected(self):
        with pytest.raises(ValueError, match="spacing"):
            DepthFirstLayout().layout(leaf("A"), -1)

    def test_full_layout_uses_default_spacing(self):
        root = TreeNode("r", [leaf("A"), leaf("B")])
        assert list(full_layout(root)) == list(assign_coordinates(root, 1))

    def test_deep_chain_does_not_recurse(self):
        depth = 5000
        node = leaf("x")
        for _ in range(depth - 1):
            node = TreeNode("x", [node])
        layout = assign_coordinates(node, 1)
        assert layout.row_count() == depth
        assert all(coord.column == 0 for coord in layout)

    def test_row_count_is_max_depth_plus_one(self):
        assert assign_coordinates(reference_tree(), 1).row_count() == 3
