"""Depth-first coordinate assignment.

The walk uses an explicit LIFO work list seeded with ``(0, root)``. Each popped
node is placed, then every successor is pushed in sequence order, so the last
listed successor is visited first and ends up leftmost among its siblings.

Rows are depths. Columns come from one counter shared by the whole walk:

  * a strict descent (first child of the node just placed) reuses the
    counter, which yields straight single-column chains;
  * any other step advances the counter by ``spacing + len(label) + 1``,
    using the label of the node being placed.

The rule is greedy and never looks ahead, so wide subtrees following deep ones
can overlap. Input must be acyclic; a cycle makes the walk run forever.
"""

from __future__ import annotations

import logging

from dag_ascii.layout.types import Coordinate, LayoutMap
from dag_ascii.types import Node

logger = logging.getLogger(__name__)


class DepthFirstLayout:
    """Assigns every visit of every reachable node a unique Coordinate."""

    def layout(self, root: Node, spacing: int) -> LayoutMap:
        if spacing < 0:
            raise ValueError(f"spacing must be non-negative, got {spacing}")

        coordinates = LayoutMap()
        column = 0
        prev_depth: int | None = None
        stack: list[tuple[int, Node]] = [(0, root)]

        while stack:
            depth, node = stack.pop()
            width = len(node.label())

            if prev_depth is not None and depth <= prev_depth:
                column += spacing + width + 1
            prev_depth = depth

            coordinates.insert(Coordinate(column, depth), node)
            stack.extend((depth + 1, child) for child in node.successors())

        logger.debug("placed %d node(s) over %d row(s)", len(coordinates), coordinates.row_count())
        return coordinates


def assign_coordinates(root: Node, spacing: int) -> LayoutMap:
    """Lay out the DAG reachable from ``root``."""
    return DepthFirstLayout().layout(root, spacing)
