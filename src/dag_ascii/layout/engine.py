"""Layout engine convenience functions."""

from __future__ import annotations

from dag_ascii.layout.depth_first import DepthFirstLayout
from dag_ascii.layout.types import LayoutMap
from dag_ascii.types import Node

DEFAULT_SPACING: int = 1


def full_layout(root: Node) -> LayoutMap:
    """Run the layout pipeline with default spacing."""
    return full_layout_with_spacing(root, DEFAULT_SPACING)


def full_layout_with_spacing(root: Node, spacing: int) -> LayoutMap:
    """Run the default (depth-first) layout pipeline."""
    engine = DepthFirstLayout()
    return engine.layout(root, spacing)
