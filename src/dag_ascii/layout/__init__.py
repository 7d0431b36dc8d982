"""Layout engine and public API."""

from __future__ import annotations

from dag_ascii.layout.depth_first import DepthFirstLayout, assign_coordinates
from dag_ascii.layout.engine import DEFAULT_SPACING, full_layout, full_layout_with_spacing
from dag_ascii.layout.types import Coordinate, LayoutMap

__all__ = [
    "DEFAULT_SPACING",
    "Coordinate",
    "DepthFirstLayout",
    "LayoutMap",
    "assign_coordinates",
    "full_layout",
    "full_layout_with_spacing",
]
