"""dag-ascii: draw a DAG as box-drawing text, one row per depth."""

from __future__ import annotations

from dag_ascii.config import RenderConfig
from dag_ascii.ir.graph import GraphIR
from dag_ascii.layout.engine import DEFAULT_SPACING, full_layout_with_spacing
from dag_ascii.parsers import parse
from dag_ascii.renderers.base import Renderer
from dag_ascii.renderers.text import TextRenderer
from dag_ascii.types import Node, TreeNode

__all__ = [
    "GraphIR",
    "Node",
    "RenderConfig",
    "TreeNode",
    "draw_dag",
    "render_dsl",
]


def draw_dag(root: Node, spacing: int = DEFAULT_SPACING, unicode: bool = True) -> str:
    """Render the DAG reachable from ``root`` as text.

    Args:
        root: Node to start from; anything with ``label()`` and ``successors()``.
        spacing: Extra blank columns between sibling branches (>= 0).
        unicode: True for box-drawing glyphs; False for the ASCII fallback.

    Returns:
        Newline-separated lines with no trailing newline.

    Raises:
        ValueError: If spacing is negative.

    The input must be acyclic. A cycle reachable from ``root`` makes this call
    run forever; use ``GraphIR.is_dag`` to check untrusted input first.
    """
    layout = full_layout_with_spacing(root, spacing)
    renderer: Renderer = TextRenderer(unicode=unicode)
    return renderer.render(layout)


def render_dsl(src: str, config: RenderConfig | None = None) -> str:
    """Parse an edge-list string and render it.

    Args:
        src: Flowchart-style source, e.g. ``"a --> b & c"``.
        config: Rendering options; defaults to ``RenderConfig()``.

    Returns:
        The rendered text, or empty string if the graph is empty.

    Raises:
        ValueError: If a cycle is reachable from the root, there is no unique
            root, or an unknown root id is requested. Cycles elsewhere in
            the graph are ignored.
    """
    config = config or RenderConfig()
    gir = GraphIR.from_ast(parse(src))
    if gir.node_count() == 0:
        return ""
    root = gir.root(config.root)
    if not gir.is_dag(root.id):
        raise ValueError(f"Graph contains a cycle reachable from '{root.id}'")
    return draw_dag(root, config.spacing, config.unicode)
