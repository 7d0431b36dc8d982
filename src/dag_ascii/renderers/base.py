"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from dag_ascii.layout.types import LayoutMap


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, layout: LayoutMap) -> str:
        """Render a laid-out DAG to an output string."""
        ...
