"""Row-by-row text renderer.

Each occupied row becomes one line of labels. Between two adjacent rows a
connector line is synthesized from column geometry alone: for neighbouring
upper-row nodes P1 and P2, every lower-row node with a column in
[P1.column, P2.column) hangs off P1. The last upper node owns the rest of
the row. This holds because the depth-first layout never moves the column
counter backwards.
"""

from __future__ import annotations

import logging

from dag_ascii.layout.types import Coordinate, LayoutMap
from dag_ascii.renderers.charset import BranchChars, CharSet

logger = logging.getLogger(__name__)


class TextRenderer:
    """Renders a LayoutMap to newline-separated text with no trailing newline."""

    def __init__(self, unicode: bool = True) -> None:
        self.charset = CharSet.Unicode if unicode else CharSet.Ascii
        self.chars = BranchChars.for_charset(self.charset)

    def render(self, layout: LayoutMap) -> str:
        lines: list[str] = []
        for row in range(layout.row_count()):
            if row > 0:
                lines.append(self.connector_line(layout, row))
            lines.append(self.label_line(layout, row))
        logger.debug("rendered %d line(s)", len(lines))
        return "\n".join(lines)

    def label_line(self, layout: LayoutMap, row: int) -> str:
        parts: list[str] = []
        cursor = 0
        for coord in layout.row(row):
            label = layout[coord].label()
            parts.append(" " * (coord.column - cursor))
            parts.append(label)
            cursor = coord.column + len(label)
        return "".join(parts)

    def connector_line(self, layout: LayoutMap, row: int) -> str:
        """Connector drawn above ``row``, joining it to ``row - 1``."""
        parents = layout.row(row - 1)
        parts: list[str] = []
        cursor = 0
        for i, parent in enumerate(parents):
            if i + 1 < len(parents):
                end = Coordinate(parents[i + 1].column, row)
            else:
                end = Coordinate(0, row + 1)
            children = layout.range(Coordinate(parent.column, row), end)
            if not children:
                continue

            parts.append(" " * (parent.column - cursor))
            if len(children) == 1:
                parts.append(self.chars.vertical)
                cursor = parent.column + 1
            else:
                parts.append(self._spread(children))
                cursor = children[-1].column + 1
        return "".join(parts)

    def _spread(self, children: list[Coordinate]) -> str:
        bc = self.chars
        parts = [bc.left_branch]
        last = len(children) - 1
        for i in range(1, len(children)):
            parts.append(bc.horizontal * (children[i].column - children[i - 1].column - 1))
            parts.append(bc.terminal_branch if i == last else bc.through_branch)
        return "".join(parts)


def render(layout: LayoutMap, unicode: bool = True) -> str:
    """Render a LayoutMap with the default text renderer."""
    return TextRenderer(unicode=unicode).render(layout)
