"""Layout types shared by the layout engine and renderers."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass
from functools import total_ordering

from dag_ascii.types import Node


@total_ordering
@dataclass(frozen=True)
class Coordinate:
    """A (column, row) position in character cells, ordered row-major."""

    column: int
    row: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (self.row, self.column) < (other.row, other.column)


class LayoutMap:
    """Ordered mapping from Coordinate to Node.

    Keys are kept in an explicitly sorted list so iteration and range queries
    follow Coordinate order: grouped by row, left to right within a row.
    """

    def __init__(self) -> None:
        self._keys: list[Coordinate] = []
        self._nodes: dict[Coordinate, Node] = {}

    def insert(self, coord: Coordinate, node: Node) -> None:
        if coord in self._nodes:
            raise ValueError(f"coordinate already occupied: ({coord.column}, {coord.row})")
        bisect.insort(self._keys, coord)
        self._nodes[coord] = node

    def __getitem__(self, coord: Coordinate) -> Node:
        return self._nodes[coord]

    def __contains__(self, coord: object) -> bool:
        return coord in self._nodes

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._keys)

    def items(self) -> Iterator[tuple[Coordinate, Node]]:
        for coord in self._keys:
            yield coord, self._nodes[coord]

    def range(self, start: Coordinate, end: Coordinate) -> list[Coordinate]:
        """Coordinates in the half-open interval [start, end)."""
        lo = bisect.bisect_left(self._keys, start)
        hi = bisect.bisect_left(self._keys, end)
        return self._keys[lo:hi]

    def row(self, row: int) -> list[Coordinate]:
        return self.range(Coordinate(0, row), Coordinate(0, row + 1))

    def row_count(self) -> int:
        if not self._keys:
            return 0
        return self._keys[-1].row + 1
