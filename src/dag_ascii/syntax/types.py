"""AST data structures for the flowchart input syntax.

These types represent the parsed form of the input DSL before it is turned
into a networkx graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Node:
    id: str
    label: str
    has_label: bool = False

    @classmethod
    def new(cls, id: str, label: str) -> Node:
        return cls(id=id, label=label, has_label=True)

    @classmethod
    def bare(cls, id: str) -> Node:
        """Create a bare node (id = label)."""
        return cls(id=id, label=id)


@dataclass
class Edge:
    from_id: str
    to_id: str


@dataclass
class Graph:
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @classmethod
    def new(cls) -> Graph:
        return cls()
