"""Graph IR — converts the AST into a networkx DiGraph.

This module owns the graph built from text input. It answers the questions
the core renderer deliberately does not ask (is the input acyclic, which node
is the root) and hands out ``GraphNode`` views that satisfy the Node
capability.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import networkx as nx

from dag_ascii.syntax import types as ast

logger = logging.getLogger(__name__)


@dataclass
class NodeData:
    id: str
    label: str


@dataclass(frozen=True)
class GraphNode:
    """Read-only view of one DiGraph node.

    Successors come back in edge insertion order, which networkx preserves.
    """

    digraph: nx.DiGraph = field(repr=False, compare=False)
    id: str

    def label(self) -> str:
        return self.digraph.nodes[self.id]["data"].label

    def successors(self) -> Sequence[GraphNode]:
        return [GraphNode(self.digraph, succ) for succ in self.digraph.successors(self.id)]


class GraphIR:
    """The graph intermediate representation built from an AST Graph.

    Wraps a networkx DiGraph and exposes helpers for topology queries.
    """

    def __init__(self, digraph: nx.DiGraph) -> None:
        self.digraph = digraph

    @classmethod
    def from_ast(cls, ast_graph: ast.Graph) -> GraphIR:
        """Build a GraphIR from an AST Graph."""
        digraph: nx.DiGraph = nx.DiGraph()
        for node in ast_graph.nodes:
            _add_node_if_absent(digraph, node.id, node.label)
        for edge in ast_graph.edges:
            _add_node_if_absent(digraph, edge.from_id, edge.from_id)
            _add_node_if_absent(digraph, edge.to_id, edge.to_id)
            digraph.add_edge(edge.from_id, edge.to_id)
        return cls(digraph)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str]]) -> GraphIR:
        """Build a GraphIR from (parent, child) id pairs; ids double as labels."""
        graph = ast.Graph.new()
        for src, tgt in edges:
            graph.edges.append(ast.Edge(src, tgt))
        return cls.from_ast(graph)

    def is_dag(self, root_id: str | None = None) -> bool:
        """True if the graph, or only the part reachable from ``root_id``, is acyclic."""
        if root_id is None:
            return nx.is_directed_acyclic_graph(self.digraph)
        reachable = nx.descendants(self.digraph, root_id) | {root_id}
        return nx.is_directed_acyclic_graph(self.digraph.subgraph(reachable))

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def node(self, node_id: str) -> GraphNode:
        if node_id not in self.digraph:
            raise ValueError(f"Unknown node '{node_id}'")
        return GraphNode(self.digraph, node_id)

    def roots(self) -> list[str]:
        """Nodes with no incoming edge, in declaration order."""
        return [n for n in self.digraph.nodes if self.digraph.in_degree(n) == 0]

    def root(self, node_id: str | None = None) -> GraphNode:
        """Pick the node to draw from.

        An explicit id must exist. Without one the graph must have exactly one
        root.
        """
        if node_id is not None:
            return self.node(node_id)
        roots = self.roots()
        if not roots:
            raise ValueError("Graph has no root node; every node lies on or below a cycle")
        if len(roots) > 1:
            raise ValueError(f"Graph has {len(roots)} root nodes ({', '.join(roots)}); choose one explicitly")
        logger.debug("using root '%s'", roots[0])
        return GraphNode(self.digraph, roots[0])


def _add_node_if_absent(digraph: nx.DiGraph, node_id: str, label: str) -> None:
    if node_id not in digraph:
        digraph.add_node(node_id, data=NodeData(id=node_id, label=label))
