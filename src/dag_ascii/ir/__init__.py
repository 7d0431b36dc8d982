"""Intermediate representation: networkx-backed GraphIR."""

from dag_ascii.ir.graph import GraphIR, GraphNode, NodeData

__all__ = [
    "GraphIR",
    "GraphNode",
    "NodeData",
]
