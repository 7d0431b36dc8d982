"""Node capability shared by the layout and rendering phases.

Anything exposing ``label()`` and ``successors()`` can be drawn. The core only
reads nodes through these two methods and never mutates them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """A drawable DAG node."""

    def label(self) -> str:
        """Text written at the node's position."""
        ...

    def successors(self) -> Sequence[Node]:
        """Ordered children; empty for a leaf."""
        ...


@dataclass(eq=False)
class TreeNode:
    """Plain in-memory node for building graphs by hand.

    The same instance may be listed under several parents; it is drawn once
    per path that reaches it.
    """

    text: str
    children: list[TreeNode] = field(default_factory=list)

    def label(self) -> str:
        return self.text

    def successors(self) -> Sequence[TreeNode]:
        return self.children
