"""
Directed weighted edge between two nodes.

Edges compare equal on (from_node, to_node, weight) and are ordered by
weight alone, so ``min(edges)`` picks the lightest edge.
"""

from __future__ import annotations

from typing import Hashable, Tuple, Union

from .node import Node

Weight = Union[int, float]

# Weight used when an edge is created without one
DEFAULT_WEIGHT: Weight = 1


class Edge:
    """
    Weighted connection from ``from_node`` to ``to_node``.

    Undirected graphs store an edge together with its reversed counterpart,
    so an Edge itself is always one-way.

    Attributes:
        from_node: Start node (not owned by the edge).
        to_node: End node (not owned by the edge).
        weight: Numeric weight, default ``DEFAULT_WEIGHT`` (1).

    Example:
        >>> a, b = Node("A"), Node("B")
        >>> e = Edge(a, b, 3)
        >>> e.reversed()
        Edge(Node('B'), Node('A'), 3)
        >>> e.reversed().reversed() == e
        True
    """

    __slots__ = ("_from_node", "_to_node", "_weight")

    def __init__(self, from_node: Node, to_node: Node, weight: Weight = DEFAULT_WEIGHT):
        self._from_node = from_node
        self._to_node = to_node
        self._weight = weight

    @property
    def from_node(self) -> Node:
        return self._from_node

    @property
    def to_node(self) -> Node:
        return self._to_node

    @property
    def weight(self) -> Weight:
        return self._weight

    def reversed(self) -> "Edge":
        """Return a new edge with swapped endpoints and the same weight."""
        return Edge(self._to_node, self._from_node, self._weight)

    def key(self) -> Tuple[Hashable, Hashable]:
        """Ordered (from name, to name) pair identifying the edge in a graph."""
        return self._from_node.name, self._to_node.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self._from_node == other._from_node
            and self._to_node == other._to_node
            and self._weight == other._weight
        )

    # Ordering looks at weight only; equal weights are neither < nor >
    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight < other._weight

    def __le__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight <= other._weight

    def __gt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight > other._weight

    def __ge__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight >= other._weight

    def __hash__(self) -> int:
        return hash((self._from_node, self._to_node, self._weight))

    def __str__(self) -> str:
        return f"{self._from_node} -> {self._to_node} with weight {self._weight}"

    def __repr__(self) -> str:
        return f"Edge({self._from_node!r}, {self._to_node!r}, {self._weight!r})"
