"""
Graph vertex.

A Node is identified by its name alone. It may carry an arbitrary payload
that the graph never looks at, and it remembers the graph it was added to
so it can answer adjacency questions on its own.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Hashable, List, Optional

from .exceptions import NodeOwnedError

if TYPE_CHECKING:
    from .core import Graph
    from .edge import Edge


class Node:
    """
    Named vertex with an optional payload.

    Two nodes are equal iff their names are equal, regardless of payload or
    owning graph. The owning graph is held through a weak reference, so a
    node never keeps its graph alive.

    Attributes:
        name: Identity key, unique within a graph.
        payload: Opaque value attached by the caller.

    Example:
        >>> a = Node("A", payload={"city": "Berlin"})
        >>> a == Node("A")
        True
        >>> a.graph is None
        True
    """

    __slots__ = ("_name", "payload", "_graph_ref", "__weakref__")

    def __init__(self, name: Hashable, payload: Any = None):
        self._name = name
        self.payload = payload
        self._graph_ref: Optional[weakref.ReferenceType] = None

    @property
    def name(self) -> Hashable:
        return self._name

    @property
    def graph(self) -> Optional["Graph"]:
        """Owning graph, or None if the node was never added or the graph is gone."""
        if self._graph_ref is None:
            return None
        return self._graph_ref()

    def _attach(self, graph: "Graph") -> None:
        """
        Record ``graph`` as the owner. Called by Graph.add_node only.

        Raises:
            NodeOwnedError: If the node is already owned by another live graph.
        """
        owner = self.graph
        if owner is not None and owner is not graph:
            raise NodeOwnedError(f"Node {self._name!r} already belongs to another graph")
        self._graph_ref = weakref.ref(graph)

    def edges(self) -> Optional[List["Edge"]]:
        """Outgoing edges of this node, or None if it has no owning graph."""
        graph = self.graph
        if graph is None:
            return None
        return graph.edges_for_node(self)

    def neighbours(self) -> List["Node"]:
        """
        Distinct nodes reachable by one outgoing edge, in edge insertion order.

        Returns an empty list for a node without an owning graph.
        """
        seen = set()
        result: List[Node] = []
        for edge in self.edges() or []:
            if edge.to_node not in seen:
                seen.add(edge.to_node)
                result.append(edge.to_node)
        return result

    neighbors = neighbours

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return str(self._name)

    def __repr__(self) -> str:
        if self.payload is None:
            return f"Node({self._name!r})"
        return f"Node({self._name!r}, payload={self.payload!r})"
