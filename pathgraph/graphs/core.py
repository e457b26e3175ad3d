"""
Core graph data structure.

Graph owns a table of Nodes keyed by name and a two-level adjacency table
of Edges keyed by (from name, to name). Undirected graphs store every
edge twice, once per direction, so outgoing-edge lookup is the same
single directed lookup in both modes.

Complexity:
    - add_node: O(1)
    - add_edge: O(1) (O(V + E) in debug mode, which re-checks invariants)
    - find_edge / has_edge: O(1)
    - edges_for_node: O(deg(v))
    - nodes / edges: O(V) / O(E)
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

from ..diagnostics import (
    GRAPH_CHECKS,
    assert_counts_consistent,
    assert_mirrored_pairs,
    is_debug_enabled,
)
from ..logging import get_logger
from .edge import Edge
from .exceptions import EdgeAlreadyExistsError, NodeAlreadyExistsError, NodeNotFoundError
from .node import Node

logger = get_logger(__name__)


class Graph:
    """
    Weighted graph with named nodes, directed or undirected.

    The graph only grows: there are no removal operations. Mutators return
    the graph itself so calls can be chained.

    Attributes:
        directed: True for a directed graph. Fixed at construction.

    Example:
        >>> a, b = Node("A"), Node("B")
        >>> g = Graph().add_node(a).add_node(b).add_edge(Edge(a, b, 4))
        >>> g.find_edge(b, a).weight   # mirrored automatically
        4
        >>> g.order(), g.size()
        (2, 2)
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self._directed = bool(directed)
        self._nodes: Dict[Hashable, Node] = {}
        self._adjacency: Dict[Hashable, Dict[Hashable, Edge]] = {}
        # Every stored record in insertion order, plus the mirrored pairs
        # of an undirected graph in the order they were added
        self._records: List[Edge] = []
        self._pairs: List[Tuple[Edge, Edge]] = []

    @classmethod
    def from_adjacency_matrix(cls, matrix: Any, directed: bool = False) -> "Graph":
        """
        Build a graph from a square adjacency matrix.

        See :func:`pathgraph.graphs.matrix.graph_from_adjacency_matrix`.
        """
        from .matrix import graph_from_adjacency_matrix

        return graph_from_adjacency_matrix(matrix, directed=directed, graph=cls(directed=directed))

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def undirected(self) -> bool:
        return not self._directed

    def order(self) -> int:
        """Number of nodes."""
        return len(self._nodes)

    def size(self) -> int:
        """Number of stored edge records; both halves of an undirected edge count."""
        return len(self._records)

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def nodes(self) -> List[Node]:
        """Return all nodes in insertion order."""
        return list(self._nodes.values())

    def add_node(self, node: Node) -> "Graph":
        """
        Add a node and make this graph its owner.

        Args:
            node: Node to add.

        Returns:
            The graph itself.

        Raises:
            NodeAlreadyExistsError: If a node with the same name is present.
        """
        if self.has_node(node):
            logger.debug("Rejected node %r: name already present", node.name)
            raise NodeAlreadyExistsError(f"Node {node.name!r} already exists")

        node._attach(self)
        self._nodes[node.name] = node
        logger.debug("Added node %r (order=%d)", node.name, len(self._nodes))
        return self

    def has_node(self, node: Node) -> bool:
        """True if a node with the same name is in the graph."""
        return self.has_node_named(node.name)

    def has_node_named(self, name: Hashable) -> bool:
        return name in self._nodes

    def find_node_by_name(self, name: Hashable) -> Optional[Node]:
        """Return the node called ``name``, or None."""
        return self._nodes.get(name)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, edge: Edge) -> "Graph":
        """
        Add an edge; for undirected graphs also add its reversed counterpart.

        Nothing is stored unless both the edge and (when undirected) its
        mirror can be stored.

        Args:
            edge: Edge to add. Both endpoints must already be in the graph.

        Returns:
            The graph itself.

        Raises:
            NodeNotFoundError: If an endpoint is not a node of this graph.
            EdgeAlreadyExistsError: If the ordered pair, or the mirrored pair
                of an undirected graph, is already stored.
        """
        for endpoint in (edge.from_node, edge.to_node):
            if not self.has_node(endpoint):
                logger.debug("Rejected edge %s: unknown node %r", edge, endpoint.name)
                raise NodeNotFoundError(f"Node {endpoint.name!r} is not part of the graph")

        if self.has_edge(edge):
            logger.debug("Rejected edge %s: pair already stored", edge)
            raise EdgeAlreadyExistsError(
                f"Edge {edge.from_node} -> {edge.to_node} already exists"
            )

        # Adjacency entries always point at the graph's own node objects
        edge = self._bind(edge)
        is_loop = edge.from_node == edge.to_node
        if self._directed or is_loop:
            self._store(edge)
            if not self._directed:
                self._pairs.append((edge, edge))
        else:
            mirror = edge.reversed()
            if self.has_edge(mirror):
                logger.debug("Rejected edge %s: mirror already stored", edge)
                raise EdgeAlreadyExistsError(
                    f"Edge {mirror.from_node} -> {mirror.to_node} already exists"
                )
            self._store(edge)
            self._store(mirror)
            self._pairs.append((edge, mirror))

        logger.debug("Added edge %s (size=%d)", edge, len(self._records))

        if is_debug_enabled(GRAPH_CHECKS):
            assert_mirrored_pairs(self)
            assert_counts_consistent(self)

        return self

    def _bind(self, edge: Edge) -> Edge:
        from_node = self._nodes[edge.from_node.name]
        to_node = self._nodes[edge.to_node.name]
        if from_node is edge.from_node and to_node is edge.to_node:
            return edge
        return Edge(from_node, to_node, edge.weight)

    def _store(self, edge: Edge) -> None:
        from_name, to_name = edge.key()
        self._adjacency.setdefault(from_name, {})[to_name] = edge
        self._records.append(edge)

    def has_edge(self, edge: Edge) -> bool:
        """True if an edge with the same ordered pair is stored; weight is ignored."""
        return self.find_edge(edge.from_node, edge.to_node) is not None

    def find_edge(self, from_node: Node, to_node: Node) -> Optional[Edge]:
        """Return the stored edge from ``from_node`` to ``to_node``, or None."""
        outgoing = self._adjacency.get(from_node.name)
        if outgoing is None:
            return None
        return outgoing.get(to_node.name)

    def edges_for_node(self, node: Node) -> List[Edge]:
        """Return the outgoing edges of ``node`` in insertion order ([] if none or unknown)."""
        return list(self._adjacency.get(node.name, {}).values())

    def stored_edges(self) -> List[Edge]:
        """Return every stored edge record in insertion order, mirrors included."""
        return list(self._records)

    def edges(self) -> Union[List[Edge], List[Tuple[Edge, Edge]]]:
        """
        Return the edges of the graph.

        A directed graph returns a flat list of edges. An undirected graph
        returns (edge, reversed edge) pairs, one per added edge. A self-loop
        in an undirected graph is reported as (edge, edge).
        """
        if self._directed:
            return list(self._records)
        return list(self._pairs)

    # -----------------
    # DUNDER
    # -----------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self.has_node(node)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"<Graph {kind} order={self.order()} size={self.size()}>"
