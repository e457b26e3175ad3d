"""
Shortest path algorithms.

Dijkstra computes, eagerly on construction, the shortest distance and a
shortest path from one start node to every node of a graph with
non-negative weights.

positive_weight_distance is a separate, narrower mode: a breadth-first
relaxation that only follows edges of strictly positive weight and only
reports a distance.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
    - https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Deque, Dict, Hashable, List, Optional, Set, Tuple

from ..diagnostics import PATH_CHECKS, assert_distances_settled, is_debug_enabled
from ..logging import get_logger
from .core import Graph
from .edge import Weight
from .exceptions import InvalidStartNodeError
from .node import Node
from .utils import reconstruct_path

logger = get_logger(__name__)


class Dijkstra:
    """
    Single-source shortest paths, computed once for a fixed graph and start.

    The run happens inside the constructor. Nodes are settled in order of
    increasing distance; among nodes at equal distance the one added to the
    graph first is settled first. Relaxation only updates unsettled nodes
    and only on a strict improvement.

    Args:
        graph: Graph with non-negative edge weights.
        start_node: Node to measure from.

    Raises:
        InvalidStartNodeError: If ``start_node`` is not a Node.
        ValueError: If the graph has a negative edge weight.

    Complexity: O((V + E) log V) using a binary heap.

    Example:
        >>> g = Graph.from_adjacency_matrix('''
        ...     0 7 9
        ...     7 0 1
        ...     9 1 0
        ... ''')
        >>> start = g.find_node_by_name("node 1")
        >>> run = Dijkstra(g, start)
        >>> run.shortest_distance_to(g.find_node_by_name("node 3"))
        8
        >>> [str(n) for n in run.shortest_path_to(g.find_node_by_name("node 3"))]
        ['node 1', 'node 2', 'node 3']
    """

    def __init__(self, graph: Graph, start_node: Node):
        if not isinstance(start_node, Node):
            raise InvalidStartNodeError(
                f"start_node must be a Node, got {type(start_node).__name__}"
            )

        self._graph = graph
        self._start_node = start_node
        self._nodes: Dict[Hashable, Node] = {}
        self._distances: Dict[Hashable, Weight] = {}
        self._previous: Dict[Hashable, Optional[Hashable]] = {}

        self._check_weights()
        self._init()
        self._process()

        if is_debug_enabled(PATH_CHECKS):
            assert_distances_settled(self)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def start_node(self) -> Node:
        return self._start_node

    def _check_weights(self) -> None:
        for edge in self._graph.stored_edges():
            if edge.weight is None or edge.weight < 0:
                raise ValueError(
                    f"Dijkstra requires non-negative weights. "
                    f"Found weight {edge.weight!r} on edge {edge}"
                )

    def _init(self) -> None:
        for node in self._graph.nodes():
            self._nodes[node.name] = node
            self._distances[node.name] = math.inf
            self._previous[node.name] = None

        start = self._start_node.name
        self._nodes.setdefault(start, self._start_node)
        self._distances[start] = 0
        self._previous[start] = None

    def _process(self) -> None:
        # Heap entries are (distance, insertion rank, name); the rank makes
        # ties resolve to graph insertion order
        rank = {name: i for i, name in enumerate(self._nodes)}
        start = self._start_node.name
        heap: List[Tuple[Weight, int, Hashable]] = [(0, rank[start], start)]
        settled: Set[Hashable] = set()

        while heap:
            d, _, u = heapq.heappop(heap)
            if u in settled:
                continue
            settled.add(u)

            for edge in self._graph.edges_for_node(self._nodes[u]):
                v = edge.to_node.name
                if v in settled or v not in self._distances:
                    continue

                alternative = d + edge.weight
                if alternative < self._distances[v]:
                    self._distances[v] = alternative
                    self._previous[v] = u
                    heapq.heappush(heap, (alternative, rank[v], v))

        logger.debug(
            "Dijkstra from %r settled %d of %d nodes",
            start,
            len(settled),
            len(self._nodes),
        )

    def shortest_distance_to(self, node: Node) -> Optional[Weight]:
        """
        Shortest distance from the start node to ``node``.

        Returns:
            0 for the start node, ``math.inf`` for a node of the graph that
            cannot be reached (including nodes added after the run), and
            None for a node that is not part of the graph.
        """
        if node.name in self._distances:
            return self._distances[node.name]
        if self._graph.has_node(node):
            return math.inf
        return None

    def shortest_path_to(self, node: Node) -> Optional[List[Node]]:
        """
        One shortest path from the start node to ``node``, both inclusive.

        Returns:
            List of nodes, or None if ``node`` is the start node, is
            unreachable, or is not part of the graph.
        """
        if self._previous.get(node.name) is None:
            return None

        names = reconstruct_path(self._previous, node.name)
        return [self._nodes[name] for name in names]

    def distances(self) -> Dict[Hashable, Weight]:
        """Copy of the settled distance table, keyed by node name."""
        return dict(self._distances)

    def predecessors(self) -> Dict[Hashable, Optional[Hashable]]:
        """Copy of the predecessor table, keyed by node name (None for start/unreached)."""
        return dict(self._previous)


def positive_weight_distance(graph: Graph, from_node: Node, to_node: Node) -> Weight:
    """
    Distance from ``from_node`` to ``to_node`` following positive edges only.

    Breadth-first relaxation without a settled set: a node is queued again
    whenever its distance improves. Edges whose weight is missing or not
    strictly positive are skipped, so this is not a general shortest-path
    algorithm; on graphs whose weights are all positive it agrees with
    Dijkstra.

    Args:
        graph: Graph to search.
        from_node: Start node.
        to_node: Target node.

    Returns:
        The distance, 0 if both nodes are the same, or ``math.inf`` if
        ``to_node`` is unreachable or not in the graph.

    Raises:
        InvalidStartNodeError: If ``from_node`` is not a Node.

    Complexity: O(V * E) worst case.
    """
    if not isinstance(from_node, Node):
        raise InvalidStartNodeError(
            f"from_node must be a Node, got {type(from_node).__name__}"
        )

    if from_node == to_node:
        return 0

    path_lengths: Dict[Hashable, Weight] = {node.name: math.inf for node in graph.nodes()}
    path_lengths[from_node.name] = 0

    queue: Deque[Node] = deque([from_node])
    queued: Set[Hashable] = {from_node.name}

    while queue:
        node = queue.popleft()
        queued.discard(node.name)

        for edge in graph.edges_for_node(node):
            if edge.weight is None or edge.weight <= 0:
                logger.debug("Skipping non-positive edge %s", edge)
                continue

            v = edge.to_node.name
            alternative = path_lengths[node.name] + edge.weight
            if alternative < path_lengths.get(v, math.inf):
                path_lengths[v] = alternative
                if v not in queued:
                    queued.add(v)
                    queue.append(edge.to_node)

    return path_lengths.get(to_node.name, math.inf)
