"""Structural checks for graphs and shortest-path results."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathgraph.graphs.core import Graph
    from pathgraph.graphs.shortest import Dijkstra


def is_mirrored(graph: "Graph") -> bool:
    """
    Return True if every stored edge (A, B, w) has a stored mirror (B, A, w).

    Directed graphs are not required to be mirrored, but the check is still
    meaningful for them (a symmetric directed graph returns True).
    """
    for edge in graph.stored_edges():
        mirror = graph.find_edge(edge.to_node, edge.from_node)
        if mirror is None or mirror.weight != edge.weight:
            return False
    return True


def assert_mirrored_pairs(graph: "Graph") -> None:
    """
    Assert the mirrored-pair invariant of an undirected graph.

    Parameters
    ----------
    graph:
        Graph to check. Directed graphs pass trivially.

    Raises
    ------
    ValueError
        If an undirected graph stores an edge without an equal-weight mirror.
    """
    if graph.directed:
        return

    for edge in graph.stored_edges():
        mirror = graph.find_edge(edge.to_node, edge.from_node)
        if mirror is None:
            raise ValueError(f"Undirected graph is missing the mirror of edge {edge}")
        if mirror.weight != edge.weight:
            raise ValueError(
                f"Mirror of edge {edge} has weight {mirror.weight}, expected {edge.weight}"
            )


def assert_counts_consistent(graph: "Graph") -> None:
    """
    Assert that order() and size() agree with the stored nodes and edges.

    Raises
    ------
    ValueError
        If a count disagrees with the underlying tables.
    """
    if graph.order() != len(graph.nodes()):
        raise ValueError(
            f"order() is {graph.order()} but graph holds {len(graph.nodes())} nodes"
        )

    stored = len(graph.stored_edges())
    if graph.size() != stored:
        raise ValueError(f"size() is {graph.size()} but graph stores {stored} edges")

    if graph.directed:
        reported = len(graph.edges())
    else:
        # A self-loop is its own mirror and is stored once
        reported = sum(1 if edge is mirror else 2 for edge, mirror in graph.edges())
    if reported != stored:
        raise ValueError(f"edges() reports {reported} records, expected {stored}")


def assert_distances_settled(run: "Dijkstra") -> None:
    """
    Assert that no edge out of a reachable node could still be relaxed.

    Dijkstra only guarantees this for non-negative weights; graphs with a
    negative edge are not checked.

    Raises
    ------
    ValueError
        If a settled distance table violates the triangle inequality along an edge.
    """
    edges = run.graph.stored_edges()
    if any(edge.weight < 0 for edge in edges):
        return

    distances = run.distances()
    for edge in edges:
        d_from = distances.get(edge.from_node.name, math.inf)
        d_to = distances.get(edge.to_node.name, math.inf)
        if d_from + edge.weight < d_to:
            raise ValueError(
                f"Edge {edge} can still be relaxed: {d_from} + {edge.weight} < {d_to}"
            )
