"""
Adjacency-matrix construction.

Builds a Graph from a dense square matrix where a nonzero cell (i, j) is
an edge of that weight from node i to node j, and renders a Graph back to
such a matrix. Nodes are named "node 1" .. "node N" after their 1-based
row index.
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from ..logging import get_logger
from .core import Graph
from .edge import Edge, Weight
from .exceptions import EdgeAlreadyExistsError
from .node import Node

logger = get_logger(__name__)


def matrix_node_name(index: int) -> str:
    """Name of the node for 0-based matrix row ``index``."""
    return f"node {index + 1}"


def parse_adjacency_matrix(matrix: Any) -> np.ndarray:
    """
    Convert a matrix description into a square float array.

    Args:
        matrix: Either text with one whitespace-separated row per line, or
            any 2-D array-like (nested lists, numpy array).

    Returns:
        (n, n) float numpy array.

    Raises:
        ValueError: If the input is empty, ragged, non-numeric or not square.

    Example:
        >>> parse_adjacency_matrix('''
        ...     0 7
        ...     7 0
        ... ''').tolist()
        [[0.0, 7.0], [7.0, 0.0]]
    """
    if isinstance(matrix, str):
        rows = [line.split() for line in matrix.splitlines() if line.strip()]
        if not rows:
            raise ValueError("Adjacency matrix text is empty")
        try:
            array = np.array(rows, dtype=float)
        except ValueError as exc:
            raise ValueError(f"Adjacency matrix text is not a numeric grid: {exc}") from exc
    else:
        array = np.asarray(matrix, dtype=float)

    if array.ndim != 2:
        raise ValueError(f"Adjacency matrix must be 2-D, got {array.ndim} dimension(s)")
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise ValueError(f"Adjacency matrix must be square, got shape {array.shape}")
    if n_rows == 0:
        raise ValueError("Adjacency matrix is empty")
    if not np.all(np.isfinite(array)):
        raise ValueError("Adjacency matrix contains non-finite values")

    return array


def _as_weight(value: float) -> Weight:
    # Keep integral weights as ints so distances print as 7, not 7.0
    return int(value) if float(value).is_integer() else float(value)


def graph_from_adjacency_matrix(
    matrix: Any, directed: bool = False, graph: Optional[Graph] = None
) -> Graph:
    """
    Build a graph from an adjacency matrix.

    Creates one node per row, then one edge per nonzero cell. In an
    undirected graph the mirror of each edge is inserted automatically,
    so the transposed cell is skipped when it carries the same weight.

    Args:
        matrix: Matrix text or 2-D array-like, see parse_adjacency_matrix.
        directed: Direction of the graph to create. Ignored if ``graph`` is given.
        graph: Optional empty graph to populate instead of a new one.

    Returns:
        The populated graph.

    Raises:
        ValueError: If the matrix is malformed.
        EdgeAlreadyExistsError: If an undirected graph gets a non-symmetric matrix.

    Example:
        >>> g = graph_from_adjacency_matrix('''
        ...     0 1 1
        ...     0 0 0
        ...     0 0 0
        ... ''', directed=True)
        >>> [str(n) for n in g.find_node_by_name("node 1").neighbours()]
        ['node 2', 'node 3']
    """
    array = parse_adjacency_matrix(matrix)
    if graph is None:
        graph = Graph(directed=directed)

    n = array.shape[0]
    nodes: List[Node] = [Node(matrix_node_name(i)) for i in range(n)]
    for node in nodes:
        graph.add_node(node)

    for i, j in zip(*np.nonzero(array)):
        edge = Edge(nodes[i], nodes[j], _as_weight(array[i, j]))
        existing = graph.find_edge(edge.from_node, edge.to_node)
        if existing is not None and graph.undirected:
            if existing.weight == edge.weight:
                continue
            raise EdgeAlreadyExistsError(
                f"Matrix is not symmetric: cell ({i + 1}, {j + 1}) is {edge.weight} "
                f"but its mirror is {existing.weight}"
            )
        graph.add_edge(edge)

    logger.debug(
        "Built %s graph from %dx%d matrix (size=%d)",
        "directed" if graph.directed else "undirected",
        n,
        n,
        graph.size(),
    )
    return graph


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Render a graph as a dense weight matrix.

    Rows and columns follow node insertion order. Absent edges are 0, so a
    zero-weight edge is indistinguishable from no edge.

    Returns:
        (order, order) float numpy array.
    """
    nodes = graph.nodes()
    index = {node.name: i for i, node in enumerate(nodes)}
    W = np.zeros((len(nodes), len(nodes)))

    for edge in graph.stored_edges():
        W[index[edge.from_node.name], index[edge.to_node.name]] = edge.weight

    return W
