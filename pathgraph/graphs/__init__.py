"""
Graph modeling and shortest paths for pathgraph.

This package provides:
- Graph data structures (Node, Edge, Graph), directed or undirected
- Construction from and rendering to dense adjacency matrices
- Dijkstra's single-source shortest paths with path reconstruction
- A positive-weight-only breadth-first distance search

Nodes are identified by name; undirected graphs store each edge once per
direction.
"""

from .core import Graph
from .edge import DEFAULT_WEIGHT, Edge
from .exceptions import (
    EdgeAlreadyExistsError,
    GraphError,
    InvalidStartNodeError,
    NoNodeError,
    NodeAlreadyExistsError,
    NodeNotFoundError,
    NodeOwnedError,
)
from .matrix import adjacency_matrix, graph_from_adjacency_matrix, parse_adjacency_matrix
from .node import Node
from .shortest import Dijkstra, positive_weight_distance
from .utils import node_names, reconstruct_path

__all__ = [
    "Node",
    "Edge",
    "DEFAULT_WEIGHT",
    "Graph",
    "GraphError",
    "NodeAlreadyExistsError",
    "EdgeAlreadyExistsError",
    "NodeNotFoundError",
    "NodeOwnedError",
    "InvalidStartNodeError",
    "NoNodeError",
    "parse_adjacency_matrix",
    "graph_from_adjacency_matrix",
    "adjacency_matrix",
    "Dijkstra",
    "positive_weight_distance",
    "node_names",
    "reconstruct_path",
]

# Example usage:
# from pathgraph.graphs import Dijkstra, Edge, Graph, Node
#
# a, b, c = Node("A"), Node("B"), Node("C")
# g = Graph(directed=True).add_node(a).add_node(b).add_node(c)
# g.add_edge(Edge(a, b, 1)).add_edge(Edge(b, c, 2))
# run = Dijkstra(g, a)
# run.shortest_distance_to(c)   # 3
# run.shortest_path_to(c)       # [Node('A'), Node('B'), Node('C')]
