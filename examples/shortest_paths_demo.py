"""Example: Shortest paths with pathgraph

Builds the graph from the Wikipedia article on Dijkstra's algorithm twice,
once from an adjacency matrix and once node by node, and prints distances
and routes from node 1.
"""

import pathgraph as pg
from pathgraph import Dijkstra, Edge, Graph, Node, positive_weight_distance
from pathgraph.graphs import node_names

WIKI_MATRIX = """
    0  7  9  0  0 14
    7  0  10 15 0 0
    9  10 0  11 0 2
    0  15 11 0  6 0
    0  0  0  6  0 9
    14 0  2  0  9 0
"""


def example_from_matrix():
    """Example: undirected graph from an adjacency matrix."""
    print("=" * 60)
    print("Example 1: Undirected graph from an adjacency matrix")
    print("=" * 60)

    graph = Graph.from_adjacency_matrix(WIKI_MATRIX)
    print(f"Graph: {graph!r}")

    start = graph.find_node_by_name("node 1")
    run = Dijkstra(graph, start)

    for node in graph.nodes():
        path = run.shortest_path_to(node)
        route = " -> ".join(node_names(path)) if path else "-"
        print(f"{node}: distance {run.shortest_distance_to(node)}, route {route}")


def example_by_hand():
    """Example: directed graph built node by node, with payloads."""
    print("=" * 60)
    print("Example 2: Directed graph with payloads")
    print("=" * 60)

    cities = {
        "Berlin": (52.52, 13.40),
        "Leipzig": (51.34, 12.37),
        "Dresden": (51.05, 13.74),
        "Prague": (50.08, 14.44),
    }
    nodes = {name: Node(name, payload=coords) for name, coords in cities.items()}

    graph = Graph(directed=True)
    for node in nodes.values():
        graph.add_node(node)

    graph.add_edge(Edge(nodes["Berlin"], nodes["Leipzig"], 190))
    graph.add_edge(Edge(nodes["Berlin"], nodes["Dresden"], 193))
    graph.add_edge(Edge(nodes["Leipzig"], nodes["Dresden"], 115))
    graph.add_edge(Edge(nodes["Dresden"], nodes["Prague"], 150))

    run = Dijkstra(graph, nodes["Berlin"])
    prague = nodes["Prague"]
    route = " -> ".join(node_names(run.shortest_path_to(prague)))
    print(f"Berlin to Prague: {run.shortest_distance_to(prague)} km via {route}")
    print(f"Prague coordinates: {prague.payload}")

    bfs_distance = positive_weight_distance(graph, nodes["Berlin"], prague)
    print(f"Positive-weight search agrees: {bfs_distance == run.shortest_distance_to(prague)}")


if __name__ == "__main__":
    print(f"pathgraph {pg.__version__}")
    example_from_matrix()
    example_by_hand()
    print("Shortest path demo complete")
