"""pathgraph - in-memory weighted graphs with Dijkstra shortest paths."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_counts_consistent,
    assert_mirrored_pairs,
    debug_context,
    enabled_checks,
    is_debug_enabled,
    is_mirrored,
    set_debug_enabled,
    set_enabled_checks,
)

# Graph model and algorithms
from .graphs import (
    DEFAULT_WEIGHT,
    Dijkstra,
    Edge,
    EdgeAlreadyExistsError,
    Graph,
    GraphError,
    InvalidStartNodeError,
    NoNodeError,
    Node,
    NodeAlreadyExistsError,
    NodeNotFoundError,
    NodeOwnedError,
    adjacency_matrix,
    graph_from_adjacency_matrix,
    parse_adjacency_matrix,
    positive_weight_distance,
    reconstruct_path,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Node",
    "Edge",
    "DEFAULT_WEIGHT",
    "Graph",
    "graph_from_adjacency_matrix",
    "parse_adjacency_matrix",
    "adjacency_matrix",
    "Dijkstra",
    "positive_weight_distance",
    "reconstruct_path",
    # Errors
    "GraphError",
    "NodeAlreadyExistsError",
    "EdgeAlreadyExistsError",
    "NodeNotFoundError",
    "NodeOwnedError",
    "InvalidStartNodeError",
    "NoNodeError",
    # Diagnostics
    "is_mirrored",
    "assert_mirrored_pairs",
    "assert_counts_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "enabled_checks",
    "set_enabled_checks",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
