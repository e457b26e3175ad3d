"""Invariant checks and debug-check switches for pathgraph."""

from .core import (
    assert_counts_consistent,
    assert_distances_settled,
    assert_mirrored_pairs,
    is_mirrored,
)
from .debug_mode import (
    ALL_CHECKS,
    GRAPH_CHECKS,
    PATH_CHECKS,
    debug_context,
    enabled_checks,
    is_debug_enabled,
    set_debug_enabled,
    set_enabled_checks,
)

__all__ = [
    "is_mirrored",
    "assert_mirrored_pairs",
    "assert_counts_consistent",
    "assert_distances_settled",
    "GRAPH_CHECKS",
    "PATH_CHECKS",
    "ALL_CHECKS",
    "is_debug_enabled",
    "set_debug_enabled",
    "enabled_checks",
    "set_enabled_checks",
    "debug_context",
]
