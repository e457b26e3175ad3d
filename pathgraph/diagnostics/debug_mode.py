"""Debug-check switches for pathgraph.

Two groups of invariant checks can be switched on independently:

- ``graph``: after every edge insertion the graph re-checks that undirected
  edges are mirrored and that ``size()`` agrees with ``edges()``.
  Each check walks the whole graph, so building a graph becomes quadratic.
- ``paths``: after a Dijkstra run the result table is checked for edges
  that could still relax a settled distance.

The initial selection comes from the PATHGRAPH_DEBUG environment variable:
``1``/``true``/``yes``/``on``/``all`` turn on every group, and a comma
separated list such as ``graph,paths`` turns on the named groups only.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import FrozenSet, Iterable, Iterator, Optional

from ..logging import get_logger

logger = get_logger(__name__)

GRAPH_CHECKS = "graph"
PATH_CHECKS = "paths"
ALL_CHECKS: FrozenSet[str] = frozenset({GRAPH_CHECKS, PATH_CHECKS})

_DEBUG_ENV_VAR = "PATHGRAPH_DEBUG"
_ON_WORDS = ("1", "true", "yes", "on", "all")
_OFF_WORDS = ("", "0", "false", "no", "off", "none")


def _parse_checks(value: str) -> FrozenSet[str]:
    value = value.strip().lower()
    if value in _ON_WORDS:
        return ALL_CHECKS
    if value in _OFF_WORDS:
        return frozenset()

    selected = set()
    for name in value.split(","):
        name = name.strip()
        if not name:
            continue
        if name in ALL_CHECKS:
            selected.add(name)
        else:
            logger.warning("Ignoring unknown %s check %r", _DEBUG_ENV_VAR, name)
    return frozenset(selected)


def _validate(check: str) -> str:
    if check not in ALL_CHECKS:
        raise ValueError(
            f"Unknown debug check {check!r}; expected one of {sorted(ALL_CHECKS)}"
        )
    return check


_enabled: FrozenSet[str] = _parse_checks(os.getenv(_DEBUG_ENV_VAR, "0"))


def is_debug_enabled(check: Optional[str] = None) -> bool:
    """
    Return whether debug checks are enabled.

    Args:
        check: ``"graph"`` or ``"paths"``. When omitted, returns True if any
            group is enabled.
    """
    if check is None:
        return bool(_enabled)
    return _validate(check) in _enabled


def enabled_checks() -> FrozenSet[str]:
    """Return the names of the enabled check groups."""
    return _enabled


def set_enabled_checks(checks: Iterable[str]) -> None:
    """Enable exactly the named check groups and disable the rest."""
    global _enabled
    _enabled = frozenset(_validate(check) for check in checks)


def set_debug_enabled(enabled: bool, check: Optional[str] = None) -> None:
    """Enable or disable one check group, or all of them when ``check`` is None."""
    global _enabled
    groups = ALL_CHECKS if check is None else frozenset({_validate(check)})
    if enabled:
        _enabled = _enabled | groups
    else:
        _enabled = _enabled - groups


@contextmanager
def debug_context(enabled: bool = True, check: Optional[str] = None) -> Iterator[None]:
    """
    Temporarily enable or disable debug checks.

    The full previous selection is restored on exit.

    Example
    -------
    >>> with debug_context(True, "graph"):
    ...     graph.add_edge(Edge(a, b, 2))  # mirroring re-checked here
    """
    previous = enabled_checks()
    set_debug_enabled(enabled, check)
    try:
        yield
    finally:
        set_enabled_checks(previous)
