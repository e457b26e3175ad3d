"""Pytest configuration and shared fixtures for pathgraph tests.

This module provides:
- The Wikipedia Dijkstra example as undirected and directed matrices
- Graph fixtures built from those matrices
- A fixture that restores the debug-check selection after every test
"""

from typing import Generator

import pytest

from pathgraph import Graph
from pathgraph.diagnostics import enabled_checks, set_enabled_checks

# https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm
WIKI_UNDIRECTED = """
    0  7  9  0  0 14
    7  0  10 15 0 0
    9  10 0  11 0 2
    0  15 11 0  6 0
    0  0  0  6  0 9
    14 0  2  0  9 0
"""

WIKI_DIRECTED = """
    0  7 0  0  0 0
    0  0 10 15 0 0
    9  0 0  11 0 2
    0  0 11 0  6 0
    0  0 0  0  0 0
    14 0 0  0  9 0
"""


@pytest.fixture
def undirected_wiki() -> Graph:
    """Undirected six-node graph from the Wikipedia Dijkstra article."""
    return Graph.from_adjacency_matrix(WIKI_UNDIRECTED)


@pytest.fixture
def directed_wiki() -> Graph:
    """Directed variant of the Wikipedia graph."""
    return Graph.from_adjacency_matrix(WIKI_DIRECTED, directed=True)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Generator[None, None, None]:
    """Keep a test that toggles debug mode from leaking into the next one."""
    original = enabled_checks()
    yield
    set_enabled_checks(original)


@pytest.fixture
def undirected_wiki_matrix() -> str:
    """Matrix text behind the undirected_wiki fixture."""
    return WIKI_UNDIRECTED
