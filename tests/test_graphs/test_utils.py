"""Tests for graph utility functions."""

import pytest

from pathgraph.graphs import Node, node_names, reconstruct_path


class TestReconstructPath:
    """Tests for predecessor-map walking."""

    def test_simple_chain(self):
        """Test a straight chain."""
        previous = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(previous, "C") == ["A", "B", "C"]

    def test_source(self):
        """Test that a key without predecessor is its own path."""
        assert reconstruct_path({"A": None}, "A") == ["A"]

    def test_missing_target(self):
        """Test that a key outside the map yields None."""
        assert reconstruct_path({"A": None}, "D") is None

    def test_cycle(self):
        """Test that cyclic predecessor links are reported."""
        with pytest.raises(ValueError, match="cycle"):
            reconstruct_path({"A": "B", "B": "A"}, "A")


def test_node_names():
    """Test name extraction preserves order."""
    assert node_names([Node("B"), Node("A")]) == ["B", "A"]
    assert node_names([]) == []
