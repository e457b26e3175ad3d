"""Tests for the Edge class."""

import pytest

from pathgraph.graphs import DEFAULT_WEIGHT, Edge, Node


@pytest.fixture
def nodes():
    return Node("A"), Node("B"), Node("C")


class TestEdge:
    """Tests for edge construction, reversal and comparison."""

    def test_default_weight(self, nodes):
        """Test that an edge without weight uses the documented default of 1."""
        a, b, _ = nodes
        assert DEFAULT_WEIGHT == 1
        assert Edge(a, b).weight == 1

    def test_accessors(self, nodes):
        """Test from/to/weight accessors."""
        a, b, _ = nodes
        edge = Edge(a, b, 42)
        assert edge.from_node is a
        assert edge.to_node is b
        assert edge.weight == 42

    def test_reversed(self, nodes):
        """Test that reversed swaps endpoints and keeps weight."""
        a, b, _ = nodes
        edge = Edge(a, b, 5)
        mirror = edge.reversed()
        assert mirror.from_node == b
        assert mirror.to_node == a
        assert mirror.weight == 5
        assert mirror is not edge

    def test_reversed_twice_is_identity(self, nodes):
        """Test that reversing twice yields an equal edge."""
        a, b, _ = nodes
        edge = Edge(a, b, 2.5)
        assert edge.reversed().reversed() == edge

    def test_equality_is_ordered(self, nodes):
        """Test that equality compares from, to and weight."""
        a, b, _ = nodes
        assert Edge(a, b, 3) == Edge(Node("A"), Node("B"), 3)
        assert Edge(a, b, 3) != Edge(b, a, 3)
        assert Edge(a, b, 3) != Edge(a, b, 4)

    def test_hash_consistent_with_equality(self, nodes):
        """Test that equal edges hash equally."""
        a, b, _ = nodes
        assert hash(Edge(a, b, 3)) == hash(Edge(Node("A"), Node("B"), 3))
        assert len({Edge(a, b, 3), Edge(a, b, 3), Edge(b, a, 3)}) == 2

    def test_ordering_by_weight(self, nodes):
        """Test that edges sort by weight only."""
        a, b, c = nodes
        light = Edge(c, a, 1)
        middle = Edge(a, b, 5)
        heavy = Edge(b, c, 9)
        assert light < middle < heavy
        assert heavy > light
        assert sorted([heavy, light, middle]) == [light, middle, heavy]
        assert min([middle, heavy, light]) is light

    def test_equal_weights_are_not_ordered(self, nodes):
        """Test that distinct edges with equal weight are neither < nor >."""
        a, b, c = nodes
        first = Edge(a, b, 4)
        second = Edge(b, c, 4)
        assert first != second
        assert not first < second
        assert not first > second
        assert first <= second
        assert first >= second

    def test_str(self, nodes):
        """Test human-readable representation."""
        a, b, _ = nodes
        assert str(Edge(a, b, 7)) == "A -> B with weight 7"

    def test_repr(self, nodes):
        """Test repr."""
        a, b, _ = nodes
        assert repr(Edge(a, b, 7)) == "Edge(Node('A'), Node('B'), 7)"

    def test_key(self, nodes):
        """Test that key is the ordered pair of names."""
        a, b, _ = nodes
        assert Edge(a, b).key() == ("A", "B")
