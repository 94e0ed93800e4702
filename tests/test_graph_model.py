"""
Unit tests for DirectedGraph.
"""

import pytest

from dotpath.errors import (
    EdgeNotFoundError,
    GraphError,
    NodeHasEdgesError,
    NodeNotFoundError,
)
from dotpath.graph import DirectedGraph


class TestAddNodes:
    """Test node insertion."""

    def test_add_new_node(self, triangle):
        """Adding a new node returns True and grows the graph by one."""
        before = triangle.node_count()
        assert triangle.add_node("D") is True
        assert triangle.node_count() == before + 1
        assert "D" in triangle.nodes()

    def test_add_duplicate_node(self, triangle):
        """Adding an existing node returns False and changes nothing."""
        before = triangle.node_count()
        assert triangle.add_node("A") is False
        assert triangle.node_count() == before

    def test_add_twice_true_then_false(self):
        """Same label twice: True, then False; count grows by exactly one."""
        graph = DirectedGraph()
        assert graph.add_node("X") is True
        assert graph.add_node("X") is False
        assert graph.node_count() == 1

    def test_add_nodes(self, triangle):
        """add_nodes adds every new label."""
        before = triangle.node_count()
        triangle.add_nodes(["D", "E", "F"])
        assert triangle.node_count() == before + 3
        assert {"D", "E", "F"} <= triangle.nodes()

    def test_add_nodes_skips_existing(self, triangle):
        """add_nodes ignores labels already present, including repeats in the input."""
        before = triangle.node_count()
        triangle.add_nodes(["A", "D", "E", "D"])
        assert triangle.node_count() == before + 2


class TestAddEdges:
    """Test edge insertion."""

    def test_add_new_edge(self, triangle):
        """Adding a new edge returns True and shows up in edges()."""
        before = triangle.edge_count()
        assert triangle.add_edge("A", "C") is True
        assert triangle.edge_count() == before + 1
        assert "A -> C" in triangle.edges()

    def test_add_duplicate_edge(self, triangle):
        """Adding an existing edge returns False."""
        before = triangle.edge_count()
        assert triangle.add_edge("A", "B") is False
        assert triangle.edge_count() == before

    def test_reverse_edge_is_distinct(self, triangle):
        """Edges are directed: B -> A is not A -> B."""
        assert triangle.add_edge("B", "A") is True
        assert triangle.contains_edge("A", "B")
        assert triangle.contains_edge("B", "A")

    def test_add_edge_creates_nodes(self, triangle):
        """Missing endpoints are created."""
        nodes_before = triangle.node_count()
        edges_before = triangle.edge_count()
        assert triangle.add_edge("D", "E") is True
        assert triangle.node_count() == nodes_before + 2
        assert triangle.edge_count() == edges_before + 1
        assert {"D", "E"} <= triangle.nodes()

    def test_self_loop(self):
        """A node may point at itself."""
        graph = DirectedGraph()
        assert graph.add_edge("A", "A") is True
        assert graph.node_count() == 1
        assert graph.outgoing_neighbors("A") == ["A"]
        assert graph.in_degree("A") == 1


class TestRemoveNodes:
    """Test node removal rules."""

    def test_remove_isolated_node(self, triangle):
        """An isolated node can be removed."""
        triangle.add_node("X")
        before = triangle.node_count()
        assert triangle.remove_node("X") is True
        assert triangle.node_count() == before - 1
        assert "X" not in triangle.nodes()

    def test_remove_nodes(self, triangle):
        """remove_nodes removes each listed node."""
        triangle.add_nodes(["X", "Y", "Z"])
        before = triangle.node_count()
        triangle.remove_nodes(["X", "Y"])
        assert triangle.node_count() == before - 2
        assert "Z" in triangle.nodes()

    def test_remove_missing_node(self, triangle):
        """Removing an unknown node raises NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError, match="Node doesn't exist"):
            triangle.remove_node("X")

    def test_remove_connected_node(self, triangle):
        """A node with edges cannot be removed, and nothing changes."""
        nodes_before = triangle.nodes()
        edges_before = triangle.edges()
        with pytest.raises(NodeHasEdgesError, match="Cannot remove node with connected edges") as exc:
            triangle.remove_node("A")
        assert exc.value.in_degree == 1
        assert exc.value.out_degree == 1
        assert triangle.nodes() == nodes_before
        assert triangle.edges() == edges_before

    def test_remove_node_with_only_incoming_edge(self):
        """Incoming edges alone also block removal."""
        graph = DirectedGraph()
        graph.add_edge("A", "B")
        with pytest.raises(NodeHasEdgesError):
            graph.remove_node("B")

    def test_remove_nodes_stops_at_first_failure(self, triangle):
        """Nodes before the failing one are gone; later ones stay."""
        triangle.add_nodes(["X", "Y"])
        with pytest.raises(NodeNotFoundError):
            triangle.remove_nodes(["X", "missing", "Y"])
        assert "X" not in triangle.nodes()
        assert "Y" in triangle.nodes()

    def test_remove_after_edges_removed(self, triangle):
        """Once its edges are gone the node can be removed."""
        triangle.remove_edge("A", "B")
        triangle.remove_edge("C", "A")
        assert triangle.remove_node("A") is True


class TestRemoveEdges:
    """Test edge removal rules."""

    def test_remove_edge(self, triangle):
        """Removing an existing edge returns True."""
        before = triangle.edge_count()
        assert triangle.remove_edge("A", "B") is True
        assert triangle.edge_count() == before - 1
        assert "A -> B" not in triangle.edges()
        assert {"A", "B"} <= triangle.nodes()

    def test_remove_missing_edge(self, triangle):
        """Existing nodes without an edge raise EdgeNotFoundError."""
        with pytest.raises(EdgeNotFoundError, match="Edge doesn't exist: A -> C"):
            triangle.remove_edge("A", "C")

    def test_remove_edge_missing_source(self, triangle):
        """Unknown source raises NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError, match="Source node doesn't exist"):
            triangle.remove_edge("X", "A")

    def test_remove_edge_missing_destination(self, triangle):
        """Unknown destination raises NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError, match="Destination node doesn't exist"):
            triangle.remove_edge("A", "X")


class TestQueries:
    """Test read-only accessors."""

    def test_counts(self, triangle):
        """Triangle has three nodes and three edges."""
        assert triangle.node_count() == 3
        assert triangle.edge_count() == 3
        assert len(triangle) == 3

    def test_edges_format(self, triangle):
        """edges() lists 'source -> target' strings."""
        assert sorted(triangle.edges()) == ["A -> B", "B -> C", "C -> A"]

    def test_outgoing_neighbors_insertion_order(self):
        """Neighbours come back in insertion order."""
        graph = DirectedGraph()
        graph.add_edge("A", "C")
        graph.add_edge("A", "B")
        assert graph.outgoing_neighbors("A") == ["C", "B"]
        assert graph.incoming_neighbors("B") == ["A"]

    def test_degrees(self, two_routes):
        """In/out degree count incident edges."""
        assert two_routes.out_degree("A") == 2
        assert two_routes.in_degree("D") == 2
        assert two_routes.in_degree("Z") == 0

    def test_degree_of_missing_node(self, triangle):
        """Degree queries on unknown nodes raise NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError):
            triangle.in_degree("X")
        with pytest.raises(NodeNotFoundError):
            triangle.out_degree("X")
        with pytest.raises(NodeNotFoundError):
            triangle.outgoing_neighbors("X")

    def test_contains(self, triangle):
        """Membership checks."""
        assert triangle.contains_node("A")
        assert not triangle.contains_node("X")
        assert "B" in triangle
        assert not triangle.contains_edge("X", "A")

    def test_nodes_returns_copy(self, triangle):
        """Mutating the returned set does not touch the graph."""
        nodes = triangle.nodes()
        nodes.add("X")
        assert not triangle.contains_node("X")

    def test_str(self, triangle):
        """String summary lists counts and edges."""
        text = str(triangle)
        assert "Number of nodes: 3" in text
        assert "Number of edges: 3" in text
        assert "A -> B" in text
        assert "C -> A" in text

    def test_errors_share_base(self):
        """All graph errors can be caught as GraphError."""
        graph = DirectedGraph()
        with pytest.raises(GraphError):
            graph.remove_node("X")
        with pytest.raises(LookupError):
            graph.remove_node("X")
