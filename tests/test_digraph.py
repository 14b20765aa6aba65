"""Tests for the directed Digraph ADT."""

from __future__ import annotations

import pytest

from trellis.exceptions import DuplicateEdgeError, InvalidEdgeError, InvalidVertexError
from trellis.graph import Digraph, Graph

# ======================================================================
# TestDigraphBasics
# ======================================================================


class TestDigraphBasics:
    def test_create(self) -> None:
        g = Digraph()
        g.insert_vertex("A")
        g.insert_vertex("B")
        g.insert_edge("A", "B", "PATH")
        assert g.num_vertices() == 2
        assert g.num_edges() == 1

    def test_is_a_graph(self) -> None:
        assert isinstance(Digraph(), Graph)

    def test_repr(self, triangle: Digraph[str, str]) -> None:
        assert repr(triangle) == "Digraph(vertices=3, edges=3)"

    def test_edges_are_directed(self, triangle: Digraph[str, str]) -> None:
        edge = triangle.find_edge("A - B")
        assert edge.directed is True
        assert edge.outbound == triangle.vertex("A")
        assert edge.inbound == triangle.vertex("B")

    def test_duplicate_edge_element(self, triangle: Digraph[str, str]) -> None:
        with pytest.raises(DuplicateEdgeError):
            triangle.insert_edge("B", "A", "A - B")

    def test_missing_endpoint(self, triangle: Digraph[str, str]) -> None:
        with pytest.raises(InvalidVertexError):
            triangle.insert_edge("X", "C", "X - C")
        with pytest.raises(InvalidVertexError):
            triangle.insert_edge("B", "X", "B - X")
        with pytest.raises(InvalidVertexError):
            triangle.insert_edge(None, "X", "N - X")

    def test_vertex_lookup(self, triangle: Digraph[str, str]) -> None:
        assert triangle.vertex("A").element == "A"
        assert triangle.vertex("D") is None


# ======================================================================
# TestDirection
# ======================================================================


class TestDirection:
    def test_are_adjacent_respects_direction(self, triangle: Digraph[str, str]) -> None:
        assert triangle.are_adjacent("A", "B")
        assert not triangle.are_adjacent("B", "A")

    def test_incident_edges_are_inbound(self, triangle: Digraph[str, str]) -> None:
        assert [e.element for e in triangle.incident_edges("A")] == ["C - A"]

    def test_outbound_edges(self, triangle: Digraph[str, str]) -> None:
        assert [e.element for e in triangle.outbound_edges("A")] == ["A - B"]

    def test_inbound_and_outbound_partition(self) -> None:
        g = Digraph()
        for name in "ABCD":
            g.insert_vertex(name)
        g.insert_edge("A", "B", "A-B")
        g.insert_edge("C", "A", "C-A")
        g.insert_edge("A", "D", "A-D")
        g.insert_edge("D", "A", "D-A")
        g.insert_edge("A", "A", "A-A")
        inbound = set(g.incident_edges("A"))
        outbound = set(g.outbound_edges("A"))
        assert not inbound & outbound
        assert inbound | outbound == set(g.edges())
        assert {e.element for e in inbound} == {"C-A", "D-A"}
        assert {e.element for e in outbound} == {"A-B", "A-D", "A-A"}

    def test_edges_of_covers_both(self, triangle: Digraph[str, str]) -> None:
        assert {e.element for e in triangle.edges_of("A")} == {"A - B", "C - A"}

    def test_edge_respects_direction(self, triangle: Digraph[str, str]) -> None:
        assert triangle.edge("A", "B").element == "A - B"
        assert triangle.edge("B", "A") is None

    def test_edge_picks_lightest_in_direction(self) -> None:
        g = Digraph()
        g.insert_vertex("A")
        g.insert_vertex("B")
        g.insert_edge("A", "B", "slow", 5.0)
        g.insert_edge("A", "B", "fast", 1.0)
        g.insert_edge("B", "A", "back", 0.1)
        assert g.edge("A", "B").element == "fast"
        assert g.edge("B", "A").element == "back"

    def test_opposite(self, triangle: Digraph[str, str]) -> None:
        assert triangle.opposite("A", "A - B") == triangle.vertex("B")
        assert triangle.opposite("B", "A - B") == triangle.vertex("A")
        assert triangle.opposite("C", "A - B") is None


# ======================================================================
# TestDigraphRemoval
# ======================================================================


class TestDigraphRemoval:
    def test_remove_vertex_cascades_both_directions(self, triangle: Digraph[str, str]) -> None:
        assert triangle.remove_vertex("C") == "C"
        assert triangle.num_vertices() == 2
        assert triangle.num_edges() == 1
        assert triangle.find_edge("B - C") is None
        assert triangle.find_edge("C - A") is None
        assert triangle.are_adjacent("A", "B")

    def test_remove_vertex_with_self_loop(self) -> None:
        g = Digraph()
        g.insert_vertex("A")
        g.insert_vertex("B")
        g.insert_edge("A", "A", "loop")
        g.insert_edge("A", "B", "A-B")
        g.insert_edge("B", "A", "B-A")
        g.remove_vertex("A")
        assert g.num_edges() == 0
        assert g.edges() == []

    def test_remove_edge_between_exact_direction(self, triangle: Digraph[str, str]) -> None:
        assert triangle.remove_edge_between("B", "A") is None
        assert triangle.num_edges() == 3
        assert triangle.remove_edge_between("A", "B") == "A - B"
        assert not triangle.are_adjacent("A", "B")
        assert not triangle.are_adjacent("B", "A")
        assert triangle.num_vertices() == 3
        assert triangle.num_edges() == 2

    def test_remove_edge_by_handle(self, triangle: Digraph[str, str]) -> None:
        edge = triangle.find_edge("B - C")
        assert triangle.remove_edge(edge) == "B - C"
        with pytest.raises(InvalidEdgeError):
            triangle.remove_edge(edge)


# ======================================================================
# TestDigraphReplace
# ======================================================================


class TestDigraphReplace:
    def test_replace_vertex(self, triangle: Digraph[str, str]) -> None:
        triangle.replace(triangle.vertex("C"), "D")
        assert triangle.num_vertices() == 3
        assert triangle.num_edges() == 3
        assert triangle.are_adjacent("A", "B")
        assert triangle.are_adjacent("D", "A")
        assert triangle.are_adjacent("B", "D")
        assert not triangle.are_adjacent("A", "D")

    def test_replace_vertex_keeps_direction(self, triangle: Digraph[str, str]) -> None:
        triangle.replace_vertex("C", "D")
        edge = triangle.find_edge("C - A")
        assert edge.outbound.element == "D"
        assert edge.inbound.element == "A"
        assert edge.directed is True

    def test_replace_edge(self, triangle: Digraph[str, str]) -> None:
        edge = triangle.find_edge("C - A")
        triangle.replace(edge, "X - A")
        replaced = [e for e in triangle.outbound_edges("C") if e.inbound.element == "A"]
        assert [e.element for e in replaced] == ["X - A"]
        assert replaced[0].weight == edge.weight
        assert triangle.num_edges() == 3
        assert triangle.are_adjacent("C", "A")
