"""Shared fixtures for Trellis tests."""

from __future__ import annotations

import pytest

from trellis.graph import Digraph, Graph


@pytest.fixture
def diamond() -> Graph[str, str]:
    """Undirected graph where two routes join at D before reaching E.

        B
      /   \\
    A       D - E
      \\   /
        C
    """
    g: Graph[str, str] = Graph()
    for name in "ABCDE":
        g.insert_vertex(name)
    g.insert_edge("A", "B", "A - B", 1.0)
    g.insert_edge("A", "C", "A - C", 0.9)
    g.insert_edge("B", "D", "B - D", 1.0)
    g.insert_edge("C", "D", "C - D", 1.0)
    g.insert_edge("D", "E", "D - E", 1.0)
    return g


@pytest.fixture
def triangle() -> Digraph[str, str]:
    """Directed cycle A -> B -> C -> A."""
    g: Digraph[str, str] = Digraph()
    for name in "ABC":
        g.insert_vertex(name)
    g.insert_edge("A", "B", "A - B")
    g.insert_edge("B", "C", "B - C")
    g.insert_edge("C", "A", "C - A")
    return g


@pytest.fixture
def two_routes() -> Digraph[str, str]:
    """Directed graph with a short heavy route and a long light route A -> I.

        B - C - D
      /           \\
    A               I
      \\           /
        E - F - G - H
    """
    g: Digraph[str, str] = Digraph()
    for name in "ABCDEFGHI":
        g.insert_vertex(name)
    for src, tgt in ("AB", "BC", "CD", "DI"):
        g.insert_edge(src, tgt, f"{src}-{tgt}", 2.0)
    for src, tgt in ("AE", "EF", "FG", "GH", "HI"):
        g.insert_edge(src, tgt, f"{src}-{tgt}", 0.1)
    return g
