"""Digraph — directed graph ADT over a rustworkx arena."""

from __future__ import annotations

from typing import Any

import rustworkx

from trellis.graph._graph import Graph
from trellis.graph.types import E, Edge, V, Vertex


class Digraph(Graph[V, E]):
    """Directed graph with unique vertex and edge elements.

    Every edge runs from ``vertex_a`` (outbound end) to ``vertex_b`` (inbound
    end).  Edge selection follows one convention throughout:

    * :meth:`incident_edges` returns the edges *entering* a vertex;
    * :meth:`outbound_edges` returns the edges *leaving* it.

    The two never overlap and together cover every edge touching the vertex.
    A self-loop counts as outbound only.
    """

    _directed = True

    def _new_storage(self) -> Any:
        return rustworkx.PyDiGraph(multigraph=True)

    # ------------------------------------------------------------------
    # Direction-aware queries
    # ------------------------------------------------------------------

    def incident_edges(self, vertex: Vertex[V] | V) -> list[Edge[E, V]]:
        """Edges whose target (inbound end) is *vertex*."""
        with self._lock:
            return self._inbound(self._require_vertex(vertex))

    def outbound_edges(self, vertex: Vertex[V] | V) -> list[Edge[E, V]]:
        """Edges whose source (outbound end) is *vertex*."""
        with self._lock:
            return self._outbound(self._require_vertex(vertex))

    def are_adjacent(self, outbound: Vertex[V] | V, inbound: Vertex[V] | V) -> bool:
        """Return whether an edge runs from *outbound* to *inbound*.

        The reverse direction does not count.
        """
        return super().are_adjacent(outbound, inbound)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _outbound(self, vertex: Vertex[V]) -> list[Edge[E, V]]:
        return [data for _src, _tgt, data in self._graph.out_edges(vertex.index)]

    def _inbound(self, vertex: Vertex[V]) -> list[Edge[E, V]]:
        return [
            data
            for src, _tgt, data in self._graph.in_edges(vertex.index)
            if src != vertex.index
        ]

    def _touching(self, vertex: Vertex[V]) -> list[Edge[E, V]]:
        return self._inbound(vertex) + self._outbound(vertex)

    def _connecting(self, u: Vertex[V], v: Vertex[V]) -> list[Edge[E, V]]:
        """Edges running exactly from *u* to *v*."""
        return [edge for edge in self._outbound(u) if edge.vertex_b == v]
