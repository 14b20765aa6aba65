"""Graph — undirected graph ADT over a rustworkx arena."""

from __future__ import annotations

import dataclasses
import logging
import threading
import uuid
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic

import rustworkx

from trellis.exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    InvalidEdgeError,
    InvalidVertexError,
)
from trellis.graph.extractors import default_label, default_weight
from trellis.graph.paths import Path
from trellis.graph.shortest_path import dijkstra
from trellis.graph.types import E, Edge, V, Vertex

if TYPE_CHECKING:
    from collections.abc import Mapping

    from trellis.graph.extractors import LabelExtractor, WeightExtractor

logger = logging.getLogger(__name__)


class Graph(Generic[V, E]):
    """Undirected graph with unique vertex and edge elements.

    Vertices and edges live in a ``rustworkx.PyGraph`` arena whose payloads
    are the immutable ``Vertex`` / ``Edge`` values.  Handles carry the arena
    index and an owner key, never a reference back to the graph.

    Wherever a vertex is expected, either a ``Vertex`` handle or its raw
    element is accepted; the same goes for edges.

    Every public call that touches the arena holds a per-instance
    :class:`threading.Lock` for its whole duration, so each one sees a
    consistent snapshot.  The lock is not reentrant and there is no
    cross-call transaction: hold an external lock around multi-call
    sequences such as :meth:`dijkstra` if other threads mutate the graph
    meanwhile.
    """

    _directed = False

    def __init__(
        self,
        *,
        weight_extractor: WeightExtractor = default_weight,
        label_extractor: LabelExtractor = default_label,
    ) -> None:
        self._graph = self._new_storage()
        self._vertex_idx: dict[V, int] = {}
        self._edge_idx: dict[E, int] = {}
        self._key = uuid.uuid4().hex
        self._lock = threading.Lock()
        self._weight_extractor = weight_extractor
        self._label_extractor = label_extractor

    def _new_storage(self) -> Any:
        return rustworkx.PyGraph(multigraph=True)

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def insert_vertex(self, element: V) -> Vertex[V]:
        """Add a vertex holding *element*.

        Raises ``DuplicateVertexError`` if an equal element is already stored.
        """
        with self._lock:
            if element is None:
                msg = "Null vertex element"
                raise InvalidVertexError(msg)
            if element in self._vertex_idx:
                msg = f"There's already a vertex with element {element!r}"
                raise DuplicateVertexError(msg)
            idx = self._graph.add_node(None)
            vertex = Vertex(element, idx, self._key)
            self._graph[idx] = vertex
            self._vertex_idx[element] = idx
            return vertex

    def remove_vertex(self, vertex: Vertex[V] | V) -> V:
        """Remove a vertex and every edge touching it.  Returns its element."""
        with self._lock:
            target = self._require_vertex(vertex)
            doomed = self._touching(target)
            for edge in doomed:
                del self._edge_idx[edge.element]
            self._graph.remove_node(target.index)
            del self._vertex_idx[target.element]
            if doomed:
                logger.debug("Removed %r with %d edge(s)", target, len(doomed))
            return target.element

    def replace_vertex(self, vertex: Vertex[V] | V, new_element: V) -> V:
        """Swap the element of *vertex* for *new_element*.

        A new ``Vertex`` value takes the old one's place and every edge that
        referenced it is rewired.  Returns the old element.
        """
        with self._lock:
            if new_element is None:
                msg = "Null vertex element"
                raise InvalidVertexError(msg)
            if new_element in self._vertex_idx:
                msg = f"There's already a vertex with element {new_element!r}"
                raise DuplicateVertexError(msg)
            old = self._require_vertex(vertex)
            new = Vertex(new_element, old.index, self._key)
            touching = self._touching(old)
            for edge in touching:
                rewired = dataclasses.replace(
                    edge,
                    vertex_a=new if edge.vertex_a == old else edge.vertex_a,
                    vertex_b=new if edge.vertex_b == old else edge.vertex_b,
                )
                self._graph.update_edge_by_index(edge.index, rewired)
            self._graph[old.index] = new
            del self._vertex_idx[old.element]
            self._vertex_idx[new_element] = old.index
            logger.debug("Replaced %r with %r, rewired %d edge(s)", old, new, len(touching))
            return old.element

    def vertex(self, element: V) -> Vertex[V] | None:
        """Return the vertex holding *element*, or ``None``."""
        with self._lock:
            idx = self._vertex_idx.get(element)
            if idx is None:
                return None
            return self._graph[idx]

    def has_vertex(self, vertex: Vertex[V] | V) -> bool:
        """Return whether *vertex* belongs to this graph.  Never raises."""
        try:
            with self._lock:
                self._require_vertex(vertex)
        except InvalidVertexError:
            return False
        return True

    def vertices(self) -> list[Vertex[V]]:
        """Return all vertices in insertion order."""
        with self._lock:
            return [self._graph[idx] for idx in self._vertex_idx.values()]

    def num_vertices(self) -> int:
        return self._graph.num_nodes()

    # ------------------------------------------------------------------
    # Edge operations
    # ------------------------------------------------------------------

    def insert_edge(
        self,
        u: Vertex[V] | V,
        v: Vertex[V] | V,
        element: E,
        weight: float | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> Edge[E, V]:
        """Connect *u* and *v* with an edge holding *element*.

        When *weight* is omitted it is read off *element* by the weight
        extractor.  The extractor runs before the graph lock is taken, so it
        may read this graph; it must not mutate it.  Raises
        ``DuplicateEdgeError`` if the element is already used,
        ``InvalidVertexError`` if either endpoint is not in the graph.
        """
        if element is None:
            msg = "Null edge element"
            raise InvalidEdgeError(msg)
        if weight is None:
            weight = self._weight_extractor(element)
        with self._lock:
            if element in self._edge_idx:
                msg = f"There's already an edge with element {element!r}"
                raise DuplicateEdgeError(msg)
            vertex_a = self._require_vertex(u)
            vertex_b = self._require_vertex(v)
            idx = self._graph.add_edge(vertex_a.index, vertex_b.index, None)
            edge = Edge(
                vertex_a,
                vertex_b,
                element,
                float(weight),
                self._directed,
                MappingProxyType(dict(properties or {})),
                idx,
                self._key,
            )
            self._graph.update_edge_by_index(idx, edge)
            self._edge_idx[element] = idx
            return edge

    def remove_edge(self, edge: Edge[E, V] | E) -> E:
        """Remove *edge*.  Returns its element."""
        with self._lock:
            target = self._require_edge(edge)
            self._graph.remove_edge_from_index(target.index)
            del self._edge_idx[target.element]
            return target.element

    def remove_edge_between(self, u: Vertex[V] | V, v: Vertex[V] | V) -> E | None:
        """Remove the first edge connecting *u* and *v*.

        Returns the removed element, or ``None`` if no such edge exists.
        """
        with self._lock:
            connecting = self._connecting(self._require_vertex(u), self._require_vertex(v))
            if not connecting:
                return None
            target = connecting[0]
            self._graph.remove_edge_from_index(target.index)
            del self._edge_idx[target.element]
            return target.element

    def replace_edge(self, edge: Edge[E, V] | E, new_element: E) -> E:
        """Swap the element of *edge*, keeping endpoints, weight and properties.

        Returns the old element.
        """
        with self._lock:
            if new_element is None:
                msg = "Null edge element"
                raise InvalidEdgeError(msg)
            if new_element in self._edge_idx:
                msg = f"There's already an edge with element {new_element!r}"
                raise DuplicateEdgeError(msg)
            old = self._require_edge(edge)
            self._graph.update_edge_by_index(
                old.index, dataclasses.replace(old, element=new_element)
            )
            del self._edge_idx[old.element]
            self._edge_idx[new_element] = old.index
            return old.element

    def replace(self, item: Vertex[V] | Edge[E, V], new_element: Any) -> Any:
        """Dispatch to :meth:`replace_vertex` or :meth:`replace_edge`."""
        if isinstance(item, Vertex):
            return self.replace_vertex(item, new_element)
        if isinstance(item, Edge):
            return self.replace_edge(item, new_element)
        msg = f"Expected a Vertex or an Edge, got {type(item).__name__}"
        raise TypeError(msg)

    def edge(self, vertex_a: Vertex[V] | V, vertex_b: Vertex[V] | V) -> Edge[E, V] | None:
        """Lightest edge connecting the pair, or ``None``.

        Ties between parallel edges go to the first one found.
        """
        with self._lock:
            connecting = self._connecting(
                self._require_vertex(vertex_a), self._require_vertex(vertex_b)
            )
        return min(connecting, key=lambda e: e.weight, default=None)

    def find_edge(self, element: E) -> Edge[E, V] | None:
        """Return the edge holding *element*, or ``None``."""
        with self._lock:
            idx = self._edge_idx.get(element)
            if idx is None:
                return None
            return self._graph.get_edge_data_by_index(idx)

    def has_edge(self, edge: Edge[E, V] | E) -> bool:
        """Return whether *edge* belongs to this graph.  Never raises."""
        try:
            with self._lock:
                self._require_edge(edge)
        except InvalidEdgeError:
            return False
        return True

    def edges(self) -> list[Edge[E, V]]:
        """Return all edges in insertion order."""
        with self._lock:
            return [self._graph.get_edge_data_by_index(idx) for idx in self._edge_idx.values()]

    def num_edges(self) -> int:
        return self._graph.num_edges()

    # ------------------------------------------------------------------
    # Adjacency queries
    # ------------------------------------------------------------------

    def incident_edges(self, vertex: Vertex[V] | V) -> list[Edge[E, V]]:
        """Every edge touching *vertex*."""
        with self._lock:
            return self._touching(self._require_vertex(vertex))

    def edges_of(self, vertex: Vertex[V] | V) -> list[Edge[E, V]]:
        """Every edge touching *vertex*, whatever its direction."""
        with self._lock:
            return self._touching(self._require_vertex(vertex))

    def opposite(self, vertex: Vertex[V] | V, edge: Edge[E, V] | E) -> Vertex[V] | None:
        """Other endpoint of *edge*, or ``None`` if the edge does not touch *vertex*."""
        with self._lock:
            target = self._require_vertex(vertex)
            return self._require_edge(edge).opposite(target)

    def are_adjacent(self, u: Vertex[V] | V, v: Vertex[V] | V) -> bool:
        """Return whether some edge connects *u* and *v*."""
        with self._lock:
            return bool(self._connecting(self._require_vertex(u), self._require_vertex(v)))

    def contains(self, item: Any) -> bool:
        """Membership test for a ``Vertex`` or an ``Edge``."""
        if isinstance(item, Vertex):
            return self.has_vertex(item)
        if isinstance(item, Edge):
            return self.has_edge(item)
        return False

    def label(self, item: Vertex[V] | Edge[E, V]) -> str:
        """Display label of a vertex or edge, via the label extractor."""
        if not isinstance(item, (Vertex, Edge)):
            msg = f"Expected a Vertex or an Edge, got {type(item).__name__}"
            raise TypeError(msg)
        return self._label_extractor(item.element)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def path_from(self, vertex: Vertex[V] | V) -> Path[V, E]:
        """Origin-only path starting at *vertex*."""
        return Path.start_from(self, vertex)

    def dijkstra(
        self, source: Vertex[V] | V, destination: Vertex[V] | V
    ) -> Path[V, E] | None:
        """Shortest simple path from *source* to *destination*, or ``None``.

        See :func:`trellis.graph.shortest_path.dijkstra`.
        """
        return dijkstra(self, source, destination)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.num_vertices()}, edges={self.num_edges()})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_vertex(self, vertex: Vertex[V] | V | None) -> Vertex[V]:
        """Return the stored vertex for a handle or element, or raise ``InvalidVertexError``."""
        if vertex is None:
            msg = "Null vertex"
            raise InvalidVertexError(msg)
        if isinstance(vertex, Vertex):
            idx = self._vertex_idx.get(vertex.element)
            if vertex.owner != self._key or idx is None or idx != vertex.index:
                msg = f"Vertex does not belong to this graph: {vertex!r}"
                raise InvalidVertexError(msg)
            return self._graph[idx]
        idx = self._vertex_idx.get(vertex)
        if idx is None:
            msg = f"No vertex contains {vertex!r}"
            raise InvalidVertexError(msg)
        return self._graph[idx]

    def _require_edge(self, edge: Edge[E, V] | E | None) -> Edge[E, V]:
        """Return the stored edge for a handle or element, or raise ``InvalidEdgeError``."""
        if edge is None:
            msg = "Null edge"
            raise InvalidEdgeError(msg)
        if isinstance(edge, Edge):
            idx = self._edge_idx.get(edge.element)
            if edge.owner != self._key or idx is None or idx != edge.index:
                msg = f"Edge does not belong to this graph: {edge!r}"
                raise InvalidEdgeError(msg)
            return self._graph.get_edge_data_by_index(idx)
        idx = self._edge_idx.get(edge)
        if idx is None:
            msg = f"No edge contains {edge!r}"
            raise InvalidEdgeError(msg)
        return self._graph.get_edge_data_by_index(idx)

    def _touching(self, vertex: Vertex[V]) -> list[Edge[E, V]]:
        """All edges with *vertex* as an endpoint, each listed once."""
        indices = dict.fromkeys(self._graph.incident_edges(vertex.index))
        return [self._graph.get_edge_data_by_index(idx) for idx in indices]

    def _connecting(self, u: Vertex[V], v: Vertex[V]) -> list[Edge[E, V]]:
        """Edges whose endpoint set is exactly ``{u, v}``."""
        return [edge for edge in self._touching(u) if edge.connects(u, v)]
