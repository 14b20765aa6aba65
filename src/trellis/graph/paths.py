"""Path — immutable, origin-anchored walk over a graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic

from trellis.exceptions import InvalidEdgeError, InvalidTraversalError, InvalidVertexError
from trellis.graph.types import E, Edge, V, Vertex

if TYPE_CHECKING:
    from collections.abc import Iterator

    from trellis.graph.protocols import GraphADT


@dataclass(frozen=True, slots=True)
class Path(Generic[V, E]):
    """An ordered walk: ``n`` vertices joined by ``n - 1`` edges.

    Edge *i* connects vertex *i* and vertex *i + 1*; directed edges are
    always walked source to target.  Paths are values: :meth:`walk` returns a
    new path and leaves the receiver untouched.  Two paths are equal when
    their vertex and edge sequences are equal, whatever graph they walk.

    Attributes:
        graph: The graph being walked (excluded from equality).
        vertices: Visited vertices, origin first.
        edges: Traversed edges, in order.
    """

    graph: GraphADT = field(compare=False, repr=False)
    vertices: tuple[Vertex[V], ...]
    edges: tuple[Edge[E, V], ...] = ()

    @classmethod
    def start_from(cls, graph: GraphADT, vertex: Vertex[V] | V) -> Path[V, E]:
        """Origin-only path at *vertex* (a handle or a raw element)."""
        if not graph.has_vertex(vertex):
            msg = f"Vertex does not belong to this graph: {vertex!r}"
            raise InvalidVertexError(msg)
        if not isinstance(vertex, Vertex):
            vertex = graph.vertex(vertex)
        return cls(graph, (vertex,))

    @property
    def origin(self) -> Vertex[V]:
        return self.vertices[0]

    @property
    def tail(self) -> Vertex[V]:
        """Last vertex of the path."""
        return self.vertices[-1]

    @property
    def distance(self) -> float:
        """Sum of edge weights; ``0.0`` for an origin-only path."""
        return sum((edge.weight for edge in self.edges), 0.0)

    def walk(self, edge: Edge[E, V]) -> Path[V, E]:
        """Extend the path by *edge*.

        A directed edge must leave the tail; an undirected edge must touch
        it.  Raises ``InvalidTraversalError`` otherwise.
        """
        if edge is None:
            msg = "Null edge"
            raise InvalidEdgeError(msg)
        tail = self.tail
        if (edge.directed and edge.vertex_a != tail) or (
            not edge.directed and not edge.contains(tail)
        ):
            msg = f"Cannot walk {edge!r} from {tail!r}"
            raise InvalidTraversalError(msg)
        return Path(
            self.graph,
            (*self.vertices, edge.opposite(tail)),
            (*self.edges, edge),
        )

    def contains(self, item: Vertex[V] | Edge[E, V] | Any) -> bool:
        """Membership of a vertex or an edge, by equality."""
        if isinstance(item, Vertex):
            return item in self.vertices
        if isinstance(item, Edge):
            return item in self.edges
        return False

    def ends_with(self, vertex: Vertex[V]) -> bool:
        return self.tail == vertex

    def accessible_vertices(self) -> Iterator[Vertex[V]]:
        """Lazily yield every vertex one traversable hop away from the tail."""
        tail = self.tail
        for edge in self.graph.edges_of(tail):
            if edge.directed and edge.vertex_a != tail:
                continue
            yield edge.opposite(tail)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __repr__(self) -> str:
        route = " -> ".join(repr(v.element) for v in self.vertices)
        return f"Path({route}, distance={self.distance!r})"
