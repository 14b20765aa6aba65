"""Vertex and Edge — immutable identity types stored in a graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeVar

V = TypeVar("V")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Vertex(Generic[V]):
    """A graph node identified by its element value.

    Attributes:
        element: User value held by the vertex.  Equality and hashing use
            this field only.
        index: Opaque storage handle inside the owning graph.
        owner: Opaque key of the owning graph.
    """

    element: V
    index: int = field(default=-1, compare=False)
    owner: str = field(default="", compare=False, repr=False)

    def __repr__(self) -> str:
        return f"Vertex({self.element!r})"


@dataclass(frozen=True, slots=True)
class Edge(Generic[E, V]):
    """A connector between two vertices, identified by its element value.

    Two edges are equal when their elements are equal, whatever their
    endpoints.  For directed edges ``vertex_a`` is the source and
    ``vertex_b`` the target.

    Attributes:
        vertex_a: First endpoint (source when directed).
        vertex_b: Second endpoint (target when directed).
        element: User value held by the edge.
        weight: Traversal cost.
        directed: Whether the edge may only be walked ``vertex_a -> vertex_b``.
        properties: Read-only string-keyed values attached at insertion.
        index: Opaque storage handle inside the owning graph.
        owner: Opaque key of the owning graph.
    """

    vertex_a: Vertex[V] = field(compare=False)
    vertex_b: Vertex[V] = field(compare=False)
    element: E
    weight: float = field(default=1.0, compare=False)
    directed: bool = field(default=False, compare=False)
    properties: MappingProxyType[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, hash=False
    )
    index: int = field(default=-1, compare=False)
    owner: str = field(default="", compare=False, repr=False)

    @property
    def outbound(self) -> Vertex[V]:
        """Source vertex of a directed edge (``vertex_a``)."""
        return self.vertex_a

    @property
    def inbound(self) -> Vertex[V]:
        """Target vertex of a directed edge (``vertex_b``)."""
        return self.vertex_b

    @property
    def endpoints(self) -> tuple[Vertex[V], Vertex[V]]:
        return (self.vertex_a, self.vertex_b)

    def contains(self, vertex: Vertex[V]) -> bool:
        """Return whether *vertex* is one of the endpoints."""
        return self.vertex_a == vertex or self.vertex_b == vertex

    def connects(self, u: Vertex[V], v: Vertex[V]) -> bool:
        """Return whether the endpoint set is exactly ``{u, v}``, in any order."""
        return (self.vertex_a == u and self.vertex_b == v) or (
            self.vertex_a == v and self.vertex_b == u
        )

    def opposite(self, vertex: Vertex[V]) -> Vertex[V] | None:
        """Other endpoint relative to *vertex*, or ``None`` if not touching."""
        if self.vertex_a == vertex:
            return self.vertex_b
        if self.vertex_b == vertex:
            return self.vertex_a
        return None

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        return (
            f"Edge({self.element!r}, {self.vertex_a.element!r} {arrow} "
            f"{self.vertex_b.element!r}, weight={self.weight!r})"
        )
