"""Graph protocols — runtime-checkable interfaces for graph implementations.

Split into a core protocol and opt-in capability protocols, detected via
``isinstance()``.  ``Graph`` satisfies ``GraphADT``; ``Digraph`` additionally
satisfies ``SupportsDirection``.  ``Path`` (and the graphs themselves)
satisfy ``Subgraph``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from trellis.graph.paths import Path
    from trellis.graph.types import Edge, Vertex


@runtime_checkable
class Subgraph(Protocol):
    """Anything that can answer vertex/edge membership."""

    def contains(self, item: Any) -> bool: ...


@runtime_checkable
class GraphADT(Protocol):
    """Core graph interface — vertex/edge mutation and adjacency queries."""

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_vertex(self, element: Any) -> Vertex[Any]: ...
    def insert_edge(
        self,
        u: Any,
        v: Any,
        element: Any,
        weight: float | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> Edge[Any, Any]: ...
    def remove_vertex(self, vertex: Any) -> Any: ...
    def remove_edge(self, edge: Any) -> Any: ...
    def remove_edge_between(self, u: Any, v: Any) -> Any | None: ...
    def replace(self, item: Any, new_element: Any) -> Any: ...

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def vertex(self, element: Any) -> Vertex[Any] | None: ...
    def edge(self, vertex_a: Any, vertex_b: Any) -> Edge[Any, Any] | None: ...
    def has_vertex(self, vertex: Any) -> bool: ...
    def has_edge(self, edge: Any) -> bool: ...
    def vertices(self) -> list[Vertex[Any]]: ...
    def edges(self) -> list[Edge[Any, Any]]: ...
    def incident_edges(self, vertex: Any) -> list[Edge[Any, Any]]: ...
    def edges_of(self, vertex: Any) -> list[Edge[Any, Any]]: ...
    def opposite(self, vertex: Any, edge: Any) -> Vertex[Any] | None: ...
    def are_adjacent(self, u: Any, v: Any) -> bool: ...
    def num_vertices(self) -> int: ...
    def num_edges(self) -> int: ...
    def dijkstra(self, source: Any, destination: Any) -> Path[Any, Any] | None: ...


@runtime_checkable
class SupportsDirection(Protocol):
    """Opt-in: direction-aware edge selection."""

    def outbound_edges(self, vertex: Any) -> list[Edge[Any, Any]]: ...
