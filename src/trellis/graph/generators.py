"""Random graph generators (Erdős–Rényi style)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from trellis.graph._digraph import Digraph
from trellis.graph._graph import Graph

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def expected_edge_count(n: int, p: float, *, directed: bool) -> float:
    """Mean edge count produced by :func:`random_graph` / :func:`random_digraph`.

    Undirected graphs draw every unordered pair including loops,
    ``n(n+1)/2`` candidates; directed graphs draw every ordered pair of
    distinct vertices, ``n(n-1)`` candidates.
    """
    _check_params(n, p)
    candidates = n * (n - 1) if directed else n * (n + 1) / 2
    return candidates * p


def random_graph(
    n: int,
    p: float,
    vertex_factory: Callable[[int], Any],
    edge_factory: Callable[[Any, Any], Any],
    *,
    seed: int | None = 0,
    **graph_options: Any,
) -> Graph[Any, Any]:
    """Build an undirected random graph.

    Parameters
    ----------
    n:
        Number of vertices, created as ``vertex_factory(1)`` .. ``vertex_factory(n)``.
    p:
        Probability of each candidate edge ``i -- j`` with ``j <= i``.
    edge_factory:
        Called with both vertex elements; must return unique edge elements.
    seed:
        Seed for ``numpy.random.default_rng``.  Same seed, same graph.
    graph_options:
        Forwarded to the :class:`Graph` constructor.
    """
    _check_params(n, p)
    rng = np.random.default_rng(seed)
    graph: Graph[Any, Any] = Graph(**graph_options)
    vertices = [graph.insert_vertex(vertex_factory(i)) for i in range(1, n + 1)]
    for i, vertex in enumerate(vertices):
        for j in np.flatnonzero(rng.random(i + 1) < p):
            other = vertices[j]
            graph.insert_edge(vertex, other, edge_factory(vertex.element, other.element))
    logger.debug("Generated %r (n=%d, p=%s, seed=%s)", graph, n, p, seed)
    return graph


def random_digraph(
    n: int,
    p: float,
    vertex_factory: Callable[[int], Any],
    edge_factory: Callable[[Any, Any], Any],
    *,
    seed: int | None = 0,
    **graph_options: Any,
) -> Digraph[Any, Any]:
    """Build a directed random graph.

    Every ordered pair of distinct vertices ``i -> j`` gets an edge with
    probability *p*.  Other parameters as in :func:`random_graph`.
    """
    _check_params(n, p)
    rng = np.random.default_rng(seed)
    graph: Digraph[Any, Any] = Digraph(**graph_options)
    vertices = [graph.insert_vertex(vertex_factory(i)) for i in range(1, n + 1)]
    for i, vertex in enumerate(vertices):
        hits = rng.random(n) < p
        hits[i] = False
        for j in np.flatnonzero(hits):
            other = vertices[j]
            graph.insert_edge(vertex, other, edge_factory(vertex.element, other.element))
    logger.debug("Generated %r (n=%d, p=%s, seed=%s)", graph, n, p, seed)
    return graph


def _check_params(n: int, p: float) -> None:
    if n < 0:
        msg = f"Vertex count must be non-negative, got {n}"
        raise ValueError(msg)
    if not 0.0 <= p <= 1.0:
        msg = f"Edge probability must be within [0, 1], got {p}"
        raise ValueError(msg)
