"""Shortest-path search — branch-and-bound exploration over simple paths."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any

from trellis.graph.paths import Path

if TYPE_CHECKING:
    from trellis.graph.protocols import GraphADT

logger = logging.getLogger(__name__)


def dijkstra(graph: GraphADT, source: Any, destination: Any) -> Path[Any, Any] | None:
    """Minimum-distance simple path from *source* to *destination*.

    Not a priority-queue Dijkstra.  Paths are explored first-in first-out;
    a path never revisits one of its own vertices, and a branch is only
    extended while its distance is below the best complete path found so far.
    Several paths may reach the same vertex, so the worst case is
    exponential, which is acceptable for interactive-sized graphs.

    Each hop follows the lightest edge between the tail and the next vertex.
    Raises ``InvalidVertexError`` if either endpoint is not in *graph*;
    returns ``None`` when *destination* is unreachable.

    Each graph query is atomic, but the search as a whole is not.  Hold an
    external lock around the call if other threads may mutate *graph*
    concurrently.
    """
    start = Path.start_from(graph, source)
    destination = Path.start_from(graph, destination).origin

    best: Path[Any, Any] | None = None
    queue: deque[Path[Any, Any]] = deque([start])
    explored = 0

    while queue:
        path = queue.popleft()
        explored += 1
        if path.ends_with(destination):
            if best is None or path.distance < best.distance:
                best = path
        elif best is None or path.distance < best.distance:
            for vertex in path.accessible_vertices():
                if path.contains(vertex):
                    continue
                queue.append(path.walk(graph.edge(path.tail, vertex)))

    logger.debug(
        "Explored %d path(s) from %r to %r, best=%r", explored, start.origin, destination, best
    )
    return best
