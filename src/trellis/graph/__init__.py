"""Graph layer — undirected and directed graph ADTs, paths and search."""

from trellis.graph._digraph import Digraph
from trellis.graph._graph import Graph
from trellis.graph.generators import expected_edge_count, random_digraph, random_graph
from trellis.graph.paths import Path
from trellis.graph.protocols import GraphADT, Subgraph, SupportsDirection
from trellis.graph.shortest_path import dijkstra
from trellis.graph.types import Edge, Vertex

__all__ = [
    "Digraph",
    "Edge",
    "Graph",
    "GraphADT",
    "Path",
    "Subgraph",
    "SupportsDirection",
    "Vertex",
    "dijkstra",
    "expected_edge_count",
    "random_digraph",
    "random_graph",
]
