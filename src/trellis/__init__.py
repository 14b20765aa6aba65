"""Trellis: a mutable, type-generic graph engine.

Undirected and directed graphs with unique vertex/edge elements, cascading
deletion, element replacement, immutable paths and shortest-path search.
"""

__version__ = "0.1.0"

from trellis.exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    InvalidEdgeError,
    InvalidTraversalError,
    InvalidVertexError,
    TrellisError,
)
from trellis.graph import (
    Digraph,
    Edge,
    Graph,
    GraphADT,
    Path,
    Subgraph,
    SupportsDirection,
    Vertex,
    dijkstra,
    expected_edge_count,
    random_digraph,
    random_graph,
)
from trellis.graph.extractors import (
    LabelExtractor,
    WeightExtractor,
    attribute_label,
    attribute_weight,
    constant_weight,
    default_label,
    default_weight,
)

__all__ = [
    "Digraph",
    "DuplicateEdgeError",
    "DuplicateVertexError",
    "Edge",
    "Graph",
    "GraphADT",
    "InvalidEdgeError",
    "InvalidTraversalError",
    "InvalidVertexError",
    "LabelExtractor",
    "Path",
    "Subgraph",
    "SupportsDirection",
    "TrellisError",
    "Vertex",
    "WeightExtractor",
    "__version__",
    "attribute_label",
    "attribute_weight",
    "constant_weight",
    "default_label",
    "default_weight",
    "dijkstra",
    "expected_edge_count",
    "random_digraph",
    "random_graph",
]
