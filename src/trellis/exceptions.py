"""Custom exception hierarchy for the Trellis graph engine."""


class TrellisError(Exception):
    """Base exception for all Trellis errors."""


class InvalidVertexError(TrellisError):
    """Raised when a vertex is null, foreign to the graph, or unknown."""


class DuplicateVertexError(InvalidVertexError):
    """Raised when a vertex element is already used in the graph."""


class InvalidEdgeError(TrellisError):
    """Raised when an edge is null, foreign to the graph, or unknown."""


class DuplicateEdgeError(InvalidEdgeError):
    """Raised when an edge element is already used in the graph."""


class InvalidTraversalError(TrellisError):
    """Raised when a path is extended by an edge that does not leave its tail."""
