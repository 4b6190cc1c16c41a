"""
Error kinds raised at the public boundary of the graph engine.

All errors derive from GraphError, which is itself a ValueError, so callers
that already treat bad input as ValueError keep working unchanged.
"""


class GraphError(ValueError):
    """Base class for every error raised by algograph."""


class InvalidVertexError(GraphError):
    """Raised when a vertex index falls outside [0, vertex_count)."""

    def __init__(self, vertex, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"Vertex {vertex} is outside the valid range [0, {vertex_count})")


class EmptyGraphError(GraphError):
    """Raised when an operation needing at least one vertex runs on an empty graph."""

    def __init__(self, operation: str = "operation"):
        self.operation = operation
        super().__init__(f"Cannot run {operation} on a graph with zero vertices")


class InvalidWeightError(GraphError):
    """Raised when an edge weight is not a usable number (NaN)."""

    def __init__(self, weight):
        self.weight = weight
        super().__init__(f"Edge weight {weight!r} is not a comparable number")


class NegativeWeightError(GraphError):
    """Raised when Dijkstra finds an edge with a negative weight."""

    def __init__(self, src: int, dest: int, weight):
        self.src = src
        self.dest = dest
        self.weight = weight
        super().__init__(f"Edge {src} -> {dest} has negative weight {weight}; "
                         f"Dijkstra requires non-negative weights")
