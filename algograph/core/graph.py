"""
Core graph data structure for the algorithm engine.

This module provides the fundamental adjacency-list store without any of the
traversal or optimisation algorithms that run on top of it.
"""

import logging
from typing import List, Dict, Tuple

from ..classes.edge import Edge, Weight
from .exceptions import EmptyGraphError
from .validation import check_count, check_vertex, check_weight

logger = logging.getLogger(__name__)


class AdjacencyGraph:
    """
    Core adjacency-list store for a graph with a fixed number of vertices.

    This class manages the fundamental graph representation without high-level
    algorithms. It provides:
    - Vertex id validation
    - Adjacency list maintenance (undirected edges stored as two entries)
    - Degree tracking (in/out)
    - Basic graph queries (sources, sinks, neighbours, inserted edges)
    """

    def __init__(self, vertex_count: int):
        """
        Initialize an empty graph with a fixed vertex count.

        Args:
            vertex_count: Number of vertices; ids are 0 .. vertex_count - 1
        """
        self.vertex_count = check_count(vertex_count)

        # Graph structure
        self.adjacency_list: List[List[Tuple[int, Weight]]] = [[] for _ in range(self.vertex_count)]
        self.in_degree: List[int] = [0] * self.vertex_count
        self.out_degree: List[int] = [0] * self.vertex_count

        # Every inserted edge, once, in insertion order
        self.aEdge: List[Edge] = []

        logger.debug(f"Initialized AdjacencyGraph with {self.vertex_count} vertices")

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"AdjacencyGraph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"

    @property
    def edge_count(self) -> int:
        """Number of inserted edges (an undirected edge counts once)."""
        return len(self.aEdge)

    def validate_vertex(self, vertex: int) -> int:
        """
        Check that a vertex id lies in [0, vertex_count).

        Args:
            vertex: Vertex id to check

        Returns:
            The vertex id as a plain int

        Raises:
            InvalidVertexError: If the id is not an integer in range
        """
        return check_vertex(vertex, self.vertex_count)

    def require_vertex(self, vertex: int, operation: str) -> int:
        """
        Validate the start vertex of an algorithm run.

        Raises:
            EmptyGraphError: If the graph has no vertices at all
            InvalidVertexError: If the id is not an integer in range
        """
        if self.vertex_count == 0:
            raise EmptyGraphError(operation)
        return self.validate_vertex(vertex)

    def add_edge(self, u: int, v: int, weight: Weight = 1, directed: bool = False) -> Edge:
        """
        Insert an edge into the adjacency list.

        Appends (v, weight) to u's list and, for undirected edges, (u, weight)
        to v's list. Multi-edges and self-loops are kept as given.

        Args:
            u: Source vertex id
            v: Destination vertex id
            weight: Edge weight (int or float)
            directed: If False, the edge is also stored as v -> u

        Returns:
            The inserted Edge

        Raises:
            InvalidVertexError: If u or v is outside [0, vertex_count)
            TypeError: If weight is not a real number
            InvalidWeightError: If weight is NaN
        """
        u = self.validate_vertex(u)
        v = self.validate_vertex(v)
        weight = check_weight(weight)

        self.adjacency_list[u].append((v, weight))
        self.out_degree[u] += 1
        self.in_degree[v] += 1

        if not directed:
            self.adjacency_list[v].append((u, weight))
            self.out_degree[v] += 1
            self.in_degree[u] += 1

        edge = Edge(u, v, weight, bool(directed))
        self.aEdge.append(edge)
        logger.debug(f"Added edge {edge}")
        return edge

    def neighbors(self, vertex: int) -> List[Tuple[int, Weight]]:
        """Get a copy of the (neighbor, weight) entries of a vertex, in insertion order."""
        return list(self.adjacency_list[self.validate_vertex(vertex)])

    def degree(self, vertex: int) -> int:
        """Number of adjacency entries stored for a vertex."""
        return len(self.adjacency_list[self.validate_vertex(vertex)])

    def edges(self) -> List[Edge]:
        """Get every inserted edge once, in insertion order."""
        return list(self.aEdge)

    def get_sources(self) -> List[int]:
        """Get vertices with no incoming entries."""
        return [vertex for vertex in range(self.vertex_count) if self.in_degree[vertex] == 0]

    def get_sinks(self) -> List[int]:
        """Get vertices with no outgoing entries."""
        return [vertex for vertex in range(self.vertex_count) if self.out_degree[vertex] == 0]

    def has_negative_weight(self) -> bool:
        """Check whether any inserted edge carries a negative weight."""
        return any(edge.weight < 0 for edge in self.aEdge)

    def get_graph_statistics(self) -> Dict[str, float]:
        """
        Get summary statistics of the graph structure.

        Returns:
            Dictionary with vertex, edge and degree counts
        """
        degrees = [len(entries) for entries in self.adjacency_list]
        n_directed = sum(1 for edge in self.aEdge if edge.directed)

        statistics = {
            'total_vertices': self.vertex_count,
            'total_edges': self.edge_count,
            'directed_edges': n_directed,
            'undirected_edges': self.edge_count - n_directed,
            'adjacency_entries': sum(degrees),
            'min_degree': min(degrees) if degrees else 0,
            'max_degree': max(degrees) if degrees else 0,
            'isolated_vertices': sum(1 for vertex in range(self.vertex_count)
                                     if self.in_degree[vertex] == 0 and self.out_degree[vertex] == 0),
        }

        logger.debug(f"Graph statistics: {statistics}")
        return statistics
