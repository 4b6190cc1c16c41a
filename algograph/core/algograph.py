"""
Main facade class for graph algorithms.

This module provides the Graph class that owns an adjacency-list store and
delegates each algorithm to its specialized module.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..classes.edge import Edge, Weight
from ..classes.results import DistanceTable, MSTResult
from .graph import AdjacencyGraph
from ..analysis.traversal import TraversalEngine
from ..analysis.detection import CycleDetector
from ..analysis.pathfinding import ShortestPathEngine, ShortestPathStrategy
from ..operations.spanning_tree import kruskal_mst
from ..operations.representation import to_adjacency_matrix, format_adjacency

logger = logging.getLogger(__name__)


class Graph:
    """
    Main facade class for graph algorithms.

    Vertices are the integer ids 0 .. vertex_count - 1. The graph is built once
    with a fixed vertex count and then grows only through add_edge; the
    algorithms never modify it.

    Example:
        >>> g = Graph(4)
        >>> g.add_edge(0, 1, 1)
        >>> g.add_edge(1, 2, 2)
        >>> g.dijkstra(0)
        [0, 1, 3, inf]
    """

    def __init__(self, vertex_count: int):
        """
        Initialize an empty graph.

        Args:
            vertex_count: Number of vertices
        """
        # Initialize core graph
        self._graph = AdjacencyGraph(vertex_count)

        # Initialize analysis components
        self._traversal = TraversalEngine(self._graph)
        self._detector = CycleDetector(self._graph)
        self._pathfinder = ShortestPathEngine(self._graph)

    def __len__(self) -> int:
        return self._graph.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    @property
    def vertex_count(self) -> int:
        return self._graph.vertex_count

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    @property
    def adjacency_list(self) -> List[List[Tuple[int, Weight]]]:
        return self._graph.adjacency_list

    def add_edge(self, u: int, v: int, weight: Weight = 1, directed: bool = False) -> None:
        """Add an edge; undirected edges are stored in both directions."""
        self._graph.add_edge(u, v, weight, directed)

    def neighbors(self, vertex: int) -> List[Tuple[int, Weight]]:
        """Get the (neighbor, weight) entries of a vertex."""
        return self._graph.neighbors(vertex)

    def degree(self, vertex: int) -> int:
        """Number of adjacency entries of a vertex."""
        return self._graph.degree(vertex)

    def edges(self) -> List[Edge]:
        """Get every inserted edge once, in insertion order."""
        return self._graph.edges()

    def get_sources(self) -> List[int]:
        """Get vertices with no incoming edges."""
        return self._graph.get_sources()

    def get_sinks(self) -> List[int]:
        """Get vertices with no outgoing edges."""
        return self._graph.get_sinks()

    def get_graph_statistics(self) -> dict:
        """Get vertex, edge and degree counts."""
        return self._graph.get_graph_statistics()

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def bfs(self, start: int) -> List[int]:
        """Breadth-first visitation order from start."""
        return self._traversal.bfs(start)

    def bfs_levels(self, start: int) -> List[Optional[int]]:
        """Hop distance from start to every vertex, None if unreachable."""
        return self._traversal.bfs_levels(start)

    def dfs(self, start: int, recursive: bool = False) -> List[int]:
        """Depth-first visitation order from start."""
        return self._traversal.dfs(start, recursive)

    def connected_components(self) -> List[List[int]]:
        """Vertex lists of each connected component."""
        return self._traversal.connected_components()

    def count_connected_components(self) -> int:
        """Number of connected components."""
        return self._traversal.count_connected_components()

    # ========================================================================
    # CYCLE DETECTION
    # ========================================================================

    def has_cycle(self, recursive: bool = False) -> bool:
        """Check a directed graph for cycles."""
        return self._detector.has_cycle(recursive)

    def find_cycle(self, recursive: bool = False) -> List[int]:
        """Find one cycle of a directed graph, empty if acyclic."""
        return self._detector.find_cycle(recursive)

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def dijkstra(self, src: int,
                 strategy: ShortestPathStrategy = ShortestPathStrategy.LINEAR_SCAN) -> List[float]:
        """Shortest distance from src to every vertex."""
        return self._pathfinder.dijkstra(src, strategy)

    def dijkstra_paths(self, src: int,
                       strategy: ShortestPathStrategy = ShortestPathStrategy.LINEAR_SCAN) -> DistanceTable:
        """Shortest distances and predecessors from src."""
        return self._pathfinder.dijkstra_paths(src, strategy)

    def shortest_hop_path(self, start: int, end: int) -> List[int]:
        """Path from start to end with the fewest edges."""
        return self._pathfinder.shortest_hop_path(start, end)

    # ========================================================================
    # SPANNING TREE & REPRESENTATION
    # ========================================================================

    def kruskal_mst(self) -> MSTResult:
        """Minimum spanning tree (or forest) over the inserted edges."""
        return kruskal_mst(self._graph.edges(), self._graph.vertex_count)

    def to_adjacency_matrix(self) -> np.ndarray:
        """Dense weighted adjacency matrix."""
        return to_adjacency_matrix(self._graph)

    def __str__(self) -> str:
        return format_adjacency(self._graph)
