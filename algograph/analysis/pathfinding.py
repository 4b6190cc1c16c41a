"""
Shortest path finding on weighted and unweighted graphs.

This module provides Dijkstra's single-source shortest paths and the
fewest-hop path found by breadth-first search.
"""

import heapq
import logging
from enum import Enum
from typing import List, Optional
from collections import deque

import numpy as np

from ..classes.results import DistanceTable, UNREACHABLE
from ..core.exceptions import NegativeWeightError
from ..core.graph import AdjacencyGraph

logger = logging.getLogger(__name__)


class ShortestPathStrategy(Enum):
    """How Dijkstra picks the next vertex to finalize."""
    LINEAR_SCAN = "linear_scan"  # O(V^2 + E)
    BINARY_HEAP = "binary_heap"  # O((V + E) log V)


class ShortestPathEngine:
    """
    Shortest path algorithms for an AdjacencyGraph.

    This class provides methods for:
    - Single-source distances with Dijkstra's algorithm
    - Shortest path reconstruction from predecessors
    - Fewest-edge paths ignoring weights
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the shortest path engine.

        Args:
            graph: AdjacencyGraph instance to search
        """
        self.graph = graph

    def dijkstra(self, src: int,
                 strategy: ShortestPathStrategy = ShortestPathStrategy.LINEAR_SCAN) -> List[float]:
        """
        Compute the shortest distance from src to every vertex.

        Args:
            src: Source vertex id
            strategy: Frontier selection method; both give identical distances

        Returns:
            List of size vertex_count; UNREACHABLE for vertices src cannot reach

        Raises:
            NegativeWeightError: If any edge in the graph has a negative weight
        """
        return self.dijkstra_paths(src, strategy).distances

    def dijkstra_paths(self, src: int,
                       strategy: ShortestPathStrategy = ShortestPathStrategy.LINEAR_SCAN) -> DistanceTable:
        """
        Compute shortest distances and predecessors from src.

        Args:
            src: Source vertex id
            strategy: Frontier selection method

        Returns:
            DistanceTable holding distances and the predecessor of each vertex
        """
        src = self.graph.require_vertex(src, "dijkstra")
        self._reject_negative_weights()

        strategy = ShortestPathStrategy(strategy)
        if strategy is ShortestPathStrategy.BINARY_HEAP:
            table = self._dijkstra_heap(src)
        else:
            table = self._dijkstra_linear(src)

        logger.debug(f"Dijkstra ({strategy.value}) from {src} reached "
                     f"{len(table.reachable_vertices())} of {self.graph.vertex_count} vertices")
        return table

    def _reject_negative_weights(self):
        if not self.graph.has_negative_weight():
            return
        edge = next(edge for edge in self.graph.edges() if edge.weight < 0)
        raise NegativeWeightError(edge.src, edge.dest, edge.weight)

    def _dijkstra_linear(self, src: int) -> DistanceTable:
        n_vertex = self.graph.vertex_count
        dist = [UNREACHABLE] * n_vertex
        predecessors: List[Optional[int]] = [None] * n_vertex
        finalized = np.zeros(n_vertex, dtype=bool)
        # Tentative distances as float64 for the argmin; dist keeps the exact values
        frontier = np.full(n_vertex, np.inf)
        dist[src] = 0
        frontier[src] = 0

        for _ in range(n_vertex - 1):
            # Linear scan for the closest vertex not yet finalized
            u = int(np.where(finalized, np.inf, frontier).argmin())

            # Everything left is unreachable
            if finalized[u] or dist[u] == UNREACHABLE:
                break

            finalized[u] = True

            for v, weight in self.graph.adjacency_list[u]:
                if not finalized[v] and dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    frontier[v] = dist[v]
                    predecessors[v] = u

        return DistanceTable(src, dist, predecessors)

    def _dijkstra_heap(self, src: int) -> DistanceTable:
        n_vertex = self.graph.vertex_count
        dist = [UNREACHABLE] * n_vertex
        predecessors: List[Optional[int]] = [None] * n_vertex
        finalized = [False] * n_vertex
        dist[src] = 0
        heap = [(0, src)]

        while heap:
            d, u = heapq.heappop(heap)
            # Stale entry left behind by a later relaxation
            if finalized[u] or d > dist[u]:
                continue
            finalized[u] = True

            for v, weight in self.graph.adjacency_list[u]:
                if not finalized[v] and d + weight < dist[v]:
                    dist[v] = d + weight
                    predecessors[v] = u
                    heapq.heappush(heap, (dist[v], v))

        return DistanceTable(src, dist, predecessors)

    def shortest_hop_path(self, start: int, end: int) -> List[int]:
        """
        Find a path from start to end with the fewest edges, ignoring weights.

        Args:
            start: Starting vertex id
            end: Target vertex id

        Returns:
            List of vertex ids from start to end, empty if end is unreachable
        """
        start = self.graph.require_vertex(start, "shortest_hop_path")
        end = self.graph.validate_vertex(end)

        parent: List[Optional[int]] = [None] * self.graph.vertex_count
        visited = [False] * self.graph.vertex_count
        visited[start] = True
        queue = deque([start])
        found = False

        while queue:
            current_id = queue.popleft()
            if current_id == end:
                found = True
                break

            for neighbor_id, _ in self.graph.adjacency_list[current_id]:
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    parent[neighbor_id] = current_id
                    queue.append(neighbor_id)

        if not found:
            logger.debug(f"No path from {start} to {end}")
            return []

        # Backtrack from end to start
        path = []
        current: Optional[int] = end
        while current is not None:
            path.append(current)
            current = parent[current]
        path.reverse()
        return path
