"""
Cycle detection for directed graphs.

This module provides the three-colour depth-first search that finds back-edges.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..core.graph import AdjacencyGraph

logger = logging.getLogger(__name__)


class VertexState(Enum):
    """Colour of a vertex during cycle detection."""
    WHITE = 0  # unvisited
    GRAY = 1   # on the active search path
    BLACK = 2  # fully processed


class CycleDetector:
    """
    Detects cycles in directed graphs.

    A cycle exists iff the search meets an edge into a GRAY vertex. Every
    undirected edge is stored in both directions, so on undirected graphs any
    edge shows up as a cycle of length two; use on directed graphs only.
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the cycle detector.

        Args:
            graph: AdjacencyGraph instance to analyze
        """
        self.graph = graph

    def has_cycle(self, recursive: bool = False) -> bool:
        """
        Check whether the directed graph contains a cycle.

        Args:
            recursive: Use the recursive reference implementation

        Returns:
            True if a back-edge (including a self-loop) exists
        """
        return bool(self.find_cycle(recursive=recursive))

    def find_cycle(self, recursive: bool = False) -> List[int]:
        """
        Find one cycle in the directed graph.

        Roots are tried in vertex id order and neighbours in insertion order,
        so the reported cycle is deterministic.

        Args:
            recursive: Use the recursive reference implementation

        Returns:
            Vertex ids along the cycle with the first vertex repeated at the
            end, e.g. [0, 1, 2, 0]; empty if the graph is acyclic
        """
        state = [VertexState.WHITE] * self.graph.vertex_count

        for vertex_id in range(self.graph.vertex_count):
            if state[vertex_id] is not VertexState.WHITE:
                continue

            if recursive:
                cycle = self._search_recursive(vertex_id, state, [])
            else:
                cycle = self._search_iterative(vertex_id, state)

            if cycle:
                logger.debug(f"Detected cycle: {cycle}")
                return cycle

        logger.debug("Cycle detection completed, graph is acyclic")
        return []

    def _search_iterative(self, root: int, state: List[VertexState]) -> Optional[List[int]]:
        state[root] = VertexState.GRAY
        # Each frame holds a vertex and the iterator over its remaining neighbours
        stack = [(root, iter(self.graph.adjacency_list[root]))]

        while stack:
            vertex_id, neighbors = stack[-1]
            descended = False

            for neighbor_id, _ in neighbors:
                if state[neighbor_id] is VertexState.GRAY:
                    path = [frame_vertex for frame_vertex, _ in stack]
                    return path[path.index(neighbor_id):] + [neighbor_id]
                if state[neighbor_id] is VertexState.WHITE:
                    state[neighbor_id] = VertexState.GRAY
                    stack.append((neighbor_id, iter(self.graph.adjacency_list[neighbor_id])))
                    descended = True
                    break

            if not descended:
                state[vertex_id] = VertexState.BLACK
                stack.pop()

        return None

    def _search_recursive(self, vertex_id: int, state: List[VertexState],
                          path: List[int]) -> Optional[List[int]]:
        state[vertex_id] = VertexState.GRAY
        path.append(vertex_id)

        for neighbor_id, _ in self.graph.adjacency_list[vertex_id]:
            if state[neighbor_id] is VertexState.GRAY:
                return path[path.index(neighbor_id):] + [neighbor_id]
            if state[neighbor_id] is VertexState.WHITE:
                cycle = self._search_recursive(neighbor_id, state, path)
                if cycle:
                    return cycle

        state[vertex_id] = VertexState.BLACK
        path.pop()
        return None
