"""
Breadth-first and depth-first traversal of an adjacency-list graph.

This module provides visitation orders, hop distances and connected
component discovery.
"""

import logging
from typing import List, Optional
from collections import deque

from ..core.graph import AdjacencyGraph

logger = logging.getLogger(__name__)


class TraversalEngine:
    """
    Traversal algorithms over an AdjacencyGraph.

    This class provides methods for:
    - Breadth-first visitation order and hop distances
    - Depth-first visitation order (iterative default, recursive reference)
    - Counting and listing connected components

    Every call allocates its own visited state; nothing is kept between calls.
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the traversal engine.

        Args:
            graph: AdjacencyGraph instance to traverse
        """
        self.graph = graph

    def bfs(self, start: int) -> List[int]:
        """
        Visit every vertex reachable from start in breadth-first order.

        Vertices appear in non-decreasing hop distance from start; ties follow
        adjacency insertion order.

        Args:
            start: Starting vertex id

        Returns:
            List of vertex ids in visitation order
        """
        start = self.graph.require_vertex(start, "bfs")
        visited = [False] * self.graph.vertex_count
        order = self._bfs_from(start, visited)
        logger.debug(f"BFS from {start} visited {len(order)} vertices")
        return order

    def _bfs_from(self, start: int, visited: List[bool]) -> List[int]:
        order = []
        queue = deque([start])
        # Mark on enqueue so a vertex is never queued twice
        visited[start] = True

        while queue:
            current_id = queue.popleft()
            order.append(current_id)

            for neighbor_id, _ in self.graph.adjacency_list[current_id]:
                if not visited[neighbor_id]:
                    visited[neighbor_id] = True
                    queue.append(neighbor_id)

        return order

    def bfs_levels(self, start: int) -> List[Optional[int]]:
        """
        Get the hop distance from start to every vertex.

        Args:
            start: Starting vertex id

        Returns:
            List indexed by vertex id; None for vertices not reachable from start
        """
        start = self.graph.require_vertex(start, "bfs_levels")
        levels: List[Optional[int]] = [None] * self.graph.vertex_count
        levels[start] = 0
        queue = deque([start])

        while queue:
            current_id = queue.popleft()
            for neighbor_id, _ in self.graph.adjacency_list[current_id]:
                if levels[neighbor_id] is None:
                    levels[neighbor_id] = levels[current_id] + 1
                    queue.append(neighbor_id)

        return levels

    def dfs(self, start: int, recursive: bool = False) -> List[int]:
        """
        Visit every vertex reachable from start in depth-first order.

        Both variants explore neighbours in adjacency insertion order and
        return the same order. The iterative variant is the default since the
        recursive one is bounded by the interpreter's recursion limit.

        Args:
            start: Starting vertex id
            recursive: Use the recursive reference implementation

        Returns:
            List of vertex ids in visitation order
        """
        start = self.graph.require_vertex(start, "dfs")
        if recursive:
            order = self._dfs_recursive(start)
        else:
            order = self._dfs_iterative(start)
        logger.debug(f"DFS from {start} visited {len(order)} vertices (recursive={recursive})")
        return order

    def _dfs_iterative(self, start: int) -> List[int]:
        visited = [False] * self.graph.vertex_count
        order = []
        stack = [start]

        while stack:
            current_id = stack.pop()

            # The stack may hold a vertex pushed by several parents
            if visited[current_id]:
                continue

            visited[current_id] = True
            order.append(current_id)

            # Reverse order so the first neighbour is popped first
            for neighbor_id, _ in reversed(self.graph.adjacency_list[current_id]):
                if not visited[neighbor_id]:
                    stack.append(neighbor_id)

        return order

    def _dfs_recursive(self, start: int) -> List[int]:
        visited = [False] * self.graph.vertex_count
        order = []

        def visit(current_id: int):
            visited[current_id] = True
            order.append(current_id)

            for neighbor_id, _ in self.graph.adjacency_list[current_id]:
                if not visited[neighbor_id]:
                    visit(neighbor_id)

        visit(start)
        return order

    def connected_components(self) -> List[List[int]]:
        """
        Partition the vertices into connected components.

        A BFS is launched from every vertex not yet visited, in id order; the
        visited state is shared across launches. Intended for undirected
        graphs; on directed graphs it follows outgoing edges only.

        Returns:
            List of components, each a list of vertex ids in BFS order
        """
        visited = [False] * self.graph.vertex_count
        components = []

        for vertex_id in range(self.graph.vertex_count):
            if not visited[vertex_id]:
                components.append(self._bfs_from(vertex_id, visited))

        logger.info(f"Found {len(components)} connected components in {self.graph.vertex_count} vertices")
        return components

    def count_connected_components(self) -> int:
        """
        Count connected components.

        Returns:
            Number of BFS launches needed to visit every vertex
        """
        return len(self.connected_components())
