"""
Result containers returned by the shortest path and spanning tree algorithms.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .edge import Edge, Weight
from ..core.validation import check_vertex

# Distance held by vertices that cannot be reached from the source
UNREACHABLE = math.inf


def is_reachable(distance: float) -> bool:
    """Check whether a distance table entry holds a real distance."""
    return distance != UNREACHABLE


@dataclass
class DistanceTable:
    """
    Single-source shortest path distances with the predecessor of each vertex
    on its shortest path.

    Attributes:
        source: Vertex the distances are measured from
        distances: distances[v] is the shortest distance, or UNREACHABLE
        predecessors: predecessors[v] is the vertex before v, None for the
            source and for unreachable vertices
    """
    source: int
    distances: List[float]
    predecessors: List[Optional[int]]

    def __len__(self) -> int:
        return len(self.distances)

    def __iter__(self):
        return iter(self.distances)

    def __getitem__(self, vertex: int) -> float:
        return self.distances[check_vertex(vertex, len(self.distances))]

    def reachable_vertices(self) -> List[int]:
        """Vertices with a finite distance from the source, in id order."""
        return [vertex for vertex, distance in enumerate(self.distances) if is_reachable(distance)]

    def path_to(self, target: int) -> List[int]:
        """
        Reconstruct the shortest path from the source to target.

        Args:
            target: Destination vertex id

        Returns:
            List of vertex ids from source to target, empty if unreachable

        Raises:
            InvalidVertexError: If target is outside [0, len(distances))
        """
        target = check_vertex(target, len(self.distances))
        if not is_reachable(self.distances[target]):
            return []

        path = []
        current: Optional[int] = target
        while current is not None:
            path.append(current)
            current = self.predecessors[current]
        path.reverse()
        return path


@dataclass
class MSTResult:
    """
    Edges accepted by Kruskal's algorithm.

    When the input graph is disconnected the accepted edges form a minimum
    spanning forest; is_spanning_tree tells the two cases apart.

    Attributes:
        edges: Accepted edges, in acceptance (ascending weight) order
        total_weight: Sum of the accepted edge weights
        accepted_count: Number of accepted edges
        vertex_count: Number of vertices the tree was built over
    """
    edges: List[Edge] = field(default_factory=list)
    total_weight: Weight = 0
    accepted_count: int = 0
    vertex_count: int = 0

    @property
    def is_spanning_tree(self) -> bool:
        """True when the accepted edges connect every vertex."""
        return self.accepted_count == max(self.vertex_count - 1, 0)

    @property
    def component_count(self) -> int:
        """Number of trees in the forest (1 for a spanning tree)."""
        return self.vertex_count - self.accepted_count

    def __iter__(self):
        # Unpacks as (edges, total_weight, accepted_count)
        return iter((self.edges, self.total_weight, self.accepted_count))
