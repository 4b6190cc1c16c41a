"""
Minimum spanning tree construction with Kruskal's algorithm.

Kruskal works on a plain edge list and its own DisjointSet, independently of
any adjacency-list graph.
"""

import logging
from typing import Iterable, List, Sequence, Union

from ..classes.disjoint_set import DisjointSet
from ..classes.edge import Edge
from ..classes.results import MSTResult
from ..core.validation import check_count, check_vertex, check_weight

logger = logging.getLogger(__name__)

EdgeLike = Union[Edge, Sequence]


def _to_edges(edges: Iterable[EdgeLike], vertex_count: int) -> List[Edge]:
    """Convert (src, dest, weight) tuples to Edge and check their endpoints."""
    aEdge = []
    for item in edges:
        edge = item if isinstance(item, Edge) else Edge(*item)
        check_vertex(edge.src, vertex_count)
        check_vertex(edge.dest, vertex_count)
        check_weight(edge.weight)
        aEdge.append(edge)
    return aEdge


def kruskal_mst(edges: Iterable[EdgeLike], vertex_count: int) -> MSTResult:
    """
    Build a minimum spanning tree (or forest) from an edge list.

    Edges are sorted by ascending weight and accepted whenever their endpoints
    lie in different sets of a fresh DisjointSet, until vertex_count - 1 edges
    are accepted or the edges run out. Ties in weight may resolve either way;
    the total weight does not depend on the input order.

    A disconnected input is not an error: the result is then a minimum
    spanning forest and MSTResult.is_spanning_tree is False.

    Args:
        edges: Edges as Edge objects or (src, dest, weight) tuples; direction is ignored
        vertex_count: Number of vertices, ids 0 .. vertex_count - 1

    Returns:
        MSTResult with the accepted edges, total weight and accepted count

    Raises:
        InvalidVertexError: If an edge endpoint is outside [0, vertex_count)
        InvalidWeightError: If an edge weight is NaN
        ValueError: If vertex_count is negative
    """
    vertex_count = check_count(vertex_count)

    sorted_edges = sorted(_to_edges(edges, vertex_count), key=lambda edge: edge.weight)
    subsets = DisjointSet(vertex_count)
    result = MSTResult(vertex_count=vertex_count)
    target = vertex_count - 1

    for edge in sorted_edges:
        if result.accepted_count >= target:
            break

        # Skip edges whose endpoints are already connected (they would close a cycle)
        root_src = subsets.find(edge.src)
        root_dest = subsets.find(edge.dest)
        if root_src == root_dest:
            continue

        subsets.union(root_src, root_dest)
        result.edges.append(edge)
        result.total_weight += edge.weight
        result.accepted_count += 1

    if result.is_spanning_tree:
        logger.info(f"Built minimum spanning tree with {result.accepted_count} edges, "
                    f"total weight {result.total_weight}")
    else:
        logger.warning(f"Input graph is disconnected: built a spanning forest of "
                       f"{result.component_count} trees with {result.accepted_count} edges, "
                       f"total weight {result.total_weight}")
    return result
