"""
Alternative views of a graph and of algorithm results.

This module converts the adjacency list into a dense matrix and renders the
text listings used when displaying a graph or a distance table.
"""

import logging

import numpy as np

from ..classes.results import DistanceTable, is_reachable
from ..core.graph import AdjacencyGraph

logger = logging.getLogger(__name__)


def to_adjacency_matrix(graph: AdjacencyGraph) -> np.ndarray:
    """
    Build the dense adjacency matrix of a graph.

    Cell [i, j] holds the summed weight of every stored i -> j entry, so
    undirected edges appear symmetrically and multi-edges accumulate.

    Args:
        graph: AdjacencyGraph to convert

    Returns:
        vertex_count x vertex_count float array, 0 where no edge exists
    """
    n_vertex = graph.vertex_count
    matrix = np.zeros((n_vertex, n_vertex), dtype=float)

    for vertex_id, entries in enumerate(graph.adjacency_list):
        for neighbor_id, weight in entries:
            matrix[vertex_id, neighbor_id] += weight

    logger.debug(f"Built {n_vertex}x{n_vertex} adjacency matrix with {np.count_nonzero(matrix)} non-zero cells")
    return matrix


def format_adjacency(graph: AdjacencyGraph) -> str:
    """
    Render the adjacency list, one line per vertex.

    Example:
        Vertex 0: -> (Node: 1, W: 4) -> (Node: 2, W: 1)
    """
    lines = []
    for vertex_id, entries in enumerate(graph.adjacency_list):
        line = f"Vertex {vertex_id}:"
        for neighbor_id, weight in entries:
            line += f" -> (Node: {neighbor_id}, W: {weight})"
        lines.append(line)
    return "\n".join(lines)


def format_distances(table: DistanceTable) -> str:
    """
    Render a Dijkstra distance table.

    Args:
        table: DistanceTable returned by dijkstra_paths

    Returns:
        Multi-line table with INFINITY for unreachable vertices
    """
    lines = [f"Shortest paths from vertex {table.source}", "Vertex\tDistance from Source"]
    for vertex_id, distance in enumerate(table.distances):
        lines.append(f"{vertex_id}\t{distance if is_reachable(distance) else 'INFINITY'}")
    return "\n".join(lines)
