"""
Graph operation modules for spanning trees and alternative representations.
"""

from .spanning_tree import kruskal_mst
from .representation import to_adjacency_matrix, format_adjacency, format_distances

__all__ = [
    'kruskal_mst',
    'to_adjacency_matrix',
    'format_adjacency',
    'format_distances',
]
