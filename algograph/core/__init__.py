"""
Core graph data structures and error kinds.

This module contains the adjacency-list store and the exceptions raised at
the public API boundary, without any of the algorithms.
"""

from .exceptions import GraphError, InvalidVertexError, EmptyGraphError, InvalidWeightError, NegativeWeightError
from .graph import AdjacencyGraph

__all__ = [
    'AdjacencyGraph',
    'GraphError',
    'InvalidVertexError',
    'EmptyGraphError',
    'InvalidWeightError',
    'NegativeWeightError',
]
