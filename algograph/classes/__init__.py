"""
Core data classes for graph representation.

This module contains the value types and the Union-Find structure used
throughout the algograph library.
"""

from .edge import Edge
from .disjoint_set import DisjointSet, Subset
from .results import DistanceTable, MSTResult, UNREACHABLE

__all__ = [
    'Edge',
    'DisjointSet',
    'Subset',
    'DistanceTable',
    'MSTResult',
    'UNREACHABLE',
]
