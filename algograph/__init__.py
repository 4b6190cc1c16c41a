"""
pyalgograph - Graph Algorithms Library

A Python library of classic graph algorithms over an adjacency-list graph
with integer vertex ids: breadth and depth first traversal, connected
components, directed cycle detection, Dijkstra shortest paths and
Kruskal minimum spanning trees backed by Union-Find.

Main Classes:
    Graph: Main class for graph algorithms (facade)
    AdjacencyGraph: Adjacency-list graph store
    DisjointSet: Union-Find with path compression and union by rank
    Edge: Weighted edge representation
    MSTResult: Accepted edges of a minimum spanning tree or forest

Example:
    >>> from algograph import Graph
    >>> graph = Graph(4)
    >>> graph.add_edge(0, 1, 1)
    >>> graph.bfs(0)
    [0, 1]
"""

__version__ = "0.1.0"

from algograph.classes.edge import Edge
from algograph.classes.disjoint_set import DisjointSet
from algograph.classes.results import DistanceTable, MSTResult, UNREACHABLE
from algograph.core.exceptions import (
    GraphError,
    InvalidVertexError,
    EmptyGraphError,
    InvalidWeightError,
    NegativeWeightError,
)
from algograph.core.graph import AdjacencyGraph
from algograph.core.algograph import Graph
from algograph.analysis.pathfinding import ShortestPathStrategy
from algograph.operations.spanning_tree import kruskal_mst

__all__ = [
    'Graph',
    'AdjacencyGraph',
    'DisjointSet',
    'Edge',
    'DistanceTable',
    'MSTResult',
    'UNREACHABLE',
    'ShortestPathStrategy',
    'kruskal_mst',
    'GraphError',
    'InvalidVertexError',
    'EmptyGraphError',
    'InvalidWeightError',
    'NegativeWeightError',
]
