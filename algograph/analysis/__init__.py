"""
Graph analysis modules for traversal, cycle detection and path finding.
"""

from .traversal import TraversalEngine
from .detection import CycleDetector, VertexState
from .pathfinding import ShortestPathEngine, ShortestPathStrategy

__all__ = [
    'TraversalEngine',
    'CycleDetector',
    'VertexState',
    'ShortestPathEngine',
    'ShortestPathStrategy',
]
