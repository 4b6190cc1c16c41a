"""
Input checks shared by the public entry points.

Vertex ids and counts are integers other than bool; edge weights are real
numbers other than bool and NaN.
"""

import math
import numbers

from .exceptions import InvalidVertexError, InvalidWeightError


def is_integer(value) -> bool:
    """Check for an integral value, rejecting bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_count(count, what: str = "Vertex count") -> int:
    """
    Validate a vertex or element count.

    Raises:
        ValueError: If count is not a non-negative integer
    """
    if not is_integer(count) or count < 0:
        raise ValueError(f"{what} must be a non-negative integer, got {count!r}")
    return int(count)


def check_vertex(vertex, vertex_count: int) -> int:
    """
    Validate a vertex id against [0, vertex_count).

    Raises:
        InvalidVertexError: If the id is not an integer in range
    """
    if not is_integer(vertex) or not 0 <= vertex < vertex_count:
        raise InvalidVertexError(vertex, vertex_count)
    return int(vertex)


def check_weight(weight):
    """
    Validate an edge weight.

    Raises:
        TypeError: If weight is not a real number
        InvalidWeightError: If weight is NaN
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise TypeError(f"Edge weight must be an int or float, got {weight!r}")
    if math.isnan(weight):
        raise InvalidWeightError(weight)
    return weight
