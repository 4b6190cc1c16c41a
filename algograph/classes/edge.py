"""
Edge representation shared by the graph store and the spanning tree builder.
"""

from typing import NamedTuple, Union

Weight = Union[int, float]


class Edge(NamedTuple):
    """
    A weighted edge between two vertex ids.

    Attributes:
        src: Source vertex id
        dest: Destination vertex id
        weight: Non-negative edge weight (int or float)
        directed: True if the edge only runs src -> dest
    """
    src: int
    dest: int
    weight: Weight = 1
    directed: bool = False

    def __str__(self) -> str:
        arrow = "->" if self.directed else "--"
        return f"{self.src} {arrow} {self.dest} (W: {self.weight})"
