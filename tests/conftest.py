"""Shared fixtures for the algograph test suite."""

import random

import pytest

from algograph import Graph


def random_edges(seed, vertex_count, edge_count, max_weight=20):
    """Distinct undirected (u, v, weight) edges without self-loops."""
    rng = random.Random(seed)
    pairs = [(u, v) for u in range(vertex_count) for v in range(u + 1, vertex_count)]
    rng.shuffle(pairs)
    return [(u, v, rng.randint(0, max_weight)) for u, v in pairs[:edge_count]]


@pytest.fixture
def weighted_graph():
    """
    4 vertices: 0 -1- 1 -2- 2 -1- 3, plus 0 -4- 2
    """
    graph = Graph(4)
    for u, v, w in [(0, 1, 1), (1, 2, 2), (0, 2, 4), (2, 3, 1)]:
        graph.add_edge(u, v, w)
    return graph


@pytest.fixture
def undirected_graph():
    """
    0 --- 1
    |     |
    2 --- 3
     \\   /
       4
    """
    graph = Graph(5)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (2, 4), (3, 4)]:
        graph.add_edge(u, v)
    return graph
