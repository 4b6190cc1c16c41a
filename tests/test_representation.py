"""Tests for algograph/operations/representation.py"""

import numpy as np

from algograph import DistanceTable, Graph, UNREACHABLE
from algograph.operations.representation import format_adjacency, format_distances


class TestAdjacencyMatrix:
    def test_undirected_is_symmetric(self, weighted_graph):
        matrix = weighted_graph.to_adjacency_matrix()
        expected = np.array([
            [0, 1, 4, 0],
            [1, 0, 2, 0],
            [4, 2, 0, 1],
            [0, 0, 1, 0],
        ], dtype=float)
        np.testing.assert_array_equal(matrix, expected)
        np.testing.assert_array_equal(matrix, matrix.T)

    def test_directed_and_multi_edges(self):
        graph = Graph(3)
        graph.add_edge(0, 1, 2, directed=True)
        graph.add_edge(0, 1, 3, directed=True)
        matrix = graph.to_adjacency_matrix()
        assert matrix.shape == (3, 3)
        assert matrix[0, 1] == 5
        assert matrix[1, 0] == 0

    def test_empty_graph(self):
        assert Graph(0).to_adjacency_matrix().shape == (0, 0)


class TestFormatting:
    def test_adjacency_listing(self):
        graph = Graph(3)
        graph.add_edge(0, 1, 4)
        graph.add_edge(0, 2, 1, directed=True)
        assert str(graph) == (
            "Vertex 0: -> (Node: 1, W: 4) -> (Node: 2, W: 1)\n"
            "Vertex 1: -> (Node: 0, W: 4)\n"
            "Vertex 2:"
        )

    def test_distance_table(self):
        text = format_distances(DistanceTable(0, [0, 3, UNREACHABLE], [None, 0, None]))
        assert text.splitlines() == [
            "Shortest paths from vertex 0",
            "Vertex\tDistance from Source",
            "0\t0",
            "1\t3",
            "2\tINFINITY",
        ]

    def test_format_adjacency_matches_str(self, weighted_graph):
        assert format_adjacency(weighted_graph._graph) == str(weighted_graph)

    def test_distance_table_from_dijkstra(self, weighted_graph):
        text = format_distances(weighted_graph.dijkstra_paths(3))
        assert text.splitlines()[0] == "Shortest paths from vertex 3"
        assert text.splitlines()[2:] == ["0\t4", "1\t3", "2\t1", "3\t0"]
