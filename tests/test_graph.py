"""Tests for algograph/core/graph.py and the Graph facade's store operations"""

import math

import pytest

from algograph import AdjacencyGraph, Edge, Graph, InvalidVertexError, InvalidWeightError, EmptyGraphError, GraphError


class TestConstruction:
    def test_vertex_count(self):
        graph = AdjacencyGraph(5)
        assert graph.vertex_count == 5
        assert len(graph) == 5
        assert graph.adjacency_list == [[], [], [], [], []]

    def test_zero_vertices_is_allowed(self):
        graph = Graph(0)
        assert graph.vertex_count == 0
        assert graph.edges() == []

    def test_negative_vertex_count(self):
        with pytest.raises(ValueError):
            AdjacencyGraph(-1)

    @pytest.mark.parametrize("count", [2.5, "3", None, True])
    def test_non_integer_vertex_count(self, count):
        with pytest.raises(ValueError):
            AdjacencyGraph(count)


class TestAddEdge:
    def test_undirected_edge_stored_twice(self):
        graph = AdjacencyGraph(3)
        graph.add_edge(0, 2, 7)
        assert graph.adjacency_list[0] == [(2, 7)]
        assert graph.adjacency_list[2] == [(0, 7)]
        assert graph.adjacency_list[1] == []

    def test_directed_edge_stored_once(self):
        graph = AdjacencyGraph(3)
        graph.add_edge(0, 2, 7, directed=True)
        assert graph.adjacency_list[0] == [(2, 7)]
        assert graph.adjacency_list[2] == []

    def test_insertion_order_is_kept(self):
        graph = AdjacencyGraph(4)
        graph.add_edge(0, 3)
        graph.add_edge(0, 1)
        graph.add_edge(0, 2)
        assert [v for v, _ in graph.adjacency_list[0]] == [3, 1, 2]

    def test_multi_edges_not_deduplicated(self):
        graph = AdjacencyGraph(2)
        graph.add_edge(0, 1, 3)
        graph.add_edge(0, 1, 5)
        assert graph.adjacency_list[0] == [(1, 3), (1, 5)]
        assert graph.edge_count == 2

    def test_default_weight_is_one(self):
        graph = AdjacencyGraph(2)
        edge = graph.add_edge(0, 1)
        assert edge == Edge(0, 1, 1, False)

    def test_float_weight(self):
        graph = AdjacencyGraph(2)
        graph.add_edge(0, 1, 2.5)
        assert graph.neighbors(1) == [(0, 2.5)]

    @pytest.mark.parametrize("u, v", [(-1, 0), (0, 3), (3, 3), (1.0, 2)])
    def test_invalid_vertex(self, u, v):
        graph = AdjacencyGraph(3)
        with pytest.raises(InvalidVertexError):
            graph.add_edge(u, v)
        # Nothing was stored
        assert graph.adjacency_list == [[], [], []]

    def test_invalid_vertex_is_value_error(self):
        graph = AdjacencyGraph(3)
        with pytest.raises(ValueError, match="outside the valid range"):
            graph.add_edge(0, 5)

    def test_non_numeric_weight(self):
        graph = AdjacencyGraph(3)
        with pytest.raises(TypeError):
            graph.add_edge(0, 1, "heavy")

    @pytest.mark.parametrize("weight", [float("nan"), math.nan])
    def test_nan_weight_rejected(self, weight):
        graph = AdjacencyGraph(3)
        with pytest.raises(InvalidWeightError):
            graph.add_edge(0, 1, weight)
        assert graph.adjacency_list == [[], [], []]
        assert graph.edges() == []

    def test_nan_weight_is_value_error(self):
        with pytest.raises(ValueError, match="not a comparable number"):
            AdjacencyGraph(2).add_edge(0, 1, float("nan"))

    def test_infinite_weight_is_stored(self):
        graph = AdjacencyGraph(2)
        graph.add_edge(0, 1, math.inf)
        assert graph.neighbors(0) == [(1, math.inf)]

    def test_negative_weight_is_stored(self):
        graph = AdjacencyGraph(2)
        graph.add_edge(0, 1, -3)
        assert graph.has_negative_weight()


class TestQueries:
    def test_edges_listed_once(self, undirected_graph):
        edges = undirected_graph.edges()
        assert len(edges) == 6
        assert edges[0] == Edge(0, 1, 1, False)

    def test_degree(self, undirected_graph):
        assert undirected_graph.degree(0) == 2
        assert undirected_graph.degree(2) == 3

    def test_neighbors_returns_copy(self, undirected_graph):
        neighbors = undirected_graph.neighbors(0)
        neighbors.clear()
        assert undirected_graph.degree(0) == 2

    def test_sources_and_sinks(self):
        graph = AdjacencyGraph(4)
        graph.add_edge(0, 1, directed=True)
        graph.add_edge(1, 2, directed=True)
        assert graph.get_sources() == [0, 3]
        assert graph.get_sinks() == [2, 3]

    def test_statistics(self):
        graph = AdjacencyGraph(4)
        graph.add_edge(0, 1, 2)
        graph.add_edge(1, 2, 3, directed=True)
        stats = graph.get_graph_statistics()
        assert stats['total_vertices'] == 4
        assert stats['total_edges'] == 2
        assert stats['directed_edges'] == 1
        assert stats['undirected_edges'] == 1
        assert stats['adjacency_entries'] == 3
        assert stats['max_degree'] == 2
        assert stats['min_degree'] == 0
        assert stats['isolated_vertices'] == 1

    def test_require_vertex_on_empty_graph(self):
        graph = AdjacencyGraph(0)
        with pytest.raises(EmptyGraphError):
            graph.require_vertex(0, "bfs")

    def test_errors_share_base_class(self):
        assert issubclass(InvalidVertexError, GraphError)
        assert issubclass(EmptyGraphError, GraphError)
        assert issubclass(InvalidWeightError, GraphError)


class TestFacade:
    def test_delegates_store_queries(self):
        graph = Graph(3)
        graph.add_edge(0, 1, 4, directed=True)
        assert graph.get_sources() == [0, 2]
        assert graph.get_sinks() == [1, 2]
        assert graph.get_graph_statistics()['total_edges'] == 1
        assert graph.adjacency_list == [[(1, 4)], [], []]
        assert graph.edge_count == 1
        assert len(graph) == 3
        assert repr(graph) == "Graph(vertex_count=3, edge_count=1)"
