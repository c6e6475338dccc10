"""Tests for ClusteringCoefficientCalculator."""
from __future__ import annotations

import pytest

from netmetrics import ClusteringCoefficientCalculator, Graph, GraphDirectedness


@pytest.fixture
def triangle_with_pendant():
    """Triangle A-B-C with D attached to A. Returns (graph, a, b, c, d)."""
    graph = Graph()
    a, b, c, d = graph.vertices.add_many(4)
    graph.edges.add(a, b)
    graph.edges.add(b, c)
    graph.edges.add(c, a)
    graph.edges.add(a, d)
    return graph, a, b, c, d


@pytest.mark.unit
def test_path_center_has_zero_coefficient(path_graph):
    graph, a, b, c = path_graph

    coefficients = ClusteringCoefficientCalculator().calculate_graph_metrics(graph)

    assert coefficients == {a.id: 0.0, b.id: 0.0, c.id: 0.0}


@pytest.mark.unit
def test_triangle_with_pendant(triangle_with_pendant):
    graph, a, b, c, d = triangle_with_pendant

    coefficients = ClusteringCoefficientCalculator().calculate_graph_metrics(graph)

    assert coefficients[a.id] == pytest.approx(1 / 3)
    assert coefficients[b.id] == 1.0
    assert coefficients[c.id] == 1.0
    assert coefficients[d.id] == 0.0


@pytest.mark.unit
def test_self_loops_and_parallel_edges_do_not_change_coefficient(triangle_with_pendant):
    graph, a, b, c, _ = triangle_with_pendant
    graph.edges.add(b, b)
    graph.edges.add(b, c)
    graph.edges.add(a, b)

    coefficients = ClusteringCoefficientCalculator().calculate_graph_metrics(graph)

    assert coefficients[b.id] == 1.0
    assert coefficients[a.id] == pytest.approx(1 / 3)


@pytest.mark.unit
def test_isolated_vertex_and_self_loop_only_vertex():
    graph = Graph()
    a, b = graph.vertices.add_many(2)
    graph.edges.add(b, b)

    coefficients = ClusteringCoefficientCalculator().calculate_graph_metrics(graph)

    assert coefficients == {a.id: 0.0, b.id: 0.0}


@pytest.mark.unit
def test_complete_graph_is_fully_clustered(complete_graph):
    graph = complete_graph(5)

    coefficients = ClusteringCoefficientCalculator().calculate_graph_metrics(graph)

    assert all(value == 1.0 for value in coefficients.values())


@pytest.mark.unit
def test_directed_graph_uses_undirected_pair_count():
    graph = Graph(GraphDirectedness.DIRECTED)
    a, b, c = graph.vertices.add_many(3)
    graph.edges.add(a, b)
    graph.edges.add(a, c)
    graph.edges.add(b, c)
    graph.edges.add(c, b)

    coefficients = ClusteringCoefficientCalculator().calculate_graph_metrics(graph)

    assert coefficients[a.id] == 1.0


@pytest.mark.unit
def test_empty_graph():
    assert ClusteringCoefficientCalculator().calculate_graph_metrics(Graph()) == {}
