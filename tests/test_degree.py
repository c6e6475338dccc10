"""Tests for VertexDegreeCalculator."""
from __future__ import annotations

import pytest

from netmetrics import DegreeOptions, Graph, GraphDirectedness, VertexDegreeCalculator


@pytest.mark.unit
def test_undirected_single_edge():
    graph = Graph(GraphDirectedness.UNDIRECTED)
    a, b = graph.vertices.add_many(2)
    graph.edges.add(a, b)

    metrics = VertexDegreeCalculator().calculate_graph_metrics(graph)

    assert metrics.surfaced_figures == ("degree",)
    assert metrics.get_surfaced_values(a.id) == {"degree": 1}
    assert metrics.get_surfaced_values(b.id) == {"degree": 1}


@pytest.mark.unit
def test_directed_single_edge():
    graph = Graph(GraphDirectedness.DIRECTED)
    a, b = graph.vertices.add_many(2)
    graph.edges.add(a, b)

    metrics = VertexDegreeCalculator().calculate_graph_metrics(graph)

    assert metrics.surfaced_figures == ("in_degree", "out_degree")
    assert metrics.get_surfaced_values(a.id) == {"in_degree": 0, "out_degree": 1}
    assert metrics.get_surfaced_values(b.id) == {"in_degree": 1, "out_degree": 0}


@pytest.mark.unit
def test_directed_star(directed_star):
    graph, (a, b, c, d) = directed_star

    metrics = VertexDegreeCalculator().calculate_graph_metrics(graph)

    assert metrics.vertex_degrees[a.id].out_degree == 3
    assert metrics.vertex_degrees[a.id].in_degree == 0
    assert metrics.get_figure_values("in_degree") == {a.id: 0, b.id: 1, c.id: 1, d.id: 1}


@pytest.mark.unit
def test_self_loop_and_parallel_edges_are_counted():
    graph = Graph()
    a, b = graph.vertices.add_many(2)
    graph.edges.add(a, a)
    graph.edges.add(a, b)
    graph.edges.add(a, b)

    metrics = VertexDegreeCalculator().calculate_graph_metrics(graph)

    assert metrics.vertex_degrees[a.id].degree == 4
    assert metrics.vertex_degrees[b.id].degree == 2
    assert metrics.vertex_degrees[a.id].degree == a.degree


@pytest.mark.unit
def test_mixed_graph_surfaces_all_requested_figures():
    graph = Graph(GraphDirectedness.MIXED)
    a, b = graph.vertices.add_many(2)
    graph.edges.add(a, b, is_directed=True)

    metrics = VertexDegreeCalculator(DegreeOptions(calculate_degree=False)).calculate_graph_metrics(graph)

    assert metrics.surfaced_figures == ("in_degree", "out_degree")


@pytest.mark.unit
@pytest.mark.parametrize(
    "directedness, options, expected",
    [
        (GraphDirectedness.DIRECTED, DegreeOptions(), ("in_degree", "out_degree")),
        (GraphDirectedness.DIRECTED, DegreeOptions(calculate_in_degree=False), ("out_degree",)),
        (GraphDirectedness.UNDIRECTED, DegreeOptions(), ("degree",)),
        (GraphDirectedness.UNDIRECTED, DegreeOptions(calculate_degree=False), ()),
        (GraphDirectedness.MIXED, DegreeOptions(), ("in_degree", "out_degree", "degree")),
    ],
)
def test_surfaced_figures(directedness, options, expected):
    assert options.surfaced_figures(directedness) == expected


@pytest.mark.unit
def test_edge_degrees_share_vertex_values(path_graph):
    graph, a, b, c = path_graph

    metrics = VertexDegreeCalculator().calculate_graph_metrics(graph)

    for edge in graph.edges.to_list():
        vertex1, vertex2 = edge.vertices
        degrees1, degrees2 = metrics.edge_degrees[edge.id]
        assert degrees1 is metrics.vertex_degrees[vertex1.id]
        assert degrees2 is metrics.vertex_degrees[vertex2.id]

    assert metrics.get_figure_values("degree") == {a.id: 1, b.id: 2, c.id: 1}


@pytest.mark.unit
def test_degree_calculation_is_idempotent(directed_star):
    graph, _ = directed_star
    calculator = VertexDegreeCalculator()

    first = calculator.calculate_graph_metrics(graph)
    second = calculator.calculate_graph_metrics(graph)

    assert first.vertex_degrees == second.vertex_degrees
