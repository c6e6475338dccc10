"""Tests for OverallMetricCalculator."""
from __future__ import annotations

import logging

import pytest

from netmetrics import CalculatorSettings, Graph, GraphDirectedness, OverallMetricCalculator
from netmetrics.analysis.overall import calculate_graph_density


@pytest.mark.unit
def test_overall_metrics():
    graph = Graph()
    a, b, c, d = graph.vertices.add_many(4)
    graph.edges.add(a, b)
    graph.edges.add(b, c)
    graph.edges.add(b, a)
    graph.edges.add(c, c)

    metrics = OverallMetricCalculator().calculate_graph_metrics(graph)

    assert metrics.directedness is GraphDirectedness.UNDIRECTED
    assert metrics.total_edges == 4
    assert metrics.unique_edges == 2
    assert metrics.edges_with_duplicates == 2
    assert metrics.self_loops == 1
    assert metrics.vertices == 4
    assert metrics.graph_density == pytest.approx(1 / 3)
    assert metrics.connected_components == 2
    assert metrics.single_vertex_connected_components == 1
    assert metrics.maximum_connected_component_vertices == 3
    assert metrics.maximum_connected_component_edges == 4
    assert metrics.maximum_geodesic_distance == 2
    assert metrics.average_geodesic_distance == pytest.approx(4 / 3)


@pytest.mark.unit
def test_empty_graph(caplog):
    with caplog.at_level(logging.WARNING, logger="netmetrics.analysis.overall"):
        metrics = OverallMetricCalculator().calculate_graph_metrics(Graph())

    assert metrics.vertices == 0
    assert metrics.graph_density is None
    assert metrics.connected_components == 0
    assert metrics.maximum_connected_component_vertices == 0
    assert metrics.maximum_geodesic_distance is None
    assert metrics.average_geodesic_distance is None
    assert "no vertices" in caplog.text


@pytest.mark.unit
def test_isolated_vertices_have_no_geodesics():
    graph = Graph()
    graph.vertices.add_many(3)

    metrics = OverallMetricCalculator().calculate_graph_metrics(graph)

    assert metrics.graph_density == 0.0
    assert metrics.single_vertex_connected_components == 3
    assert metrics.maximum_geodesic_distance is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "vertex_count, edge_count, is_directed, expected",
    [
        (0, 0, False, None),
        (1, 0, False, None),
        (2, 1, False, 1.0),
        (2, 1, True, 0.5),
        (4, 3, False, 0.5),
    ],
)
def test_graph_density(vertex_count, edge_count, is_directed, expected):
    assert calculate_graph_density(vertex_count, edge_count, is_directed) == expected


@pytest.mark.unit
def test_progress_steps_and_cancellation(path_graph):
    graph, _, _, _ = path_graph

    class Context:
        def __init__(self):
            self.fractions = []

        @property
        def is_cancellation_requested(self):
            return len(self.fractions) >= 1

        def report_progress(self, fraction, message):
            self.fractions.append(fraction)

    context = Context()
    calculator = OverallMetricCalculator(CalculatorSettings())

    outcome = calculator.try_calculate_graph_metrics(graph, context)

    assert outcome.cancelled
    assert context.fractions == pytest.approx([1 / 3])
