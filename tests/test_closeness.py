"""Tests for ClosenessCentralityCalculator."""
from __future__ import annotations

import pytest

from netmetrics import (
    CalculationStatus,
    CalculatorSettings,
    ClosenessCentralityCalculator,
    Graph,
    GraphDirectedness,
)
from netmetrics.core.exceptions import ArgumentError


class RecordingContext:
    """CalculationContext that records progress and cancels on request."""

    def __init__(self, cancel_after_reports=None):
        self.reports = []
        self._cancel_after_reports = cancel_after_reports

    @property
    def is_cancellation_requested(self):
        return (self._cancel_after_reports is not None
                and len(self.reports) >= self._cancel_after_reports)

    def report_progress(self, fraction, message):
        self.reports.append((fraction, message))


@pytest.mark.unit
def test_path_ends_are_farthest(path_graph):
    graph, a, b, c = path_graph

    centralities = ClosenessCentralityCalculator().calculate_graph_metrics(graph)

    assert centralities == {a.id: 1.5, b.id: 1.0, c.id: 1.5}


@pytest.mark.unit
@pytest.mark.parametrize("vertex_count", [2, 4])
def test_complete_graph_is_one_hop_everywhere(complete_graph, vertex_count):
    graph = complete_graph(vertex_count)

    centralities = ClosenessCentralityCalculator().calculate_graph_metrics(graph)

    assert list(centralities.values()) == [1.0] * vertex_count


@pytest.mark.unit
def test_isolated_vertex_is_zero():
    graph = Graph()
    a = graph.vertices.add("A")
    graph.edges.add(a, a)

    centralities = ClosenessCentralityCalculator().calculate_graph_metrics(graph)

    assert centralities == {a.id: 0.0}


@pytest.mark.unit
def test_empty_graph():
    assert ClosenessCentralityCalculator().calculate_graph_metrics(Graph()) == {}


@pytest.mark.unit
def test_direction_is_ignored(chain_graph):
    graph = chain_graph(3, GraphDirectedness.DIRECTED)
    a, b, c = graph.vertices.to_list()

    centralities = ClosenessCentralityCalculator().calculate_graph_metrics(graph)

    assert centralities == {a.id: 1.5, b.id: 1.0, c.id: 1.5}


@pytest.mark.unit
def test_only_reachable_vertices_are_averaged(chain_graph):
    graph = chain_graph(4)
    d = graph.vertices.to_list()[3]
    e, f = graph.vertices.add_many(2)
    graph.edges.add(e, f)
    lone = graph.vertices.add("lone")

    centralities = ClosenessCentralityCalculator().calculate_graph_metrics(graph)

    assert centralities[d.id] == pytest.approx(2.0)
    assert centralities[e.id] == 1.0
    assert centralities[f.id] == 1.0
    assert centralities[lone.id] == 0.0


@pytest.mark.unit
def test_progress_is_reported_every_batch(chain_graph):
    graph = chain_graph(5)
    context = RecordingContext()
    calculator = ClosenessCentralityCalculator(CalculatorSettings(vertices_per_progress_report=2))

    outcome = calculator.try_calculate_graph_metrics(graph, context)

    assert outcome.completed
    assert [fraction for fraction, _ in context.reports] == pytest.approx([0.0, 0.4, 0.8])
    assert context.reports[1][1] == "Calculating closeness centralities: 2 of 5."


@pytest.mark.unit
def test_cancellation_returns_no_values(chain_graph):
    graph = chain_graph(6)
    context = RecordingContext(cancel_after_reports=2)
    calculator = ClosenessCentralityCalculator(CalculatorSettings(vertices_per_progress_report=1))

    outcome = calculator.try_calculate_graph_metrics(graph, context)

    assert outcome.cancelled
    assert outcome.metrics is None
    assert calculator.status is CalculationStatus.CANCELLED
    assert len(context.reports) == 2


@pytest.mark.unit
def test_none_graph_is_rejected():
    with pytest.raises(ArgumentError):
        ClosenessCentralityCalculator().calculate_graph_metrics(None)
