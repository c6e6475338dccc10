"""Tests for DuplicateEdgeDetector."""
from __future__ import annotations

import pytest

from netmetrics import DuplicateEdgeDetector, Graph, GraphDirectedness
from netmetrics.core.exceptions import ArgumentError


@pytest.mark.unit
def test_undirected_duplicates_ignore_vertex_order():
    graph = Graph()
    a, b, c = graph.vertices.add_many(3)
    graph.edges.add(a, b)
    graph.edges.add(b, a)
    graph.edges.add(a, b)
    graph.edges.add(b, c)
    graph.edges.add(c, c)

    detector = DuplicateEdgeDetector(graph)

    assert detector.graph_contains_duplicate_edges is True
    assert detector.unique_edges == 2
    assert detector.edges_with_duplicates == 3
    assert detector.total_edges_after_merging_duplicates_no_self_loops == 2
    assert [len(group) for group in detector.find_duplicate_groups()] == [3]


@pytest.mark.unit
def test_directed_duplicates_respect_direction():
    graph = Graph(GraphDirectedness.DIRECTED)
    a, b = graph.vertices.add_many(2)
    graph.edges.add(a, b)
    graph.edges.add(b, a)

    detector = DuplicateEdgeDetector(graph)

    assert detector.graph_contains_duplicate_edges is False
    assert detector.unique_edges == 2
    assert detector.edges_with_duplicates == 0
    assert detector.total_edges_after_merging_duplicates_no_self_loops == 2


@pytest.mark.unit
def test_duplicates_are_matched_by_id_not_name():
    graph = Graph()
    a = graph.vertices.add("same")
    b = graph.vertices.add("same")
    c = graph.vertices.add("other")
    graph.edges.add(a, c)
    graph.edges.add(b, c)

    assert DuplicateEdgeDetector(graph).edges_with_duplicates == 0


@pytest.mark.unit
def test_detector_requires_graph():
    with pytest.raises(ArgumentError):
        DuplicateEdgeDetector(None)
