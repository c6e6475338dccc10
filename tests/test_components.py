"""Tests for ConnectedComponentCalculator."""
from __future__ import annotations

import pytest

from netmetrics import ConnectedComponentCalculator, Graph, GraphDirectedness
from netmetrics.analysis.components import count_component_edges


@pytest.fixture
def three_component_graph():
    """Components {A, B}, {C, D, E} (directed) and {F}. Returns (graph, vertices by name)."""
    graph = Graph(GraphDirectedness.DIRECTED)
    vertices = {name: graph.vertices.add(name) for name in "ABCDEF"}
    graph.edges.add(vertices["A"], vertices["B"])
    graph.edges.add(vertices["D"], vertices["C"])
    graph.edges.add(vertices["E"], vertices["D"])
    return graph, vertices


@pytest.mark.unit
def test_components_are_sorted_by_size(three_component_graph):
    graph, _ = three_component_graph

    components = ConnectedComponentCalculator().calculate_graph_metrics(graph)

    assert [[vertex.name for vertex in component] for component in components] == [
        ["C", "D", "E"],
        ["A", "B"],
        ["F"],
    ]


@pytest.mark.unit
def test_equal_sized_components_keep_graph_order():
    graph = Graph()
    a, b, c, d = graph.vertices.add_many(4)
    graph.edges.add(c, d)
    graph.edges.add(a, b)

    components = ConnectedComponentCalculator().calculate_graph_metrics(graph)

    assert components == [[a, b], [c, d]]


@pytest.mark.unit
def test_component_edge_count_includes_self_loops_and_duplicates(path_graph):
    graph, a, b, _ = path_graph
    graph.edges.add(a, b)
    graph.edges.add(a, a)

    components = ConnectedComponentCalculator().calculate_graph_metrics(graph)

    assert len(components) == 1
    assert count_component_edges(components[0]) == 4


@pytest.mark.unit
def test_empty_graph_has_no_components():
    assert ConnectedComponentCalculator().calculate_graph_metrics(Graph()) == []
