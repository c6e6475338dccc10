"""Shared pytest configuration and fixtures for the test suite.

This module centralizes:
- Path setup (makes the netmetrics package importable without installing)
- Pytest markers for test categorization
- Small graph fixtures used across the calculator tests
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


# ==============================================================================
# Path Setup - Ensures netmetrics is importable
# ==============================================================================

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from netmetrics import Graph, GraphDirectedness  # noqa: E402


# ==============================================================================
# Pytest Configuration
# ==============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "unit: Fast tests with no I/O",
    )
    config.addinivalue_line(
        "markers",
        "threading: Tests that run calculators on a background thread",
    )


# ==============================================================================
# Graph Fixtures
# ==============================================================================

@pytest.fixture
def path_graph():
    """Undirected path A-B-C. Returns (graph, a, b, c)."""
    graph = Graph(GraphDirectedness.UNDIRECTED)
    a = graph.vertices.add("A")
    b = graph.vertices.add("B")
    c = graph.vertices.add("C")
    graph.edges.add(a, b)
    graph.edges.add(b, c)
    return graph, a, b, c


@pytest.fixture
def directed_star():
    """Directed star with center A and edges A->B, A->C, A->D. Returns (graph, [a, b, c, d])."""
    graph = Graph(GraphDirectedness.DIRECTED)
    vertices = [graph.vertices.add(name) for name in ("A", "B", "C", "D")]
    center = vertices[0]
    for leaf in vertices[1:]:
        graph.edges.add(center, leaf)
    return graph, vertices


def make_complete_graph(vertex_count: int) -> Graph:
    """Undirected graph with an edge between every pair of vertices."""
    graph = Graph()
    vertices = graph.vertices.add_many(vertex_count)
    for i, vertex1 in enumerate(vertices):
        for vertex2 in vertices[i + 1:]:
            graph.edges.add(vertex1, vertex2)
    return graph


def make_path_graph(vertex_count: int, directedness: GraphDirectedness = GraphDirectedness.UNDIRECTED) -> Graph:
    """Graph whose vertices are joined in a single chain, in vertex order."""
    graph = Graph(directedness)
    vertices = graph.vertices.add_many(vertex_count)
    for vertex1, vertex2 in zip(vertices, vertices[1:]):
        graph.edges.add(vertex1, vertex2)
    return graph


@pytest.fixture
def complete_graph():
    """Factory fixture for make_complete_graph."""
    return make_complete_graph


@pytest.fixture
def chain_graph():
    """Factory fixture for make_path_graph."""
    return make_path_graph
