"""
NetMetrics - Graph Model and Metrics Library

A Python library for building graphs of vertices and edges with per-entity
metadata and calculating structural metrics over them: vertex degree,
clustering coefficient, betweenness and closeness centrality, connected
components and overall graph metrics.

Main Classes:
    Graph: Graph that owns the vertex and edge collections
    Vertex: Vertex representation in the graph
    Edge: Directed or undirected connection between two vertices
    MetadataStore: Key/value metadata attached to every graph entity
    GraphMetricWorker: Runs calculators on a background thread

Example:
    >>> from netmetrics import Graph, BetweennessCentralityCalculator
    >>> graph = Graph()
    >>> a, b, c = graph.vertices.add_many(3)
    >>> graph.edges.add(a, b)
    >>> graph.edges.add(b, c)
    >>> BetweennessCentralityCalculator().calculate_graph_metrics(graph)
"""

__version__ = "0.1.0"

from netmetrics.classes.metadata import MetadataStore, ReservedMetadataKeys
from netmetrics.classes.vertex import Vertex
from netmetrics.classes.edge import Edge
from netmetrics.core.enums import GraphDirectedness, GraphRestrictions
from netmetrics.core.graph import Graph
from netmetrics.core.matrix import SimpleGraphMatrix
from netmetrics.analysis.base import CalculationOutcome, CalculationStatus
from netmetrics.analysis.degree import DegreeOptions, VertexDegreeCalculator
from netmetrics.analysis.clustering import ClusteringCoefficientCalculator
from netmetrics.analysis.betweenness import BetweennessCentralityCalculator
from netmetrics.analysis.closeness import ClosenessCentralityCalculator
from netmetrics.analysis.components import ConnectedComponentCalculator
from netmetrics.analysis.duplicates import DuplicateEdgeDetector
from netmetrics.analysis.overall import OverallMetricCalculator, OverallMetrics
from netmetrics.operations.execution import CancellationToken, GraphMetricWorker, ProgressReport
from netmetrics.operations.results import to_metric_rows
from netmetrics.config import CalculatorSettings, get_calculator_settings

__all__ = [
    'Graph',
    'Vertex',
    'Edge',
    'MetadataStore',
    'ReservedMetadataKeys',
    'GraphDirectedness',
    'GraphRestrictions',
    'SimpleGraphMatrix',
    'CalculationOutcome',
    'CalculationStatus',
    'DegreeOptions',
    'VertexDegreeCalculator',
    'ClusteringCoefficientCalculator',
    'BetweennessCentralityCalculator',
    'ClosenessCentralityCalculator',
    'ConnectedComponentCalculator',
    'DuplicateEdgeDetector',
    'OverallMetricCalculator',
    'OverallMetrics',
    'CancellationToken',
    'GraphMetricWorker',
    'ProgressReport',
    'to_metric_rows',
    'CalculatorSettings',
    'get_calculator_settings',
]
