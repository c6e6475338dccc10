"""
Vertex degree calculation.

Counts in-degree, out-degree and degree for every vertex in one pass over
each vertex's incident edges, then exposes the figures that make sense for
the graph's directedness.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..config import CalculatorSettings
from ..core.enums import GraphDirectedness
from .base import CalculationContext, GraphMetricCalculatorBase

logger = logging.getLogger(__name__)

IN_DEGREE = 'in_degree'
OUT_DEGREE = 'out_degree'
DEGREE = 'degree'


@dataclass
class VertexDegrees:
    """Degree figures for one vertex. A self-loop adds one to each direction."""

    in_degree: int = 0
    out_degree: int = 0

    @property
    def degree(self) -> int:
        return self.in_degree + self.out_degree

    def get_figure(self, figure: str) -> int:
        if figure not in (IN_DEGREE, OUT_DEGREE, DEGREE):
            raise KeyError(figure)
        return getattr(self, figure)


@dataclass(frozen=True)
class DegreeOptions:
    """Which degree figures the caller wants surfaced."""

    calculate_in_degree: bool = True
    calculate_out_degree: bool = True
    calculate_degree: bool = True

    def surfaced_figures(self, directedness: GraphDirectedness) -> Tuple[str, ...]:
        """
        Filter the requested figures through the graph's directedness.

        Directed graphs surface in- and out-degree, undirected graphs surface
        degree, and mixed graphs surface everything requested.
        """
        directed = directedness is not GraphDirectedness.UNDIRECTED
        undirected = directedness is not GraphDirectedness.DIRECTED

        figures = []
        if directed and self.calculate_in_degree:
            figures.append(IN_DEGREE)
        if directed and self.calculate_out_degree:
            figures.append(OUT_DEGREE)
        if undirected and self.calculate_degree:
            figures.append(DEGREE)
        return tuple(figures)


@dataclass
class VertexDegreeMetrics:
    """
    Result of a VertexDegreeCalculator run.

    edge_degrees holds, for each edge ID, the same VertexDegrees objects that
    vertex_degrees holds for the edge's two vertices.
    """

    surfaced_figures: Tuple[str, ...]
    vertex_degrees: Dict[int, VertexDegrees] = field(default_factory=dict)
    edge_degrees: Dict[int, Tuple[VertexDegrees, VertexDegrees]] = field(default_factory=dict)

    def get_surfaced_values(self, vertex_id: int) -> Dict[str, int]:
        """Surfaced figures for one vertex, keyed by figure name."""
        degrees = self.vertex_degrees[vertex_id]
        return {figure: degrees.get_figure(figure) for figure in self.surfaced_figures}

    def get_figure_values(self, figure: str) -> Dict[int, int]:
        """One figure for every vertex, in vertex order."""
        return {vertex_id: degrees.get_figure(figure)
                for vertex_id, degrees in self.vertex_degrees.items()}


class VertexDegreeCalculator(GraphMetricCalculatorBase):
    """Calculates in-degree, out-degree and degree for each vertex."""

    def __init__(self, options: Optional[DegreeOptions] = None,
                 settings: Optional[CalculatorSettings] = None):
        super().__init__(settings)
        self.options = options if options is not None else DegreeOptions()

    @property
    def graph_metric_description(self) -> str:
        return "vertex degrees"

    def _calculate(self, graph, context: Optional[CalculationContext]) -> VertexDegreeMetrics:
        metrics = VertexDegreeMetrics(self.options.surfaced_figures(graph.directedness))
        vertices = graph.vertices.to_list()
        total = len(vertices)

        for i, vertex in enumerate(vertices):
            self._check_progress(context, i, total)
            metrics.vertex_degrees[vertex.id] = calculate_vertex_degrees(vertex)

        for edge in graph.edges.to_list():
            vertex1, vertex2 = edge.vertices
            metrics.edge_degrees[edge.id] = (metrics.vertex_degrees[vertex1.id],
                                             metrics.vertex_degrees[vertex2.id])

        logger.debug(f"Calculated degrees for {total} vertices and {len(metrics.edge_degrees)} edges")
        return metrics


def calculate_vertex_degrees(vertex) -> VertexDegrees:
    """
    Count a vertex's degrees from its incident edges.

    The vertex counts as out-degree when it is the edge's first (back)
    vertex and as in-degree when it is the second (front) vertex, regardless
    of the edge's directedness.
    """
    degrees = VertexDegrees()

    for edge in vertex.incident_edges:
        vertex1, vertex2 = edge.vertices
        if vertex1 is vertex:
            degrees.out_degree += 1
        if vertex2 is vertex:
            degrees.in_degree += 1

    return degrees
