"""
Overall graph metrics.

Summarizes a whole graph: edge and vertex counts, density, connected
components and geodesic distances.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..classes import utils
from ..core.enums import GraphDirectedness
from .base import CalculationContext, GraphMetricCalculatorBase
from .components import ConnectedComponentCalculator, count_component_edges
from .duplicates import DuplicateEdgeDetector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverallMetrics:
    """Metrics that describe an entire graph."""

    directedness: GraphDirectedness
    unique_edges: int
    edges_with_duplicates: int
    total_edges: int
    self_loops: int
    vertices: int
    graph_density: Optional[float]
    connected_components: int
    single_vertex_connected_components: int
    maximum_connected_component_vertices: int
    maximum_connected_component_edges: int
    maximum_geodesic_distance: Optional[int]
    average_geodesic_distance: Optional[float]


class OverallMetricCalculator(GraphMetricCalculatorBase):
    """
    Calculates the OverallMetrics of a graph.

    Progress is reported in three steps: edge counts, connected components
    and geodesic distances, with a cancellation check before each of the
    last two.
    """

    @property
    def graph_metric_description(self) -> str:
        return "overall metrics"

    def _calculate(self, graph, context: Optional[CalculationContext]) -> OverallMetrics:
        detector = DuplicateEdgeDetector(graph)
        total_edges = len(graph.edges)
        vertex_count = len(graph.vertices)
        self_loops = sum(1 for edge in graph.edges.to_list() if edge.is_self_loop)
        density = calculate_graph_density(
            vertex_count,
            detector.total_edges_after_merging_duplicates_no_self_loops,
            graph.is_directed)

        if context is not None:
            self._poll_and_report(context, 1, 3)

        components = ConnectedComponentCalculator(self.settings).calculate_graph_metrics(graph)
        single_vertex_components = sum(1 for component in components if len(component) == 1)
        largest_vertices = len(components[0]) if components else 0
        largest_edges = count_component_edges(components[0]) if components else 0

        if context is not None:
            self._poll_and_report(context, 2, 3)

        maximum_geodesic, average_geodesic = calculate_geodesic_distances(graph)

        metrics = OverallMetrics(
            directedness=graph.directedness,
            unique_edges=detector.unique_edges,
            edges_with_duplicates=detector.edges_with_duplicates,
            total_edges=total_edges,
            self_loops=self_loops,
            vertices=vertex_count,
            graph_density=density,
            connected_components=len(components),
            single_vertex_connected_components=single_vertex_components,
            maximum_connected_component_vertices=largest_vertices,
            maximum_connected_component_edges=largest_edges,
            maximum_geodesic_distance=maximum_geodesic,
            average_geodesic_distance=average_geodesic,
        )
        logger.debug(f"Calculated overall metrics: {metrics}")
        return metrics


def calculate_graph_density(vertex_count: int, merged_edge_count: int, is_directed: bool) -> Optional[float]:
    """
    Calculate graph density.

    Args:
        vertex_count: Number of vertices
        merged_edge_count: Number of distinct connected vertex pairs, not
            counting self-loops
        is_directed: Whether pairs are ordered

    Returns:
        Density between 0 and 1, or None for fewer than two vertices
    """
    if vertex_count < 2:
        return None

    density = (2 * merged_edge_count) / (vertex_count * (vertex_count - 1))
    if is_directed:
        density /= 2
    return density


def calculate_geodesic_distances(graph) -> Tuple[Optional[int], Optional[float]]:
    """
    Calculate the maximum and average shortest-path lengths, in hops,
    between every ordered pair of distinct vertices that are connected.
    Edge direction is ignored.

    Returns:
        Tuple of (maximum, average), both None if no two vertices are
        connected
    """
    _, _, adjacency = utils.build_undirected_adjacency(graph)
    if not adjacency:
        logger.warning("Geodesic distances requested for a graph with no vertices")
        return None, None

    lengths: List[int] = []
    for source in range(len(adjacency)):
        distances = utils.bfs_distances(adjacency, source)
        lengths.extend(distance for target, distance in distances.items() if target != source)

    if not lengths:
        logger.debug("No connected vertex pairs; geodesic distances are undefined")
        return None, None

    values = np.asarray(lengths, dtype=np.int64)
    return int(values.max()), float(values.mean())
