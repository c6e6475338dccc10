"""
Clustering coefficient calculation.
"""

import logging
from itertools import combinations
from typing import Dict, Optional

from ..core.exceptions import GraphMetricError
from ..core.matrix import SimpleGraphMatrix
from .base import (CalculationContext, GraphMetricCalculatorBase,
                   calculate_edges_in_fully_connected_neighborhood)

logger = logging.getLogger(__name__)


class ClusteringCoefficientCalculator(GraphMetricCalculatorBase):
    """
    Calculates the clustering coefficient of each vertex.

    The coefficient is the number of connected pairs among a vertex's
    neighbors divided by k(k-1)/2, where k is the number of distinct
    neighbors other than the vertex itself. Vertices with fewer than two
    neighbors get 0. Edge direction is ignored, including in the
    denominator.
    """

    @property
    def graph_metric_description(self) -> str:
        return "clustering coefficients"

    def _calculate(self, graph, context: Optional[CalculationContext]) -> Dict[int, float]:
        matrix = SimpleGraphMatrix(graph)
        vertices = graph.vertices.to_list()
        total = len(vertices)
        coefficients: Dict[int, float] = {}

        for i, vertex in enumerate(vertices):
            self._check_progress(context, i, total)
            coefficients[vertex.id] = calculate_clustering_coefficient(vertex, matrix)

        logger.debug(f"Calculated clustering coefficients for {total} vertices")
        return coefficients


def calculate_clustering_coefficient(vertex, matrix: SimpleGraphMatrix) -> float:
    """
    Calculate one vertex's clustering coefficient.

    Args:
        vertex: Vertex to calculate for
        matrix: Matrix built from the vertex's graph

    Returns:
        Coefficient between 0 and 1
    """
    neighbors = [neighbor for neighbor in vertex.adjacent_vertices if neighbor is not vertex]
    k = len(neighbors)
    if k < 2:
        return 0.0

    connected_pairs = sum(1 for x, y in combinations(neighbors, 2) if matrix.aij(x, y))

    possible_pairs = calculate_edges_in_fully_connected_neighborhood(k)
    if possible_pairs == 0:
        raise GraphMetricError(f"Vertex {vertex.id} has {k} neighbors but no possible neighbor pairs.")

    return connected_pairs / possible_pairs
