"""
Closeness centrality calculation.
"""

import logging
from typing import Dict, List, Optional

from ..classes import utils
from .base import CalculationContext, GraphMetricCalculatorBase

logger = logging.getLogger(__name__)


class ClosenessCentralityCalculator(GraphMetricCalculatorBase):
    """
    Calculates the closeness centrality of each vertex.

    The closeness centrality of a vertex is the mean shortest-path length,
    in hops, from the vertex to every other vertex reachable from it. Edge
    direction is ignored. An isolated vertex gets 0.
    """

    @property
    def graph_metric_description(self) -> str:
        return "closeness centralities"

    def _calculate(self, graph, context: Optional[CalculationContext]) -> Dict[int, float]:
        vertices, _, adjacency = utils.build_undirected_adjacency(graph)
        total = len(vertices)
        centralities: Dict[int, float] = {}

        for source, vertex in enumerate(vertices):
            self._check_progress(context, source, total)
            centralities[vertex.id] = calculate_closeness_centrality(adjacency, source)

        logger.debug(f"Calculated closeness centralities for {total} vertices")
        return centralities


def calculate_closeness_centrality(adjacency: List[List[int]], source: int) -> float:
    """
    Mean hop distance from a source vertex to the other vertices it reaches.

    Args:
        adjacency: Index-based undirected adjacency list
        source: Index of the source vertex

    Returns:
        The mean distance, or 0 if the source reaches no other vertex
    """
    distances = utils.bfs_distances(adjacency, source)
    others = [distance for target, distance in distances.items() if target != source]
    if not others:
        return 0.0
    return sum(others) / len(others)
