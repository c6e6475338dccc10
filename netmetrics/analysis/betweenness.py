"""
Betweenness centrality calculation using Brandes' algorithm.

Reference:
    Brandes, U. (2001). A faster algorithm for betweenness centrality.
    Journal of Mathematical Sociology, 25(2), 163-177.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

import numpy as np

from ..classes import utils
from ..core.exceptions import GraphMetricError
from .base import CalculationContext, GraphMetricCalculatorBase

logger = logging.getLogger(__name__)


class BetweennessCentralityCalculator(GraphMetricCalculatorBase):
    """
    Calculates the betweenness centrality of each vertex.

    Every vertex is used as a breadth-first search source. Edges are
    traversed in both directions and are unweighted. The raw centralities
    are divided by the largest one, so the most central vertex gets 1.0; if
    no vertex lies between any two others, every vertex gets 0.
    """

    @property
    def graph_metric_description(self) -> str:
        return "betweenness centralities"

    def _calculate(self, graph, context: Optional[CalculationContext]) -> Dict[int, float]:
        vertices, _, adjacency = utils.build_undirected_adjacency(graph)
        n = len(vertices)
        centrality = np.zeros(n, dtype=np.float64)

        for source in range(n):
            self._check_progress(context, source, n)
            accumulate_source_dependencies(adjacency, source, centrality)

        maximum = centrality.max() if n > 0 else 0.0
        if maximum > 0:
            centrality = centrality / maximum
        else:
            centrality = np.zeros(n, dtype=np.float64)

        logger.debug(f"Calculated betweenness centralities for {n} vertices "
                     f"(raw maximum {float(maximum):.4f})")
        return {vertex.id: float(centrality[i]) for i, vertex in enumerate(vertices)}


def accumulate_source_dependencies(adjacency: List[List[int]], source: int,
                                   centrality: np.ndarray) -> None:
    """
    Run one Brandes iteration and add the source's dependencies to the
    running centrality totals in place.

    Args:
        adjacency: Index-based undirected adjacency list
        source: Index of the source vertex
        centrality: Running raw centrality totals, one per vertex index

    Raises:
        GraphMetricError: If a vertex reached by the search has no shortest
            paths counted
    """
    n = len(adjacency)
    stack: List[int] = []
    predecessors: List[List[int]] = [[] for _ in range(n)]
    sigma = np.zeros(n, dtype=np.float64)
    distance = np.full(n, -1, dtype=np.int64)

    sigma[source] = 1.0
    distance[source] = 0
    queue = deque([source])

    while queue:
        v = queue.popleft()
        stack.append(v)
        for w in adjacency[v]:
            if distance[w] < 0:
                distance[w] = distance[v] + 1
                queue.append(w)
            if distance[w] == distance[v] + 1:
                sigma[w] += sigma[v]
                predecessors[w].append(v)

    delta = np.zeros(n, dtype=np.float64)

    while stack:
        w = stack.pop()
        if sigma[w] == 0:
            raise GraphMetricError(f"Vertex index {w} was reached from source {source} "
                                   f"without any shortest paths.")
        for v in predecessors[w]:
            delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
        if w != source:
            centrality[w] += delta[w]
