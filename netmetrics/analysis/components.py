"""
Connected component detection.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

from .base import CalculationContext, GraphMetricCalculatorBase

logger = logging.getLogger(__name__)


class ConnectedComponentCalculator(GraphMetricCalculatorBase):
    """
    Finds the weakly connected components of a graph.

    Edge direction is ignored. Each component is a list of vertices in the
    order the breadth-first search discovered them, and components are
    sorted by vertex count, largest first. Components of equal size keep the
    order of their first vertex in the graph.
    """

    @property
    def graph_metric_description(self) -> str:
        return "connected components"

    def _calculate(self, graph, context: Optional[CalculationContext]) -> List[List]:
        vertices = graph.vertices.to_list()
        total = len(vertices)
        visited: Dict[int, bool] = {}
        components: List[List] = []

        for i, vertex in enumerate(vertices):
            self._check_progress(context, i, total)
            if vertex.id in visited:
                continue
            components.append(self._collect_component(vertex, visited))

        components.sort(key=len, reverse=True)
        logger.debug(f"Found {len(components)} connected components among {total} vertices")
        return components

    @staticmethod
    def _collect_component(start_vertex, visited: Dict[int, bool]) -> List:
        component = [start_vertex]
        visited[start_vertex.id] = True
        queue = deque([start_vertex])

        while queue:
            current = queue.popleft()
            for neighbor in current.adjacent_vertices:
                if neighbor.id not in visited:
                    visited[neighbor.id] = True
                    component.append(neighbor)
                    queue.append(neighbor)

        return component


def count_component_edges(component: List) -> int:
    """Number of edges with both vertices in the component, self-loops included."""
    vertex_ids = {vertex.id for vertex in component}
    edge_ids = set()

    for vertex in component:
        for edge in vertex.incident_edges:
            vertex1, vertex2 = edge.vertices
            if vertex1.id in vertex_ids and vertex2.id in vertex_ids:
                edge_ids.add(edge.id)

    return len(edge_ids)
