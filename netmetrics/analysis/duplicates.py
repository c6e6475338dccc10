"""
Duplicate edge detection.

Edges are duplicates when they join the same pair of vertices: the same
ordered pair in a directed graph, the same unordered pair otherwise.
"""

import logging
from collections import defaultdict
from typing import DefaultDict, List, Optional, Tuple

from ..core.exceptions import ArgumentError

logger = logging.getLogger(__name__)


class DuplicateEdgeDetector:
    """
    Counts duplicate edges in a graph.

    The counts are computed on first access and cached, so the graph must
    not be modified while the detector is in use.
    """

    def __init__(self, graph):
        """
        Initialize the detector.

        Args:
            graph: Graph to analyze
        """
        if graph is None:
            raise ArgumentError("DuplicateEdgeDetector: graph can't be None.")
        self.graph = graph
        self._edge_groups: Optional[List[List]] = None

    @property
    def graph_contains_duplicate_edges(self) -> bool:
        return self.unique_edges != len(self.graph.edges)

    @property
    def unique_edges(self) -> int:
        """Number of edges that have no duplicates."""
        return sum(1 for group in self._get_edge_groups() if len(group) == 1)

    @property
    def edges_with_duplicates(self) -> int:
        """Number of edges that have at least one duplicate, counting every copy."""
        return sum(len(group) for group in self._get_edge_groups() if len(group) > 1)

    @property
    def total_edges_after_merging_duplicates_no_self_loops(self) -> int:
        """Number of distinct vertex pairs joined by an edge, not counting self-loops."""
        return sum(1 for group in self._get_edge_groups() if not group[0].is_self_loop)

    def find_duplicate_groups(self) -> List[List]:
        """
        Get the groups of duplicate edges.

        Returns:
            List of groups with more than one edge, in graph edge order
        """
        return [list(group) for group in self._get_edge_groups() if len(group) > 1]

    def _get_edge_groups(self) -> List[List]:
        if self._edge_groups is None:
            self._edge_groups = self._group_edges()
        return self._edge_groups

    def _group_edges(self) -> List[List]:
        use_direction = self.graph.is_directed
        edge_groups: DefaultDict[Tuple[int, int], List] = defaultdict(list)

        for edge in self.graph.edges.to_list():
            edge_groups[get_edge_pair_key(edge, use_direction)].append(edge)

        groups = list(edge_groups.values())
        logger.debug(f"Grouped {len(self.graph.edges)} edges into {len(groups)} vertex pairs")
        return groups


def get_edge_pair_key(edge, use_direction: bool) -> Tuple[int, int]:
    """Vertex ID pair identifying the edge's endpoints."""
    vertex1, vertex2 = edge.vertices
    id1, id2 = vertex1.id, vertex2.id
    if use_direction or id1 <= id2:
        return (id1, id2)
    return (id2, id1)
