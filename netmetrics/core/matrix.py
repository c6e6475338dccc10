"""
Adjacency existence lookups for a graph snapshot.
"""

import logging
from typing import Set

from ..classes.vertex import Vertex
from .exceptions import ArgumentError

logger = logging.getLogger(__name__)

_MAX_VERTEX_ID = 0xFFFFFFFF


class SimpleGraphMatrix:
    """
    Answers "is there an edge between these two vertices?" in O(1).

    The graph is treated as simple: edge direction and multiplicity are
    collapsed to plain existence. The matrix is built once from the graph's
    current edges and does not follow later changes to the graph.
    """

    def __init__(self, graph):
        """
        Build the matrix from the graph's edges.

        Args:
            graph: Graph to read
        """
        if graph is None:
            raise ArgumentError("SimpleGraphMatrix: graph can't be None.")

        self._keys: Set[int] = set()

        for edge in graph.edges.to_list():
            vertex1, vertex2 = edge.vertices
            self._keys.add(get_vertex_pair_key(vertex1.id, vertex2.id))

        logger.debug(f"Built SimpleGraphMatrix with {len(self._keys)} vertex pairs "
                     f"from {len(graph.edges)} edges")

    def aij(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        """
        Determine whether two vertices are connected by at least one edge.

        The result is the same when the arguments are swapped. aij(v, v) is
        True only if v has a self-loop.
        """
        if vertex1 is None or vertex2 is None:
            raise ArgumentError("aij: Neither vertex can be None.")
        return get_vertex_pair_key(vertex1.id, vertex2.id) in self._keys

    def __len__(self) -> int:
        """Number of distinct connected vertex pairs."""
        return len(self._keys)


def get_vertex_pair_key(vertex_id1: int, vertex_id2: int) -> int:
    """
    Pack an unordered pair of vertex IDs into one 64-bit integer.

    The smaller ID goes into the low 32 bits and the larger into the high 32
    bits, so the key does not depend on argument order.
    """
    for vertex_id in (vertex_id1, vertex_id2):
        if vertex_id is None or not 0 <= vertex_id <= _MAX_VERTEX_ID:
            raise ArgumentError(f"Vertex ID {vertex_id!r} can't be packed into a vertex pair key.")

    low, high = (vertex_id1, vertex_id2) if vertex_id1 <= vertex_id2 else (vertex_id2, vertex_id1)
    return (high << 32) | low
