"""
Core graph data structure.

This module provides the Graph that owns the vertex and edge collections,
without any metric calculations.
"""

import itertools
import logging
import threading
from typing import Dict, Optional, TextIO

from ..classes.base import GraphVertexEdgeBase
from ..classes.vertex import Vertex
from ..classes import utils
from .collections import EdgeCollection, VertexCollection
from .enums import GraphDirectedness, GraphRestrictions
from .exceptions import ArgumentError

logger = logging.getLogger(__name__)

_graph_ids = itertools.count(1)


class Graph(GraphVertexEdgeBase):
    """
    Graph made of vertices, edges and per-entity metadata.

    This class manages the fundamental graph representation. It provides:
    - Vertex and edge collections with ID management
    - Directedness and restriction checks on edge insertion
    - Basic graph queries (vertex lookup, counts)
    - A calculation lock that keeps two calculators off the same graph
    """

    def __init__(self, directedness: GraphDirectedness = GraphDirectedness.UNDIRECTED,
                 restrictions: GraphRestrictions = GraphRestrictions.NONE,
                 name: Optional[str] = None):
        """
        Initialize an empty graph.

        Args:
            directedness: Kinds of edges the graph may contain
            restrictions: Edge restrictions enforced by EdgeCollection.add()
            name: Optional graph name
        """
        if not isinstance(directedness, GraphDirectedness):
            raise ArgumentError(f"directedness must be a GraphDirectedness; got {directedness!r}.")
        if not isinstance(restrictions, GraphRestrictions):
            raise ArgumentError(f"restrictions must be GraphRestrictions; got {restrictions!r}.")

        super().__init__(next(_graph_ids), name)
        self._directedness = directedness
        self._restrictions = restrictions
        self._vertices = VertexCollection(self)
        self._edges = EdgeCollection(self)
        self._calculation_lock = threading.Lock()

        logger.debug(f"Created {directedness.value} graph {self.id}")

    @property
    def directedness(self) -> GraphDirectedness:
        return self._directedness

    @property
    def restrictions(self) -> GraphRestrictions:
        return self._restrictions

    def has_restrictions(self, restrictions: GraphRestrictions) -> bool:
        """Determine whether all of the given restriction flags are set."""
        return (self._restrictions & restrictions) == restrictions

    @property
    def vertices(self) -> VertexCollection:
        return self._vertices

    @property
    def edges(self) -> EdgeCollection:
        return self._edges

    @property
    def is_directed(self) -> bool:
        return self._directedness is GraphDirectedness.DIRECTED

    def get_vertex_by_id(self, vertex_id: int) -> Optional[Vertex]:
        """
        Get a vertex by its collection-assigned ID.

        Args:
            vertex_id: Vertex ID

        Returns:
            The vertex object, or None if not found
        """
        return self._vertices.find(vertex_id)

    def get_vertex_count(self) -> int:
        return len(self._vertices)

    def get_edge_count(self) -> int:
        return len(self._edges)

    def try_begin_calculation(self) -> bool:
        """
        Claim the graph for a calculator run without waiting.

        Returns:
            False if another run already holds the graph
        """
        return self._calculation_lock.acquire(blocking=False)

    def end_calculation(self) -> None:
        """Release a claim made by try_begin_calculation()."""
        self._calculation_lock.release()

    @property
    def is_calculation_running(self) -> bool:
        return self._calculation_lock.locked()

    def clone(self, copy_metadata_values: bool, copy_tag: bool) -> 'Graph':
        """
        Create a deep copy of the graph structure.

        Vertices and edges are cloned in order and receive IDs from the new
        graph, so IDs match the originals only if nothing was ever removed
        from this graph. Metadata values are copied by reference.
        """
        new_graph = Graph(self._directedness, self._restrictions)
        self._copy_to(new_graph, copy_metadata_values, copy_tag)

        vertex_map: Dict[int, Vertex] = {}
        for vertex in self._vertices.to_list():
            new_vertex = new_graph.vertices.add(vertex.clone(copy_metadata_values, copy_tag))
            vertex_map[vertex.id] = new_vertex

        for edge in self._edges.to_list():
            vertex1, vertex2 = edge.vertices
            new_edge = new_graph.edges.add(vertex_map[vertex1.id], vertex_map[vertex2.id],
                                           edge.is_directed, edge.name)
            edge._copy_to(new_edge, copy_metadata_values, copy_tag)

        logger.debug(f"Cloned graph {self.id} into graph {new_graph.id}")
        return new_graph

    def append_properties_to_string(self, buffer: TextIO, indentation_level: int, format: str) -> None:
        super().append_properties_to_string(buffer, indentation_level, format)
        if format == 'G':
            return

        utils.append_property(buffer, indentation_level, 'Directedness', self._directedness.value)
        utils.append_property(buffer, indentation_level, 'Restrictions', self._restrictions)
        utils.append_property(buffer, indentation_level, 'Vertices', f"{len(self._vertices):,}")
        utils.append_property(buffer, indentation_level, 'Edges', f"{len(self._edges):,}")

    def __repr__(self) -> str:
        return (f"Graph(id={self.id}, directedness={self._directedness.value}, "
                f"vertices={len(self._vertices)}, edges={len(self._edges)})")
