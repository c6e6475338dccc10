"""
Vertex representation.

A vertex stores only its identity, name, location and metadata. Incident
edges and adjacent vertices are derived on demand from the owning graph's
EdgeCollection.
"""

import logging
import weakref
from typing import List, Optional, Tuple, TextIO

from ..core.exceptions import ArgumentError
from .base import GraphVertexEdgeBase
from . import utils

logger = logging.getLogger(__name__)


class Vertex(GraphVertexEdgeBase):
    """
    Graph vertex.

    A vertex gets its ID when it is added to a graph's VertexCollection.
    The parent graph is held through a weak reference; the graph owns the
    vertex, never the other way around.
    """

    def __init__(self, name: Optional[str] = None):
        super().__init__(None, name)
        self._parent_ref: Optional[weakref.ref] = None
        self.location: Tuple[float, float] = (0.0, 0.0)

    @property
    def parent_graph(self):
        """The graph that contains the vertex, or None if it has not been added."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    # ------------------------------------------------------------------
    # Derived edges and vertices
    # ------------------------------------------------------------------

    @property
    def incident_edges(self) -> List:
        """Snapshot of all edges connected to the vertex. A self-loop appears once."""
        edges = self._edge_collection()
        if edges is None:
            return []
        return edges._get_incident_edges(self)

    @property
    def incoming_edges(self) -> List:
        """Incident edges that are undirected or directed toward the vertex."""
        return [edge for edge in self.incident_edges if self.is_incoming_edge(edge)]

    @property
    def outgoing_edges(self) -> List:
        """Incident edges that are undirected or directed away from the vertex."""
        return [edge for edge in self.incident_edges if self.is_outgoing_edge(edge)]

    @property
    def adjacent_vertices(self) -> List['Vertex']:
        """
        Snapshot of the vertices joined to this one by an edge, ignoring
        direction. Each vertex appears once; a self-loop makes the vertex
        adjacent to itself.
        """
        return self._get_neighbors(include_predecessors=True, include_successors=True)

    @property
    def predecessor_vertices(self) -> List['Vertex']:
        """Vertices with an undirected edge or an edge directed to this vertex."""
        return self._get_neighbors(include_predecessors=True, include_successors=False)

    @property
    def successor_vertices(self) -> List['Vertex']:
        """Vertices with an undirected edge or an edge directed from this vertex."""
        return self._get_neighbors(include_predecessors=False, include_successors=True)

    @property
    def degree(self) -> int:
        """Number of incident edges, with a self-loop counted on both of its ends."""
        return sum(2 if edge.is_self_loop else 1 for edge in self.incident_edges)

    def is_incident_edge(self, edge) -> bool:
        _check_edge_argument('is_incident_edge', edge)
        vertex1, vertex2 = edge.vertices
        return vertex1 is self or vertex2 is self

    def is_outgoing_edge(self, edge) -> bool:
        """
        True if the vertex is the back vertex of a directed edge, or the edge
        is undirected and incident. A self-loop is both incoming and outgoing.
        """
        _check_edge_argument('is_outgoing_edge', edge)
        if edge.is_directed:
            return edge.vertices[0] is self
        return self.is_incident_edge(edge)

    def is_incoming_edge(self, edge) -> bool:
        """
        True if the vertex is the front vertex of a directed edge, or the edge
        is undirected and incident. A self-loop is both incoming and outgoing.
        """
        _check_edge_argument('is_incoming_edge', edge)
        if edge.is_directed:
            return edge.vertices[1] is self
        return self.is_incident_edge(edge)

    def get_connecting_edges(self, other_vertex: 'Vertex') -> List:
        """Get the edges that join this vertex to another, ignoring direction."""
        if other_vertex is None:
            raise ArgumentError("get_connecting_edges: other_vertex can't be None.")
        edges = self._edge_collection()
        if edges is None:
            return []
        return edges.get_connecting_edges(self, other_vertex)

    def clone(self, copy_metadata_values: bool, copy_tag: bool) -> 'Vertex':
        """
        Create a detached copy of the vertex.

        The copy has the same name and location but no ID and no parent
        graph. Metadata values are copied by reference.
        """
        new_vertex = Vertex()
        new_vertex.location = self.location
        self._copy_to(new_vertex, copy_metadata_values, copy_tag)
        return new_vertex

    # ------------------------------------------------------------------
    # Ownership, managed by VertexCollection
    # ------------------------------------------------------------------

    def _attach(self, graph, vertex_id: int) -> None:
        self._parent_ref = weakref.ref(graph)
        self._id = vertex_id

    def _detach(self) -> None:
        # The ID is kept so that callers can still identify a removed vertex.
        self._parent_ref = None

    def _edge_collection(self):
        graph = self.parent_graph
        if graph is None:
            return None
        return graph.edges

    def _get_neighbors(self, include_predecessors: bool, include_successors: bool) -> List['Vertex']:
        neighbors = {}

        for edge in self.incident_edges:
            vertex1, vertex2 = edge.vertices
            neighbor = None

            if edge.is_directed:
                if include_predecessors and vertex2 is self:
                    neighbor = vertex1
                if include_successors and vertex1 is self:
                    neighbor = vertex2
            else:
                neighbor = vertex2 if vertex1 is self else vertex1

            if neighbor is not None and neighbor.id not in neighbors:
                neighbors[neighbor.id] = neighbor

        return list(neighbors.values())

    def append_properties_to_string(self, buffer: TextIO, indentation_level: int, format: str) -> None:
        super().append_properties_to_string(buffer, indentation_level, format)
        if format == 'G':
            return

        utils.append_property(buffer, indentation_level, 'Degree', self.degree)
        utils.append_property(buffer, indentation_level, 'Location', self.location)
        utils.append_property(buffer, indentation_level, 'AdjacentVertices',
                              len(self.adjacent_vertices))
        utils.append_property(buffer, indentation_level, 'IncidentEdges',
                              len(self.incident_edges))

    def __repr__(self) -> str:
        return f"Vertex(id={self._id!r}, name={self.name!r})"


def _check_edge_argument(method_name: str, edge) -> None:
    if edge is None:
        raise ArgumentError(f"{method_name}: edge can't be None.")
