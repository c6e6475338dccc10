"""
Edge representation.

An edge connects an ordered pair of vertices. For a directed edge the first
vertex is the back (origin) vertex and the second the front (destination)
vertex.
"""

import logging
import weakref
from typing import Optional, Tuple, TextIO

from ..core.exceptions import ArgumentError, GraphMismatchError, InvalidStateError, NoParentGraphError
from .base import GraphVertexEdgeBase
from .vertex import Vertex
from . import utils

logger = logging.getLogger(__name__)


class Edge(GraphVertexEdgeBase):
    """
    Graph edge.

    Edges are created by EdgeCollection.add(), which assigns the ID. Both
    vertices must already belong to the same graph.
    """

    def __init__(self, vertex1: Vertex, vertex2: Vertex, is_directed: bool, name: Optional[str] = None):
        """
        Initialize an edge between two vertices of the same graph.

        Args:
            vertex1: Back vertex for a directed edge
            vertex2: Front vertex for a directed edge
            is_directed: Whether the edge is directed
            name: Optional edge name

        Raises:
            ArgumentError: If a vertex is None or has not been added to a graph
            GraphMismatchError: If the vertices belong to different graphs
        """
        super().__init__(None, name)
        _check_vertex_argument(vertex1, 'vertex1')
        _check_vertex_argument(vertex2, 'vertex2')

        if vertex1.parent_graph is not vertex2.parent_graph:
            raise GraphMismatchError(
                "vertex1 and vertex2 have been added to different graphs.  An edge "
                "can't connect vertices from different graphs."
            )

        self._vertices: Tuple[Vertex, Vertex] = (vertex1, vertex2)
        self._is_directed = bool(is_directed)
        self._parent_ref: Optional[weakref.ref] = weakref.ref(vertex1.parent_graph)

    @property
    def parent_graph(self):
        """
        The graph that contains the edge.

        Raises:
            NoParentGraphError: If the edge has been removed from its graph
        """
        graph = None if self._parent_ref is None else self._parent_ref()
        if graph is None:
            raise NoParentGraphError(
                "The edge has been removed from its parent graph and is no longer "
                "valid.  Do not attempt to access an edge that has been removed "
                "from its graph."
            )
        return graph

    @property
    def vertices(self) -> Tuple[Vertex, Vertex]:
        return self._vertices

    @property
    def is_directed(self) -> bool:
        return self._is_directed

    @property
    def is_self_loop(self) -> bool:
        return self._vertices[0] is self._vertices[1]

    @property
    def back_vertex(self) -> Vertex:
        """The origin of a directed edge."""
        self._check_directed('back')
        return self._vertices[0]

    @property
    def front_vertex(self) -> Vertex:
        """The destination of a directed edge."""
        self._check_directed('front')
        return self._vertices[1]

    def get_adjacent_vertex(self, vertex: Vertex) -> Vertex:
        """
        Get the vertex at the other end of the edge.

        Raises:
            ArgumentError: If the vertex is not one of the edge's vertices
        """
        vertex1, vertex2 = self._vertices
        if vertex is vertex1:
            return vertex2
        if vertex is vertex2:
            return vertex1
        raise ArgumentError("get_adjacent_vertex: The specified vertex is not one of the edge's vertices.")

    def is_parallel_to(self, other_edge: 'Edge') -> bool:
        """
        Determine whether another edge joins the same vertices the same way.

        Two undirected edges between the same vertices are parallel. Two
        directed edges are parallel only if they point the same way. An
        undirected edge is parallel to any edge between the same vertices.
        """
        if other_edge is None:
            raise ArgumentError("is_parallel_to: other_edge can't be None.")

        vertex1, vertex2 = self._vertices
        other1, other2 = other_edge.vertices

        same_pair = (vertex1 is other1 and vertex2 is other2) or (vertex1 is other2 and vertex2 is other1)
        if not same_pair:
            return False

        if not self._is_directed or not other_edge.is_directed:
            return True
        return vertex1 is other1

    def is_antiparallel_to(self, other_edge: 'Edge') -> bool:
        """
        Determine whether another directed edge joins the same vertices in
        the opposite direction.
        """
        if other_edge is None:
            raise ArgumentError("is_antiparallel_to: other_edge can't be None.")

        if not self._is_directed or not other_edge.is_directed or self.is_self_loop:
            return False

        vertex1, vertex2 = self._vertices
        other1, other2 = other_edge.vertices
        return vertex1 is other2 and vertex2 is other1

    def clone(self, copy_metadata_values: bool, copy_tag: bool,
              vertex1: Optional[Vertex] = None, vertex2: Optional[Vertex] = None,
              is_directed: Optional[bool] = None) -> 'Edge':
        """
        Create a copy of the edge that is not in any EdgeCollection.

        By default the copy joins the same vertices with the same
        directedness; pass vertices from another graph to build a copy that
        can be added to that graph.
        """
        new_edge = Edge(
            self._vertices[0] if vertex1 is None else vertex1,
            self._vertices[1] if vertex2 is None else vertex2,
            self._is_directed if is_directed is None else is_directed,
        )
        self._copy_to(new_edge, copy_metadata_values, copy_tag)
        return new_edge

    def _attach(self, edge_id: int) -> None:
        self._id = edge_id

    def _detach(self) -> None:
        self._parent_ref = None

    def _is_attached_to(self, graph) -> bool:
        return self._parent_ref is not None and self._parent_ref() is graph

    def _check_directed(self, end: str) -> None:
        if not self._is_directed:
            raise InvalidStateError(f"The edge is not directed, so it does not have a {end} vertex.")

    def append_properties_to_string(self, buffer: TextIO, indentation_level: int, format: str) -> None:
        super().append_properties_to_string(buffer, indentation_level, format)
        if format == 'G':
            return

        utils.append_property(buffer, indentation_level, 'IsDirected', self._is_directed)
        utils.append_property(buffer, indentation_level, 'IsSelfLoop', self.is_self_loop)
        utils.append_property(buffer, indentation_level, 'Vertices',
                              ', '.join(str(vertex.id) for vertex in self._vertices))

    def __repr__(self) -> str:
        vertex1, vertex2 = self._vertices
        arrow = '->' if self._is_directed else '--'
        return f"Edge(id={self._id!r}, {vertex1.id!r} {arrow} {vertex2.id!r})"


def _check_vertex_argument(vertex: Vertex, argument_name: str) -> None:
    if vertex is None:
        raise ArgumentError(f"{argument_name} can't be None.")
    if vertex.parent_graph is None:
        raise ArgumentError(
            f"{argument_name} has not been added to a graph.  A vertex must be added "
            f"to a graph before it can be connected to an edge."
        )
