"""
Vertex and edge collections owned by a Graph.

The collections assign IDs, keep entities in insertion order and hand out
enumerators that fail fast when the collection is modified underneath them.
The EdgeCollection also maintains a per-vertex incidence index so that a
vertex's incident edges can be found in O(degree).
"""

import logging
from typing import Dict, Generic, Iterator, List, Optional, TypeVar, Union

from ..classes.edge import Edge
from ..classes.metadata import ReservedMetadataKeys
from ..classes.vertex import Vertex
from .enums import GraphRestrictions
from .exceptions import (
    ArgumentError,
    ConcurrentModificationError,
    GraphMismatchError,
    InvalidStateError,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CollectionEnumerator(Generic[T]):
    """
    Enumerator over a VertexCollection or EdgeCollection.

    Supports both the explicit move_next()/current/reset() protocol and
    Python iteration. Every step compares the collection's version with the
    version captured when enumeration started; a mismatch raises
    ConcurrentModificationError, and keeps raising until the enumerator is
    discarded.
    """

    def __init__(self, collection: '_EntityCollection'):
        self._collection = collection
        self._version = collection._version
        self._iterator: Optional[Iterator[T]] = None
        self._current: Optional[T] = None
        self._finished = False

    @property
    def current(self) -> T:
        """
        The item at the enumerator's position.

        Raises:
            InvalidStateError: If move_next() hasn't been called or the
                enumeration has finished
        """
        self._check_version()
        if self._iterator is None:
            raise InvalidStateError("current: move_next() hasn't been called.")
        if self._finished:
            raise InvalidStateError("current: The enumeration has already finished.")
        return self._current

    def move_next(self) -> bool:
        """Advance to the next item. Returns False when there are no more items."""
        self._check_version()
        if self._finished:
            return False

        if self._iterator is None:
            self._iterator = iter(self._collection._entities.values())

        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._current = None
            self._finished = True
            return False
        return True

    def reset(self) -> None:
        """Position the enumerator before the first item."""
        self._check_version()
        self._iterator = None
        self._current = None
        self._finished = False

    def __iter__(self) -> 'CollectionEnumerator[T]':
        return self

    def __next__(self) -> T:
        if not self.move_next():
            raise StopIteration
        return self._current

    def _check_version(self) -> None:
        if self._version != self._collection._version:
            raise ConcurrentModificationError(
                "The collection was modified after the enumerator was created."
            )


class _EntityCollection(Generic[T]):
    """Storage, ID assignment and lookup shared by the two collections."""

    _entity_type: type = object

    def __init__(self, graph):
        self._graph = graph
        self._entities: Dict[int, T] = {}
        self._next_id = 1
        self._version = 0

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> CollectionEnumerator[T]:
        return self.get_enumerator()

    def get_enumerator(self) -> CollectionEnumerator[T]:
        return CollectionEnumerator(self)

    def to_list(self) -> List[T]:
        """Snapshot of the collection in insertion order."""
        return list(self._entities.values())

    def find(self, entity_id: int) -> Optional[T]:
        """Get the entity with the given ID, or None."""
        return self._entities.get(entity_id)

    def find_by_name(self, name: str) -> Optional[T]:
        """Get the first entity with the given name, or None."""
        if not name:
            raise ArgumentError("find_by_name: name can't be None or empty.")
        for entity in self._entities.values():
            if entity.name == name:
                return entity
        return None

    def _allocate_id(self) -> int:
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def _bump_version(self) -> None:
        self._version += 1

    def __contains__(self, entity_or_id) -> bool:
        if entity_or_id is None or entity_or_id == "" or isinstance(entity_or_id, bool):
            return False
        if not isinstance(entity_or_id, (int, str, self._entity_type)):
            return False
        return self._resolve(entity_or_id) is not None

    def _resolve(self, entity_or_id: Union[T, int, str]) -> Optional[T]:
        if entity_or_id is None:
            raise ArgumentError("The entity, ID or name can't be None.")
        if isinstance(entity_or_id, bool):
            raise ArgumentError("An entity ID must be an integer.")
        if isinstance(entity_or_id, int):
            return self.find(entity_or_id)
        if isinstance(entity_or_id, str):
            return self.find_by_name(entity_or_id)
        if not isinstance(entity_or_id, self._entity_type):
            raise ArgumentError(
                f"Expected a {self._entity_type.__name__}, an ID or a name; got {type(entity_or_id).__name__}."
            )
        entity = self._entities.get(entity_or_id.id)
        return entity if entity is entity_or_id else None


class VertexCollection(_EntityCollection[Vertex]):
    """
    The vertices of a graph.

    IDs start at 1 and are never reused, even after a vertex is removed.
    """

    _entity_type = Vertex

    def add(self, vertex_or_name: Union[Vertex, str, None] = None) -> Vertex:
        """
        Add a vertex to the graph.

        Args:
            vertex_or_name: An existing detached Vertex, a name for a new
                vertex, or None to create an unnamed vertex

        Returns:
            The added vertex, with its ID and parent graph set

        Raises:
            GraphMismatchError: If the vertex already belongs to another graph
            ArgumentError: If the vertex is already in this graph or the name
                is empty
        """
        if vertex_or_name is None:
            vertex = Vertex()
        elif isinstance(vertex_or_name, str):
            if not vertex_or_name:
                raise ArgumentError("add: The vertex name can't be empty.")
            vertex = Vertex(vertex_or_name)
        elif isinstance(vertex_or_name, Vertex):
            vertex = vertex_or_name
        else:
            raise ArgumentError(
                f"add: Expected a Vertex or a name; got {type(vertex_or_name).__name__}."
            )

        owner = vertex.parent_graph
        if owner is self._graph:
            raise ArgumentError("add: The vertex has already been added to this graph.")
        if owner is not None:
            raise GraphMismatchError(
                "add: The vertex has already been added to a graph.  It must be "
                "removed from the graph before it can be added to a different graph."
            )

        vertex._attach(self._graph, self._allocate_id())
        self._entities[vertex.id] = vertex
        self._bump_version()
        return vertex

    def add_many(self, count: int) -> List[Vertex]:
        """Add a number of unnamed vertices and return them in order."""
        if count < 0:
            raise ArgumentError("add_many: count can't be negative.")
        return [self.add() for _ in range(count)]

    def remove(self, vertex_or_id: Union[Vertex, int, str]) -> bool:
        """
        Remove a vertex and all of its incident edges.

        Returns:
            False if the vertex is not in the collection
        """
        vertex = self._resolve(vertex_or_id)
        if vertex is None:
            return False

        self._graph.edges._remove_incident_edges(vertex)
        del self._entities[vertex.id]
        vertex._detach()
        self._bump_version()
        return True

    def clear(self) -> None:
        """Remove all vertices, and therefore all edges."""
        self._graph.edges.clear()
        for vertex in self._entities.values():
            vertex._detach()
        self._entities.clear()
        self._bump_version()


class EdgeCollection(_EntityCollection[Edge]):
    """
    The edges of a graph.

    Parallel edges and self-loops are accepted unless the graph's
    restrictions forbid them; the collection never merges duplicates.
    """

    _entity_type = Edge

    def __init__(self, graph):
        super().__init__(graph)
        # vertex ID -> {edge ID: edge}, in insertion order
        self._incidence: Dict[int, Dict[int, Edge]] = {}

    def add(self, vertex1: Vertex, vertex2: Vertex, is_directed: Optional[bool] = None,
            name: Optional[str] = None) -> Edge:
        """
        Create an edge between two vertices of this graph.

        Args:
            vertex1: Back vertex of a directed edge
            vertex2: Front vertex of a directed edge
            is_directed: Edge directedness. Defaults to True for a directed
                graph and False otherwise.
            name: Optional edge name

        Returns:
            The new edge, with its ID assigned

        Raises:
            GraphMismatchError: If either vertex is not in this graph
            ArgumentError: If a vertex is None, the directedness conflicts
                with the graph's, or a graph restriction is violated
        """
        self._check_vertex(vertex1, 'vertex1')
        self._check_vertex(vertex2, 'vertex2')

        if is_directed is None:
            is_directed = self._graph.directedness.edges_are_directed_by_default

        self._check_directedness(is_directed)
        edge = Edge(vertex1, vertex2, is_directed, name)
        self._check_restrictions(edge)

        edge._attach(self._allocate_id())
        self._entities[edge.id] = edge
        self._incidence.setdefault(vertex1.id, {})[edge.id] = edge
        self._incidence.setdefault(vertex2.id, {})[edge.id] = edge
        self._bump_version()
        return edge

    def remove(self, edge_or_id: Union[Edge, int, str]) -> bool:
        """
        Remove an edge.

        Returns:
            False if the edge is not in the collection
        """
        edge = self._resolve(edge_or_id)
        if edge is None:
            return False

        self._unlink(edge)
        self._bump_version()
        return True

    def clear(self) -> None:
        for edge in self._entities.values():
            edge._detach()
        self._entities.clear()
        self._incidence.clear()
        self._bump_version()

    def get_connecting_edges(self, vertex1: Vertex, vertex2: Vertex) -> List[Edge]:
        """
        Get all edges that directly join two vertices, ignoring direction.

        If the two vertices are the same, only that vertex's self-loops are
        returned.
        """
        self._check_vertex(vertex1, 'vertex1')
        self._check_vertex(vertex2, 'vertex2')

        connecting = []
        for edge in self._incidence.get(vertex1.id, {}).values():
            if vertex1 is vertex2:
                if edge.is_self_loop:
                    connecting.append(edge)
            elif vertex2 in edge.vertices:
                connecting.append(edge)
        return connecting

    def get_edge_weight(self, vertex1: Vertex, vertex2: Vertex, default: float = 1.0) -> Optional[float]:
        """
        Read the weight of the edge joining two vertices.

        Duplicate edges are assumed to have been merged already, so there
        is at most one connecting edge per direction. The first connecting
        edge's EDGE_WEIGHT value is returned; default is returned when that
        edge has no weight.

        Returns:
            The weight, or None if the vertices are not connected
        """
        connecting = self.get_connecting_edges(vertex1, vertex2)
        if not connecting:
            return None

        found, weight = connecting[0].try_get_value(ReservedMetadataKeys.EDGE_WEIGHT, (int, float))
        if not found or weight is None:
            return default
        return float(weight)

    def _get_incident_edges(self, vertex: Vertex) -> List[Edge]:
        return list(self._incidence.get(vertex.id, {}).values())

    def _remove_incident_edges(self, vertex: Vertex) -> None:
        incident = self._incidence.get(vertex.id)
        if not incident:
            self._incidence.pop(vertex.id, None)
            return

        for edge in list(incident.values()):
            self._unlink(edge)
        self._incidence.pop(vertex.id, None)
        self._bump_version()

    def _unlink(self, edge: Edge) -> None:
        del self._entities[edge.id]
        for vertex in edge.vertices:
            group = self._incidence.get(vertex.id)
            if group is not None:
                group.pop(edge.id, None)
                if not group:
                    del self._incidence[vertex.id]
        edge._detach()

    def _check_vertex(self, vertex: Vertex, argument_name: str) -> None:
        if vertex is None:
            raise ArgumentError(f"{argument_name} can't be None.")
        if vertex.parent_graph is not self._graph:
            raise GraphMismatchError(f"{argument_name} is not contained in this graph.")

    def _check_directedness(self, is_directed: bool) -> None:
        directedness = self._graph.directedness
        if not directedness.accepts(is_directed):
            kind = 'A directed' if is_directed else 'An undirected'
            raise ArgumentError(f"{kind} edge can't be added to a {directedness.value} graph.")

    def _check_restrictions(self, edge: Edge) -> None:
        restrictions = self._graph.restrictions
        if edge.is_self_loop and GraphRestrictions.NO_SELF_LOOPS in restrictions:
            raise ArgumentError(
                "The edge is a self-loop, and the parent graph's restrictions "
                "include NO_SELF_LOOPS."
            )

        if GraphRestrictions.NO_PARALLEL_EDGES in restrictions:
            vertex1, vertex2 = edge.vertices
            for existing in self.get_connecting_edges(vertex1, vertex2):
                if edge.is_parallel_to(existing):
                    raise ArgumentError(
                        f"The edge is parallel to the edge with the ID {existing.id}, "
                        f"and the parent graph's restrictions include NO_PARALLEL_EDGES."
                    )
