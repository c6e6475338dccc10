"""
Graph-level enumerations.
"""

from enum import Enum, Flag, auto


class GraphDirectedness(Enum):
    """Kinds of edges a graph may contain."""

    DIRECTED = 'directed'
    UNDIRECTED = 'undirected'
    MIXED = 'mixed'

    @property
    def edges_are_directed_by_default(self) -> bool:
        return self is GraphDirectedness.DIRECTED

    def accepts(self, is_directed: bool) -> bool:
        """Determine whether an edge with the given directedness may be added."""
        if self is GraphDirectedness.DIRECTED:
            return is_directed
        if self is GraphDirectedness.UNDIRECTED:
            return not is_directed
        return True


class GraphRestrictions(Flag):
    """Restrictions checked when edges are added to a graph."""

    NONE = 0
    NO_SELF_LOOPS = auto()
    NO_PARALLEL_EDGES = auto()
    ALL = NO_SELF_LOOPS | NO_PARALLEL_EDGES
