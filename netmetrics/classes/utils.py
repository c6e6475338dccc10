"""
Utility functions for netmetrics.

This module provides shared utility functions used across the netmetrics
package, including text formatting helpers for the to_string() family and
the adjacency and breadth-first search helpers used by the calculators.
"""

from typing import List, Dict, Any, Sequence, TextIO, Tuple
from collections import deque
import logging

from ..core.exceptions import ArgumentError

logger = logging.getLogger(__name__)

STRING_FORMATS = ('G', 'P', 'D')


def check_format(format: str) -> None:
    """
    Validate a to_string() format specifier.

    Args:
        format: "G" (general), "P" (properties) or "D" (details)

    Raises:
        ArgumentError: If the format is not one of the supported specifiers
    """
    if format not in STRING_FORMATS:
        raise ArgumentError(f"format must be one of {', '.join(STRING_FORMATS)}; got {format!r}.")


def append_indentation(buffer: TextIO, indentation_level: int) -> None:
    """Write one tab per indentation level."""
    if indentation_level < 0:
        raise ArgumentError("indentation_level can't be negative.")
    buffer.write('\t' * indentation_level)


def append_object(buffer: TextIO, value: Any) -> None:
    """Write an object's string form, or "[null]" for None."""
    buffer.write('[null]' if value is None else str(value))


def append_property(buffer: TextIO, indentation_level: int, name: str, value: Any,
                    append_line: bool = True) -> None:
    """
    Write a "Name = value" line.

    Args:
        buffer: Text buffer to write to
        indentation_level: Number of leading tabs
        name: Property name
        value: Property value, written with append_object()
        append_line: Terminate the line with a newline
    """
    append_indentation(buffer, indentation_level)
    buffer.write(f"{name} = ")
    append_object(buffer, value)
    if append_line:
        buffer.write('\n')


def build_undirected_adjacency(graph) -> Tuple[List[Any], Dict[int, int], List[List[int]]]:
    """
    Build an index-based adjacency list that ignores edge direction.

    Vertices are numbered 0..n-1 in the graph's vertex order. Each vertex's
    neighbor list is deduplicated; a self-loop makes a vertex its own
    neighbor, which breadth-first searches ignore naturally.

    Args:
        graph: Graph to read

    Returns:
        Tuple of (vertices, vertex_id_to_index, adjacency)
    """
    vertices = graph.vertices.to_list()
    index_of: Dict[int, int] = {vertex.id: i for i, vertex in enumerate(vertices)}
    adjacency: List[List[int]] = []

    for vertex in vertices:
        adjacency.append([index_of[neighbor.id] for neighbor in vertex.adjacent_vertices])

    logger.debug(f"Built undirected adjacency for {len(vertices)} vertices")
    return vertices, index_of, adjacency


def bfs_distances(adjacency: Sequence[Sequence[int]], source: int) -> Dict[int, int]:
    """
    Compute hop distances from a source vertex using breadth-first search.

    Args:
        adjacency: Index-based adjacency list
        source: Index of the source vertex

    Returns:
        Dictionary mapping each reachable vertex index to its distance,
        including the source at distance 0
    """
    distances = {source: 0}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        for neighbor in adjacency[current]:
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    return distances
