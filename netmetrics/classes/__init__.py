"""
Entity classes for graph representation.

This module contains the vertex, edge and metadata classes used throughout
the netmetrics library.
"""

from .metadata import MetadataStore, ReservedMetadataKeys
from .base import GraphVertexEdgeBase
from .vertex import Vertex
from .edge import Edge

__all__ = [
    'MetadataStore',
    'ReservedMetadataKeys',
    'GraphVertexEdgeBase',
    'Vertex',
    'Edge',
]
