"""
Core graph data structures and management.

This module contains the graph, its vertex and edge collections, the
adjacency matrix and the exception hierarchy, without any metric
calculations.
"""

__all__ = []
