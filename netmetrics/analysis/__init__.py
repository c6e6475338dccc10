"""
Graph metric calculators.

This module contains the calculator base class and the degree, clustering
coefficient, betweenness centrality, closeness centrality, connected
component, duplicate edge and overall metric calculations.
"""

__all__ = []
