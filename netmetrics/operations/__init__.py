"""
Execution and result handling for graph metric calculators.

This module contains the background worker with cancellation and progress
reporting, and the conversion of results into (identifier, value) rows.
"""

__all__ = []
