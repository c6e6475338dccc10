"""
Exception hierarchy for the netmetrics package.

Argument errors are raised at the offending call when an argument is
invalid. Invalid-state errors signal a caller programming mistake such as
using a stale enumerator or reading a missing metadata key.
"""


class NetMetricsError(Exception):
    """Base class for all errors raised by netmetrics."""


class ArgumentError(NetMetricsError, ValueError):
    """An argument passed to a method is missing, empty or out of range."""


class GraphMismatchError(ArgumentError):
    """A vertex or edge belongs to a different graph than the one being modified."""


class InvalidStateError(NetMetricsError, RuntimeError):
    """An object was used in a state that does not support the operation."""


class ConcurrentModificationError(InvalidStateError):
    """A collection was structurally modified while it was being enumerated."""


class MissingMetadataError(InvalidStateError):
    """A required metadata key is absent or holds a value of the wrong type."""


class NoParentGraphError(InvalidStateError):
    """A vertex or edge is not (or is no longer) contained in a graph."""


class CalculatorBusyError(InvalidStateError):
    """Another calculator is already running against the same graph."""


class GraphMetricError(NetMetricsError):
    """An internal consistency check failed while calculating graph metrics."""
