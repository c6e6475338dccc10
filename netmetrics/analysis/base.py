"""
Base class and shared types for graph metric calculators.

A calculator reads a Graph and produces per-entity values. Runs can be
observed and cancelled through a CalculationContext supplied by the host;
cancellation produces a CANCELLED outcome rather than an exception.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from ..config import CalculatorSettings, get_calculator_settings
from ..core.exceptions import ArgumentError

logger = logging.getLogger(__name__)


class CalculationStatus(Enum):
    """Lifecycle of a calculator run."""

    NOT_STARTED = 'not_started'
    RUNNING = 'running'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    FAILED = 'failed'

    @property
    def is_terminal(self) -> bool:
        return self in (CalculationStatus.COMPLETED, CalculationStatus.CANCELLED,
                        CalculationStatus.FAILED)


class CalculationContext(Protocol):
    """
    What a calculator needs from its host.

    Any object with these two members works; netmetrics.operations provides
    a thread-safe implementation.
    """

    @property
    def is_cancellation_requested(self) -> bool:
        ...

    def report_progress(self, fraction: float, message: str) -> None:
        ...


@dataclass(frozen=True)
class CalculationOutcome:
    """Terminal result of a calculator run."""

    status: CalculationStatus
    metrics: Any = None
    error: Optional[BaseException] = None

    @property
    def completed(self) -> bool:
        return self.status is CalculationStatus.COMPLETED

    @property
    def cancelled(self) -> bool:
        return self.status is CalculationStatus.CANCELLED

    @property
    def failed(self) -> bool:
        return self.status is CalculationStatus.FAILED


class _CalculationCancelled(Exception):
    """Unwinds a run once cancellation has been observed. Never escapes the base class."""


class GraphMetricCalculatorBase(ABC):
    """
    Base class for graph metric calculators.

    Subclasses implement _calculate() and call _check_progress() at their
    batch boundaries. The base class tracks the run status:
    NOT_STARTED -> RUNNING -> COMPLETED, CANCELLED or FAILED.
    """

    def __init__(self, settings: Optional[CalculatorSettings] = None):
        self.settings = settings if settings is not None else get_calculator_settings()
        self._status = CalculationStatus.NOT_STARTED

    @property
    @abstractmethod
    def graph_metric_description(self) -> str:
        """Plural description used in progress messages, e.g. "vertex degrees"."""

    @property
    def status(self) -> CalculationStatus:
        return self._status

    def calculate_graph_metrics(self, graph) -> Any:
        """
        Calculate the metrics without progress reporting or cancellation.

        Returns:
            The calculator's metrics
        """
        outcome = self.try_calculate_graph_metrics(graph, None)
        return outcome.metrics

    def try_calculate_graph_metrics(self, graph, context: Optional[CalculationContext] = None) -> CalculationOutcome:
        """
        Calculate the metrics, reporting progress to and polling for
        cancellation from an optional context.

        Args:
            graph: Graph to analyze. It must not be modified during the run.
            context: Optional progress and cancellation host

        Returns:
            A COMPLETED outcome carrying the metrics, or a CANCELLED outcome
            carrying no metrics

        Raises:
            Exception: Whatever the calculation raised; the status becomes
                FAILED
        """
        if graph is None:
            raise ArgumentError(f"{type(self).__name__}: graph can't be None.")

        self._status = CalculationStatus.RUNNING
        logger.debug(f"Calculating {self.graph_metric_description} for {graph!r}")

        try:
            metrics = self._calculate(graph, context)
        except _CalculationCancelled:
            self._status = CalculationStatus.CANCELLED
            logger.info(f"Calculation of {self.graph_metric_description} was cancelled")
            return CalculationOutcome(CalculationStatus.CANCELLED)
        except Exception:
            self._status = CalculationStatus.FAILED
            raise

        self._status = CalculationStatus.COMPLETED
        return CalculationOutcome(CalculationStatus.COMPLETED, metrics)

    @abstractmethod
    def _calculate(self, graph, context: Optional[CalculationContext]) -> Any:
        """Do the work. Call _check_progress() at batch boundaries."""

    def _check_progress(self, context: Optional[CalculationContext], processed: int, total: int) -> None:
        """
        At every vertices_per_progress_report-th item, poll for cancellation
        and report progress.

        Args:
            context: Host context, or None for an uninterruptible run
            processed: Items processed so far
            total: Total items in the run
        """
        if context is None or processed % self.settings.vertices_per_progress_report != 0:
            return
        self._poll_and_report(context, processed, total)

    def _poll_and_report(self, context: CalculationContext, processed: int, total: int) -> None:
        if context.is_cancellation_requested:
            raise _CalculationCancelled()

        fraction = processed / total if total > 0 else 0.0
        context.report_progress(fraction, f"Calculating {self.graph_metric_description}: {processed:,} of {total:,}.")


def calculate_edges_in_fully_connected_neighborhood(adjacent_vertices: int, graph_is_directed: bool = False) -> int:
    """
    Number of edges among k vertices if every pair were connected.

    Args:
        adjacent_vertices: k
        graph_is_directed: Count ordered pairs instead of unordered pairs

    Returns:
        k(k-1) for a directed count, k(k-1)/2 otherwise
    """
    if adjacent_vertices < 0:
        raise ArgumentError("adjacent_vertices can't be negative.")
    pairs = adjacent_vertices * (adjacent_vertices - 1)
    return pairs if graph_is_directed else pairs // 2
