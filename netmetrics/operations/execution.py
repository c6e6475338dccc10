"""
Background execution of graph metric calculators.

A GraphMetricWorker runs calculators on a dedicated thread. The caller can
cancel a run through a CancellationToken, receives ProgressReport
notifications through a callback, and gets exactly one CalculationOutcome
per run through the returned future and an optional completion callback.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional

from ..analysis.base import CalculationOutcome, CalculationStatus, GraphMetricCalculatorBase
from ..core.exceptions import ArgumentError, CalculatorBusyError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[['ProgressReport'], None]
CompletionCallback = Callable[[CalculationOutcome], None]


class CancellationToken:
    """Thread-safe flag a caller sets to ask a running calculator to stop."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class ProgressReport:
    """One progress notification from a running calculator."""

    sequence: int
    fraction: float
    message: str

    @property
    def percent(self) -> int:
        return int(round(self.fraction * 100))


class _WorkerContext:
    """CalculationContext backed by a token and a progress callback."""

    def __init__(self, token: CancellationToken, progress_callback: Optional[ProgressCallback]):
        self._token = token
        self._progress_callback = progress_callback
        self._sequence = 0

    @property
    def is_cancellation_requested(self) -> bool:
        return self._token.is_cancellation_requested

    def report_progress(self, fraction: float, message: str) -> None:
        self._sequence += 1
        if self._progress_callback is not None:
            self._progress_callback(ProgressReport(self._sequence, fraction, message))


class GraphMetricWorker:
    """
    Runs calculators on a single background thread.

    Only one calculator may run against a given graph at a time. The graph
    must not be modified while a run is in progress.
    """

    def __init__(self):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='netmetrics')

    def submit(self, calculator: GraphMetricCalculatorBase, graph,
               token: Optional[CancellationToken] = None,
               progress_callback: Optional[ProgressCallback] = None,
               completion_callback: Optional[CompletionCallback] = None) -> 'Future[CalculationOutcome]':
        """
        Start a calculator run.

        Args:
            calculator: Calculator to run
            graph: Graph to analyze
            token: Optional cancellation token
            progress_callback: Called on the worker thread with each ProgressReport
            completion_callback: Called on the worker thread with the outcome

        Returns:
            Future resolving to the run's CalculationOutcome. The future
            never raises: a failed run yields a FAILED outcome, and an
            exception raised by completion_callback is logged.

        Raises:
            CalculatorBusyError: If a calculator is already running against
                the graph
        """
        if calculator is None:
            raise ArgumentError("submit: calculator can't be None.")
        if graph is None:
            raise ArgumentError("submit: graph can't be None.")

        if not graph.try_begin_calculation():
            raise CalculatorBusyError(f"A calculator is already running against graph {graph.id}.")

        context = _WorkerContext(token if token is not None else CancellationToken(), progress_callback)
        try:
            future = self._executor.submit(self._run, calculator, graph, context, completion_callback)
        except Exception:
            graph.end_calculation()
            raise

        logger.debug(f"Submitted {type(calculator).__name__} for graph {graph.id}")
        return future

    def _run(self, calculator: GraphMetricCalculatorBase, graph, context: _WorkerContext,
             completion_callback: Optional[CompletionCallback]) -> CalculationOutcome:
        try:
            outcome = calculator.try_calculate_graph_metrics(graph, context)
        except Exception as exc:
            logger.exception(f"{type(calculator).__name__} failed on graph {graph.id}")
            outcome = CalculationOutcome(CalculationStatus.FAILED, error=exc)
        finally:
            graph.end_calculation()

        if completion_callback is not None:
            try:
                completion_callback(outcome)
            except Exception:
                logger.exception(f"Completion callback for {type(calculator).__name__} raised")
        return outcome

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> 'GraphMetricWorker':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown(wait=True)
