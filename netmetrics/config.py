"""Configuration helpers for the netmetrics calculators."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .core.exceptions import ArgumentError

VERTICES_PER_PROGRESS_REPORT_ENV = "NETMETRICS_VERTICES_PER_PROGRESS_REPORT"

DEFAULT_VERTICES_PER_PROGRESS_REPORT = 100


@dataclass(frozen=True)
class CalculatorSettings:
    """Runtime configuration shared by all graph metric calculators."""

    # Vertices processed between progress reports and cancellation checks.
    vertices_per_progress_report: int = DEFAULT_VERTICES_PER_PROGRESS_REPORT

    def __post_init__(self):
        value = self.vertices_per_progress_report
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ArgumentError(
                f"vertices_per_progress_report must be a positive integer; got {value!r}."
            )


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def get_calculator_settings() -> CalculatorSettings:
    """Resolve calculator settings from the environment with sensible defaults."""

    raw = _get_env(VERTICES_PER_PROGRESS_REPORT_ENV)
    if raw is None:
        return CalculatorSettings()

    try:
        interval = int(raw)
    except ValueError as exc:
        raise ArgumentError(
            f"{VERTICES_PER_PROGRESS_REPORT_ENV} must be an integer; got {raw!r}."
        ) from exc

    return CalculatorSettings(vertices_per_progress_report=interval)
