"""Tests for calculator settings."""
from __future__ import annotations

import pytest

from netmetrics import CalculatorSettings, VertexDegreeCalculator, get_calculator_settings
from netmetrics.config import DEFAULT_VERTICES_PER_PROGRESS_REPORT, VERTICES_PER_PROGRESS_REPORT_ENV
from netmetrics.core.exceptions import ArgumentError


@pytest.mark.unit
def test_default_settings(monkeypatch):
    monkeypatch.delenv(VERTICES_PER_PROGRESS_REPORT_ENV, raising=False)

    settings = get_calculator_settings()

    assert settings.vertices_per_progress_report == DEFAULT_VERTICES_PER_PROGRESS_REPORT == 100


@pytest.mark.unit
def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv(VERTICES_PER_PROGRESS_REPORT_ENV, "25")

    assert get_calculator_settings().vertices_per_progress_report == 25
    assert VertexDegreeCalculator().settings.vertices_per_progress_report == 25


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["abc", "0", "-5", "1.5"])
def test_invalid_environment_value(monkeypatch, raw):
    monkeypatch.setenv(VERTICES_PER_PROGRESS_REPORT_ENV, raw)

    with pytest.raises(ArgumentError):
        get_calculator_settings()


@pytest.mark.unit
def test_explicit_settings_win(monkeypatch):
    monkeypatch.setenv(VERTICES_PER_PROGRESS_REPORT_ENV, "25")
    settings = CalculatorSettings(vertices_per_progress_report=7)

    assert VertexDegreeCalculator(settings=settings).settings is settings


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, -1, True, "10"])
def test_settings_validation(value):
    with pytest.raises(ArgumentError):
        CalculatorSettings(vertices_per_progress_report=value)
