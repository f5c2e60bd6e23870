"""
Tests for society_health/scoring/classifier.py.

What we test
------------
classify_status():
  - Exact band boundaries (closed on the lower bound).
  - critical_override lowers the critical boundary only; NaN or inf raise.

resolve_thresholds():
  - Overrides above the configured boundary are clamped down.
  - Negative overrides are clamped to 0.
  - The healthy boundary never exceeds 80.

StatusThresholds:
  - Rejects inverted or out-of-range bands.
"""

from __future__ import annotations

import logging

import pytest

from society_health.scoring.classifier import (
    DEFAULT_THRESHOLDS,
    StatusThresholds,
    classify_status,
    resolve_thresholds,
)
from society_health.taxonomy.dimension_taxonomy import HealthStatus


class TestBands:
    @pytest.mark.parametrize(
        "overall, expected",
        [
            (100, HealthStatus.HEALTHY),
            (80.0, HealthStatus.HEALTHY),
            (79.9, HealthStatus.ATTENTION_NEEDED),
            (65, HealthStatus.ATTENTION_NEEDED),
            (50.0, HealthStatus.ATTENTION_NEEDED),
            (49.9, HealthStatus.CRITICAL),
            (0, HealthStatus.CRITICAL),
        ],
    )
    def test_boundaries(self, overall, expected):
        assert classify_status(overall) == expected

    def test_every_integer_score_gets_exactly_one_band(self):
        statuses = [classify_status(s) for s in range(101)]
        assert statuses[:50] == [HealthStatus.CRITICAL] * 50
        assert statuses[50:80] == [HealthStatus.ATTENTION_NEEDED] * 30
        assert statuses[80:] == [HealthStatus.HEALTHY] * 21


class TestCriticalOverride:
    def test_lowered_boundary_moves_score_out_of_critical(self):
        assert classify_status(45) == HealthStatus.CRITICAL
        assert classify_status(45, critical_override=40) == HealthStatus.ATTENTION_NEEDED

    def test_score_below_lowered_boundary_still_critical(self):
        assert classify_status(39.9, critical_override=40) == HealthStatus.CRITICAL

    def test_override_cannot_raise_critical_boundary(self):
        assert classify_status(55, critical_override=60) == HealthStatus.ATTENTION_NEEDED
        assert resolve_thresholds(60).critical == 50.0

    def test_override_clamp_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="society_health.scoring.classifier"):
            resolve_thresholds(75)
        assert "clamped" in caplog.text

    def test_negative_override_clamped_to_zero(self):
        assert resolve_thresholds(-10).critical == 0.0
        assert classify_status(0, critical_override=-10) == HealthStatus.ATTENTION_NEEDED

    def test_override_never_touches_healthy_boundary(self):
        assert resolve_thresholds(20).healthy == 80.0
        assert classify_status(80, critical_override=20) == HealthStatus.HEALTHY

    def test_none_keeps_defaults(self):
        assert resolve_thresholds(None) == DEFAULT_THRESHOLDS

    @pytest.mark.parametrize("override", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_override_rejected(self, override):
        with pytest.raises(ValueError, match="finite"):
            resolve_thresholds(override)
        with pytest.raises(ValueError, match="finite"):
            classify_status(45, critical_override=override)


class TestThresholds:
    def test_healthy_above_80_is_capped(self):
        base = StatusThresholds(healthy=90.0, critical=50.0)
        assert resolve_thresholds(None, base).healthy == 80.0
        assert classify_status(85, thresholds=base) == HealthStatus.HEALTHY

    def test_lower_healthy_boundary_is_honoured(self):
        base = StatusThresholds(healthy=75.0, critical=50.0)
        assert classify_status(76, thresholds=base) == HealthStatus.HEALTHY

    @pytest.mark.parametrize(
        "healthy, critical", [(50.0, 50.0), (40.0, 60.0), (80.0, -1.0), (101.0, 50.0)]
    )
    def test_invalid_bands_rejected(self, healthy, critical):
        with pytest.raises(ValueError, match="thresholds"):
            StatusThresholds(healthy=healthy, critical=critical)
