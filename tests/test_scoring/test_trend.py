"""Tests for society_health/scoring/trend.py."""

from __future__ import annotations

import pytest

from society_health.scoring.trend import DEFAULT_PERIOD, analyze_trend
from society_health.taxonomy.dimension_taxonomy import TrendDirection


class TestNoUsablePrevious:
    @pytest.mark.parametrize("current", [0, 37, 86, 100])
    def test_missing_previous_is_stable(self, current):
        t = analyze_trend(current, None)
        assert t.direction == TrendDirection.STABLE
        assert t.change_percentage == 0.0

    def test_zero_previous_is_stable(self):
        t = analyze_trend(70, 0)
        assert t.direction == TrendDirection.STABLE
        assert t.change_percentage == 0.0

    def test_negative_previous_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            analyze_trend(70, -5)

    @pytest.mark.parametrize("previous", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_previous_rejected(self, previous):
        with pytest.raises(ValueError, match="finite"):
            analyze_trend(70, previous)


class TestChange:
    @pytest.mark.parametrize("score", [1, 50, 86, 100])
    def test_unchanged_score_is_stable(self, score):
        t = analyze_trend(score, score)
        assert t.direction == TrendDirection.STABLE
        assert t.change_percentage == 0.0

    def test_improving(self):
        t = analyze_trend(86, 80)
        assert t.direction == TrendDirection.IMPROVING
        assert t.change_percentage == pytest.approx(7.5)

    def test_declining_is_signed(self):
        t = analyze_trend(60, 80)
        assert t.direction == TrendDirection.DECLINING
        assert t.change_percentage == pytest.approx(-25.0)

    def test_rounded_to_one_decimal(self):
        t = analyze_trend(85, 78)
        assert t.change_percentage == pytest.approx(9.0)  # 8.974...
        t = analyze_trend(70, 65)
        assert t.change_percentage == pytest.approx(7.7)  # 7.692...

    def test_small_change_below_noise_is_stable(self):
        t = analyze_trend(82, 81)  # +1.23%
        assert t.direction == TrendDirection.STABLE
        assert t.change_percentage == pytest.approx(1.2)

    def test_change_of_exactly_two_percent_is_not_noise(self):
        t = analyze_trend(51, 50)
        assert t.change_percentage == pytest.approx(2.0)
        assert t.direction == TrendDirection.IMPROVING

    def test_custom_noise_threshold(self):
        t = analyze_trend(86, 80, noise_threshold=10.0)
        assert t.direction == TrendDirection.STABLE


class TestPeriod:
    def test_default_period(self):
        assert analyze_trend(80, 70).period == DEFAULT_PERIOD == "last_30_days"

    def test_period_passed_through_unchanged(self):
        assert analyze_trend(80, 70, period="30d").period == "30d"
        assert analyze_trend(80, None, period=" Q3 ").period == " Q3 "
