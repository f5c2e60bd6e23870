"""
Trend analyzer: compares the current overall score with a previous one.

    change_percentage = round((current - previous) / previous * 100, 1)

    stable    : |change_percentage| < noise threshold (default 2.0)
    improving : current > previous
    declining : current < previous

No previous score (``None``) or a previous score of zero yields
``stable / 0.0`` — there is nothing meaningful to divide by. The engine never
looks up previous scores itself; the caller passes whatever it persisted.
"""

from __future__ import annotations

import math
from typing import Optional

from society_health.models.result import HealthTrend
from society_health.taxonomy.dimension_taxonomy import TrendDirection

DEFAULT_PERIOD = "last_30_days"
NOISE_THRESHOLD_PCT = 2.0


def analyze_trend(
    current: float,
    previous: Optional[float] = None,
    period: str = DEFAULT_PERIOD,
    noise_threshold: float = NOISE_THRESHOLD_PCT,
) -> HealthTrend:
    """Derive direction and percentage change of the overall score.

    Args:
        current:         Current overall score.
        previous:        Previous overall score, or ``None`` if unknown.
        period:          Caller-supplied label passed through unchanged.
        noise_threshold: Absolute percentage below which a change is "stable".

    Returns:
        ``HealthTrend``.

    Raises:
        ValueError: If ``previous`` is negative or not finite.
    """
    if previous is not None and not math.isfinite(previous):
        raise ValueError(f"previous overall score must be finite, got {previous}.")
    if previous is not None and previous < 0:
        raise ValueError(f"previous overall score must be non-negative, got {previous}.")

    if not previous:
        return HealthTrend(
            direction=TrendDirection.STABLE, change_percentage=0.0, period=period
        )

    change_pct = round((current - previous) / previous * 100.0, 1)

    if abs(change_pct) < noise_threshold:
        direction = TrendDirection.STABLE
    elif current > previous:
        direction = TrendDirection.IMPROVING
    else:
        direction = TrendDirection.DECLINING

    # round() can leave -0.0 for tiny negative changes
    return HealthTrend(
        direction=direction, change_percentage=change_pct + 0.0, period=period
    )
