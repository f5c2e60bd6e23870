"""
Weighted aggregator: combines the six dimension sub-scores into one overall
score.

    overall = round_half_up(
        engagement         * 0.20
        + issue_management * 0.25
        + financial        * 0.20
        + communication    * 0.15
        + maintenance      * 0.10
        + satisfaction     * 0.10
    )

The weights are fixed constants so that scores stay comparable across
societies and over time. ``ScoringConfig`` may replace the vector as a whole
(validated by ``validate_weights``), but callers never pass weights per call.

Rounding is half-up (84.5 → 85), matching how the platform has always
displayed overall scores; Python's ``round`` would give 84.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from society_health.taxonomy.dimension_taxonomy import Dimension

DEFAULT_WEIGHTS: dict[Dimension, float] = {
    Dimension.ENGAGEMENT:       0.20,
    Dimension.ISSUE_MANAGEMENT: 0.25,
    Dimension.FINANCIAL:        0.20,
    Dimension.COMMUNICATION:    0.15,
    Dimension.MAINTENANCE:      0.10,
    Dimension.SATISFACTION:     0.10,
}

WEIGHT_SUM_TOLERANCE = 1e-6


def validate_weights(weights: Mapping[Dimension, float]) -> dict[Dimension, float]:
    """Check a weight vector covers every dimension, is non-negative and sums to 1.

    Returns:
        A plain dict copy of ``weights`` in ``Dimension`` declaration order.

    Raises:
        ValueError: On missing/unknown dimensions, negative weights, or a sum
            outside ``1.0 ± WEIGHT_SUM_TOLERANCE``.
    """
    missing = set(Dimension) - set(weights)
    if missing:
        raise ValueError(f"weights missing dimensions: {sorted(d.value for d in missing)}.")
    extra = set(weights) - set(Dimension)
    if extra:
        raise ValueError(f"weights contain unknown dimensions: {sorted(map(str, extra))}.")

    negative = [d.value for d in Dimension if weights[d] < 0]
    if negative:
        raise ValueError(f"weights must be non-negative; negative for {negative}.")

    total = sum(weights[d] for d in Dimension)
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ValueError(f"weights must sum to 1.0, got {total:.6f}.")

    return {d: float(weights[d]) for d in Dimension}


def weighted_sum(
    breakdown: Mapping[Dimension, float],
    weights: Mapping[Dimension, float] = DEFAULT_WEIGHTS,
) -> float:
    """Unrounded ``Σ weight_d * score_d`` over all six dimensions."""
    return sum(weights[d] * breakdown[d] for d in Dimension)


def aggregate(
    breakdown: Mapping[Dimension, float],
    weights: Mapping[Dimension, float] = DEFAULT_WEIGHTS,
) -> int:
    """Combine dimension scores into the overall score.

    Args:
        breakdown: Score in [0, 100] for each dimension.
        weights:   Weight per dimension, summing to 1.0.

    Returns:
        Integer overall score in [0, 100].
    """
    return int(_clamp(round_half_up(weighted_sum(breakdown, weights)), 0, 100))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
