"""
Society health scoring entry point.

``compute_health_score`` composes the five pure stages:

    HealthMetrics ──normalize_metrics──▶ breakdown ──aggregate──▶ overall
                                             │                       │
                                             │              classify_status ──▶ status
                                             │                       │
                                             │  previous_overall ──analyze_trend──▶ trend
                                             │
                                             └──generate_recommendations──▶ recommendations

It either returns a complete ``HealthResult`` or raises
``pydantic.ValidationError`` before any computation (missing or out-of-domain
metrics). There is no partial result, no I/O and no state kept between calls,
so the function is safe to map over many snapshots concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from society_health.config import ScoringConfig
from society_health.models.metrics import HealthMetrics
from society_health.models.result import HealthResult
from society_health.recommendations.generator import generate_recommendations
from society_health.scoring.aggregator import aggregate
from society_health.scoring.classifier import classify_status
from society_health.scoring.normalizer import normalize_metrics
from society_health.scoring.trend import analyze_trend

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ScoringConfig()


def compute_health_score(
    metrics: Union[HealthMetrics, Mapping[str, Any]],
    previous_overall: Optional[float] = None,
    critical_override: Optional[float] = None,
    *,
    period: Optional[str] = None,
    config: Optional[ScoringConfig] = None,
) -> HealthResult:
    """Score one society snapshot.

    Args:
        metrics:           ``HealthMetrics`` or a mapping with the same fields
                           (snake_case or camelCase keys).
        previous_overall:  Overall score from the caller's previous evaluation,
                           used for the trend. ``None`` → stable / 0.
        critical_override: Optional lowered critical boundary for this society.
        period:            Trend period label; defaults to
                           ``config.default_period``.
        config:            Weights and thresholds; defaults to ``ScoringConfig()``.

    Returns:
        ``HealthResult``.

    Raises:
        pydantic.ValidationError: If ``metrics`` is missing required fields or
            holds out-of-domain values.
        ValueError: If ``previous_overall`` is negative or not finite, or
            ``critical_override`` is not finite.
    """
    cfg = config or _DEFAULT_CONFIG
    snapshot = (
        metrics if isinstance(metrics, HealthMetrics) else HealthMetrics.model_validate(metrics)
    )

    breakdown = normalize_metrics(snapshot)
    overall = aggregate(breakdown, cfg.weights)
    status = classify_status(overall, critical_override, cfg.thresholds)
    trend = analyze_trend(
        overall,
        previous_overall,
        period=period if period is not None else cfg.default_period,
        noise_threshold=cfg.trend_noise_threshold,
    )
    recommendations = generate_recommendations(breakdown, cfg.attention_threshold)

    logger.debug(
        "Scored snapshot: overall=%d status=%s trend=%s recommendations=%d",
        overall, status.value, trend.direction.value, len(recommendations),
    )

    return HealthResult(
        overall=overall,
        status=status,
        breakdown=breakdown,
        trend=trend,
        recommendations=recommendations,
    )
