"""
society_health — composite health scoring for housing societies.

Converts one ``HealthMetrics`` snapshot into a ``HealthResult``: overall score,
status band, per-dimension breakdown, trend against a previous score, and
ranked recommendations. Pure and synchronous; persistence, I/O and
presentation belong to the caller.

Usage::

    from society_health import compute_health_score

    result = compute_health_score(
        {"totalResidents": 150, "activeResidents": 142, "openIssues": 3,
         "resolvedIssues": 47, "paymentComplianceRate": 92.3,
         "residentSatisfactionScore": 4.2, "communityParticipation": 65},
        previous_overall=80,
    )
    result.status          # HealthStatus.HEALTHY
"""

from pydantic import ValidationError

from society_health.config import ScoringConfig
from society_health.models.metrics import HealthMetrics, sample_health_metrics
from society_health.models.result import HealthResult, HealthTrend
from society_health.scoring.engine import compute_health_score
from society_health.taxonomy.dimension_taxonomy import (
    Dimension,
    HealthStatus,
    TrendDirection,
)

__all__ = [
    "Dimension",
    "HealthMetrics",
    "HealthResult",
    "HealthStatus",
    "HealthTrend",
    "ScoringConfig",
    "TrendDirection",
    "ValidationError",
    "compute_health_score",
    "sample_health_metrics",
]
