"""
Metric normalizer: maps a raw ``HealthMetrics`` snapshot onto one sub-score
in [0, 100] per dimension.

Dimension formulas
------------------
engagement (0–100):
    60% active-resident ratio + 40% community participation.
    Formula: 100 * (0.6 * active/total + 0.4 * participation/100).

issue_management (0–100):
    Resolution ratio, scaled down by the absolute size of the open backlog.
    Formula: 100 * resolved/(resolved+open) * 1/(1 + open/OPEN_ISSUE_SCALE).
    10 open issues halve the score; 3 open issues keep ~77% of it.

financial (0–100):
    paymentComplianceRate taken directly (already a percentage).

communication (0–100):
    40% delivery ratio + 60% read ratio, both relative to notices sent.
    Formula: 100 * (0.4 * delivered/sent + 0.6 * read/sent).

maintenance (0–100):
    100 while the mean response time is within the 24h target SLA, then
    decays inversely: 48h → 50, 96h → 25.

satisfaction (0–100):
    residentSatisfactionScore rescaled from [0, 5] to [0, 100].

Zero-demand policy
------------------
A ratio whose denominator is zero (no residents, no issues raised, no
notices sent) takes the sentinel value 1.0: no demand means no penalty.
A missing or zero response time likewise scores 100. Every ratio is clamped
to [0, 1] and every dimension to [0, 100], so upstream values such as a
compliance rate of 103% or more read notices than sent never escape the range.
"""

from __future__ import annotations

from society_health.models.metrics import HealthMetrics
from society_health.taxonomy.dimension_taxonomy import Dimension

# Score returned for a ratio with nothing to measure ("no demand ⇒ no penalty").
ZERO_DEMAND_RATIO = 1.0

OPEN_ISSUE_SCALE = 10.0
MAINTENANCE_TARGET_HOURS = 24.0
SATISFACTION_SCALE_MAX = 5.0

_ACTIVE_WEIGHT = 0.6
_PARTICIPATION_WEIGHT = 0.4
_DELIVERY_WEIGHT = 0.4
_READ_WEIGHT = 0.6


def engagement_score(metrics: HealthMetrics) -> float:
    active_ratio = _ratio(metrics.active_residents, metrics.total_residents)
    participation = _clamp(metrics.community_participation / 100.0, 0.0, 1.0)
    return _clamp(
        100.0 * (_ACTIVE_WEIGHT * active_ratio + _PARTICIPATION_WEIGHT * participation),
        0.0,
        100.0,
    )


def issue_management_score(metrics: HealthMetrics) -> float:
    resolution_ratio = _ratio(
        metrics.resolved_issues, metrics.resolved_issues + metrics.open_issues
    )
    backlog_factor = 1.0 / (1.0 + metrics.open_issues / OPEN_ISSUE_SCALE)
    return _clamp(100.0 * resolution_ratio * backlog_factor, 0.0, 100.0)


def financial_score(metrics: HealthMetrics) -> float:
    return _clamp(metrics.payment_compliance_rate, 0.0, 100.0)


def communication_score(metrics: HealthMetrics) -> float:
    delivery_ratio = _ratio(metrics.notifications_delivered, metrics.notifications_sent)
    read_ratio = _ratio(metrics.notifications_read, metrics.notifications_sent)
    return _clamp(
        100.0 * (_DELIVERY_WEIGHT * delivery_ratio + _READ_WEIGHT * read_ratio),
        0.0,
        100.0,
    )


def maintenance_score(metrics: HealthMetrics) -> float:
    """Inverse of mean response time against ``MAINTENANCE_TARGET_HOURS``."""
    response = metrics.maintenance_response_time
    if not response or response <= MAINTENANCE_TARGET_HOURS:
        return 100.0
    return _clamp(100.0 * MAINTENANCE_TARGET_HOURS / response, 0.0, 100.0)


def satisfaction_score(metrics: HealthMetrics) -> float:
    return _clamp(
        metrics.resident_satisfaction_score / SATISFACTION_SCALE_MAX * 100.0, 0.0, 100.0
    )


_DIMENSION_SCORERS = {
    Dimension.ENGAGEMENT:       engagement_score,
    Dimension.ISSUE_MANAGEMENT: issue_management_score,
    Dimension.FINANCIAL:        financial_score,
    Dimension.COMMUNICATION:    communication_score,
    Dimension.MAINTENANCE:      maintenance_score,
    Dimension.SATISFACTION:     satisfaction_score,
}


def normalize_metrics(metrics: HealthMetrics) -> dict[Dimension, float]:
    """Compute every dimension sub-score for one snapshot.

    Args:
        metrics: Validated input snapshot. Read only; no reference is kept.

    Returns:
        Dict with one entry per ``Dimension`` (declaration order), each a
        float in [0, 100] rounded to two decimals.
    """
    return {
        dim: round(scorer(metrics), 2)
        for dim, scorer in _DIMENSION_SCORERS.items()
    }


# ── Helpers ───────────────────────────────────────────────────────────────────

def _ratio(numerator: float, denominator: float) -> float:
    """``numerator / denominator`` clamped to [0, 1]; sentinel on zero demand."""
    if denominator <= 0:
        return ZERO_DEMAND_RATIO
    return _clamp(numerator / denominator, 0.0, 1.0)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
