"""
Status classifier: maps an overall score to a status band.

Bands (closed on their lower bound, contiguous, non-overlapping):
    healthy          : overall >= 80
    attention_needed : 50 <= overall < 80
    critical         : overall < 50

Per-society critical override
-----------------------------
A caller may pass ``critical_override`` to lower the critical boundary for a
specific society (e.g. a newly onboarded society whose telemetry is still
sparse). The override can only lower the boundary: values above the
configured critical boundary are clamped down to it, values below zero are
clamped up to zero. The healthy boundary is never raised above 80, whatever
the configuration says.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from society_health.taxonomy.dimension_taxonomy import HealthStatus

logger = logging.getLogger(__name__)

HEALTHY_THRESHOLD = 80.0
CRITICAL_THRESHOLD = 50.0

# Ceiling for the healthy boundary; configuration cannot raise it.
MAX_HEALTHY_THRESHOLD = HEALTHY_THRESHOLD


@dataclass(frozen=True)
class StatusThresholds:
    """Lower bounds of the ``healthy`` and ``attention_needed`` bands.

    Attributes:
        healthy:  Scores at or above this are ``healthy``.
        critical: Scores below this are ``critical``.
    """

    healthy: float = HEALTHY_THRESHOLD
    critical: float = CRITICAL_THRESHOLD

    def __post_init__(self) -> None:
        if not 0.0 <= self.critical < self.healthy <= 100.0:
            raise ValueError(
                "thresholds must satisfy 0 <= critical < healthy <= 100, "
                f"got critical={self.critical}, healthy={self.healthy}."
            )


DEFAULT_THRESHOLDS = StatusThresholds()


def resolve_thresholds(
    critical_override: Optional[float] = None,
    base: StatusThresholds = DEFAULT_THRESHOLDS,
) -> StatusThresholds:
    """Apply a per-society critical override to the base thresholds.

    Args:
        critical_override: Requested critical boundary, or ``None``.
        base:              Configured thresholds.

    Returns:
        Effective thresholds. ``healthy`` is capped at ``MAX_HEALTHY_THRESHOLD``;
        ``critical`` is ``min(max(override, 0), base.critical)``.

    Raises:
        ValueError: If ``critical_override`` is not finite.
    """
    healthy = min(base.healthy, MAX_HEALTHY_THRESHOLD)
    critical = min(base.critical, healthy)

    if critical_override is not None:
        requested = float(critical_override)
        if not math.isfinite(requested):
            raise ValueError(f"critical_override must be finite, got {requested}.")
        clamped = max(0.0, min(requested, critical))
        if clamped != requested:
            logger.warning(
                "critical_override %.1f outside [0, %.1f]; clamped to %.1f",
                requested, critical, clamped,
            )
        critical = clamped

    if critical >= healthy:
        critical = max(0.0, healthy - 1.0)

    return StatusThresholds(healthy=healthy, critical=critical)


def classify_status(
    overall: float,
    critical_override: Optional[float] = None,
    thresholds: StatusThresholds = DEFAULT_THRESHOLDS,
) -> HealthStatus:
    """Return the status band for an overall score.

    Args:
        overall:           Overall score (int from the aggregator, or any float).
        critical_override: Optional lowered critical boundary for one society.
        thresholds:        Configured base thresholds.

    Returns:
        ``HealthStatus.HEALTHY``, ``ATTENTION_NEEDED`` or ``CRITICAL``.
    """
    effective = resolve_thresholds(critical_override, thresholds)
    if overall >= effective.healthy:
        return HealthStatus.HEALTHY
    if overall >= effective.critical:
        return HealthStatus.ATTENTION_NEEDED
    return HealthStatus.CRITICAL
