"""
Dimension and status taxonomy for society health scoring.

Three vocabularies describe every health evaluation:
  - ``Dimension``      — the six fixed sub-scores feeding the overall score.
  - ``HealthStatus``   — the status band derived from the overall score.
  - ``TrendDirection`` — movement of the overall score between evaluations.

``RECOMMENDATION_PRIORITY`` fixes the order in which dimensions win ties when
recommendations are ranked (earlier = more urgent for equal scores).

Usage example::

    from society_health.taxonomy.dimension_taxonomy import Dimension, HealthStatus

    dim    = Dimension.FINANCIAL
    status = HealthStatus.HEALTHY

This module has NO imports from any other ``society_health`` package.
"""

from enum import StrEnum


class Dimension(StrEnum):
    """One of the six fixed sub-scores of a society's health."""

    ENGAGEMENT = "engagement"
    """Share of active residents and community participation."""

    ISSUE_MANAGEMENT = "issue_management"
    """Resolution ratio of reported issues, penalised by open backlog."""

    FINANCIAL = "financial"
    """Maintenance-fee payment compliance."""

    COMMUNICATION = "communication"
    """Notification delivery and read-through."""

    MAINTENANCE = "maintenance"
    """Average maintenance response time against the target SLA."""

    SATISFACTION = "satisfaction"
    """Resident satisfaction survey score."""

    @property
    def alias(self) -> str:
        """camelCase key used by the platform's JSON payloads (``issueManagement``)."""
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)


class HealthStatus(StrEnum):
    """Status band of an overall score. Bands are closed on their lower bound."""

    HEALTHY = "healthy"
    ATTENTION_NEEDED = "attention_needed"
    CRITICAL = "critical"


class TrendDirection(StrEnum):
    """Direction of change between a previous and a current overall score."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


RECOMMENDATION_PRIORITY: tuple[Dimension, ...] = (
    Dimension.ISSUE_MANAGEMENT,
    Dimension.FINANCIAL,
    Dimension.ENGAGEMENT,
    Dimension.SATISFACTION,
    Dimension.MAINTENANCE,
    Dimension.COMMUNICATION,
)

_PRIORITY_RANK: dict[Dimension, int] = {
    dim: rank for rank, dim in enumerate(RECOMMENDATION_PRIORITY)
}


def priority_rank(dim: Dimension) -> int:
    """Position of ``dim`` in ``RECOMMENDATION_PRIORITY`` (0 = most urgent on ties)."""
    return _PRIORITY_RANK[dim]


def parse_dimension(key: str) -> Dimension:
    """Resolve a dimension from its snake_case value or camelCase alias.

    Raises:
        ValueError: If ``key`` names no known dimension.
    """
    for dim in Dimension:
        if key in (dim.value, dim.alias):
            return dim
    raise ValueError(
        f"Unknown dimension '{key}'. Expected one of {[d.value for d in Dimension]}."
    )
