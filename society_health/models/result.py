"""
Scoring output models.

``HealthTrend`` describes the movement of the overall score against a
previous evaluation supplied by the caller.

``HealthResult`` is the complete, internally consistent output of one
``compute_health_score`` call: overall score, status band, per-dimension
breakdown, trend and ranked recommendations.

Both models are frozen and so are their contents: ``breakdown`` is a read-only
mapping and ``recommendations`` a tuple, so a result computed from one
snapshot cannot be changed afterwards. Storing results for later trend
comparison is the caller's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from society_health.taxonomy.dimension_taxonomy import (
    Dimension,
    HealthStatus,
    TrendDirection,
    priority_rank,
)


class HealthTrend(BaseModel):
    """Change of the overall score between two evaluation points.

    Attributes:
        direction: ``improving``, ``declining`` or ``stable``.
        change_percentage: Signed percentage change relative to the previous
            score, one decimal place. ``0.0`` when there is no usable previous.
        period: Opaque caller-supplied label, e.g. ``"30d"``.
    """

    model_config = ConfigDict(frozen=True)

    direction: TrendDirection
    change_percentage: float
    period: str


class HealthResult(BaseModel):
    """Overall health evaluation of one society snapshot.

    Attributes:
        overall: Weighted composite score, integer in [0, 100].
        status: Status band derived from ``overall``.
        breakdown: Score in [0, 100] for every one of the six dimensions.
        trend: Movement against the caller-supplied previous score.
        recommendations: Guidance for sub-threshold dimensions, most urgent
            first. Empty when every dimension is at or above the threshold.
    """

    model_config = ConfigDict(frozen=True)

    overall: int
    status: HealthStatus
    breakdown: Mapping[Dimension, float]
    trend: HealthTrend
    recommendations: tuple[str, ...]

    @field_validator("overall")
    @classmethod
    def validate_overall_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"overall must be in [0, 100], got {v}.")
        return v

    @field_validator("breakdown")
    @classmethod
    def validate_breakdown(cls, v: Mapping[Dimension, float]) -> Mapping[Dimension, float]:
        missing = set(Dimension) - set(v)
        if missing:
            raise ValueError(
                f"breakdown is missing dimensions: {sorted(d.value for d in missing)}."
            )
        for dim, score in v.items():
            if not 0.0 <= score <= 100.0:
                raise ValueError(f"breakdown[{dim.value}] must be in [0, 100], got {score}.")
        return MappingProxyType({dim: float(v[dim]) for dim in Dimension})

    @field_serializer("breakdown")
    def serialize_breakdown(self, v: Mapping[Dimension, float]) -> dict[Dimension, float]:
        return dict(v)

    @property
    def weakest_dimension(self) -> Dimension:
        """Dimension with the lowest score, ties ranked like recommendations
        (``RECOMMENDATION_PRIORITY`` order).
        """
        return min(Dimension, key=lambda d: (self.breakdown[d], priority_rank(d)))

    def to_payload(self) -> dict[str, Any]:
        """Serialise with the platform's camelCase keys.

        Example::

            {"overall": 86, "status": "healthy",
             "breakdown": {"engagement": 82.8, "issueManagement": 72.31, ...},
             "trend": {"direction": "stable", "changePercentage": 0.0,
                       "period": "last_30_days"},
             "recommendations": []}
        """
        return {
            "overall": self.overall,
            "status": self.status.value,
            "breakdown": {dim.alias: self.breakdown[dim] for dim in Dimension},
            "trend": {
                "direction": self.trend.direction.value,
                "changePercentage": self.trend.change_percentage,
                "period": self.trend.period,
            },
            "recommendations": list(self.recommendations),
        }
