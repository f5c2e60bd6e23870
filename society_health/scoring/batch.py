"""
Batch scoring: evaluates many societies in one pass.

Each ``SocietySnapshot`` pairs a society identifier with its metrics and the
previous overall score the caller persisted for it. ``score_batch`` maps
``compute_health_score`` over the snapshots sequentially and returns results
in input order; callers wanting parallelism can map the same entry point over
a pool themselves, since no state is shared between calls.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from society_health.config import ScoringConfig
from society_health.models.metrics import HealthMetrics
from society_health.models.result import HealthResult
from society_health.scoring.engine import compute_health_score
from society_health.taxonomy.dimension_taxonomy import HealthStatus

logger = logging.getLogger(__name__)


class SocietySnapshot(BaseModel):
    """One batch input entry.

    Attributes:
        society_id: Caller's identifier for the society.
        metrics: Snapshot to score.
        previous_overall: Last persisted overall score, or ``None``.
        critical_override: Optional lowered critical boundary for this society.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        allow_inf_nan=False,
    )

    society_id: str
    metrics: HealthMetrics
    previous_overall: Optional[float] = None
    critical_override: Optional[float] = None

    @field_validator("society_id")
    @classmethod
    def validate_society_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("society_id must not be empty.")
        return v.strip()


@dataclass(frozen=True)
class SocietyScore:
    """Scored batch entry: the society identifier and its ``HealthResult``."""

    society_id: str
    result:     HealthResult


def score_batch(
    snapshots: Iterable[SocietySnapshot],
    config:    Optional[ScoringConfig] = None,
    period:    Optional[str] = None,
) -> list[SocietyScore]:
    """Score every snapshot, preserving input order.

    Args:
        snapshots: Validated batch entries.
        config:    Scoring configuration shared by all entries.
        period:    Trend period label shared by all entries.

    Returns:
        One ``SocietyScore`` per snapshot.

    Raises:
        ValueError: If an entry cannot be scored (logged with its ``society_id``).
    """
    scores: list[SocietyScore] = []
    for snap in snapshots:
        try:
            result = compute_health_score(
                snap.metrics,
                snap.previous_overall,
                snap.critical_override,
                period=period,
                config=config,
            )
        except ValueError:
            logger.error(
                "Scoring failed for %s", snap.society_id,
                extra={"society_id": snap.society_id},
            )
            raise
        logger.debug(
            "Scored %s: overall=%d status=%s",
            snap.society_id, result.overall, result.status.value,
            extra={"society_id": snap.society_id, "overall": result.overall},
        )
        scores.append(SocietyScore(society_id=snap.society_id, result=result))

    counts = status_counts(scores)
    logger.info(
        "Scored %d societies: %s",
        len(scores),
        ", ".join(f"{status.value}={n}" for status, n in counts.items()),
        extra={"n_societies": len(scores)},
    )
    return scores


def status_counts(scores: Iterable[SocietyScore]) -> dict[HealthStatus, int]:
    """Number of societies per status band (every band present, possibly 0)."""
    counts = Counter(s.result.status for s in scores)
    return {status: counts.get(status, 0) for status in HealthStatus}


def rank_by_urgency(scores: Iterable[SocietyScore]) -> list[SocietyScore]:
    """Order societies lowest overall first; ties by ``society_id`` ascending."""
    return sorted(scores, key=lambda s: (s.result.overall, s.society_id))
