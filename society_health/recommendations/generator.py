"""
Recommendation generator: turns a score breakdown into ranked, human-readable
guidance for the society's manager.

Rules
-----
- One recommendation per dimension whose score is below the attention
  threshold (default 70). Dimensions at or above it produce nothing.
- Ordered by ascending score, so the weakest dimension comes first.
- Equal scores are ordered by ``RECOMMENDATION_PRIORITY``
  (issue management, financial, engagement, satisfaction, maintenance,
  communication).
- Pure and deterministic: identical breakdowns give identical lists.
"""

from __future__ import annotations

from collections.abc import Mapping

from society_health.taxonomy.dimension_taxonomy import Dimension, priority_rank

ATTENTION_THRESHOLD = 70.0

RECOMMENDATION_TEXT: dict[Dimension, str] = {
    Dimension.ENGAGEMENT: (
        "Increase resident engagement through community events "
        "and digital platform promotion"
    ),
    Dimension.ISSUE_MANAGEMENT: (
        "Clear the open issue backlog with faster resolution "
        "and regular progress updates to residents"
    ),
    Dimension.FINANCIAL: (
        "Improve payment collection follow-up, e.g. automated dues reminders"
    ),
    Dimension.COMMUNICATION: (
        "Enhance communication channels so notices reach and are read by residents"
    ),
    Dimension.MAINTENANCE: (
        "Improve maintenance scheduling to bring response times within the 24-hour target"
    ),
    Dimension.SATISFACTION: (
        "Conduct resident surveys and address key satisfaction pain points"
    ),
}

def dimensions_needing_attention(
    breakdown: Mapping[Dimension, float],
    attention_threshold: float = ATTENTION_THRESHOLD,
) -> list[Dimension]:
    """Sub-threshold dimensions, most urgent first.

    Sort key: ``(score, priority_rank)`` ascending.
    """
    flagged = [dim for dim, score in breakdown.items() if score < attention_threshold]
    return sorted(flagged, key=lambda d: (breakdown[d], priority_rank(d)))


def generate_recommendations(
    breakdown: Mapping[Dimension, float],
    attention_threshold: float = ATTENTION_THRESHOLD,
) -> list[str]:
    """Build the ranked recommendation list for a breakdown.

    Args:
        breakdown:           Score per dimension.
        attention_threshold: Scores strictly below this get a recommendation.

    Returns:
        Recommendation strings, most urgent first; empty when no dimension
        is below the threshold.
    """
    return [
        RECOMMENDATION_TEXT[dim]
        for dim in dimensions_needing_attention(breakdown, attention_threshold)
    ]
