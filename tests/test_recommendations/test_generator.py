"""
Tests for society_health/recommendations/generator.py.

What we test
------------
generate_recommendations():
  - Empty when every dimension is at or above 70 (70.0 itself included).
  - One entry per sub-threshold dimension, weakest first.
  - Equal scores fall back to the fixed dimension priority.
  - Custom attention threshold.

RECOMMENDATION_TEXT:
  - One distinct, non-empty text per dimension.
"""

from __future__ import annotations

import pytest

from society_health.recommendations.generator import (
    RECOMMENDATION_TEXT,
    dimensions_needing_attention,
    generate_recommendations,
)
from society_health.taxonomy.dimension_taxonomy import RECOMMENDATION_PRIORITY, Dimension


class TestGenerateRecommendations:
    def test_all_clear_gives_empty_list(self, all_clear_breakdown):
        assert generate_recommendations(all_clear_breakdown) == []

    def test_exactly_70_is_not_flagged(self, all_clear_breakdown):
        assert all_clear_breakdown[Dimension.ENGAGEMENT] == 70.0
        assert Dimension.ENGAGEMENT not in dimensions_needing_attention(all_clear_breakdown)

    def test_weakest_first(self, mixed_breakdown):
        assert generate_recommendations(mixed_breakdown) == [
            RECOMMENDATION_TEXT[Dimension.MAINTENANCE],  # 30
            RECOMMENDATION_TEXT[Dimension.FINANCIAL],    # 55
            RECOMMENDATION_TEXT[Dimension.ENGAGEMENT],   # 69.9
        ]

    def test_ties_follow_priority_order(self):
        breakdown = {dim: 40.0 for dim in Dimension}
        assert dimensions_needing_attention(breakdown) == list(RECOMMENDATION_PRIORITY)

    def test_partial_tie(self):
        breakdown = {dim: 90.0 for dim in Dimension}
        breakdown[Dimension.COMMUNICATION] = 50.0
        breakdown[Dimension.FINANCIAL] = 50.0
        breakdown[Dimension.SATISFACTION] = 20.0
        assert dimensions_needing_attention(breakdown) == [
            Dimension.SATISFACTION,
            Dimension.FINANCIAL,
            Dimension.COMMUNICATION,
        ]

    def test_custom_threshold(self, all_clear_breakdown):
        recs = generate_recommendations(all_clear_breakdown, attention_threshold=85.0)
        assert recs == [
            RECOMMENDATION_TEXT[Dimension.ENGAGEMENT],     # 70
            RECOMMENDATION_TEXT[Dimension.COMMUNICATION],  # 71.5
            RECOMMENDATION_TEXT[Dimension.SATISFACTION],   # 84
        ]

    def test_deterministic(self, mixed_breakdown):
        assert generate_recommendations(mixed_breakdown) == generate_recommendations(
            dict(reversed(list(mixed_breakdown.items())))
        )

    @pytest.mark.parametrize("dim", list(Dimension))
    def test_single_weak_dimension(self, all_clear_breakdown, dim):
        breakdown = dict(all_clear_breakdown)
        breakdown[dim] = 10.0
        assert generate_recommendations(breakdown) == [RECOMMENDATION_TEXT[dim]]


class TestRecommendationText:
    def test_covers_every_dimension(self):
        assert set(RECOMMENDATION_TEXT) == set(Dimension)

    def test_texts_are_distinct_and_non_empty(self):
        texts = list(RECOMMENDATION_TEXT.values())
        assert all(t.strip() for t in texts)
        assert len(set(texts)) == len(texts)
