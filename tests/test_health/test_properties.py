"""
Cross-cutting properties of the scoring engine.

  - Bounds: score in [0, 100] and a defined label for a grid of inputs,
    including malformed ones far outside the nominal domain.
  - Determinism: equal inputs give equal outputs.
  - Monotonicity: retention rate and upward trend change never lower the score.
  - Ordering: a high-priority entry never follows a low-priority one.
  - Count: 0..4 recommendations.
  - Round-trip: recomputing from sub-scores reproduces the score.
"""

from __future__ import annotations

import itertools

import pytest

from giving_health.health import compute_health_score, generate_recommendations
from giving_health.health.aggregator import aggregate, round_half_up
from giving_health.taxonomy.health_taxonomy import (
    METRIC_WEIGHTS,
    HealthLabel,
    RecommendationPriority,
)

_DIRECTIONS = ("up", "down", "stable")
_CHANGES = (-500.0, -25.0, -10.0, 0.0, 15.0, 40.0, 500.0)
_RATES = (-50.0, 0.0, 49.0, 70.0, 100.0, 180.0)
_GROWTH = (-500.0, -1.0, 0.0, 20.0, 35.0, 500.0)


def _grid(make_snapshot):
    for direction, change, rate, growth in itertools.product(
        _DIRECTIONS, _CHANGES, _RATES, _GROWTH
    ):
        yield make_snapshot(direction, change, rate, rate / 2, growth)


class TestBounds:
    def test_score_and_label_always_defined(self, make_snapshot):
        for snapshot in _grid(make_snapshot):
            result = compute_health_score(snapshot)
            assert 0 <= result.score <= 100
            assert result.label in set(HealthLabel)

    def test_recommendation_count_in_range(self, make_snapshot):
        for snapshot in _grid(make_snapshot):
            assert 0 <= len(generate_recommendations(snapshot)) <= 4


class TestDeterminism:
    def test_repeated_calls_equal(self, make_snapshot):
        for snapshot in _grid(make_snapshot):
            assert compute_health_score(snapshot) == compute_health_score(snapshot)
            assert generate_recommendations(snapshot) == generate_recommendations(snapshot)

    def test_structurally_equal_inputs_equal_outputs(self, make_snapshot):
        a = make_snapshot("down", -12.0, 55.0, 35.0, -3.0)
        b = make_snapshot("down", -12.0, 55.0, 35.0, -3.0)
        assert compute_health_score(a) == compute_health_score(b)
        assert generate_recommendations(a) == generate_recommendations(b)


class TestMonotonicity:
    @pytest.mark.parametrize("direction", _DIRECTIONS)
    def test_retention_rate(self, make_snapshot, direction):
        scores = [
            compute_health_score(make_snapshot(direction, 12.0, rate, 40.0, 5.0)).score
            for rate in range(-20, 121, 5)
        ]
        assert scores == sorted(scores)

    def test_upward_trend_change(self, make_snapshot):
        scores = [
            compute_health_score(make_snapshot("up", change, 60.0, 40.0, 0.0)).score
            for change in range(-60, 121, 3)
        ]
        assert scores == sorted(scores)


class TestOrdering:
    def test_high_never_after_low(self, make_snapshot):
        for snapshot in _grid(make_snapshot):
            ranks = [r.priority.rank for r in generate_recommendations(snapshot)]
            assert ranks == sorted(ranks)

    def test_rank_order(self):
        assert (
            RecommendationPriority.HIGH.rank
            < RecommendationPriority.MEDIUM.rank
            < RecommendationPriority.LOW.rank
        )


class TestRoundTrip:
    def test_independent_recomputation(self, make_snapshot):
        for snapshot in _grid(make_snapshot):
            result = compute_health_score(snapshot)
            subs = result.sub_scores
            manual = (
                subs.giving_trend * METRIC_WEIGHTS["giving_trend"]
                + subs.donor_retention * METRIC_WEIGHTS["donor_retention"]
                + subs.recurring_giving * METRIC_WEIGHTS["recurring_giving"]
                + subs.new_donor_growth * METRIC_WEIGHTS["new_donor_growth"]
            )
            assert round_half_up(min(100.0, max(0.0, manual))) == result.score
            assert aggregate(subs) == result.score
