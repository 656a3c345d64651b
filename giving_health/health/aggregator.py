"""
Weighted aggregator: combines sub-scores into the overall health score.

Score formula
-------------
    score = round_half_up(clamp(
        giving_trend       * 0.25
        + donor_retention  * 0.30
        + recurring_giving * 0.25
        + new_donor_growth * 0.20,
        0, 100))

Weights are fixed (``METRIC_WEIGHTS``) and not configurable at call time.
The clamp is a no-op while the weights sum to 1.0 over clamped sub-scores,
but keeps the [0, 100] output invariant if the weights ever change.

Rounding is half-up (76.5 → 77), not Python's round-half-to-even.

Label bands (lower bound inclusive)
-----------------------------------
    [80, 100] Excellent
    [60, 80)  Good
    [40, 60)  Fair
    [0, 40)   Needs Attention

Tone bands (gauge colour)
-------------------------
    >= 80 green,  >= 60 yellow,  otherwise red
"""

from __future__ import annotations

import math

from giving_health.health.normalizer import SCORE_MAX, SCORE_MIN, clamp, normalize
from giving_health.models.health import (
    FinancialHealthInput,
    FinancialHealthResult,
    SubScores,
)
from giving_health.taxonomy.health_taxonomy import HealthLabel, ScoreTone

# Lower bounds, checked highest first
_LABEL_BANDS: tuple[tuple[int, HealthLabel], ...] = (
    (80, HealthLabel.EXCELLENT),
    (60, HealthLabel.GOOD),
    (40, HealthLabel.FAIR),
)

_TONE_BANDS: tuple[tuple[int, ScoreTone], ...] = (
    (80, ScoreTone.GREEN),
    (60, ScoreTone.YELLOW),
)

# Float noise below this is dropped before rounding (e.g. 76.49999999999999).
_ROUNDING_DIGITS = 9


def weighted_sum(sub_scores: SubScores) -> float:
    """Weighted combination of the four sub-scores, unrounded and unclamped."""
    return sub_scores.weighted_total()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 → 3, -2.5 → -2)."""
    return int(math.floor(round(value, _ROUNDING_DIGITS) + 0.5))


def aggregate(sub_scores: SubScores) -> int:
    """Overall integer score in [0, 100]."""
    return round_half_up(clamp(weighted_sum(sub_scores), SCORE_MIN, SCORE_MAX))


def classify(score: int) -> HealthLabel:
    for lower, label in _LABEL_BANDS:
        if score >= lower:
            return label
    return HealthLabel.NEEDS_ATTENTION


def score_tone(score: int) -> ScoreTone:
    for lower, tone in _TONE_BANDS:
        if score >= lower:
            return tone
    return ScoreTone.RED


def compute_health_score(data: FinancialHealthInput) -> FinancialHealthResult:
    """Normalize ``data`` and aggregate it into a scored, labelled result.

    Args:
        data: Raw metric snapshot.  Never mutated.

    Returns:
        ``FinancialHealthResult`` with integer ``score`` in [0, 100], its
        ``label`` and ``tone``, and the ``sub_scores`` it was computed from.
    """
    sub_scores = normalize(data)
    score = aggregate(sub_scores)
    return FinancialHealthResult(
        score=score,
        label=classify(score),
        tone=score_tone(score),
        sub_scores=sub_scores,
    )
