"""
Metric normalizer: maps each raw metric group to a 0–100 sub-score.

Rules
-----
giving trend (baseline 50):
    up     → min(100, 50 + percentage_change)
    down   → max(0, 50 - |percentage_change|)
    stable → 50

donor retention:
    rate, used as-is (already a percentage).

recurring giving:
    percentage, used as-is.

new donor growth (baseline 50):
    rate > 0  → min(100, 50 + rate)
    rate <= 0 → max(0, 50 + rate)     (rate 0 → 50: no growth, no decline)

Every sub-score is finally clamped to [0, 100].  Out-of-domain inputs (a
retention rate of 140, a growth rate of -500) are clamped, never rejected,
so the engine always yields a display-ready value from malformed upstream
data.

Pure functions, no I/O.
"""

from __future__ import annotations

from giving_health.models.health import (
    DonorRetention,
    FinancialHealthInput,
    GivingTrend,
    NewDonorGrowth,
    RecurringGiving,
    SubScores,
)
from giving_health.taxonomy.health_taxonomy import TrendDirection

BASELINE = 50.0
SCORE_MIN = 0.0
SCORE_MAX = 100.0


def normalize_giving_trend(trend: GivingTrend) -> float:
    if trend.direction == TrendDirection.UP:
        score = min(SCORE_MAX, BASELINE + trend.percentage_change)
    elif trend.direction == TrendDirection.DOWN:
        score = max(SCORE_MIN, BASELINE - abs(trend.percentage_change))
    else:
        score = BASELINE
    return clamp(score)


def normalize_donor_retention(retention: DonorRetention) -> float:
    return clamp(retention.rate)


def normalize_recurring_giving(recurring: RecurringGiving) -> float:
    return clamp(recurring.percentage)


def normalize_new_donor_growth(growth: NewDonorGrowth) -> float:
    if growth.rate > 0:
        score = min(SCORE_MAX, BASELINE + growth.rate)
    else:
        score = max(SCORE_MIN, BASELINE + growth.rate)
    return clamp(score)


def normalize(data: FinancialHealthInput) -> SubScores:
    """Compute all four sub-scores for one snapshot."""
    return SubScores(
        giving_trend=normalize_giving_trend(data.giving_trend),
        donor_retention=normalize_donor_retention(data.donor_retention),
        recurring_giving=normalize_recurring_giving(data.recurring_giving),
        new_donor_growth=normalize_new_donor_growth(data.new_donor_growth),
    )


# ── Helper ────────────────────────────────────────────────────────────────────

def clamp(value: float, lo: float = SCORE_MIN, hi: float = SCORE_MAX) -> float:
    return max(lo, min(hi, value))
