"""
Recommendation engine: turns a raw metric snapshot into advisory entries.

Rules read the *raw* input, not the sub-scores.  Each metric group is
evaluated independently and emits at most one entry (first match wins
within a group):

    giving trend
        down AND |change| > 10   → warning "Declining Giving Trend"       high
        up   AND change > 15     → success "Strong Giving Momentum"       low
    donor retention
        rate < 50                → warning "Low Donor Retention"          high
        rate >= 70               → success "Excellent Donor Retention"    low
    recurring giving
        percentage < 30          → tip     "Grow Recurring Giving"        medium
        percentage >= 50         → success "Strong Recurring Base"        low
    new donor growth
        rate < 0                 → warning "Donor Acquisition Declining"  high
        rate > 20                → success "Growing Donor Base"           low

The result is stable-sorted by priority (high, medium, low); ties keep the
group order above.  An empty list is a normal outcome ("all healthy").
"""

from __future__ import annotations

from typing import Callable, Optional

from giving_health.models.health import FinancialHealthInput, Recommendation
from giving_health.taxonomy.health_taxonomy import (
    MetricGroup,
    RecommendationPriority,
    RecommendationType,
    TrendDirection,
)

# ── Thresholds ────────────────────────────────────────────────────────────────

TREND_DECLINE_THRESHOLD = 10.0
TREND_MOMENTUM_THRESHOLD = 15.0
RETENTION_LOW_THRESHOLD = 50.0
RETENTION_EXCELLENT_THRESHOLD = 70.0
RECURRING_LOW_THRESHOLD = 30.0
RECURRING_STRONG_THRESHOLD = 50.0
GROWTH_STRONG_THRESHOLD = 20.0


# ── Per-group rules ───────────────────────────────────────────────────────────

def _giving_trend_rule(data: FinancialHealthInput) -> Optional[Recommendation]:
    trend = data.giving_trend
    if (
        trend.direction == TrendDirection.DOWN
        and abs(trend.percentage_change) > TREND_DECLINE_THRESHOLD
    ):
        return Recommendation(
            type=RecommendationType.WARNING,
            title="Declining Giving Trend",
            description=(
                "Consider launching a giving campaign or communicating impact "
                "stories to re-engage donors."
            ),
            priority=RecommendationPriority.HIGH,
            metric=MetricGroup.GIVING_TREND,
        )
    if (
        trend.direction == TrendDirection.UP
        and trend.percentage_change > TREND_MOMENTUM_THRESHOLD
    ):
        return Recommendation(
            type=RecommendationType.SUCCESS,
            title="Strong Giving Momentum",
            description=(
                "Capitalize on this momentum by thanking donors and sharing "
                "recent achievements."
            ),
            priority=RecommendationPriority.LOW,
            metric=MetricGroup.GIVING_TREND,
        )
    return None


def _donor_retention_rule(data: FinancialHealthInput) -> Optional[Recommendation]:
    rate = data.donor_retention.rate
    if rate < RETENTION_LOW_THRESHOLD:
        return Recommendation(
            type=RecommendationType.WARNING,
            title="Low Donor Retention",
            description=(
                "Implement a donor appreciation program and regular impact "
                "updates to improve retention."
            ),
            priority=RecommendationPriority.HIGH,
            metric=MetricGroup.DONOR_RETENTION,
        )
    if rate >= RETENTION_EXCELLENT_THRESHOLD:
        return Recommendation(
            type=RecommendationType.SUCCESS,
            title="Excellent Donor Retention",
            description=(
                "Your donors are loyal! Consider a referral program to leverage "
                "their engagement."
            ),
            priority=RecommendationPriority.LOW,
            metric=MetricGroup.DONOR_RETENTION,
        )
    return None


def _recurring_giving_rule(data: FinancialHealthInput) -> Optional[Recommendation]:
    percentage = data.recurring_giving.percentage
    if percentage < RECURRING_LOW_THRESHOLD:
        return Recommendation(
            type=RecommendationType.TIP,
            title="Grow Recurring Giving",
            description=(
                "Launch a recurring giving initiative with matching donations "
                "or exclusive benefits for monthly givers."
            ),
            priority=RecommendationPriority.MEDIUM,
            metric=MetricGroup.RECURRING_GIVING,
        )
    if percentage >= RECURRING_STRONG_THRESHOLD:
        return Recommendation(
            type=RecommendationType.SUCCESS,
            title="Strong Recurring Base",
            description=(
                "Your recurring giving provides financial stability. Focus on "
                "increasing average gift amounts."
            ),
            priority=RecommendationPriority.LOW,
            metric=MetricGroup.RECURRING_GIVING,
        )
    return None


def _new_donor_growth_rule(data: FinancialHealthInput) -> Optional[Recommendation]:
    rate = data.new_donor_growth.rate
    if rate < 0:
        return Recommendation(
            type=RecommendationType.WARNING,
            title="Donor Acquisition Declining",
            description=(
                "Expand outreach through social media campaigns and community "
                "events to attract new supporters."
            ),
            priority=RecommendationPriority.HIGH,
            metric=MetricGroup.NEW_DONOR_GROWTH,
        )
    if rate > GROWTH_STRONG_THRESHOLD:
        return Recommendation(
            type=RecommendationType.SUCCESS,
            title="Growing Donor Base",
            description=(
                "Great acquisition! Ensure new donors receive a warm welcome "
                "and clear next steps."
            ),
            priority=RecommendationPriority.LOW,
            metric=MetricGroup.NEW_DONOR_GROWTH,
        )
    return None


# Evaluation order doubles as the tie-break order after sorting.
_RULES: tuple[Callable[[FinancialHealthInput], Optional[Recommendation]], ...] = (
    _giving_trend_rule,
    _donor_retention_rule,
    _recurring_giving_rule,
    _new_donor_growth_rule,
)


# ── Public API ────────────────────────────────────────────────────────────────

def sort_by_priority(recommendations: list[Recommendation]) -> list[Recommendation]:
    """Stable sort: high before medium before low; ties keep input order."""
    return sorted(recommendations, key=lambda rec: rec.priority.rank)


def generate_recommendations(
    data: FinancialHealthInput,
    limit: Optional[int] = None,
) -> list[Recommendation]:
    """Evaluate every rule group against ``data`` and return sorted entries.

    Args:
        data:  Raw metric snapshot.  Never mutated.
        limit: Keep only the first ``limit`` entries after sorting.
            ``None`` keeps all of them (at most one per metric group).

    Returns:
        Between 0 and 4 recommendations, highest priority first.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}.")

    fired = [rec for rule in _RULES if (rec := rule(data)) is not None]
    ranked = sort_by_priority(fired)
    return ranked if limit is None else ranked[:limit]
