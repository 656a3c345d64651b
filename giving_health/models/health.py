"""
Financial health input and output models.

``FinancialHealthInput`` is a point-in-time snapshot of the four raw metric
groups the dashboard computes from donation and member records. It is the
only input the scoring engine reads.

``FinancialHealthResult``, ``Recommendation`` and ``HealthReport`` are the
engine's outputs. They are created fresh on every evaluation.

All models are frozen (and therefore hashable), so a snapshot can be used
directly as a cache key. Field names are snake_case; camelCase keys from the
dashboard API (``givingTrend``, ``percentageChange``, ...) are accepted on
input as aliases.

Validation is about *shape*, not *range*: a missing field, a non-numeric rate
or an unknown trend direction raises ``pydantic.ValidationError``, but a
retention rate of 140 or a growth rate of -500 is accepted and clamped later
by the normalizer.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from giving_health.taxonomy.health_taxonomy import (
    METRIC_WEIGHTS,
    HealthLabel,
    MetricGroup,
    RecommendationPriority,
    RecommendationType,
    ScoreTone,
    TrendDirection,
)

_SNAPSHOT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    allow_inf_nan=False,
)


# ── Input ─────────────────────────────────────────────────────────────────────


class GivingTrend(BaseModel):
    """Change in total giving versus the comparison period.

    Attributes:
        direction: ``up``, ``down`` or ``stable``.
        percentage_change: Signed percent change, e.g. ``-12.5``.
        comparison_period_label: Display text such as ``"vs last month"``.
    """

    model_config = _SNAPSHOT_CONFIG

    direction: TrendDirection
    percentage_change: float
    comparison_period_label: str = Field(
        default="",
        validation_alias=AliasChoices(
            "comparison_period_label", "comparisonPeriodLabel", "comparisonPeriod"
        ),
    )


class DonorRetention(BaseModel):
    """Share of last period's donors who gave again this period.

    Attributes:
        rate: Retention percentage, nominally 0–100.
        total_donors: Donors in the base period.
        retained_donors: Donors who gave again.
        lost_donors: Donors who did not give again.
    """

    model_config = _SNAPSHOT_CONFIG

    rate: float
    total_donors: int = 0
    retained_donors: int = 0
    lost_donors: int = 0


class RecurringGiving(BaseModel):
    """Share of donors with an active recurring gift.

    Attributes:
        percentage: Recurring donor percentage, nominally 0–100.
        recurring_donors: Donors with an active recurring schedule.
        total_donors: All active donors.
        monthly_recurring_revenue: Expected recurring revenue per month.
    """

    model_config = _SNAPSHOT_CONFIG

    percentage: float
    recurring_donors: int = 0
    total_donors: int = 0
    monthly_recurring_revenue: float = 0.0


class NewDonorGrowth(BaseModel):
    """Change in first-time donors versus the previous period.

    Attributes:
        rate: Signed percent growth in new donors.
        new_donors_this_period: First-time donors this period.
        new_donors_last_period: First-time donors in the previous period.
    """

    model_config = _SNAPSHOT_CONFIG

    rate: float
    new_donors_this_period: int = 0
    new_donors_last_period: int = 0

    @property
    def direction(self) -> TrendDirection:
        """Trend direction implied by the sign of ``rate``."""
        if self.rate > 0:
            return TrendDirection.UP
        if self.rate < 0:
            return TrendDirection.DOWN
        return TrendDirection.STABLE


class FinancialHealthInput(BaseModel):
    """Snapshot of the four raw metric groups for one evaluation.

    ``historical_scores`` carries previously computed overall scores for trend
    display only; the engine never reads it.
    """

    model_config = _SNAPSHOT_CONFIG

    giving_trend: GivingTrend
    donor_retention: DonorRetention
    recurring_giving: RecurringGiving
    new_donor_growth: NewDonorGrowth
    historical_scores: tuple[float, ...] = ()


# ── Output ────────────────────────────────────────────────────────────────────


class SubScores(BaseModel):
    """Per-metric health ratings, each in [0, 100], before weighting."""

    model_config = ConfigDict(frozen=True)

    giving_trend: float = Field(ge=0.0, le=100.0)
    donor_retention: float = Field(ge=0.0, le=100.0)
    recurring_giving: float = Field(ge=0.0, le=100.0)
    new_donor_growth: float = Field(ge=0.0, le=100.0)

    def as_dict(self) -> dict[MetricGroup, float]:
        """Sub-scores keyed by ``MetricGroup`` in rule-evaluation order."""
        return {group: getattr(self, group.value) for group in MetricGroup}

    def weighted_total(self) -> float:
        """Unrounded, unclamped weighted sum of the sub-scores."""
        return sum(
            value * METRIC_WEIGHTS[group] for group, value in self.as_dict().items()
        )


class FinancialHealthResult(BaseModel):
    """Overall score, its label and tone, and the sub-scores behind it."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    label: HealthLabel
    tone: ScoreTone
    sub_scores: SubScores


class Recommendation(BaseModel):
    """One rule-triggered advisory entry.

    Attributes:
        type: ``success``, ``warning`` or ``tip``.
        title: Short headline, e.g. ``"Low Donor Retention"``.
        description: One-sentence suggested action.
        priority: ``high``, ``medium`` or ``low``.
        metric: The metric group whose rule produced this entry.
    """

    model_config = ConfigDict(frozen=True)

    type: RecommendationType
    title: str
    description: str
    priority: RecommendationPriority
    metric: MetricGroup


class HealthReport(BaseModel):
    """Score and recommendations from a single evaluation."""

    model_config = ConfigDict(frozen=True)

    result: FinancialHealthResult
    recommendations: tuple[Recommendation, ...] = ()

    @property
    def is_all_healthy(self) -> bool:
        """True when no rule fired for any metric group."""
        return not self.recommendations
