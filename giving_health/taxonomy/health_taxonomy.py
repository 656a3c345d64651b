"""
Financial health taxonomy.

Closed vocabularies used by the scoring engine and its consumers:
  - ``TrendDirection``         — direction of the giving trend.
  - ``RecommendationType``     — visual class of an advisory entry.
  - ``RecommendationPriority`` — urgency, with a total order (high < medium < low).
  - ``HealthLabel``            — qualitative band for the overall score.
  - ``ScoreTone``              — gauge colour band for the overall score.
  - ``MetricGroup``            — the four scored metric groups and their weights.

Usage example::

    from giving_health.taxonomy.health_taxonomy import MetricGroup, TrendDirection

    direction = TrendDirection.UP
    weight    = MetricGroup.DONOR_RETENTION.weight   # 0.30

This module has NO imports from any other ``giving_health`` package.
"""

from enum import StrEnum


class TrendDirection(StrEnum):
    """Direction of total giving compared to the previous period."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class RecommendationType(StrEnum):
    """Class of advisory entry; drives card styling in the dashboard."""

    SUCCESS = "success"
    """A dimension is doing well; reinforce it."""

    WARNING = "warning"
    """A dimension is deteriorating; act on it."""

    TIP = "tip"
    """A dimension has headroom; suggested improvement."""


class RecommendationPriority(StrEnum):
    """Urgency of a recommendation. ``rank`` gives the sort key (0 = first)."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}


class HealthLabel(StrEnum):
    """Qualitative band for an overall score (lower bounds inclusive)."""

    EXCELLENT = "Excellent"
    """80–100."""

    GOOD = "Good"
    """60–79."""

    FAIR = "Fair"
    """40–59."""

    NEEDS_ATTENTION = "Needs Attention"
    """0–39."""


class ScoreTone(StrEnum):
    """Gauge colour band for an overall score."""

    GREEN = "green"
    """80 and above."""

    YELLOW = "yellow"
    """60–79."""

    RED = "red"
    """Below 60."""


class MetricGroup(StrEnum):
    """The four raw metric groups, in rule-evaluation order."""

    GIVING_TREND = "giving_trend"
    DONOR_RETENTION = "donor_retention"
    RECURRING_GIVING = "recurring_giving"
    NEW_DONOR_GROWTH = "new_donor_growth"

    @property
    def display_name(self) -> str:
        return _METRIC_DISPLAY_NAMES[self]

    @property
    def weight(self) -> float:
        return METRIC_WEIGHTS[self]


_METRIC_DISPLAY_NAMES: dict[str, str] = {
    "giving_trend":     "Giving Trend",
    "donor_retention":  "Donor Retention",
    "recurring_giving": "Recurring Giving",
    "new_donor_growth": "New Donor Growth",
}

# Fixed aggregation weights; must sum to 1.0.
METRIC_WEIGHTS: dict[str, float] = {
    "giving_trend":     0.25,
    "donor_retention":  0.30,
    "recurring_giving": 0.25,
    "new_donor_growth": 0.20,
}
