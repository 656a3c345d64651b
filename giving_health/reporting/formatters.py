"""
ASCII terminal formatters for the financial health report.

All formatters accept engine models and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Tone tags
---------
The headline score carries a tag matching the dashboard gauge colour::

  [GREEN]  77 / 100  Good        <- score >= 80 shows green, 60-79 yellow
  [RED]    32 / 100  Needs Attention

Component bars
--------------
Each sub-score is drawn as a 20-cell bar (one cell per 5 points), followed
by the rounded sub-score and the metric's weight in the overall score::

  Giving Trend       [##############------]   70   (25%)
"""

from __future__ import annotations

from typing import Sequence

from giving_health.health.aggregator import round_half_up
from giving_health.models.health import (
    FinancialHealthInput,
    FinancialHealthResult,
    HealthReport,
    Recommendation,
    SubScores,
)
from giving_health.taxonomy.health_taxonomy import TrendDirection

_BAR_WIDTH = 20
_ALL_HEALTHY_MESSAGE = (
    "Your financial health looks great! Keep up the excellent work."
)


# ── Small pieces ──────────────────────────────────────────────────────────────


def format_trend_indicator(
    direction: TrendDirection,
    change: float,
    period: str = "",
) -> str:
    """Return e.g. ``"+20.0% vs last month"``.

    Only upward trends get an explicit ``+``; the change is printed as given
    otherwise.
    """
    sign = "+" if direction == TrendDirection.UP else ""
    text = f"{sign}{change:.1f}%"
    return f"{text} {period}".rstrip()


def format_score_bar(value: float, width: int = _BAR_WIDTH) -> str:
    filled = round_half_up(max(0.0, min(100.0, value)) / 100.0 * width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_score_gauge(result: FinancialHealthResult) -> str:
    """One-line headline: tone tag, score out of 100, label."""
    tag = f"[{result.tone.value.upper()}]"
    return f"  {tag:<8} {result.score:>3} / 100  {result.label.value}"


# ── Sections ──────────────────────────────────────────────────────────────────


def format_component_scores(sub_scores: SubScores) -> str:
    lines: list[str] = ["  Component Scores"]
    for group, value in sub_scores.as_dict().items():
        lines.append(
            f"    {group.display_name:<18} {format_score_bar(value)}  "
            f"{round_half_up(value):>3}   ({group.weight:.0%})"
        )
    return "\n".join(lines)


def format_recommendations(recommendations: Sequence[Recommendation]) -> str:
    """Format recommendations in the given order, or the all-healthy message."""
    lines: list[str] = ["  Recommendations"]
    if not recommendations:
        lines.append(f"    {_ALL_HEALTHY_MESSAGE}")
        return "\n".join(lines)

    for rec in recommendations:
        lines.append(
            f"    [{rec.type.value.upper()}] {rec.title} ({rec.priority.value})"
        )
        lines.append(f"        {rec.description}")
    return "\n".join(lines)


def format_quick_stats(data: FinancialHealthInput) -> str:
    trend = data.giving_trend
    growth = data.new_donor_growth
    lines = [
        "  Quick Stats",
        "    Giving trend:      "
        + format_trend_indicator(
            trend.direction, trend.percentage_change, trend.comparison_period_label
        ),
        f"    Donor retention:   {data.donor_retention.rate:.1f}%  "
        f"({data.donor_retention.retained_donors} loyal donors of "
        f"{data.donor_retention.total_donors})",
        f"    Recurring giving:  {data.recurring_giving.percentage:.1f}%  "
        f"({data.recurring_giving.recurring_donors} monthly givers)",
        "    New donor growth:  "
        + format_trend_indicator(growth.direction, growth.rate)
        + f"  ({growth.new_donors_this_period} new this period)",
    ]
    return "\n".join(lines)


def format_history(scores: Sequence[float]) -> str:
    values = ", ".join(str(round_half_up(s)) for s in scores)
    return f"  Score history: {values}"


# ── Full report ───────────────────────────────────────────────────────────────


def format_health_report(data: FinancialHealthInput, report: HealthReport) -> str:
    """Format the complete report: headline, stats, components, advice.

    Args:
        data:   The snapshot that was evaluated (for quick stats and history).
        report: Output of ``evaluate_health()``.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Financial Health Score ===")
    lines.append(format_score_gauge(report.result))
    if data.historical_scores:
        lines.append(format_history(data.historical_scores))
    lines.append("")
    lines.append(format_quick_stats(data))
    lines.append("")
    lines.append(format_component_scores(report.result.sub_scores))
    lines.append("")
    lines.append(format_recommendations(report.recommendations))
    return "\n".join(lines)
