"""Tests for giving_health.reporting.formatters."""

from __future__ import annotations

from giving_health.health import evaluate_health
from giving_health.health.aggregator import compute_health_score
from giving_health.reporting.formatters import (
    format_component_scores,
    format_health_report,
    format_recommendations,
    format_score_bar,
    format_score_gauge,
    format_trend_indicator,
)
from giving_health.taxonomy.health_taxonomy import TrendDirection


# ── format_trend_indicator ────────────────────────────────────────────────────


def test_trend_indicator_up_has_plus() -> None:
    assert format_trend_indicator(TrendDirection.UP, 20.0, "vs last month") == "+20.0% vs last month"


def test_trend_indicator_down_keeps_sign() -> None:
    assert format_trend_indicator(TrendDirection.DOWN, -12.0, "vs last month") == "-12.0% vs last month"


def test_trend_indicator_without_period() -> None:
    assert format_trend_indicator(TrendDirection.STABLE, 0.0) == "0.0%"


# ── format_score_bar / gauge ──────────────────────────────────────────────────


def test_score_bar_width_constant() -> None:
    for value in (0.0, 37.0, 50.0, 100.0, 140.0):
        assert len(format_score_bar(value)) == 22


def test_score_bar_fill() -> None:
    assert format_score_bar(50.0) == "[" + "#" * 10 + "-" * 10 + "]"
    assert format_score_bar(0.0) == "[" + "-" * 20 + "]"


def test_gauge_shows_tone_score_label(scenario_b) -> None:
    line = format_score_gauge(compute_health_score(scenario_b))
    assert "[RED]" in line
    assert "8 / 100" in line
    assert "Needs Attention" in line


# ── Sections ──────────────────────────────────────────────────────────────────


def test_component_scores_one_row_per_metric(scenario_a) -> None:
    text = format_component_scores(compute_health_score(scenario_a).sub_scores)
    for name in ("Giving Trend", "Donor Retention", "Recurring Giving", "New Donor Growth"):
        assert name in text
    assert "(30%)" in text
    assert len(text.splitlines()) == 5


def test_recommendations_empty_shows_all_healthy() -> None:
    text = format_recommendations([])
    assert "looks great" in text


def test_recommendations_in_given_order(scenario_b) -> None:
    report = evaluate_health(scenario_b)
    text = format_recommendations(report.recommendations)
    assert text.index("Declining Giving Trend") < text.index("Grow Recurring Giving")
    assert "[WARNING]" in text
    assert "(medium)" in text


# ── Full report ───────────────────────────────────────────────────────────────


def test_full_report_sections(camel_payload) -> None:
    from giving_health.ingestion.snapshot import parse_snapshot

    snapshot = parse_snapshot(camel_payload)
    text = format_health_report(snapshot, evaluate_health(snapshot))
    assert "=== Financial Health Score ===" in text
    assert "+20.0% vs last month" in text
    assert "200 loyal donors of 250" in text
    assert "150 monthly givers" in text
    assert "30 new this period" in text
    assert "Score history: 68, 71, 74" in text
    assert "Component Scores" in text
    assert "Strong Giving Momentum" in text


def test_full_report_without_history(scenario_c) -> None:
    text = format_health_report(scenario_c, evaluate_health(scenario_c))
    assert "Score history" not in text
    assert "looks great" in text
