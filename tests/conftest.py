"""
Shared pytest fixtures for the giving-health test suite.

Provides:
  - ``make_snapshot``: factory building a ``FinancialHealthInput`` from the
    four headline numbers, with sensible counts filled in.
  - ``scenario_a`` / ``scenario_b`` / ``scenario_c``: strong, worst-case and
    neutral reference snapshots.
  - ``camel_payload``: a raw dashboard-style dict with camelCase keys.
  - ``restore_root_logger``: undoes configure_logging() after a test.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import pytest

from giving_health.models.health import (
    DonorRetention,
    FinancialHealthInput,
    GivingTrend,
    NewDonorGrowth,
    RecurringGiving,
)
from giving_health.taxonomy.health_taxonomy import TrendDirection

SnapshotFactory = Callable[..., FinancialHealthInput]


def build_snapshot(
    direction: str = "stable",
    percentage_change: float = 0.0,
    retention_rate: float = 60.0,
    recurring_pct: float = 40.0,
    growth_rate: float = 0.0,
    historical_scores: tuple[float, ...] = (),
) -> FinancialHealthInput:
    return FinancialHealthInput(
        giving_trend=GivingTrend(
            direction=TrendDirection(direction),
            percentage_change=percentage_change,
            comparison_period_label="vs last month",
        ),
        donor_retention=DonorRetention(
            rate=retention_rate,
            total_donors=200,
            retained_donors=int(200 * max(0.0, min(retention_rate, 100.0)) / 100),
            lost_donors=200 - int(200 * max(0.0, min(retention_rate, 100.0)) / 100),
        ),
        recurring_giving=RecurringGiving(
            percentage=recurring_pct,
            recurring_donors=int(200 * max(0.0, min(recurring_pct, 100.0)) / 100),
            total_donors=200,
            monthly_recurring_revenue=12_500.0,
        ),
        new_donor_growth=NewDonorGrowth(
            rate=growth_rate,
            new_donors_this_period=24,
            new_donors_last_period=20,
        ),
        historical_scores=historical_scores,
    )


@pytest.fixture
def make_snapshot() -> SnapshotFactory:
    """Return the ``build_snapshot`` factory (all arguments optional)."""
    return build_snapshot


@pytest.fixture
def scenario_a() -> FinancialHealthInput:
    """Strong snapshot: every group fires its success rule."""
    return build_snapshot("up", 20.0, 80.0, 60.0, 25.0)


@pytest.fixture
def scenario_b() -> FinancialHealthInput:
    """Worst-case snapshot: every group fires its warning/tip rule."""
    return build_snapshot("down", -50.0, 10.0, 5.0, -30.0)


@pytest.fixture
def scenario_c() -> FinancialHealthInput:
    """Neutral snapshot: trend and growth at baseline, no rule fires."""
    return build_snapshot("stable", 0.0, 60.0, 40.0, 0.0)


@pytest.fixture
def camel_payload() -> dict[str, Any]:
    """Dashboard API-shaped snapshot with camelCase keys."""
    return {
        "givingTrend": {
            "direction": "up",
            "percentageChange": 20,
            "comparisonPeriod": "vs last month",
        },
        "donorRetention": {
            "rate": 80,
            "totalDonors": 250,
            "retainedDonors": 200,
            "lostDonors": 50,
        },
        "recurringGiving": {
            "percentage": 60,
            "recurringDonors": 150,
            "totalDonors": 250,
            "monthlyRecurringRevenue": 18500,
        },
        "newDonorGrowth": {
            "rate": 25,
            "newDonorsThisPeriod": 30,
            "newDonorsLastPeriod": 24,
        },
        "historicalScores": [68, 71, 74],
    }


@pytest.fixture
def restore_root_logger():
    """Undo ``configure_logging()`` side effects on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
