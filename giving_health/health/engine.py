"""
Evaluation facade: score + recommendations for one snapshot in one call.

``evaluate_health()`` is what the CLI and report writers use.  It simply
composes ``compute_health_score()`` and ``generate_recommendations()``; the
two halves remain independent and can be called on their own.

``evaluate_health_cached()`` memoizes on structural equality of the input
(snapshots are frozen and hashable).  It always returns the same report as
``evaluate_health()``; use ``evaluate_health_cached.cache_clear()`` to reset.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from giving_health.health.advisor import generate_recommendations
from giving_health.health.aggregator import compute_health_score
from giving_health.models.health import FinancialHealthInput, HealthReport

log = logging.getLogger(__name__)

_CACHE_SIZE = 256


def evaluate_health(
    data: FinancialHealthInput,
    limit: Optional[int] = None,
) -> HealthReport:
    """Score ``data`` and generate its recommendations.

    Args:
        data:  Raw metric snapshot.
        limit: Optional cap on the number of recommendations kept.

    Returns:
        ``HealthReport`` bundling the result and the sorted recommendations.
    """
    result = compute_health_score(data)
    recommendations = generate_recommendations(data, limit=limit)
    log.debug(
        "Financial health evaluated: score=%d label=%s recommendations=%d",
        result.score,
        result.label.value,
        len(recommendations),
    )
    return HealthReport(result=result, recommendations=tuple(recommendations))


@lru_cache(maxsize=_CACHE_SIZE)
def evaluate_health_cached(
    data: FinancialHealthInput,
    limit: Optional[int] = None,
) -> HealthReport:
    """Memoized ``evaluate_health()`` keyed on ``(data, limit)``."""
    return evaluate_health(data, limit=limit)
