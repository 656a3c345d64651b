"""
Financial health scoring engine: raw giving/donor metrics → 0–100 score,
qualitative label, and prioritized recommendations.

Modules
-------
normalizer : normalize() + per-metric sub-score rules — pure functions.
aggregator : compute_health_score() + weighted_sum() / aggregate() /
             classify() / score_tone() — pure functions.
advisor    : generate_recommendations() — rule table + priority sort.
engine     : evaluate_health() + evaluate_health_cached() — facade.
"""

from giving_health.health.advisor import generate_recommendations
from giving_health.health.aggregator import compute_health_score
from giving_health.health.engine import evaluate_health, evaluate_health_cached

__all__ = [
    "compute_health_score",
    "generate_recommendations",
    "evaluate_health",
    "evaluate_health_cached",
]
