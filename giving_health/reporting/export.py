"""
JSON export of a financial health report.

``report_to_dict()`` builds the JSON-safe structure; ``export_report_json()``
writes it to disk and returns the written ``Path``.

Output shape::

    {
      "score": 77, "label": "Good", "tone": "yellow",
      "sub_scores": {"giving_trend": 70.0, ...},
      "recommendations": [{"type": "success", "title": ..., ...}, ...],
      "all_healthy": false,
      "input": {...snake_case snapshot...}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from giving_health.models.health import FinancialHealthInput, HealthReport


def report_to_dict(data: FinancialHealthInput, report: HealthReport) -> dict[str, Any]:
    """Flatten ``report`` (plus the evaluated snapshot) into plain JSON types."""
    result = report.result
    return {
        "score":           result.score,
        "label":           result.label.value,
        "tone":            result.tone.value,
        "sub_scores":      result.sub_scores.model_dump(mode="json"),
        "recommendations": [rec.model_dump(mode="json") for rec in report.recommendations],
        "all_healthy":     report.is_all_healthy,
        "input":           data.model_dump(mode="json"),
    }


def export_report_json(
    data: FinancialHealthInput,
    report: HealthReport,
    path: Path,
) -> Path:
    """Write the report as pretty-printed JSON.

    Args:
        data:   The evaluated snapshot.
        report: Output of ``evaluate_health()``.
        path:   Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(report_to_dict(data, report), indent=2, default=str),
        encoding="utf-8",
    )
    return path
