"""
JSON snapshot loader for ``FinancialHealthInput``.

A snapshot is one JSON object with the four metric groups, as produced by
the dashboard API::

    {
      "givingTrend":    {"direction": "up", "percentageChange": 20,
                         "comparisonPeriod": "vs last month"},
      "donorRetention": {"rate": 80, "totalDonors": 250,
                         "retainedDonors": 200, "lostDonors": 50},
      "recurringGiving":{"percentage": 60, "recurringDonors": 150,
                         "totalDonors": 250, "monthlyRecurringRevenue": 18500},
      "newDonorGrowth": {"rate": 25, "newDonorsThisPeriod": 30,
                         "newDonorsLastPeriod": 24},
      "historicalScores": [68, 71, 74]
    }

camelCase and snake_case keys are both accepted.  A response envelope of
the form ``{"data": {...}}`` is unwrapped.

Numeric ranges are not checked here; out-of-range values are clamped by the
scoring engine.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from giving_health.models.health import FinancialHealthInput

logger = logging.getLogger(__name__)

_ENVELOPE_KEY = "data"
_MAX_REPORTED_ERRORS = 10


def parse_snapshot(raw: dict[str, Any]) -> FinancialHealthInput:
    """Validate a decoded snapshot dict.

    Raises:
        pydantic.ValidationError: If a field is missing or has the wrong type.
    """
    if _ENVELOPE_KEY in raw and isinstance(raw[_ENVELOPE_KEY], dict):
        raw = raw[_ENVELOPE_KEY]
    return FinancialHealthInput.model_validate(raw)


def load_snapshot(path: Path) -> FinancialHealthInput:
    """Read and validate a snapshot JSON file.

    Args:
        path: Path to the JSON file (must exist).

    Returns:
        Validated, frozen ``FinancialHealthInput``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        OSError: If ``path`` exists but cannot be read (a directory, no
            permission).
        ValueError: If the file is not valid JSON, is not a JSON object, or
            fails shape validation.  The message lists up to 10 field errors.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Snapshot is not valid JSON: {path} ({exc})") from exc

    if not isinstance(raw, dict):
        raise ValueError(
            f"Snapshot must be a JSON object, got {type(raw).__name__}: {path}"
        )

    try:
        snapshot = parse_snapshot(raw)
    except ValidationError as exc:
        lines = [
            f"  {'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()[:_MAX_REPORTED_ERRORS]
        ]
        raise ValueError(
            f"Snapshot failed validation ({exc.error_count()} error(s)): {path}\n"
            + "\n".join(lines)
        ) from exc

    logger.info("Loaded financial health snapshot from %s", path)
    return snapshot
