"""
giving-health — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (score a snapshot, show config).
  5. Report result to stdout.

Install and run::

    pip install -e .
    giving-health --help
    giving-health score snapshot.json
    giving-health score snapshot.json --format json --output out/health.json
    giving-health validate-config
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="giving-health",
    help="Financial health scoring for church giving and donor metrics.",
    add_completion=False,
)


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from giving_health.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from giving_health.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("score")
def score(
    snapshot_file: Path = typer.Argument(
        ...,
        help="Path to a financial health snapshot (.json).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="Output format: 'text' (terminal report) or 'json'.",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=0,
        help="Max recommendations to show. Defaults to recommendations.display_limit.",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON report to this file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score a snapshot and print its health score and recommendations.

    Exits with code 1 if the snapshot is missing or unreadable, is not valid
    JSON, or fails validation, or if the report cannot be written.
    Out-of-range metric values are clamped, not rejected.
    """
    from giving_health.health.engine import evaluate_health
    from giving_health.ingestion.snapshot import load_snapshot
    from giving_health.reporting.export import export_report_json, report_to_dict
    from giving_health.reporting.formatters import format_health_report

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        snapshot = load_snapshot(snapshot_file)
    except (OSError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    display_limit = limit if limit is not None else config.recommendations.display_limit
    report = evaluate_health(snapshot, limit=display_limit)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(report_to_dict(snapshot, report), indent=2, default=str))
    else:
        typer.echo(format_health_report(snapshot, report))

    if output_path is not None:
        try:
            written = export_report_json(snapshot, report, output_path)
        except OSError as exc:
            typer.echo(f"[ERROR] Could not write report: {exc}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"[OK] Report written to {written}", err=True)


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Log file:         {config.logging.log_file or '(none)'}")
    typer.echo(f"  JSON logs:        {config.logging.json_format}")
    typer.echo(f"  Display limit:    {config.recommendations.display_limit}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
