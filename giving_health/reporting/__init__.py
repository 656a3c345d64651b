"""
giving_health.reporting — Terminal formatting and file export of reports.

It does NOT compute anything; all inputs come from giving_health.health.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — JSON export helpers.
"""
