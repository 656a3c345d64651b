"""
Ingestion layer — reading metric snapshots produced upstream.

Submodules:
  snapshot — JSON snapshot loader for FinancialHealthInput
"""
