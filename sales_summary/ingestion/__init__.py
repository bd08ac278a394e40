"""
Ingestion layer — locating per-store sales files and reading their totals.

Submodules:
  discovery   — recursive, lazy file search under the stores root
  sales_json  — best-effort ``Total`` extraction from one JSON file
"""
