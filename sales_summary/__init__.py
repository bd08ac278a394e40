"""
sales_summary — roll per-store sales JSON files up into one text report.

Pipeline: ingestion (discover + extract) -> aggregation -> reporting,
driven by ``pipeline.summary.run_sales_summary`` and the ``sales-summary`` CLI.
"""

__version__ = "0.1.0"
