"""
Sales summary orchestration.

One linear pass, no retries:

  Step 1 — Resolve paths:  stores root, output dir, summary file (all
                           relative to the working directory).
  Step 2 — Prepare output: create the output directory if missing.
  Step 3 — Discover:       every ``*.json`` under the stores root.
  Step 4 — Extract:        each file's ``Total`` (0.0 when unreadable).
  Step 5 — Aggregate:      per-store totals keyed by parent directory name,
                           plus the grand total.
  Step 6 — Write:          render the report and overwrite the summary file.

Only step 4 absorbs errors.  A failure to create the output directory or to
write the report propagates to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sales_summary.aggregation.store_totals import SalesAggregate, aggregate, store_id_for
from sales_summary.config import AppConfig
from sales_summary.ingestion.discovery import find_files
from sales_summary.ingestion.sales_json import read_sales_total
from sales_summary.models.meta import RunMetadata
from sales_summary.pipeline.base import PipelineStage
from sales_summary.reporting.export import write_report
from sales_summary.reporting.formatters import format_sales_summary

logger = logging.getLogger(__name__)

COMPLETION_MESSAGE = "Sales summary created at: {path}"


@dataclass
class SummaryResult:
    """Outcome of one sales summary run.

    Attributes:
        summary_path: Absolute path of the written report.
        aggregate:    Per-store and grand totals the report was built from.
        run:          Finalized run record.
    """

    summary_path: Path
    aggregate:    SalesAggregate
    run:          Optional[RunMetadata] = None

    @property
    def message(self) -> str:
        """The one-line completion message for stdout."""
        return COMPLETION_MESSAGE.format(path=self.summary_path)


class SalesSummaryStage(PipelineStage):
    """Discover, extract, aggregate and write the sales summary."""

    stage_name = "sales_summary"

    def __init__(self, config: AppConfig, base_dir: Optional[Path] = None) -> None:
        super().__init__(config)
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.summary_path: Optional[Path] = None
        self.aggregate: Optional[SalesAggregate] = None

    @property
    def stores_dir(self) -> Path:
        return (self.base_dir / self.config.paths.stores_dir).absolute()

    @property
    def output_dir(self) -> Path:
        return (self.base_dir / self.config.paths.output_dir).absolute()

    def _execute(self, run: RunMetadata, **kwargs) -> int:
        paths = self.config.paths
        self.output_dir.mkdir(parents=True, exist_ok=True)
        summary_path = self.output_dir / paths.summary_file

        logger.info("Scanning %s for %s", self.stores_dir, paths.file_pattern)
        result = aggregate(self._store_totals(find_files(self.stores_dir, paths.file_pattern)))
        logger.info(
            "Aggregated %d file(s) across %d store(s) | grand_total=%.2f",
            result.files_processed, len(result.store_totals), result.grand_total,
        )

        text = format_sales_summary(result, self.config.report.currency_symbol)
        write_report(text, summary_path)

        self.summary_path = summary_path
        self.aggregate = result
        return result.files_processed

    @staticmethod
    def _store_totals(files: Iterator[Path]) -> Iterator[tuple[str, float]]:
        for path in files:
            yield store_id_for(path), read_sales_total(path)


def run_sales_summary(
    config: Optional[AppConfig] = None,
    base_dir: Optional[Path] = None,
) -> SummaryResult:
    """Run the sales summary end to end.

    Args:
        config:   Defaults to ``AppConfig()`` (the standard layout).
        base_dir: Directory the configured relative paths resolve against.
                  Defaults to the current working directory.

    Returns:
        :class:`SummaryResult` for the written report.

    Raises:
        OSError: The output directory or summary file could not be written.
    """
    stage = SalesSummaryStage(config or AppConfig(), base_dir=base_dir)
    run = stage.run()
    return SummaryResult(summary_path=stage.summary_path, aggregate=stage.aggregate, run=run)
