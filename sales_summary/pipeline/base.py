"""
Abstract base class for pipeline stages.

Every stage follows the same contract:
  1. Receive ``AppConfig`` at construction.
  2. ``run(**kwargs)`` is the sole public API.
  3. ``run()`` creates a ``RunMetadata`` record, calls ``_execute()``,
     and finalizes the record with ``success`` or ``failed``.
  4. ``_execute()`` is the stage-specific implementation.

Error handling is centralized here: the failure is recorded on the run and
logged, then re-raised.  Stages never swallow exceptions.

Usage::

    class MyStage(PipelineStage):
        stage_name = "sales_summary"

        def _execute(self, run: RunMetadata, **kwargs) -> int:
            return 42

    run = MyStage(config=AppConfig()).run()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from uuid import uuid4

from sales_summary.config import AppConfig
from sales_summary.models.meta import RunMetadata
from sales_summary.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


class PipelineStage(ABC):
    """Abstract base for pipeline stages.

    Subclasses must:
      1. Set ``stage_name`` class variable.
      2. Implement ``_execute(run, **kwargs) -> int``.

    Attributes:
        stage_name: String identifier matching a valid ``RunMetadata.pipeline_stage``.
        config: The application configuration for this run.
    """

    stage_name: str  # Override in subclass

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self, **kwargs) -> RunMetadata:
        """Execute this pipeline stage.

        Args:
            **kwargs: Stage-specific keyword arguments passed to ``_execute()``.

        Returns:
            ``RunMetadata`` with ``status='success'``, ``rows_processed``
            and ``finished_at`` set.

        Raises:
            Exception: Re-raises any exception from ``_execute()`` after
                recording ``status='failed'`` in the run record.
        """
        run = RunMetadata(
            run_slug=str(uuid4()),
            pipeline_stage=self.stage_name,
            config_snapshot=self.config.model_dump(),
            started_at=utcnow(),
        )
        logger.info(
            "Stage [%s] starting | run_slug=%s", self.stage_name, run.run_slug
        )

        try:
            rows = self._execute(run=run, **kwargs)
        except Exception as exc:
            run.status = "failed"
            run.error_message = str(exc)
            run.finished_at = utcnow()
            logger.error(
                "Stage [%s] FAILED: %s | run_slug=%s",
                self.stage_name, exc, run.run_slug,
            )
            raise

        run.status = "success"
        run.rows_processed = rows
        run.finished_at = utcnow()
        logger.info(
            "Stage [%s] completed | rows=%d | run_slug=%s",
            self.stage_name, rows, run.run_slug,
        )
        return run

    @abstractmethod
    def _execute(self, run: RunMetadata, **kwargs) -> int:
        """Stage-specific implementation.

        Args:
            run: The in-progress ``RunMetadata`` record (mutable).
            **kwargs: Stage-specific parameters.

        Returns:
            Integer count of records processed.
        """
        ...
