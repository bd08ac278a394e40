"""
Best-effort reader for per-store sales JSON files.

A file contributes its ``Total`` to the summary, or ``0.0`` if anything at all
goes wrong: unreadable file, bad encoding, invalid JSON, a document that is
not an object, a missing or non-numeric ``Total``.  One corrupt file must
never abort the run, so :func:`read_sales_total` never raises for input
problems; the cause is logged at DEBUG and otherwise discarded.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sales_summary.models.sales import SalesRecord

logger = logging.getLogger(__name__)


def parse_sales_record(text: str) -> SalesRecord:
    """Parse one JSON document into a :class:`SalesRecord`.

    Raises:
        ValueError: Invalid JSON, or ``pydantic.ValidationError`` (a
            ``ValueError`` subclass) when ``Total`` is missing or not numeric.
    """
    return SalesRecord.model_validate(json.loads(text))


def read_sales_total(path: Path) -> float:
    """Return the ``Total`` recorded in ``path``, or ``0.0`` on any failure.

    Text is decoded as UTF-8; a leading byte-order mark is tolerated.
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
        return parse_sales_record(text).total
    except (OSError, ValueError, RecursionError) as exc:
        logger.debug("Treating %s as 0: %s", path, exc)
        return 0.0
