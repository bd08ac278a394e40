"""
Writing the rendered summary to disk.

Failures here are deliberately not caught: a summary that cannot be written
ends the run with the underlying ``OSError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_report(text: str, path: Path) -> Path:
    """Write ``text`` to ``path`` as UTF-8, replacing any existing file.

    ``"\\n"`` in ``text`` is written as the platform line terminator.

    Args:
        text: Report body.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %d characters to %s", len(text), path)
    return path
