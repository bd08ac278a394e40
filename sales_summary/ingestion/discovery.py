"""
Recursive discovery of per-store sales files.

Layout convention::

    stores/
      201/sales.json
      202/sales.json
      regional/204/sales.json

Every file matching the pattern at any depth is returned.  Results are a lazy
generator of absolute paths in no guaranteed order; callers that need a
stable order must sort.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def find_files(root: Path, pattern: str) -> Iterator[Path]:
    """Yield every file under ``root`` whose name matches ``pattern``.

    Args:
        root:    Directory to search recursively.  A missing root yields
                 nothing rather than raising.
        pattern: Filename glob, e.g. ``"*.json"``.

    Yields:
        Absolute ``Path`` objects for regular files only.
    """
    root = Path(root).absolute()
    if not root.is_dir():
        logger.debug("Stores root %s does not exist; nothing to scan", root)
        return

    for path in root.rglob(pattern):
        if path.is_file():
            yield path
