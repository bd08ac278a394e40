"""
Shared pytest fixtures for the sales summary test suite.

Provides:
  - ``stores_root``: ``<tmp_path>/stores`` (not created until a file is written).
  - ``write_sales_file``: factory writing one sales JSON file under a store dir.
  - ``in_tmp_cwd``: chdir into ``tmp_path`` for tests of the default layout.
  - an autouse fixture restoring the root logger after each test.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def stores_root(tmp_path: Path) -> Path:
    return tmp_path / "stores"


@pytest.fixture
def write_sales_file(stores_root: Path) -> Callable[..., Path]:
    """Return ``write(store, name, payload, raw=False) -> Path``.

    ``store`` may contain slashes for nested layouts (``"west/204"``).
    ``payload`` is JSON-encoded unless ``raw=True``, in which case it is
    written verbatim.
    """

    def _write(store: str, name: str, payload: Any, raw: bool = False) -> Path:
        path = stores_root / store / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = payload if raw else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo ``configure_logging()`` calls made by CLI and logging tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
