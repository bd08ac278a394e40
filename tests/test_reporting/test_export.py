"""Tests for sales_summary.reporting.export."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sales_summary.reporting.export import write_report


def test_write_report_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "summary.txt"
    assert write_report("hello\n", path) == path
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_write_report_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "summary.txt"
    path.write_text("old content that is longer", encoding="utf-8")
    write_report("new\n", path)
    assert path.read_text(encoding="utf-8") == "new\n"


def test_write_report_uses_platform_line_terminator(tmp_path: Path) -> None:
    path = tmp_path / "summary.txt"
    write_report("a\nb\n", path)
    assert path.read_bytes() == f"a{os.linesep}b{os.linesep}".encode()


def test_write_report_is_utf8(tmp_path: Path) -> None:
    path = tmp_path / "summary.txt"
    write_report("  Café: €1.00\n", path)
    assert "Café".encode("utf-8") in path.read_bytes()


def test_write_report_propagates_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(OSError):
        write_report("x", blocker / "summary.txt")
