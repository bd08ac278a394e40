"""Tests for sales_summary.ingestion.sales_json and the SalesRecord model."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sales_summary.ingestion.sales_json import parse_sales_record, read_sales_total
from sales_summary.models.sales import SalesRecord


# ── parse_sales_record ────────────────────────────────────────────────────────


def test_parse_reads_total() -> None:
    assert parse_sales_record('{"Total": 100.5}').total == 100.5


def test_parse_ignores_other_fields() -> None:
    record = parse_sales_record('{"Total": 7, "OverallTotal": 999, "Store": "x"}')
    assert record.total == 7.0


@pytest.mark.parametrize("key", ["total", "TOTAL", "ToTaL"])
def test_parse_total_key_is_case_insensitive(key: str) -> None:
    assert parse_sales_record(f'{{"{key}": 12.25}}').total == 12.25


def test_parse_exact_key_wins_over_other_casing() -> None:
    assert parse_sales_record('{"TOTAL": 1, "Total": 2}').total == 2.0


def test_parse_accepts_numeric_string() -> None:
    assert parse_sales_record('{"Total": "12.5"}').total == 12.5


def test_parse_rejects_non_object() -> None:
    with pytest.raises(ValidationError):
        parse_sales_record('"not an object"')


def test_parse_rejects_missing_total() -> None:
    with pytest.raises(ValidationError):
        parse_sales_record('{"Sales": 10}')


def test_parse_rejects_invalid_json() -> None:
    with pytest.raises(ValueError):
        parse_sales_record("{Total: ")


def test_sales_record_is_frozen() -> None:
    record = SalesRecord(Total=1.0)
    with pytest.raises(ValidationError):
        record.total = 2.0  # type: ignore[misc]


# ── read_sales_total ──────────────────────────────────────────────────────────


def test_read_total(write_sales_file) -> None:
    path = write_sales_file("201", "sales.json", {"Total": 49.5})
    assert read_sales_total(path) == 49.5


def test_read_negative_total(write_sales_file) -> None:
    path = write_sales_file("201", "refunds.json", {"Total": -20})
    assert read_sales_total(path) == -20.0


def test_read_tolerates_utf8_bom(stores_root: Path) -> None:
    path = stores_root / "201" / "sales.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xef\xbb\xbf" + b'{"Total": 3.5}')
    assert read_sales_total(path) == 3.5


@pytest.mark.parametrize(
    "content",
    [
        '"not an object"',
        "",
        "{",
        "[1, 2, 3]",
        "null",
        '{"Total": null}',
        '{"Total": "abc"}',
        '{"Total": {"amount": 5}}',
        '{"Sales": 10}',
    ],
)
def test_read_malformed_returns_zero(write_sales_file, content: str) -> None:
    path = write_sales_file("203", "bad.json", content, raw=True)
    assert read_sales_total(path) == 0.0


def test_read_invalid_utf8_returns_zero(stores_root: Path) -> None:
    path = stores_root / "203" / "bad.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b'{"Total": \xff\xfe}')
    assert read_sales_total(path) == 0.0


def test_read_missing_file_returns_zero(tmp_path: Path) -> None:
    assert read_sales_total(tmp_path / "gone.json") == 0.0


def test_read_directory_returns_zero(tmp_path: Path) -> None:
    assert read_sales_total(tmp_path) == 0.0
