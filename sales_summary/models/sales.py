"""
Sales record model — the one value read out of each per-store JSON file.

An input file looks like::

    {"Total": 1234.5, "OverallTotal": 0, "Notes": "..."}

Only ``Total`` is kept; every other key is ignored.  The key is matched
case-insensitively (``"total"`` and ``"TOTAL"`` are accepted) and numeric
strings such as ``"12.5"`` are coerced by pydantic's lax mode.

Records are frozen and short-lived: built during extraction, folded into the
running totals, then dropped.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

TOTAL_FIELD = "Total"


class SalesRecord(BaseModel):
    """A single file's sales figure.

    Attributes:
        total: The ``Total`` value from the source document.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: float = Field(alias=TOTAL_FIELD)

    @model_validator(mode="before")
    @classmethod
    def match_total_key(cls, data: Any) -> Any:
        """Accept ``Total`` under any casing; an exact match wins."""
        if isinstance(data, dict) and TOTAL_FIELD not in data and "total" not in data:
            for key, val in data.items():
                if isinstance(key, str) and key.casefold() == "total":
                    return {**data, TOTAL_FIELD: val}
        return data
