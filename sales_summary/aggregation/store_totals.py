"""
Store identifier policy and per-store accumulation.

Store identity
--------------
A file's store is the name of the directory it sits in::

    stores/201/sales.json          -> "201"
    stores/west/204/q3.json        -> "204"

Identifiers are compared case-insensitively.  :func:`store_key` is the one
place that rule lives: :class:`StoreTotals` merges on it and
:meth:`StoreTotals.sorted_items` orders by it, so grouping and ordering can
never disagree.  When two spellings of one store appear ("abc" and "ABC"),
the first spelling seen is the one shown in the report.

The key upper-cases each identifier one character at a time, which gives
ordinal ignore-case ordering: ``"_"`` sorts after every letter, ``"1"`` before.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


def store_key(store_id: str) -> str:
    """Case-insensitive comparison key for a store identifier.

    Characters are upper-cased one at a time; a character whose upper case
    is longer than one character ("ß" -> "SS") is kept as is.
    """
    return "".join(u if len(u := c.upper()) == 1 else c for c in store_id)


def store_id_for(path: Path) -> str:
    """Return the store identifier for a sales file: its parent directory name."""
    return Path(path).parent.name


class StoreTotals:
    """Mapping of store identifier -> accumulated total.

    Each store appears once regardless of casing.  Entries are never removed,
    so a store whose only file was unreadable stays listed with ``0.0``.
    """

    def __init__(self) -> None:
        # key -> (display identifier, running total)
        self._entries: dict[str, tuple[str, float]] = {}

    def add(self, store_id: str, amount: float) -> None:
        """Fold ``amount`` into ``store_id``'s running total."""
        key = store_key(store_id)
        if key in self._entries:
            display, total = self._entries[key]
            self._entries[key] = (display, total + amount)
        else:
            self._entries[key] = (store_id, amount)

    def __len__(self) -> int:
        return len(self._entries)

    def sorted_items(self) -> list[tuple[str, float]]:
        """Return ``(store_id, total)`` pairs in ascending case-insensitive order."""
        return [self._entries[key] for key in sorted(self._entries)]

    def sum(self) -> float:
        return sum(total for _, total in self._entries.values())

    def as_dict(self) -> dict[str, float]:
        """Plain ``{store_id: total}`` copy in report order."""
        return dict(self.sorted_items())

    def __repr__(self) -> str:
        return f"StoreTotals({self.as_dict()!r})"


@dataclass
class SalesAggregate:
    """Result of folding every extracted total.

    Attributes:
        store_totals:    Per-store accumulated totals.
        grand_total:     Sum of every file's total, independent of grouping.
        files_processed: Number of ``(store_id, total)`` pairs folded.
    """

    store_totals:    StoreTotals = field(default_factory=StoreTotals)
    grand_total:     float       = 0.0
    files_processed: int         = 0

    def add(self, store_id: str, amount: float) -> None:
        self.store_totals.add(store_id, amount)
        self.grand_total += amount
        self.files_processed += 1


def aggregate(pairs: Iterable[tuple[str, float]]) -> SalesAggregate:
    """Fold ``(store_id, total)`` pairs into a :class:`SalesAggregate`.

    Args:
        pairs: Any iterable, consumed once (a generator is fine).

    Returns:
        The per-store totals and grand total.
    """
    result = SalesAggregate()
    for store_id, amount in pairs:
        result.add(store_id, amount)
    return result
