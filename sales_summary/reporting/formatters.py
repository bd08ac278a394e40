"""
Plain-text formatters for the sales summary report.

Report layout (every line terminated, including the last)::

    Sales Summary
    ----------------------------
     Total Sales: $350.00

     Details:
      201: $150.00
      202: $200.00

Currency values follow US conventions: leading symbol, comma thousands
separators, exactly two decimals.  Rounding is half away from zero on the
float's exact decimal value, so ``0.125`` becomes ``$0.13`` while ``1.005``
(stored as 1.00499...) becomes ``$1.00``.

Formatters return ``str`` using ``"\\n"``; the writer translates to the
platform line terminator.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from sales_summary.aggregation.store_totals import SalesAggregate

REPORT_TITLE = "Sales Summary"
REPORT_RULE = "-" * 28

_CENTS = Decimal("0.01")


def format_currency(value: float, symbol: str = "$") -> str:
    """Format ``value`` as US currency, e.g. ``1234.5 -> "$1,234.50"``.

    Negative amounts render as ``-$1,234.50``; an amount that rounds to zero
    carries no sign.  Non-finite values render as ``NaN``, ``∞`` or ``-∞``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    amount = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_sales_summary(summary: SalesAggregate, currency_symbol: str = "$") -> str:
    """Render the fixed-layout summary for ``summary``.

    Detail lines are ordered by store identifier, case-insensitively.  With no
    stores the ``Details:`` header is still emitted, followed by nothing.
    """
    lines: list[str] = [
        REPORT_TITLE,
        REPORT_RULE,
        f" Total Sales: {format_currency(summary.grand_total, currency_symbol)}",
        "",
        " Details:",
    ]
    for store_id, total in summary.store_totals.sorted_items():
        lines.append(f"  {store_id}: {format_currency(total, currency_symbol)}")

    return "\n".join(lines) + "\n"
