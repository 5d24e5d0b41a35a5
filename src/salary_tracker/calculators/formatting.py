"""Display formatting for monetary amounts.

Lenient by contract: bad input renders as zero instead of raising. Values
produced here are for display only and never feed back into calculations.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from salary_tracker.calculators.money import CENTS, is_number, to_amount

DEFAULT_CURRENCY_SYMBOL = "₹"

INDIAN = "indian"
WESTERN = "western"


def _group_western(digits: str) -> str:
    return f"{int(digits):,}"


def _group_indian(digits: str) -> str:
    """Group as 12,34,567: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(
    amount: Any,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    grouping: str = INDIAN,
) -> str:
    """Render an amount with digit grouping and exactly two decimals."""
    if not is_number(amount) or not to_amount(amount).is_finite():
        return f"{symbol}0.00"

    value = to_amount(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):f}".partition(".")

    group = _group_indian if grouping == INDIAN else _group_western
    return f"{symbol}{sign}{group(whole)}.{fraction or '00'}"
