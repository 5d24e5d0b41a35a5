"""Monetary value helpers shared by every salary derivation."""

from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Union

Number = Union[int, float, Decimal]

CENTS = Decimal("0.01")
PRECISION_TOLERANCE = Decimal("0.001")


def is_number(value: Any) -> bool:
    """Check whether value is numeric (bool is not a number here)."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def to_amount(value: Number) -> Decimal:
    """Convert a numeric value to Decimal.

    Floats go through their shortest repr so 3333.33 stays 3333.33
    instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_money(value: Number) -> Decimal:
    """Round to 2 decimal places: scale by 100, round half up, unscale.

    Halves round toward positive infinity, so -2.005 becomes -2.00.
    """
    amount = to_amount(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        if amount < 0:
            return -((-amount).quantize(CENTS, rounding=ROUND_HALF_DOWN))
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
