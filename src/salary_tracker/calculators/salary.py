"""Salary calculation engine.

Pure, stateless operations: remaining salary, payment status and the
monetary validation rules. The persistence hook, the API and the live
preview all call into this module so every layer derives identical values.

Payment status rules, in precedence order:
- remaining == 0               -> Paid (so total 0 / advance 0 is Paid)
- advance > 0, remaining > 0   -> Partially Paid
- advance == 0                 -> Pending
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from salary_tracker.calculators.errors import (
    ADVANCE_LABEL,
    TOTAL_LABEL,
    AdvanceExceedsTotalError,
    ExcessPrecisionError,
    NegativeAmountError,
    NotANumberError,
    NotFiniteError,
    TypeMismatchError,
    UnclassifiableStateError,
)
from salary_tracker.calculators.money import (
    PRECISION_TOLERANCE,
    Number,
    is_number,
    round_money,
    to_amount,
)
from salary_tracker.calculators.types import PaymentStatus, SalaryCalculationResult

ZERO = Decimal("0")


def validate_monetary_amount(amount: Any, field_label: str = "amount") -> bool:
    """Validate a monetary amount.

    Checks run in order and the first failure wins: not a number, not
    finite, negative, more than 2 decimal places.
    """
    if not is_number(amount):
        raise NotANumberError(field_label)

    value = to_amount(amount)
    if not value.is_finite():
        raise NotFiniteError(field_label)

    if value < 0:
        raise NegativeAmountError(field_label)

    # Tolerates binary float noise but not a genuine third decimal
    if abs(value - round_money(value)) > PRECISION_TOLERANCE:
        raise ExcessPrecisionError(field_label)

    return True


def validate_advance_amount(total: Any, advance: Any) -> bool:
    """Validate both amounts, then that the advance does not exceed the total."""
    validate_monetary_amount(total, TOTAL_LABEL)
    validate_monetary_amount(advance, ADVANCE_LABEL)

    if to_amount(advance) > to_amount(total):
        raise AdvanceExceedsTotalError()

    return True


def calculate_remaining_salary(total: Any, advance: Any) -> Decimal:
    """Return total minus advance, rounded to cents."""
    if not is_number(total) or not is_number(advance):
        raise TypeMismatchError()

    total_amount = to_amount(total)
    advance_amount = to_amount(advance)
    # Sign first so -inf reports as negative; NaN cannot be ordered
    if not total_amount.is_nan() and total_amount < 0:
        raise NegativeAmountError(TOTAL_LABEL)
    if not advance_amount.is_nan() and advance_amount < 0:
        raise NegativeAmountError(ADVANCE_LABEL)

    if not total_amount.is_finite():
        raise NotFiniteError(TOTAL_LABEL)
    if not advance_amount.is_finite():
        raise NotFiniteError(ADVANCE_LABEL)

    if advance_amount > total_amount:
        raise AdvanceExceedsTotalError()

    return round_money(total_amount - advance_amount)


def determine_payment_status(total: Any, advance: Any) -> PaymentStatus:
    """Classify a (total, advance) pair into a payment status."""
    remaining = calculate_remaining_salary(total, advance)
    advance_amount = to_amount(advance)

    if remaining == ZERO:
        return PaymentStatus.PAID
    if advance_amount > ZERO and remaining > ZERO:
        return PaymentStatus.PARTIALLY_PAID
    if advance_amount == ZERO:
        return PaymentStatus.PENDING

    raise UnclassifiableStateError()


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def calculate_salary_details(data: Mapping[str, Any]) -> SalaryCalculationResult:
    """Validate and derive every salary figure in one step.

    Accepts ``totalMonthlySalary``/``advanceAmountPaid`` or their
    snake_case spellings. Raises on the first failure; never returns a
    partial result.
    """
    total = _pick(data, "totalMonthlySalary", "total_monthly_salary")
    advance = _pick(data, "advanceAmountPaid", "advance_amount_paid")

    validate_advance_amount(total, advance)

    remaining = calculate_remaining_salary(total, advance)
    status = determine_payment_status(total, advance)

    return SalaryCalculationResult(
        total_monthly_salary=to_amount(total),
        advance_amount_paid=to_amount(advance),
        remaining_salary_payable=remaining,
        payment_status=status,
        calculated_at=datetime.now(timezone.utc),
    )


def calculate_advance_percentage(total: Number, advance: Number) -> Decimal:
    """Percentage of the total already paid as advance, to 2 decimals."""
    validate_advance_amount(total, advance)

    total_amount = to_amount(total)
    if total_amount == ZERO:
        return ZERO

    return round_money(to_amount(advance) / total_amount * 100)


def is_fully_paid(total: Number, advance: Number) -> bool:
    return calculate_remaining_salary(total, advance) == ZERO


def has_advance_payment(advance: Number) -> bool:
    validate_monetary_amount(advance, ADVANCE_LABEL)
    return to_amount(advance) > ZERO
