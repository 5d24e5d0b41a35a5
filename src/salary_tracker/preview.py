"""Live salary preview for entry forms.

Mirrors what the server will compute for a pair of typed-in amounts by
calling the same engine, but never raises: input the engine rejects is
reported as an ``Invalid`` status with zero remaining.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from salary_tracker.calculators.errors import (
    AdvanceExceedsTotalError,
    SalaryCalculationError,
)
from salary_tracker.calculators.money import is_number
from salary_tracker.calculators.salary import calculate_salary_details
from salary_tracker.calculators.types import PaymentStatus

INVALID = "Invalid"
INVALID_ADVANCE_EXCEEDS_TOTAL = "Invalid - Advance exceeds total"

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))")

_BADGES = {
    PaymentStatus.PAID.value: "status-paid",
    PaymentStatus.PARTIALLY_PAID.value: "status-partial",
    PaymentStatus.PENDING.value: "status-pending",
}


@dataclass(frozen=True)
class LivePreview:
    remaining_salary: Decimal
    payment_status: str

    @property
    def is_valid(self) -> bool:
        return self.payment_status not in (INVALID, INVALID_ADVANCE_EXCEEDS_TOTAL)


def parse_amount(raw: Any) -> Any:
    """Read a form value the way a browser number field does.

    Numbers pass through unchanged. Text contributes its leading number,
    and blank or unparsable text counts as zero.
    """
    if is_number(raw):
        return raw
    if isinstance(raw, str):
        match = _LEADING_NUMBER.match(raw)
        if match:
            return Decimal(match.group(1))
    return Decimal("0")


def live_preview(total: Any, advance: Any) -> LivePreview:
    """Compute remaining salary and status for display while typing."""
    try:
        result = calculate_salary_details(
            {
                "totalMonthlySalary": parse_amount(total),
                "advanceAmountPaid": parse_amount(advance),
            }
        )
    except AdvanceExceedsTotalError:
        return LivePreview(Decimal("0"), INVALID_ADVANCE_EXCEEDS_TOTAL)
    except SalaryCalculationError:
        return LivePreview(Decimal("0"), INVALID)

    return LivePreview(result.remaining_salary_payable, result.payment_status.value)


def status_badge(status: str) -> str:
    """CSS class for a payment status label."""
    return _BADGES.get(status, "status-invalid")
