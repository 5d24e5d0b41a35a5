"""Type definitions for salary calculations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class PaymentStatus(str, Enum):
    """Payment status of a salary record."""

    PENDING = "Pending"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"


MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    """Return the English month name for a 1-based month number."""
    if not 1 <= month <= 12:
        raise ValueError("Month must be a number between 1 and 12")
    return MONTH_NAMES[month - 1]


@dataclass(frozen=True)
class SalaryCalculationResult:
    """Derived salary figures for one (total, advance) pair.

    Immutable: a new result is computed whenever the inputs change.
    """

    total_monthly_salary: Decimal
    advance_amount_paid: Decimal
    remaining_salary_payable: Decimal
    payment_status: PaymentStatus
    calculated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return the result keyed the way the API reports it."""
        return {
            "totalMonthlySalary": self.total_monthly_salary,
            "advanceAmountPaid": self.advance_amount_paid,
            "remainingSalaryPayable": self.remaining_salary_payable,
            "paymentStatus": self.payment_status.value,
            "calculatedAt": self.calculated_at,
        }
