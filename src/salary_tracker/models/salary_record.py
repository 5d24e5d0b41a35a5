"""Salary record model."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    event,
)
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, validates

from salary_tracker.calculators.errors import (
    ADVANCE_LABEL,
    TOTAL_LABEL,
    SalaryCalculationError,
)
from salary_tracker.calculators.formatting import format_currency
from salary_tracker.calculators.money import is_number, round_money, to_amount
from salary_tracker.calculators.salary import (
    calculate_salary_details,
    validate_advance_amount,
    validate_monetary_amount,
)
from salary_tracker.calculators.types import MONTH_NAMES, PaymentStatus
from salary_tracker.models.base import Base, TimestampMixin

MIN_YEAR = 2000
MAX_YEAR = 2100
EMPLOYEE_ID_MAX_LENGTH = 50
EMPLOYEE_NAME_MAX_LENGTH = 100


class RecordValidationError(Exception):
    """Raised when a salary record fails schema validation."""

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        super().__init__("Validation failed: " + "; ".join(e["message"] for e in errors))


def _is_valid_amount(value: Any, label: str) -> bool:
    try:
        return validate_monetary_amount(value, label)
    except SalaryCalculationError:
        return False


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SalaryRecord(Base, TimestampMixin):
    """Salary for one employee and month, with its derived payment figures.

    ``remaining_salary_payable`` and ``payment_status`` are read-only. They
    are computed from the amounts on construction, on
    ``update_advance_payment`` and again before every insert/update flush,
    so a stored record can never disagree with its own amounts.
    """

    __tablename__ = "salary_record"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    employee_id: Mapped[str] = mapped_column(
        String(EMPLOYEE_ID_MAX_LENGTH), nullable=False
    )
    employee_name: Mapped[str] = mapped_column(
        String(EMPLOYEE_NAME_MAX_LENGTH), nullable=False
    )
    month: Mapped[str] = mapped_column(String(9), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    total_monthly_salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    advance_amount_paid: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    _remaining_salary_payable: Mapped[Decimal] = mapped_column(
        "remaining_salary_payable", Numeric(12, 2), nullable=False
    )
    payment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    _payment_status: Mapped[str] = mapped_column(
        "payment_status",
        String(20),
        nullable=False,
        default=PaymentStatus.PENDING.value,
    )

    __table_args__ = (
        UniqueConstraint(
            "employee_id", "year", "month", name="salary_record_employee_period_unique"
        ),
        CheckConstraint(
            f"year >= {MIN_YEAR} AND year <= {MAX_YEAR}", name="salary_record_year_check"
        ),
        CheckConstraint("total_monthly_salary >= 0", name="salary_record_total_check"),
        CheckConstraint(
            "advance_amount_paid >= 0 AND advance_amount_paid <= total_monthly_salary",
            name="salary_record_advance_check",
        ),
        CheckConstraint(
            "remaining_salary_payable >= 0", name="salary_record_remaining_check"
        ),
        CheckConstraint(
            "payment_status IN ('Pending', 'Partially Paid', 'Paid')",
            name="salary_record_status_check",
        ),
        # Half-cent tolerance: SQLite stores Numeric as binary floating point
        CheckConstraint(
            "ABS(remaining_salary_payable - (total_monthly_salary - advance_amount_paid)) < 0.005",
            name="salary_record_remaining_derived_check",
        ),
        CheckConstraint(
            "payment_status = CASE"
            " WHEN remaining_salary_payable = 0 THEN 'Paid'"
            " WHEN advance_amount_paid > 0 THEN 'Partially Paid'"
            " ELSE 'Pending' END",
            name="salary_record_status_derived_check",
        ),
        Index("ix_salary_record_payment_status", "payment_status"),
        Index("ix_salary_record_payment_date", "payment_date"),
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        for attr in ("total_monthly_salary", "advance_amount_paid"):
            value = getattr(self, attr)
            if is_number(value):
                setattr(self, attr, to_amount(value))
        if self.total_monthly_salary is not None and self.advance_amount_paid is not None:
            self.recalculate()

    @hybrid_property
    def remaining_salary_payable(self) -> Decimal:
        return self._remaining_salary_payable

    @hybrid_property
    def payment_status(self) -> str:
        return self._payment_status

    @validates("employee_id", "employee_name")
    def _strip(self, key: str, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def recalculate(self) -> None:
        """Recompute derived fields and round the amounts to cents."""
        result = calculate_salary_details(
            {
                "totalMonthlySalary": self.total_monthly_salary,
                "advanceAmountPaid": self.advance_amount_paid,
            }
        )
        self.total_monthly_salary = round_money(result.total_monthly_salary)
        self.advance_amount_paid = round_money(result.advance_amount_paid)
        self._remaining_salary_payable = result.remaining_salary_payable
        self._payment_status = result.payment_status.value

    def update_advance_payment(self, new_advance_amount: Any) -> None:
        """Replace the advance amount and recompute the derived fields."""
        validate_advance_amount(self.total_monthly_salary, new_advance_amount)
        self.advance_amount_paid = to_amount(new_advance_amount)
        self.recalculate()

    def validate(self) -> list[dict[str, str]]:
        """Return field/message pairs for every schema rule the record breaks."""
        errors: list[dict[str, str]] = []

        def fail(field: str, message: str) -> None:
            errors.append({"field": field, "message": message})

        if not self.employee_id:
            fail("employeeId", "Employee ID is required")
        elif len(self.employee_id) > EMPLOYEE_ID_MAX_LENGTH:
            fail("employeeId", "Employee ID cannot exceed 50 characters")

        if not self.employee_name:
            fail("employeeName", "Employee name is required")
        elif len(self.employee_name) > EMPLOYEE_NAME_MAX_LENGTH:
            fail("employeeName", "Employee name cannot exceed 100 characters")

        if not self.month:
            fail("month", "Month is required")
        elif self.month not in MONTH_NAMES:
            fail("month", "Month must be a valid month name")

        if self.year is None:
            fail("year", "Year is required")
        elif not isinstance(self.year, int) or isinstance(self.year, bool):
            fail("year", "Year must be a valid integer")
        elif self.year < MIN_YEAR:
            fail("year", "Year must be 2000 or later")
        elif self.year > MAX_YEAR:
            fail("year", "Year must be 2100 or earlier")

        total = self.total_monthly_salary
        if total is None:
            fail("totalMonthlySalary", "Total monthly salary is required")
        elif not _is_valid_amount(total, TOTAL_LABEL):
            fail(
                "totalMonthlySalary",
                "Total monthly salary must be a valid monetary amount with up to 2 decimal places",
            )

        advance = self.advance_amount_paid
        if advance is None:
            fail("advanceAmountPaid", "Advance amount paid is required")
        elif not _is_valid_amount(advance, ADVANCE_LABEL):
            fail(
                "advanceAmountPaid",
                "Advance amount paid must be a valid monetary amount with up to 2 decimal places",
            )
        elif _is_valid_amount(total, TOTAL_LABEL) and to_amount(advance) > to_amount(total):
            fail("advanceAmountPaid", "Advance amount paid cannot exceed total monthly salary")

        if self.payment_date is None:
            fail("paymentDate", "Payment date is required")
        elif _as_utc(self.payment_date) > datetime.now(timezone.utc) + timedelta(days=365):
            fail("paymentDate", "Payment date cannot be more than one year in the future")

        return errors

    @property
    def formatted_payment_date(self) -> str:
        d = self.payment_date
        return f"{d.month}/{d.day}/{d.year}"

    @property
    def formatted_amounts(self) -> dict[str, str]:
        return {
            "totalSalary": format_currency(self.total_monthly_salary),
            "advancePaid": format_currency(self.advance_amount_paid),
            "remainingPayable": format_currency(self.remaining_salary_payable),
        }

    def __repr__(self) -> str:
        return (
            f"<SalaryRecord {self.employee_id} {self.month} {self.year} "
            f"{self.payment_status}>"
        )


@event.listens_for(SalaryRecord, "before_insert")
@event.listens_for(SalaryRecord, "before_update")
def _derive_before_flush(mapper: Any, connection: Any, target: SalaryRecord) -> None:
    """Validate and re-derive remaining salary and status before every write."""
    errors = target.validate()
    if errors:
        raise RecordValidationError(errors)
    target.recalculate()
