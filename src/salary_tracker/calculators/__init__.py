"""Salary calculation engine."""

from salary_tracker.calculators.errors import (
    AdvanceExceedsTotalError,
    ExcessPrecisionError,
    FailureKind,
    NegativeAmountError,
    NotANumberError,
    NotFiniteError,
    SalaryCalculationError,
    TypeMismatchError,
    UnclassifiableStateError,
)
from salary_tracker.calculators.formatting import format_currency
from salary_tracker.calculators.money import round_money
from salary_tracker.calculators.salary import (
    calculate_advance_percentage,
    calculate_remaining_salary,
    calculate_salary_details,
    determine_payment_status,
    has_advance_payment,
    is_fully_paid,
    validate_advance_amount,
    validate_monetary_amount,
)
from salary_tracker.calculators.types import PaymentStatus, SalaryCalculationResult

__all__ = [
    "AdvanceExceedsTotalError",
    "ExcessPrecisionError",
    "FailureKind",
    "NegativeAmountError",
    "NotANumberError",
    "NotFiniteError",
    "PaymentStatus",
    "SalaryCalculationError",
    "SalaryCalculationResult",
    "TypeMismatchError",
    "UnclassifiableStateError",
    "calculate_advance_percentage",
    "calculate_remaining_salary",
    "calculate_salary_details",
    "determine_payment_status",
    "format_currency",
    "has_advance_payment",
    "is_fully_paid",
    "round_money",
    "validate_advance_amount",
    "validate_monetary_amount",
]
