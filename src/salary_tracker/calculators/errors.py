"""Typed failures raised by the salary calculation engine."""

from __future__ import annotations

from enum import Enum

TOTAL_LABEL = "Total monthly salary"
ADVANCE_LABEL = "Advance amount paid"


class FailureKind(str, Enum):
    """Failure kinds reported by the engine."""

    NOT_A_NUMBER = "NOT_A_NUMBER"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    NOT_FINITE = "NOT_FINITE"
    NEGATIVE = "NEGATIVE"
    EXCESS_PRECISION = "EXCESS_PRECISION"
    ADVANCE_EXCEEDS_TOTAL = "ADVANCE_EXCEEDS_TOTAL"
    UNCLASSIFIABLE_STATE = "UNCLASSIFIABLE_STATE"


class SalaryCalculationError(ValueError):
    """Base class for every engine failure.

    ``field`` names the offending input (the human label, e.g.
    "Total monthly salary") when the failure is attributable to one.
    """

    kind: FailureKind = FailureKind.UNCLASSIFIABLE_STATE

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.kind.value


class NotANumberError(SalaryCalculationError):
    """Amount is not a numeric value."""

    kind = FailureKind.NOT_A_NUMBER

    def __init__(self, field: str):
        super().__init__(f"{field} must be a number", field)


class TypeMismatchError(SalaryCalculationError):
    """Operands of a calculation are not numeric."""

    kind = FailureKind.TYPE_MISMATCH

    def __init__(self) -> None:
        super().__init__("Salary amounts must be numbers")


class NotFiniteError(SalaryCalculationError):
    kind = FailureKind.NOT_FINITE

    def __init__(self, field: str):
        super().__init__(f"{field} must be a finite number", field)


class NegativeAmountError(SalaryCalculationError):
    kind = FailureKind.NEGATIVE

    def __init__(self, field: str):
        super().__init__(f"{field} cannot be negative", field)


class ExcessPrecisionError(SalaryCalculationError):
    kind = FailureKind.EXCESS_PRECISION

    def __init__(self, field: str):
        super().__init__(f"{field} must have at most 2 decimal places", field)


class AdvanceExceedsTotalError(SalaryCalculationError):
    kind = FailureKind.ADVANCE_EXCEEDS_TOTAL

    def __init__(self) -> None:
        super().__init__(
            "Advance amount cannot exceed total monthly salary", ADVANCE_LABEL
        )


class UnclassifiableStateError(SalaryCalculationError):
    """No payment status matches; unreachable for valid inputs."""

    kind = FailureKind.UNCLASSIFIABLE_STATE

    def __init__(self) -> None:
        super().__init__("Unable to determine payment status with given inputs")
