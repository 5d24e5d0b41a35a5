"""ORM models."""

from salary_tracker.models.base import Base, TimestampMixin
from salary_tracker.models.salary_record import RecordValidationError, SalaryRecord

__all__ = ["Base", "RecordValidationError", "SalaryRecord", "TimestampMixin"]
