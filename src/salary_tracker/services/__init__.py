"""Business services."""

from salary_tracker.services.salary_record_service import (
    DuplicateSalaryRecordError,
    EmployeeSalarySummary,
    SalaryRecordFilter,
    SalaryRecordService,
)

__all__ = [
    "DuplicateSalaryRecordError",
    "EmployeeSalarySummary",
    "SalaryRecordFilter",
    "SalaryRecordService",
]
