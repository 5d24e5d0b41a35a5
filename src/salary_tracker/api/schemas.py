"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Union
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictFloat,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel

# Amounts are Decimal internally and plain JSON numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
StrictNumber = Union[StrictInt, StrictFloat]


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Salary record schemas
# ============================================================================


class SalaryRecordCreate(ApiModel):
    """Schema for creating a salary record."""

    employee_id: StrictStr = Field(min_length=1)
    employee_name: StrictStr = Field(min_length=1)
    month: StrictInt = Field(ge=1, le=12)
    year: StrictInt = Field(ge=1900, le=2100)
    total_monthly_salary: StrictNumber
    advance_amount_paid: StrictNumber
    payment_date: datetime


class AdvanceUpdate(ApiModel):
    """Schema for replacing the advance amount of a record."""

    advance_amount_paid: StrictNumber


class SalaryRecordResponse(ApiModel):
    """Schema for salary record response."""

    id: UUID
    employee_id: str
    employee_name: str
    month: str
    year: int
    total_monthly_salary: Money
    advance_amount_paid: Money
    remaining_salary_payable: Money
    payment_date: datetime
    payment_status: str
    created_at: datetime
    updated_at: datetime


class CalculationSummary(ApiModel):
    """Engine output echoed alongside a created record."""

    remaining_salary: Money
    payment_status: str
    calculated_at: datetime


class SalaryRecordCreatedResponse(ApiModel):
    message: str
    data: SalaryRecordResponse
    calculations: CalculationSummary


class SalaryRecordDetailResponse(ApiModel):
    data: SalaryRecordResponse


class SalaryRecordUpdatedResponse(ApiModel):
    message: str
    data: SalaryRecordResponse


class Pagination(ApiModel):
    total: int
    limit: int
    skip: int
    has_more: bool


class SalaryRecordListResponse(ApiModel):
    """Schema for listing salary records."""

    data: list[SalaryRecordResponse]
    pagination: Pagination
    filter: dict[str, Any]


class DeletedRecord(ApiModel):
    id: UUID
    employee_id: str
    employee_name: str
    month: str
    year: int
    total_monthly_salary: Money
    deleted_at: datetime


class SalaryRecordDeletedResponse(ApiModel):
    message: str
    deleted_record: DeletedRecord


class EmployeeSummary(ApiModel):
    """Totals across one employee's salary records."""

    total_records: int
    total_salary: Money
    total_advances: Money
    total_remaining: Money
    status_counts: dict[str, int]


class EmployeeSalaryResponse(ApiModel):
    employee_id: str
    data: list[SalaryRecordResponse]
    summary: EmployeeSummary


class PreviewResponse(ApiModel):
    """Live feedback for amounts typed into the entry form."""

    remaining_salary: Money
    payment_status: str
    formatted_remaining: str
    badge: str


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
    field: str | None = None
    details: list[dict[str, Any]] | None = None
