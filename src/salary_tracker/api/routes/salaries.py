"""Salary record API endpoints."""

from datetime import datetime, timezone
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from salary_tracker.api.dependencies import DbSession, RecordService
from salary_tracker.api.errors import ApiError
from salary_tracker.api.schemas import (
    AdvanceUpdate,
    CalculationSummary,
    DeletedRecord,
    EmployeeSalaryResponse,
    EmployeeSummary,
    ErrorResponse,
    Pagination,
    SalaryRecordCreate,
    SalaryRecordCreatedResponse,
    SalaryRecordDeletedResponse,
    SalaryRecordDetailResponse,
    SalaryRecordListResponse,
    SalaryRecordResponse,
    SalaryRecordUpdatedResponse,
)
from salary_tracker.calculators.salary import calculate_salary_details
from salary_tracker.calculators.types import MONTH_NAMES, PaymentStatus, month_name
from salary_tracker.models import SalaryRecord
from salary_tracker.services import SalaryRecordFilter

router = APIRouter(tags=["salaries"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _parse_record_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Invalid ID format. Must be a valid UUID",
            field="id",
            code="INVALID_ID",
        )


def _not_found(record_id: UUID) -> ApiError:
    return ApiError(
        status.HTTP_404_NOT_FOUND,
        "Salary record not found",
        code="NOT_FOUND",
        id=str(record_id),
    )


async def _load(service: RecordService, raw_id: str) -> SalaryRecord:
    record_id = _parse_record_id(raw_id)
    record = await service.get_by_id(record_id)
    if record is None:
        raise _not_found(record_id)
    return record


# ============================================================================
# Create
# ============================================================================


@router.post(
    "/addSalary",
    response_model=SalaryRecordCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def add_salary(
    db: DbSession,
    service: RecordService,
    payload: SalaryRecordCreate,
) -> SalaryRecordCreatedResponse:
    """Create a salary record; remaining salary and status are computed."""
    details = calculate_salary_details(
        {
            "totalMonthlySalary": payload.total_monthly_salary,
            "advanceAmountPaid": payload.advance_amount_paid,
        }
    )

    record = await service.create(
        employee_id=payload.employee_id,
        employee_name=payload.employee_name,
        month=month_name(payload.month),
        year=payload.year,
        total_monthly_salary=details.total_monthly_salary,
        advance_amount_paid=details.advance_amount_paid,
        payment_date=payload.payment_date,
    )
    await db.commit()
    await db.refresh(record)

    return SalaryRecordCreatedResponse(
        message="Salary record created successfully",
        data=SalaryRecordResponse.model_validate(record),
        calculations=CalculationSummary(
            remaining_salary=details.remaining_salary_payable,
            payment_status=details.payment_status.value,
            calculated_at=details.calculated_at,
        ),
    )


# ============================================================================
# Read
# ============================================================================


@router.get(
    "/salaries",
    response_model=SalaryRecordListResponse,
    responses=ERROR_RESPONSES,
)
async def list_salaries(
    service: RecordService,
    employee_id: Annotated[str | None, Query(alias="employeeId")] = None,
    month: str | None = None,
    year: Annotated[int | None, Query(ge=2000, le=2100)] = None,
    payment_status: Annotated[PaymentStatus | None, Query(alias="paymentStatus")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    skip: Annotated[int, Query(ge=0)] = 0,
) -> SalaryRecordListResponse:
    """List salary records, newest first, with optional filters.

    Stored derived fields are returned as-is; nothing is recomputed here.
    """
    if month and month not in MONTH_NAMES:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Invalid month. Must be a valid month name (e.g., January, February, etc.)",
            field="month",
            code="INVALID_FIELD",
        )

    filters = SalaryRecordFilter(
        employee_id=employee_id or None,
        month=month or None,
        year=year,
        payment_status=payment_status.value if payment_status else None,
    )
    records, total = await service.find(filters, limit=limit, skip=skip)

    return SalaryRecordListResponse(
        data=[SalaryRecordResponse.model_validate(r) for r in records],
        pagination=Pagination(
            total=total,
            limit=limit,
            skip=skip,
            has_more=skip + limit < total,
        ),
        filter=filters.to_dict(),
    )


@router.get(
    "/salaries/{record_id}",
    response_model=SalaryRecordDetailResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
)
async def get_salary(
    service: RecordService,
    record_id: Annotated[str, Path()],
) -> SalaryRecordDetailResponse:
    """Get a specific salary record by ID."""
    record = await _load(service, record_id)
    return SalaryRecordDetailResponse(data=SalaryRecordResponse.model_validate(record))


@router.get(
    "/employees/{employee_id}/salaries",
    response_model=EmployeeSalaryResponse,
    responses=ERROR_RESPONSES,
)
async def list_employee_salaries(
    service: RecordService,
    employee_id: Annotated[str, Path()],
    year: Annotated[int | None, Query(ge=2000, le=2100)] = None,
    payment_status: Annotated[PaymentStatus | None, Query(alias="paymentStatus")] = None,
) -> EmployeeSalaryResponse:
    """All salary records of one employee with summary totals."""
    records = await service.find_by_employee_id(
        employee_id,
        year=year,
        payment_status=payment_status.value if payment_status else None,
    )
    summary = service.summarize(records)

    return EmployeeSalaryResponse(
        employee_id=employee_id,
        data=[SalaryRecordResponse.model_validate(r) for r in records],
        summary=EmployeeSummary(
            total_records=summary.total_records,
            total_salary=summary.total_salary,
            total_advances=summary.total_advances,
            total_remaining=summary.total_remaining,
            status_counts=summary.status_counts,
        ),
    )


# ============================================================================
# Update / Delete
# ============================================================================


@router.patch(
    "/salaries/{record_id}/advance",
    response_model=SalaryRecordUpdatedResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
)
async def update_advance(
    db: DbSession,
    service: RecordService,
    record_id: Annotated[str, Path()],
    payload: AdvanceUpdate,
) -> SalaryRecordUpdatedResponse:
    """Replace the advance amount; remaining salary and status follow."""
    parsed_id = _parse_record_id(record_id)
    record = await service.update_advance_payment(parsed_id, payload.advance_amount_paid)
    if record is None:
        raise _not_found(parsed_id)
    await db.commit()
    await db.refresh(record)

    return SalaryRecordUpdatedResponse(
        message="Advance payment updated successfully",
        data=SalaryRecordResponse.model_validate(record),
    )


@router.delete(
    "/salaries/{record_id}",
    response_model=SalaryRecordDeletedResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
)
async def delete_salary(
    db: DbSession,
    service: RecordService,
    record_id: Annotated[str, Path()],
) -> SalaryRecordDeletedResponse:
    """Delete a specific salary record."""
    parsed_id = _parse_record_id(record_id)
    record = await service.delete_by_id(parsed_id)
    if record is None:
        raise _not_found(parsed_id)
    await db.commit()

    return SalaryRecordDeletedResponse(
        message="Salary record deleted successfully",
        deleted_record=DeletedRecord(
            id=record.id,
            employee_id=record.employee_id,
            employee_name=record.employee_name,
            month=record.month,
            year=record.year,
            total_monthly_salary=record.total_monthly_salary,
            deleted_at=datetime.now(timezone.utc),
        ),
    )
