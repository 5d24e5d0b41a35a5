"""Salary record service - persistence operations for salary records."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from salary_tracker.calculators.money import round_money
from salary_tracker.calculators.types import MONTH_NAMES
from salary_tracker.models import RecordValidationError, SalaryRecord

logger = logging.getLogger(__name__)

MONTH_ORDER = case(
    {name: number for number, name in enumerate(MONTH_NAMES, start=1)},
    value=SalaryRecord.month,
)


class DuplicateSalaryRecordError(Exception):
    """Raised when a record already exists for an employee and period."""

    def __init__(self, employee_id: str, month: str, year: int):
        self.employee_id = employee_id
        self.month = month
        self.year = year
        super().__init__(
            "A salary record for this employee and month/year already exists"
        )


@dataclass
class SalaryRecordFilter:
    """Optional equality filters for listing salary records."""

    employee_id: str | None = None
    month: str | None = None
    year: int | None = None
    payment_status: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the active filters keyed the way the API reports them."""
        active = {
            "employeeId": self.employee_id,
            "month": self.month,
            "year": self.year,
            "paymentStatus": self.payment_status,
        }
        return {k: v for k, v in active.items() if v is not None}


@dataclass
class EmployeeSalarySummary:
    """Totals over a set of salary records."""

    total_records: int = 0
    total_salary: Decimal = Decimal("0")
    total_advances: Decimal = Decimal("0")
    total_remaining: Decimal = Decimal("0")
    status_counts: dict[str, int] = field(default_factory=dict)


class SalaryRecordService:
    """Service for storing and querying salary records.

    Derived fields are never written here: the model recomputes them on
    construction and before every flush.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        *,
        employee_id: str,
        employee_name: str,
        month: str,
        year: int,
        total_monthly_salary: Any,
        advance_amount_paid: Any,
        payment_date: datetime,
    ) -> SalaryRecord:
        """Validate and insert a new salary record.

        Raises:
            SalaryCalculationError: amounts fail the engine rules
            RecordValidationError: record breaks a schema rule
            DuplicateSalaryRecordError: employee already has this period
        """
        record = SalaryRecord(
            employee_id=employee_id,
            employee_name=employee_name,
            month=month,
            year=year,
            total_monthly_salary=total_monthly_salary,
            advance_amount_paid=advance_amount_paid,
            payment_date=payment_date,
        )
        errors = record.validate()
        if errors:
            raise RecordValidationError(errors)

        self.session.add(record)
        await self._flush(record)
        logger.info(
            "Created salary record %s for %s %s %s (%s)",
            record.id,
            record.employee_id,
            record.month,
            record.year,
            record.payment_status,
        )
        return record

    async def _flush(self, record: SalaryRecord) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if "unique" in str(exc.orig).lower():
                raise DuplicateSalaryRecordError(
                    record.employee_id, record.month, record.year
                ) from exc
            raise
        except RecordValidationError:
            await self.session.rollback()
            raise

    async def get_by_id(self, record_id: UUID) -> SalaryRecord | None:
        return await self.session.get(SalaryRecord, record_id)

    async def find(
        self,
        filters: SalaryRecordFilter | None = None,
        limit: int = 50,
        skip: int = 0,
    ) -> tuple[list[SalaryRecord], int]:
        """List records newest first. Returns the page and the total match count."""
        query = self._apply_filters(select(SalaryRecord), filters or SalaryRecordFilter())

        count_query = select(func.count()).select_from(query.subquery())
        total = await self.session.scalar(count_query) or 0

        query = query.order_by(SalaryRecord.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def find_by_employee_id(
        self,
        employee_id: str,
        year: int | None = None,
        payment_status: str | None = None,
    ) -> list[SalaryRecord]:
        """All records for one employee, most recent period first."""
        filters = SalaryRecordFilter(
            employee_id=employee_id, year=year, payment_status=payment_status
        )
        query = self._apply_filters(select(SalaryRecord), filters)
        query = query.order_by(SalaryRecord.year.desc(), MONTH_ORDER.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_payment_status(self, payment_status: str) -> list[SalaryRecord]:
        query = (
            select(SalaryRecord)
            .where(SalaryRecord.payment_status == payment_status)
            .order_by(SalaryRecord.payment_date.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_period(self, month: str, year: int) -> list[SalaryRecord]:
        query = (
            select(SalaryRecord)
            .where(SalaryRecord.month == month, SalaryRecord.year == year)
            .order_by(SalaryRecord.employee_name)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete_by_id(self, record_id: UUID) -> SalaryRecord | None:
        """Delete a record. Returns the deleted record, or None if absent."""
        record = await self.get_by_id(record_id)
        if record is None:
            return None
        await self.session.delete(record)
        await self.session.flush()
        logger.info("Deleted salary record %s", record_id)
        return record

    async def update_advance_payment(
        self, record_id: UUID, new_advance_amount: Any
    ) -> SalaryRecord | None:
        """Replace a record's advance amount; derived fields follow."""
        record = await self.get_by_id(record_id)
        if record is None:
            return None
        record.update_advance_payment(new_advance_amount)
        await self._flush(record)
        logger.info(
            "Updated advance for salary record %s: %s (%s)",
            record_id,
            record.advance_amount_paid,
            record.payment_status,
        )
        return record

    @staticmethod
    def summarize(records: list[SalaryRecord]) -> EmployeeSalarySummary:
        """Sum amounts across records and count them per payment status."""
        return EmployeeSalarySummary(
            total_records=len(records),
            total_salary=round_money(sum((r.total_monthly_salary for r in records), Decimal("0"))),
            total_advances=round_money(sum((r.advance_amount_paid for r in records), Decimal("0"))),
            total_remaining=round_money(
                sum((r.remaining_salary_payable for r in records), Decimal("0"))
            ),
            status_counts=dict(Counter(r.payment_status for r in records)),
        )

    @staticmethod
    def _apply_filters(query: Any, filters: SalaryRecordFilter) -> Any:
        if filters.employee_id:
            query = query.where(SalaryRecord.employee_id == filters.employee_id)
        if filters.month:
            query = query.where(SalaryRecord.month == filters.month)
        if filters.year is not None:
            query = query.where(SalaryRecord.year == filters.year)
        if filters.payment_status:
            query = query.where(SalaryRecord.payment_status == filters.payment_status)
        return query
