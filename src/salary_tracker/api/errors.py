"""Translation of domain failures into HTTP error responses."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from salary_tracker.calculators.errors import SalaryCalculationError
from salary_tracker.models import RecordValidationError
from salary_tracker.services import DuplicateSalaryRecordError

logger = logging.getLogger(__name__)

# Client-facing messages for request field failures, keyed by (location, field)
FIELD_MESSAGES: dict[tuple[str, str], str] = {
    ("body", "employeeId"): "Employee ID is required and must be a string",
    ("body", "employeeName"): "Employee name is required and must be a string",
    ("body", "month"): "Month is required and must be a number between 1 and 12",
    ("body", "year"): "Year is required and must be a valid year",
    ("body", "totalMonthlySalary"): "Total monthly salary is required and must be a number",
    ("body", "advanceAmountPaid"): "Advance amount paid is required and must be a number",
    ("body", "paymentDate"): "Payment date must be a valid ISO date string",
    ("query", "year"): "Invalid year. Must be a number between 2000 and 2100",
    ("query", "paymentStatus"): (
        "Invalid payment status. Must be one of: Pending, Partially Paid, Paid"
    ),
    ("query", "limit"): "Invalid limit. Must be a number between 1 and 100",
    ("query", "skip"): "Invalid skip. Must be a non-negative number",
}


class ApiError(Exception):
    """An error with a status code and an offending field."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        field: str | None = None,
        code: str | None = None,
        **context: Any,
    ):
        self.status_code = status_code
        self.detail = detail
        self.field = field
        self.code = code
        self.context = context
        super().__init__(detail)


def _error_body(detail: str, code: str | None = None, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"detail": detail, "code": code}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def _describe_validation_error(error: dict[str, Any]) -> tuple[str, str]:
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else "body"
    # loc is (location, field, ...); union members append their type tag
    field = loc[1] if len(loc) > 1 and not loc[1].isdigit() else location
    if (location, field) == ("body", "paymentDate") and error.get("type") == "missing":
        return field, "Payment date is required"
    return field, FIELD_MESSAGES.get((location, field), error.get("msg", "Invalid value"))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to an application."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail, exc.code, field=exc.field, **exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        field, message = _describe_validation_error(exc.errors()[0])
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(message, "INVALID_FIELD", field=field),
        )

    @app.exception_handler(SalaryCalculationError)
    async def calculation_error_handler(
        request: Request, exc: SalaryCalculationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(str(exc), exc.code, field="salary_calculation"),
        )

    @app.exception_handler(RecordValidationError)
    async def record_validation_handler(
        request: Request, exc: RecordValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Validation failed", "VALIDATION_ERROR", details=exc.errors),
        )

    @app.exception_handler(DuplicateSalaryRecordError)
    async def duplicate_record_handler(
        request: Request, exc: DuplicateSalaryRecordError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(str(exc), "DUPLICATE_RECORD", field="duplicate_record"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=exc.status_code,
                content=_error_body(
                    "Endpoint not found",
                    "NOT_FOUND",
                    path=request.url.path,
                    method=request.method,
                ),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail), "HTTP_ERROR"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("An unexpected error occurred", "INTERNAL_ERROR"),
        )
