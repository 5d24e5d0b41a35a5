"""Live preview endpoint backing the salary entry form."""

from typing import Annotated

from fastapi import APIRouter, Query

from salary_tracker.api.schemas import PreviewResponse
from salary_tracker.calculators.formatting import format_currency
from salary_tracker.config import get_settings
from salary_tracker.preview import live_preview, status_badge

router = APIRouter(tags=["preview"])


@router.get("/preview", response_model=PreviewResponse)
async def preview_salary(
    total: Annotated[str, Query(alias="totalMonthlySalary")] = "",
    advance: Annotated[str, Query(alias="advanceAmountPaid")] = "",
) -> PreviewResponse:
    """Remaining salary and status for raw form input; never fails."""
    preview = live_preview(total, advance)
    return PreviewResponse(
        remaining_salary=preview.remaining_salary,
        payment_status=preview.payment_status,
        formatted_remaining=format_currency(
            preview.remaining_salary, get_settings().currency_symbol
        ),
        badge=status_badge(preview.payment_status),
    )
