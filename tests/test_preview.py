"""Tests for the live salary preview."""

from decimal import Decimal

import pytest

from salary_tracker.calculators import calculate_salary_details
from salary_tracker.preview import (
    INVALID,
    INVALID_ADVANCE_EXCEEDS_TOTAL,
    live_preview,
    parse_amount,
    status_badge,
)


class TestParseAmount:
    """Test form value parsing."""

    def test_numbers_pass_through(self):
        assert parse_amount(5000) == 5000
        assert parse_amount(12.5) == 12.5

    def test_text(self):
        assert parse_amount("3333.33") == Decimal("3333.33")
        assert parse_amount("  42 ") == Decimal("42")
        assert parse_amount("12.5abc") == Decimal("12.5")
        assert parse_amount("-100") == Decimal("-100")

    @pytest.mark.parametrize("raw", ["", "abc", None, "."])
    def test_blank_or_garbage_is_zero(self, raw):
        assert parse_amount(raw) == Decimal("0")


class TestLivePreview:
    """Test live preview results."""

    def test_partially_paid(self):
        preview = live_preview("5000", "2000")
        assert preview.remaining_salary == Decimal("3000")
        assert preview.payment_status == "Partially Paid"
        assert preview.is_valid

    def test_pending(self):
        preview = live_preview("3000", "")
        assert preview.remaining_salary == Decimal("3000")
        assert preview.payment_status == "Pending"

    def test_paid(self):
        assert live_preview(4000, 4000).payment_status == "Paid"

    def test_empty_form_matches_engine(self):
        # 0/0 classifies exactly like the server does
        assert live_preview("", "").payment_status == "Paid"

    def test_negative_input_is_invalid(self):
        preview = live_preview("-100", "0")
        assert preview.payment_status == INVALID
        assert preview.remaining_salary == Decimal("0")
        assert not preview.is_valid

    def test_advance_exceeds_total(self):
        preview = live_preview("3000", "5000")
        assert preview.payment_status == INVALID_ADVANCE_EXCEEDS_TOTAL
        assert preview.remaining_salary == Decimal("0")

    def test_precision_the_server_rejects_is_invalid(self):
        assert live_preview("100.123", "0").payment_status == INVALID

    def test_never_raises_on_odd_input(self):
        for total, advance in [(float("nan"), 0), (None, None), (object(), "0")]:
            preview = live_preview(total, advance)
            assert preview.payment_status in (INVALID, "Paid")

    @pytest.mark.parametrize(
        "total, advance",
        [("5000", "2000"), ("4000", "4000"), ("3000", "0"), ("3333.33", "1111.11")],
    )
    def test_agrees_with_engine(self, total, advance):
        preview = live_preview(total, advance)
        result = calculate_salary_details(
            {"totalMonthlySalary": Decimal(total), "advanceAmountPaid": Decimal(advance)}
        )
        assert preview.remaining_salary == result.remaining_salary_payable
        assert preview.payment_status == result.payment_status.value


class TestStatusBadge:
    def test_badges(self):
        assert status_badge("Paid") == "status-paid"
        assert status_badge("Partially Paid") == "status-partial"
        assert status_badge("Pending") == "status-pending"
        assert status_badge(INVALID_ADVANCE_EXCEEDS_TOTAL) == "status-invalid"
