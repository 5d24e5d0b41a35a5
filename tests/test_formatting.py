"""Tests for currency display formatting."""

from decimal import Decimal

import pytest

from salary_tracker.calculators.formatting import WESTERN, format_currency


class TestFormatCurrency:
    """Test lenient currency formatting."""

    def test_indian_grouping_by_default(self):
        assert format_currency(1234567.891) == "₹12,34,567.89"
        assert format_currency(100000) == "₹1,00,000.00"
        assert format_currency(1000) == "₹1,000.00"
        assert format_currency(999) == "₹999.00"

    def test_two_decimals_always(self):
        assert format_currency(0) == "₹0.00"
        assert format_currency(Decimal("2222.2")) == "₹2,222.20"

    def test_custom_symbol_and_western_grouping(self):
        assert format_currency(1234567.5, "$", grouping=WESTERN) == "$1,234,567.50"

    def test_negative_amount(self):
        assert format_currency(-1500) == "₹-1,500.00"

    @pytest.mark.parametrize(
        "amount",
        [float("nan"), float("inf"), float("-inf"), "1000", None, Decimal("NaN")],
    )
    def test_invalid_input_renders_zero(self, amount):
        assert format_currency(amount) == "₹0.00"

    def test_invalid_input_keeps_symbol(self):
        assert format_currency(float("nan"), "$") == "$0.00"
