"""Property-based tests for the salary calculation invariants.

Amounts are generated as whole cents, then fed to the engine both as
Decimal and as float, the two shapes callers actually send.
"""

from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from salary_tracker.calculators import (
    AdvanceExceedsTotalError,
    NegativeAmountError,
    PaymentStatus,
    calculate_advance_percentage,
    calculate_remaining_salary,
    calculate_salary_details,
    determine_payment_status,
    round_money,
)
from salary_tracker.preview import live_preview

MAX_CENTS = 10**10


@st.composite
def salary_pairs(draw, as_float: bool = False):
    """Valid (total, advance) pairs with advance <= total."""
    total_cents = draw(st.integers(min_value=0, max_value=MAX_CENTS))
    advance_cents = draw(st.integers(min_value=0, max_value=total_cents))
    if as_float:
        return total_cents / 100, advance_cents / 100
    return Decimal(total_cents) / 100, Decimal(advance_cents) / 100


class TestRemainingSalaryProperties:
    @given(salary_pairs())
    def test_remaining_is_rounded_difference_within_bounds(self, pair):
        total, advance = pair
        remaining = calculate_remaining_salary(total, advance)

        assert remaining == round_money(total - advance)
        assert Decimal("0") <= remaining <= total

    @given(salary_pairs())
    def test_advance_plus_remaining_is_total(self, pair):
        total, advance = pair
        assert advance + calculate_remaining_salary(total, advance) == total

    @given(salary_pairs(as_float=True))
    def test_float_inputs_balance_within_a_cent(self, pair):
        total, advance = pair
        remaining = calculate_remaining_salary(total, advance)
        assert abs(Decimal(repr(advance)) + remaining - Decimal(repr(total))) <= Decimal("0.01")

    @given(salary_pairs(as_float=True))
    def test_deterministic(self, pair):
        total, advance = pair
        first = calculate_remaining_salary(total, advance)
        assert all(calculate_remaining_salary(total, advance) == first for _ in range(3))


class TestPaymentStatusProperties:
    @given(salary_pairs())
    def test_classification(self, pair):
        total, advance = pair
        remaining = calculate_remaining_salary(total, advance)
        status = determine_payment_status(total, advance)

        if remaining == 0:
            assert status == PaymentStatus.PAID
        elif advance > 0:
            assert status == PaymentStatus.PARTIALLY_PAID
        else:
            assert status == PaymentStatus.PENDING

    @given(salary_pairs())
    def test_details_agree_with_parts(self, pair):
        total, advance = pair
        result = calculate_salary_details(
            {"totalMonthlySalary": total, "advanceAmountPaid": advance}
        )
        assert result.remaining_salary_payable == calculate_remaining_salary(total, advance)
        assert result.payment_status == determine_payment_status(total, advance)

    @given(salary_pairs())
    def test_preview_matches_engine(self, pair):
        total, advance = pair
        preview = live_preview(str(total), str(advance))
        assert preview.remaining_salary == calculate_remaining_salary(total, advance)
        assert preview.payment_status == determine_payment_status(total, advance).value


class TestPercentageProperties:
    @given(salary_pairs())
    def test_percentage_between_zero_and_hundred(self, pair):
        total, advance = pair
        assert Decimal("0") <= calculate_advance_percentage(total, advance) <= Decimal("100")


class TestInvalidInputs:
    @given(
        st.integers(min_value=0, max_value=MAX_CENTS),
        st.integers(min_value=1, max_value=MAX_CENTS),
    )
    def test_advance_over_total_always_fails(self, total_cents, excess_cents):
        total = Decimal(total_cents) / 100
        advance = total + Decimal(excess_cents) / 100
        with pytest.raises(AdvanceExceedsTotalError):
            calculate_remaining_salary(total, advance)
        with pytest.raises(AdvanceExceedsTotalError):
            calculate_salary_details({"totalMonthlySalary": total, "advanceAmountPaid": advance})

    @given(st.integers(min_value=1, max_value=MAX_CENTS))
    def test_negative_total_always_fails(self, cents):
        with pytest.raises(NegativeAmountError):
            determine_payment_status(-Decimal(cents) / 100, 0)
