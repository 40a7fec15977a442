"""Tests for the cash-out calculator."""

import math

import pytest

from src.cash_out import LTV_WARNING_THRESHOLD, CashOutInputs, calculate_cash_out
from src.mortgage import standard_payment


class TestCalculateCashOut:
    """Tests for cash-out sizing."""

    def test_default_cash_out(self):
        result = calculate_cash_out(CashOutInputs())

        assert result.new_loan_amount == 300000
        assert result.ltv_percent == pytest.approx(300000 / 550000 * 100)
        assert result.new_monthly_pi == standard_payment(300000, 6.25, 30)
        assert result.total_cash_to_borrower == 50000
        assert not result.exceeds_ltv_cap

    def test_ltv_above_cap_is_flagged_not_rejected(self):
        inputs = CashOutInputs(home_value=500000, current_balance=380000, cash_requested=40000)
        result = calculate_cash_out(inputs)

        assert result.ltv_percent == pytest.approx(84.0)
        assert result.exceeds_ltv_cap
        assert result.new_monthly_pi > 0

    def test_ltv_exactly_at_cap_is_not_flagged(self):
        inputs = CashOutInputs(home_value=500000, current_balance=350000, cash_requested=50000)
        result = calculate_cash_out(inputs)

        assert result.ltv_percent == pytest.approx(LTV_WARNING_THRESHOLD)
        assert not result.exceeds_ltv_cap

    def test_ltv_over_100_is_not_clamped(self):
        inputs = CashOutInputs(home_value=200000, current_balance=220000, cash_requested=10000)
        result = calculate_cash_out(inputs)

        assert result.ltv_percent == pytest.approx(115.0)

    def test_zero_home_value(self):
        """Degenerate home value does not raise."""
        result = calculate_cash_out(CashOutInputs(home_value=0))
        assert math.isinf(result.ltv_percent)
        assert result.exceeds_ltv_cap

        empty = calculate_cash_out(CashOutInputs(home_value=0, current_balance=0, cash_requested=0))
        assert empty.ltv_percent == 0.0
        assert empty.new_monthly_pi == 0.0

    def test_to_dict_includes_cap_flag(self):
        data = calculate_cash_out(CashOutInputs()).to_dict()

        assert data['exceeds_ltv_cap'] is False
        assert data['new_loan_amount'] == 300000
