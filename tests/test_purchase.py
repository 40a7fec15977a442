"""Tests for the purchase calculator."""

import pytest

from src.purchase import PurchaseInputs, calculate_purchase


class TestCalculatePurchase:
    """Tests for purchase payment breakdown."""

    def test_default_purchase(self):
        """$450k home, $90k down, 6.5% for 30 years."""
        result = calculate_purchase(PurchaseInputs())

        assert result.principal == 360000
        assert abs(result.monthly_pi - 2275.00) < 1
        assert result.monthly_tax == 450
        assert result.monthly_insurance == 100
        assert abs(result.total_monthly - 2825) < 1

    def test_total_monthly_is_sum_of_components(self):
        result = calculate_purchase(PurchaseInputs(yearly_tax=7300, yearly_insurance=1850))

        assert result.total_monthly == pytest.approx(
            result.monthly_pi + result.monthly_tax + result.monthly_insurance
        )

    def test_total_interest(self):
        result = calculate_purchase(PurchaseInputs())

        assert result.total_interest == pytest.approx(result.monthly_pi * 360 - 360000)

    def test_total_payment_includes_escrow(self):
        result = calculate_purchase(PurchaseInputs())

        assert result.total_payment == pytest.approx(result.total_monthly * 360)

    def test_down_payment_above_price_finances_nothing(self):
        """Negative principal clamps to zero instead of raising."""
        result = calculate_purchase(PurchaseInputs(home_price=200000, down_payment=250000))

        assert result.principal == 0
        assert result.monthly_pi == 0
        assert result.total_interest == 0
        assert result.total_monthly == pytest.approx(450 + 100)

    def test_zero_rate(self):
        inputs = PurchaseInputs(home_price=300000, down_payment=60000, interest_rate_pct=0, term_years=20)
        result = calculate_purchase(inputs)

        assert result.monthly_pi == 240000 / 240
        assert result.total_interest == pytest.approx(0)

    def test_zero_term_is_clamped(self):
        result = calculate_purchase(PurchaseInputs(term_years=0))

        assert result.monthly_pi > 0

    def test_down_payment_pct(self):
        assert PurchaseInputs().down_payment_pct == pytest.approx(20.0)
        assert PurchaseInputs(home_price=0).down_payment_pct == 0.0

    def test_payment_breakdown(self):
        result = calculate_purchase(PurchaseInputs())
        breakdown = dict(result.payment_breakdown())

        assert breakdown['Principal & Interest'] == result.monthly_pi
        assert breakdown['Property Tax'] == 450
        assert breakdown['Home Insurance'] == 100
