"""Tests for core mortgage calculations."""

import pytest
from src.mortgage import Mortgage, remaining_balance, standard_payment


class TestMortgage:
    """Tests for Mortgage class."""

    def test_monthly_payment_calculation(self):
        """Test standard amortization formula."""
        # $300,000 at 6.5% for 30 years
        mortgage = Mortgage(principal=300000, annual_rate_pct=6.5, term_years=30)

        # Expected: ~$1,896.20
        assert abs(mortgage.monthly_payment - 1896.20) < 0.10

    def test_monthly_payment_zero_rate(self):
        """Test edge case of 0% interest."""
        mortgage = Mortgage(principal=120000, annual_rate_pct=0.0, term_years=10)

        assert mortgage.monthly_payment == 1000.0

    def test_zero_principal(self):
        """A zero loan has a zero payment."""
        mortgage = Mortgage(principal=0, annual_rate_pct=6.5, term_years=30)

        assert mortgage.monthly_payment == 0.0

    def test_total_interest(self):
        """Total paid equals principal plus interest."""
        mortgage = Mortgage(principal=300000, annual_rate_pct=6.5, term_years=30)

        expected_total = mortgage.monthly_payment * 360
        assert mortgage.total_payment == pytest.approx(expected_total)
        assert mortgage.principal + mortgage.total_interest == pytest.approx(expected_total)

    def test_balance_at_month(self):
        """Test remaining balance calculation."""
        mortgage = Mortgage(principal=300000, annual_rate_pct=6.5, term_years=30)

        # Balance at month 0 should equal principal
        assert mortgage.balance_at_month(0) == 300000

        # Balance at end should be 0
        assert mortgage.balance_at_month(360) == 0.0

        # Balance should decrease over time
        assert mortgage.balance_at_month(60) > mortgage.balance_at_month(120)

    def test_balance_zero_rate_is_linear(self):
        """Zero-rate loans pay down in equal steps."""
        mortgage = Mortgage(principal=120000, annual_rate_pct=0.0, term_years=10)

        assert mortgage.balance_at_month(60) == pytest.approx(60000)

    def test_balance_matches_schedule(self):
        """Closed-form balance agrees with the iterated schedule."""
        mortgage = Mortgage(principal=250000, annual_rate_pct=5.5, term_years=30)
        schedule = mortgage.amortization_schedule()

        assert schedule.iloc[119]['balance'] == pytest.approx(mortgage.balance_at_month(120), abs=0.01)

    def test_amortization_schedule_length(self):
        """Test that schedule has correct number of rows."""
        mortgage = Mortgage(principal=200000, annual_rate_pct=5.0, term_years=15)

        schedule = mortgage.amortization_schedule()
        assert len(schedule) == 180

    def test_amortization_schedule_final_balance(self):
        """Test that final balance is zero."""
        mortgage = Mortgage(principal=250000, annual_rate_pct=5.5, term_years=30)

        schedule = mortgage.amortization_schedule()
        assert schedule.iloc[-1]['balance'] == 0.0

    def test_amortization_schedule_principal_sum(self):
        """Test that total principal paid equals original principal."""
        mortgage = Mortgage(principal=200000, annual_rate_pct=6.0, term_years=20)

        schedule = mortgage.amortization_schedule()

        # Allow for small rounding differences
        assert abs(schedule['principal'].sum() - 200000) < 1.0

    def test_15_year_vs_30_year(self):
        """Test that 15-year loan has higher payment but less total interest."""
        mortgage_30 = Mortgage(principal=300000, annual_rate_pct=6.5, term_years=30)
        mortgage_15 = Mortgage(principal=300000, annual_rate_pct=6.0, term_years=15)

        assert mortgage_15.monthly_payment > mortgage_30.monthly_payment
        assert mortgage_15.total_interest < mortgage_30.total_interest


class TestStandardPayment:
    """Tests for the standalone payment and balance functions."""

    def test_matches_mortgage_class(self):
        """Test that standalone function matches class property."""
        standalone = standard_payment(250000, 7.0, 30)
        mortgage = Mortgage(250000, 7.0, 30)

        assert standalone == mortgage.monthly_payment

    def test_zero_rate_is_straight_division(self):
        assert standard_payment(90000, 0, 15) == 90000 / 180

    def test_payment_never_negative(self):
        for principal in [0, 1, 150000, 2000000]:
            for rate in [0, 0.5, 6.5, 18]:
                for term in [1, 15, 30]:
                    assert standard_payment(principal, rate, term) >= 0

    def test_negative_principal_does_not_raise(self):
        """Unvalidated input yields a nonsensical but finite payment."""
        assert standard_payment(-100000, 6.0, 30) < 0

    def test_remaining_balance(self):
        mortgage = Mortgage(400000, 6.5, 30)

        assert remaining_balance(400000, 6.5, 30, 180) == mortgage.balance_at_month(180)
        assert remaining_balance(400000, 6.5, 30, 0) == 400000
        assert remaining_balance(400000, 6.5, 30, 360) == 0.0
