"""Tests for the HECM estimator.

The principal limit factor under test is a heuristic approximation, not the
HUD table; these tests pin the heuristic, not real HECM figures.
"""

import pytest

from src.reverse import (
    FHA_MAX_CLAIM,
    OTHER_CLOSING_COSTS,
    ReverseMortgageInputs,
    calculate_reverse_mortgage,
    equity_breakdown,
    principal_limit_factor,
)


class TestEligibility:
    """Tests for the age gate."""

    def test_age_61_not_eligible(self):
        result = calculate_reverse_mortgage(ReverseMortgageInputs(age=61))

        assert result.is_eligible is False
        assert result.net_cash_available == 0
        assert result.gross_principal_limit == 0

    def test_age_62_eligible(self):
        result = calculate_reverse_mortgage(ReverseMortgageInputs(age=62, expected_rate_pct=5.0))

        assert result.is_eligible is True
        assert result.principal_limit_factor == pytest.approx(0.38)


class TestPrincipalLimitFactor:
    """Tests for the approximate PLF."""

    def test_rate_adjustment_at_62(self):
        assert principal_limit_factor(62, 7.25) == pytest.approx(0.38 - 2.25 * 0.04)

    def test_increases_with_age(self):
        assert principal_limit_factor(80, 6.0) > principal_limit_factor(70, 6.0)

    def test_decreases_with_rate(self):
        assert principal_limit_factor(70, 8.0) < principal_limit_factor(70, 6.0)

    def test_clamped_to_maximum(self):
        assert principal_limit_factor(100, 3.0) == 0.75

    def test_clamped_to_minimum(self):
        assert principal_limit_factor(62, 15.0) == 0.10


class TestCalculateReverseMortgage:
    """Tests for gross limit, costs and net cash."""

    def test_default_estimate(self):
        """Age 72 at 7.25% on a $650k home with $120k to pay off."""
        result = calculate_reverse_mortgage(ReverseMortgageInputs())

        assert result.principal_limit_factor == pytest.approx(0.40)
        assert result.gross_principal_limit == pytest.approx(260000)
        assert result.closing_costs == pytest.approx(650000 * 0.02 + OTHER_CLOSING_COSTS)
        assert result.payoff_amount == 120000
        assert result.net_cash_available == pytest.approx(260000 - 18500 - 120000)
        assert result.ltv_percent == pytest.approx(40.0)

    def test_home_value_capped_at_fha_limit(self):
        inputs = ReverseMortgageInputs(home_value=2000000, current_balance=0)
        result = calculate_reverse_mortgage(inputs)

        assert result.gross_principal_limit == pytest.approx(FHA_MAX_CLAIM * 0.40)
        assert result.closing_costs == pytest.approx(FHA_MAX_CLAIM * 0.02 + OTHER_CLOSING_COSTS)
        assert result.ltv_percent == pytest.approx(FHA_MAX_CLAIM * 0.40 / 2000000 * 100)

    def test_net_cash_never_negative(self):
        inputs = ReverseMortgageInputs(current_balance=400000)
        result = calculate_reverse_mortgage(inputs)

        assert result.net_cash_available == 0.0

    def test_zero_home_value(self):
        result = calculate_reverse_mortgage(ReverseMortgageInputs(home_value=0, current_balance=0))

        assert result.ltv_percent == 0.0
        assert result.net_cash_available == 0.0

    def test_equity_breakdown(self):
        inputs = ReverseMortgageInputs()
        result = calculate_reverse_mortgage(inputs)
        breakdown = dict(equity_breakdown(inputs, result))

        assert breakdown['Cash to You'] == result.net_cash_available
        assert breakdown['Remaining Equity'] == pytest.approx(650000 - 260000)
