"""Reverse mortgage (HECM) estimator.

The principal limit factor used here is a heuristic approximation, not the
HUD PLF lookup table. Results are for illustration and must not be used for
real HECM underwriting.
"""

from dataclasses import asdict, dataclass
from typing import List, Tuple

HECM_MIN_AGE = 62

# FHA maximum claim amount (2024 national limit)
FHA_MAX_CLAIM = 1149825.0

# PLF heuristic: 0.38 at age 62, about 1.1% more per year of age, reduced by
# 4% of every point the expected rate sits above 5%.
PLF_BASE = 0.38
PLF_PER_YEAR_OF_AGE = 0.011
PLF_REFERENCE_RATE_PCT = 5.0
PLF_RATE_PENALTY = 0.04
PLF_MIN = 0.10
PLF_MAX = 0.75

UPFRONT_MIP_RATE = 0.02
OTHER_CLOSING_COSTS = 5500.0


@dataclass(frozen=True)
class ReverseMortgageInputs:
    age: int = 72
    home_value: float = 650000.0
    current_balance: float = 120000.0  # existing mortgage paid off at closing
    expected_rate_pct: float = 7.25


@dataclass(frozen=True)
class ReverseMortgageResult:
    """Estimator output. Monetary fields are meaningless when not eligible."""

    is_eligible: bool
    principal_limit_factor: float = 0.0
    gross_principal_limit: float = 0.0
    closing_costs: float = 0.0
    payoff_amount: float = 0.0
    net_cash_available: float = 0.0
    ltv_percent: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def principal_limit_factor(age: int, expected_rate_pct: float) -> float:
    """Approximate PLF from borrower age and expected rate, clamped to [0.10, 0.75]."""
    rate_adjustment = (expected_rate_pct - PLF_REFERENCE_RATE_PCT) * PLF_RATE_PENALTY
    base_plf = PLF_BASE + (age - HECM_MIN_AGE) * PLF_PER_YEAR_OF_AGE - rate_adjustment
    return min(max(base_plf, PLF_MIN), PLF_MAX)


def calculate_reverse_mortgage(inputs: ReverseMortgageInputs) -> ReverseMortgageResult:
    """Estimate the gross principal limit and net cash for a HECM."""
    if inputs.age < HECM_MIN_AGE:
        return ReverseMortgageResult(is_eligible=False)

    effective_value = min(inputs.home_value, FHA_MAX_CLAIM)
    plf = principal_limit_factor(inputs.age, inputs.expected_rate_pct)
    gross_principal_limit = effective_value * plf

    closing_costs = effective_value * UPFRONT_MIP_RATE + OTHER_CLOSING_COSTS
    net_cash = max(0.0, gross_principal_limit - closing_costs - inputs.current_balance)

    if inputs.home_value > 0:
        ltv_percent = gross_principal_limit / inputs.home_value * 100
    else:
        ltv_percent = 0.0

    return ReverseMortgageResult(
        is_eligible=True,
        principal_limit_factor=plf,
        gross_principal_limit=gross_principal_limit,
        closing_costs=closing_costs,
        payoff_amount=inputs.current_balance,
        net_cash_available=net_cash,
        ltv_percent=ltv_percent,
    )


def equity_breakdown(
    inputs: ReverseMortgageInputs,
    result: ReverseMortgageResult,
) -> List[Tuple[str, float]]:
    """Split the home value into payoff, costs, cash and retained equity."""
    return [
        ('Existing Mortgage Payoff', result.payoff_amount),
        ('Closing Costs & Fees', result.closing_costs),
        ('Cash to You', result.net_cash_available),
        ('Remaining Equity', max(0.0, inputs.home_value - result.gross_principal_limit)),
    ]
