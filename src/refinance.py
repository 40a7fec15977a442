"""Refinance comparison and break-even analysis."""

import pandas as pd
from dataclasses import asdict, dataclass
from typing import Optional

from .mortgage import Mortgage

# The existing loan is always priced as a 30-year fixed so the two payments
# are comparable without knowing the borrower's original term.
CURRENT_LOAN_TERM_YEARS = 30


@dataclass(frozen=True)
class RefinanceInputs:
    """Current loan and the proposed refinance."""

    current_balance: float = 350000.0
    current_rate_pct: float = 7.25
    new_rate_pct: float = 5.75
    new_term_years: int = 30
    closing_costs: float = 6000.0


@dataclass(frozen=True)
class RefinanceResult:
    current_payment: float
    new_payment: float
    monthly_savings: float  # negative when the refinance raises the payment
    break_even_months: Optional[float]  # None: never breaks even

    @property
    def breaks_even(self) -> bool:
        return self.break_even_months is not None

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_refinance(inputs: RefinanceInputs) -> RefinanceResult:
    """Compare the current payment against the proposed one.

    Break-even is closing costs divided by monthly savings, and only exists
    when the refinance actually lowers the payment.
    """
    current = Mortgage(inputs.current_balance, inputs.current_rate_pct, CURRENT_LOAN_TERM_YEARS)
    proposed = Mortgage(inputs.current_balance, inputs.new_rate_pct, max(1, inputs.new_term_years))

    current_payment = current.monthly_payment
    new_payment = proposed.monthly_payment
    monthly_savings = current_payment - new_payment

    if monthly_savings > 0:
        break_even_months = inputs.closing_costs / monthly_savings
    else:
        break_even_months = None

    return RefinanceResult(
        current_payment=current_payment,
        new_payment=new_payment,
        monthly_savings=monthly_savings,
        break_even_months=break_even_months,
    )


def generate_break_even_chart_data(
    inputs: RefinanceInputs,
    months_to_show: int = 120,
) -> pd.DataFrame:
    """Generate data for break-even visualization.

    Shows cumulative cost of keeping the current loan against refinancing,
    with closing costs paid upfront on the refinance path.
    """
    result = calculate_refinance(inputs)
    new_term_months = max(1, inputs.new_term_years) * 12
    current_term_months = CURRENT_LOAN_TERM_YEARS * 12

    data = []
    current_cumulative = 0.0
    new_cumulative = inputs.closing_costs

    for month in range(1, months_to_show + 1):
        if month <= current_term_months:
            current_cumulative += result.current_payment

        if month <= new_term_months:
            new_cumulative += result.new_payment

        data.append({
            'month': month,
            'current_cumulative': round(current_cumulative, 2),
            'new_cumulative': round(new_cumulative, 2),
            'savings': round(current_cumulative - new_cumulative, 2),
        })

    return pd.DataFrame(data)
