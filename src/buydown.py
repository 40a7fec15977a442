"""Rate buydown strategies: temporary 2-1 / 1-0 and permanent discount points."""

import pandas as pd
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .mortgage import Mortgage

# Industry rules of thumb, not lender pricing:
# one discount point lowers the rate by 0.25 percentage points and costs 1%
# of the loan amount.
RATE_REDUCTION_PER_POINT = 0.25
POINT_COST_PCT = 1.0


class BuydownStrategy(Enum):
    TEMPORARY_2_1 = "2-1-temporary"
    TEMPORARY_1_0 = "1-0-temporary"
    PERMANENT = "permanent"


@dataclass(frozen=True)
class BuydownInputs:
    loan_amount: float = 400000.0
    base_rate_pct: float = 7.0
    term_years: int = 30
    strategy: BuydownStrategy = BuydownStrategy.TEMPORARY_2_1
    points: float = 1.0  # only used by the permanent strategy


@dataclass(frozen=True)
class BuydownPeriod:
    """One row of a buydown schedule."""

    label: str
    rate_pct: float
    monthly_payment: float
    savings: float  # annual for temporary periods, lifetime for permanent


@dataclass(frozen=True)
class BuydownResult:
    strategy: BuydownStrategy
    base_payment: float
    total_cost: float
    schedule: List[BuydownPeriod] = field(default_factory=list)

    def schedule_frame(self) -> pd.DataFrame:
        return pd.DataFrame([
            {
                'period': period.label,
                'rate': period.rate_pct,
                'payment': round(period.monthly_payment, 2),
                'savings': round(period.savings, 2),
            }
            for period in self.schedule
        ])

    def to_dict(self) -> dict:
        return {
            'strategy': self.strategy.value,
            'base_payment': self.base_payment,
            'total_cost': self.total_cost,
            'schedule': [
                {
                    'period': period.label,
                    'rate': period.rate_pct,
                    'payment': period.monthly_payment,
                    'savings': period.savings,
                }
                for period in self.schedule
            ],
        }


def _temporary_schedule(
    inputs: BuydownInputs,
    term_years: int,
    base_payment: float,
    discounts: List[float],
) -> List[BuydownPeriod]:
    """Discount the first years by ``discounts`` points, then revert to base."""
    schedule = []
    for year, discount in enumerate(discounts, start=1):
        rate = max(0.0, inputs.base_rate_pct - discount)
        payment = Mortgage(inputs.loan_amount, rate, term_years).monthly_payment
        schedule.append(BuydownPeriod(
            label=f"Year {year}",
            rate_pct=rate,
            monthly_payment=payment,
            savings=(base_payment - payment) * 12,
        ))

    first_base_year = len(discounts) + 1
    if term_years > first_base_year:
        label = f"Years {first_base_year}-{term_years}"
    elif term_years == first_base_year:
        label = f"Year {first_base_year}"
    else:
        # Term ends inside the discounted years
        label = f"Year {first_base_year}+"

    schedule.append(BuydownPeriod(
        label=label,
        rate_pct=inputs.base_rate_pct,
        monthly_payment=base_payment,
        savings=0.0,
    ))
    return schedule


def calculate_buydown(inputs: BuydownInputs) -> BuydownResult:
    """Build the payment schedule and upfront cost for the chosen strategy.

    Temporary buydowns are funded by the payment shortfall they cover, so the
    cost is the sum of the discounted years' savings. A permanent buydown
    costs its points and reports undiscounted savings over the full term.
    """
    term_years = max(1, inputs.term_years)
    base_payment = Mortgage(inputs.loan_amount, inputs.base_rate_pct, term_years).monthly_payment

    if inputs.strategy == BuydownStrategy.TEMPORARY_2_1:
        schedule = _temporary_schedule(inputs, term_years, base_payment, [2.0, 1.0])
        total_cost = sum(period.savings for period in schedule)
    elif inputs.strategy == BuydownStrategy.TEMPORARY_1_0:
        schedule = _temporary_schedule(inputs, term_years, base_payment, [1.0])
        total_cost = sum(period.savings for period in schedule)
    else:
        reduction = inputs.points * RATE_REDUCTION_PER_POINT
        rate = max(0.0, inputs.base_rate_pct - reduction)
        payment = Mortgage(inputs.loan_amount, rate, term_years).monthly_payment
        schedule = [BuydownPeriod(
            label="Entire Term",
            rate_pct=rate,
            monthly_payment=payment,
            savings=(base_payment - payment) * 12 * term_years,
        )]
        total_cost = inputs.points * POINT_COST_PCT / 100 * inputs.loan_amount

    return BuydownResult(
        strategy=inputs.strategy,
        base_payment=base_payment,
        total_cost=total_cost,
        schedule=schedule,
    )
