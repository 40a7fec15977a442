"""Year-by-year rent versus buy projection."""

import pandas as pd
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .mortgage import Mortgage

MIN_DURATION_YEARS = 1
MAX_DURATION_YEARS = 30


@dataclass(frozen=True)
class RentVsBuyAssumptions:
    """Fixed buying assumptions.

    Tax, insurance and maintenance rates apply to the appreciated home
    value of each year, not the purchase price.
    """

    down_payment_pct: float = 20.0
    mortgage_rate_pct: float = 6.5
    loan_term_years: int = 30
    closing_costs_pct: float = 2.0
    maintenance_pct: float = 1.0
    property_tax_pct: float = 1.2
    insurance_pct: float = 0.3


@dataclass(frozen=True)
class RentVsBuyInputs:
    home_price: float = 500000.0
    monthly_rent: float = 2800.0
    appreciation_pct: float = 4.0
    rent_increase_pct: float = 3.0
    duration_years: int = 15
    assumptions: RentVsBuyAssumptions = field(default_factory=RentVsBuyAssumptions)

    @property
    def horizon(self) -> int:
        return min(max(self.duration_years, MIN_DURATION_YEARS), MAX_DURATION_YEARS)


@dataclass(frozen=True)
class RentVsBuyYearPoint:
    year: int
    cumulative_rent_cost: float
    net_buying_cost: float
    home_value: float
    remaining_balance: float
    equity: float


class RentVsBuyProjection:
    """Restartable sequence of year points, years 0 through the horizon.

    Every iteration replays the simulation from year 0.
    """

    def __init__(self, inputs: RentVsBuyInputs):
        self.inputs = inputs

    def __len__(self) -> int:
        return self.inputs.horizon + 1

    def __iter__(self) -> Iterator[RentVsBuyYearPoint]:
        inputs = self.inputs
        assumptions = inputs.assumptions

        down_payment = inputs.home_price * assumptions.down_payment_pct / 100
        loan_amount = inputs.home_price - down_payment
        closing_costs = inputs.home_price * assumptions.closing_costs_pct / 100
        mortgage = Mortgage(loan_amount, assumptions.mortgage_rate_pct, assumptions.loan_term_years)
        annual_pi = mortgage.monthly_payment * 12

        cumulative_rent = 0.0
        current_rent = inputs.monthly_rent
        cumulative_buy_expenses = down_payment + closing_costs

        yield RentVsBuyYearPoint(
            year=0,
            cumulative_rent_cost=0.0,
            net_buying_cost=cumulative_buy_expenses,
            home_value=inputs.home_price,
            remaining_balance=loan_amount,
            equity=down_payment,
        )

        for year in range(1, inputs.horizon + 1):
            # Rent is charged for this year, then grows for the next one
            cumulative_rent += current_rent * 12
            current_rent *= 1 + inputs.rent_increase_pct / 100

            home_value = inputs.home_price * (1 + inputs.appreciation_pct / 100) ** year
            balance = mortgage.balance_at_month(year * 12)

            cumulative_buy_expenses += (
                annual_pi
                + home_value * assumptions.property_tax_pct / 100
                + home_value * assumptions.insurance_pct / 100
                + home_value * assumptions.maintenance_pct / 100
            )

            equity = home_value - balance
            yield RentVsBuyYearPoint(
                year=year,
                cumulative_rent_cost=cumulative_rent,
                net_buying_cost=cumulative_buy_expenses - equity,
                home_value=home_value,
                remaining_balance=balance,
                equity=equity,
            )


@dataclass(frozen=True)
class RentVsBuyResult:
    points: List[RentVsBuyYearPoint]
    crossover_year: Optional[int]  # None: buying never wins within the horizon

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame([
            {
                'year': p.year,
                'rent_cost': round(p.cumulative_rent_cost, 2),
                'buy_cost': round(p.net_buying_cost, 2),
                'home_value': round(p.home_value, 2),
                'equity': round(p.equity, 2),
            }
            for p in self.points
        ])
        df['buy_advantage'] = (df['rent_cost'] - df['buy_cost']).round(2)
        return df

    def to_dict(self) -> dict:
        final = self.points[-1]
        return {
            'crossover_year': self.crossover_year,
            'final_year': final.year,
            'final_cumulative_rent': final.cumulative_rent_cost,
            'final_net_buying_cost': final.net_buying_cost,
            'final_equity': final.equity,
        }


def find_crossover_year(points) -> Optional[int]:
    """First year whose net buying cost is below cumulative rent."""
    for point in points:
        if point.year > 0 and point.net_buying_cost < point.cumulative_rent_cost:
            return point.year
    return None


def simulate_rent_vs_buy(inputs: RentVsBuyInputs) -> RentVsBuyResult:
    """Run the projection and locate the first crossover year."""
    points = list(RentVsBuyProjection(inputs))
    return RentVsBuyResult(points=points, crossover_year=find_crossover_year(points))
