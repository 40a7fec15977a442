"""Purchase calculator: monthly payment breakdown for a new home loan."""

from dataclasses import asdict, dataclass
from typing import List, Tuple

from .mortgage import Mortgage


@dataclass(frozen=True)
class PurchaseInputs:
    """Parameters of a new-purchase loan."""

    home_price: float = 450000.0
    down_payment: float = 90000.0
    interest_rate_pct: float = 6.5
    term_years: int = 30
    yearly_tax: float = 5400.0
    yearly_insurance: float = 1200.0

    @property
    def principal(self) -> float:
        """Financed amount; a down payment above the price finances nothing."""
        return max(0.0, self.home_price - self.down_payment)

    @property
    def down_payment_pct(self) -> float:
        if self.home_price <= 0:
            return 0.0
        return self.down_payment / self.home_price * 100


@dataclass(frozen=True)
class PurchaseResult:
    principal: float
    monthly_pi: float
    monthly_tax: float
    monthly_insurance: float
    total_monthly: float
    total_interest: float
    total_payment: float

    def payment_breakdown(self) -> List[Tuple[str, float]]:
        """Monthly components as (label, amount) slices for a pie chart."""
        return [
            ('Principal & Interest', self.monthly_pi),
            ('Property Tax', self.monthly_tax),
            ('Home Insurance', self.monthly_insurance),
        ]

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_purchase(inputs: PurchaseInputs) -> PurchaseResult:
    """Compute the monthly P&I, escrow and lifetime totals of a purchase.

    Taxes and insurance are divided straight-line over twelve months.
    Total payment covers the full monthly outlay over every payment.
    """
    term_years = max(1, inputs.term_years)
    mortgage = Mortgage(inputs.principal, inputs.interest_rate_pct, term_years)

    monthly_pi = mortgage.monthly_payment
    monthly_tax = inputs.yearly_tax / 12
    monthly_insurance = inputs.yearly_insurance / 12
    total_monthly = monthly_pi + monthly_tax + monthly_insurance

    return PurchaseResult(
        principal=mortgage.principal,
        monthly_pi=monthly_pi,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        total_monthly=total_monthly,
        total_interest=mortgage.total_interest,
        total_payment=total_monthly * mortgage.term_months,
    )
