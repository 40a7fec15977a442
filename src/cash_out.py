"""Cash-out refinance: new loan size, loan-to-value and payment."""

from dataclasses import asdict, dataclass

from .mortgage import Mortgage

# Typical lender ceiling for cash-out LTV. Surfaced as a warning only.
LTV_WARNING_THRESHOLD = 80.0


@dataclass(frozen=True)
class CashOutInputs:
    home_value: float = 550000.0
    current_balance: float = 250000.0
    cash_requested: float = 50000.0
    new_rate_pct: float = 6.25
    new_term_years: int = 30


@dataclass(frozen=True)
class CashOutResult:
    new_loan_amount: float
    ltv_percent: float
    new_monthly_pi: float
    total_cash_to_borrower: float

    @property
    def exceeds_ltv_cap(self) -> bool:
        """True when the raw LTV is above the usual 80% lender cap."""
        return self.ltv_percent > LTV_WARNING_THRESHOLD

    def to_dict(self) -> dict:
        data = asdict(self)
        data['exceeds_ltv_cap'] = self.exceeds_ltv_cap
        return data


def calculate_cash_out(inputs: CashOutInputs) -> CashOutResult:
    """Size the new loan as balance plus cash requested.

    The LTV is reported unclamped; a value above 100 is a valid result.
    """
    new_loan_amount = inputs.current_balance + inputs.cash_requested

    if inputs.home_value > 0:
        ltv_percent = new_loan_amount / inputs.home_value * 100
    elif new_loan_amount > 0:
        ltv_percent = float('inf')
    else:
        ltv_percent = 0.0

    mortgage = Mortgage(new_loan_amount, inputs.new_rate_pct, max(1, inputs.new_term_years))

    return CashOutResult(
        new_loan_amount=new_loan_amount,
        ltv_percent=ltv_percent,
        new_monthly_pi=mortgage.monthly_payment,
        total_cash_to_borrower=inputs.cash_requested,
    )
