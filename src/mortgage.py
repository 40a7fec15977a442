"""Core amortization engine shared by every calculator."""

import pandas as pd
from dataclasses import dataclass


@dataclass(frozen=True)
class Mortgage:
    """A fixed-rate loan.

    No validation is performed here: callers clamp degenerate inputs before
    building a Mortgage.
    """

    principal: float
    annual_rate_pct: float  # as percent, e.g., 6.5 for 6.5%
    term_years: int

    @property
    def monthly_rate(self) -> float:
        """Convert annual percentage rate to monthly decimal rate."""
        return self.annual_rate_pct / 100 / 12

    @property
    def term_months(self) -> int:
        return self.term_years * 12

    @property
    def monthly_payment(self) -> float:
        """Calculate monthly payment using standard amortization formula.

        M = P * [r(1+r)^n] / [(1+r)^n - 1]
        """
        r = self.monthly_rate
        n = self.term_months
        p = self.principal

        if r == 0:
            return p / n

        return p * (r * (1 + r)**n) / ((1 + r)**n - 1)

    @property
    def total_payment(self) -> float:
        """Total amount paid over the life of the loan."""
        return self.monthly_payment * self.term_months

    @property
    def total_interest(self) -> float:
        """Total interest paid over the life of the loan."""
        return self.total_payment - self.principal

    def balance_at_month(self, month: int) -> float:
        """Calculate remaining balance after a specific number of payments.

        B = P * [(1+r)^n - (1+r)^k] / [(1+r)^n - 1]
        where k is payments made
        """
        if month <= 0:
            return self.principal
        if month >= self.term_months:
            return 0.0

        r = self.monthly_rate
        n = self.term_months
        p = self.principal

        if r == 0:
            return p * (1 - month / n)

        return p * ((1 + r)**n - (1 + r)**month) / ((1 + r)**n - 1)

    def amortization_schedule(self) -> pd.DataFrame:
        """Generate full amortization schedule.

        Returns DataFrame with columns:
        - month: payment number (1-indexed)
        - payment: monthly payment amount
        - principal: principal portion of payment
        - interest: interest portion of payment
        - balance: remaining balance after payment
        - cumulative_interest: total interest paid to date
        - cumulative_principal: total principal paid to date
        """
        schedule = []
        balance = self.principal
        cumulative_interest = 0.0
        cumulative_principal = 0.0
        payment = self.monthly_payment

        for month in range(1, self.term_months + 1):
            interest = balance * self.monthly_rate
            principal_paid = payment - interest

            # Final payment absorbs rounding drift
            if month == self.term_months:
                principal_paid = balance
                payment = principal_paid + interest

            balance -= principal_paid
            cumulative_interest += interest
            cumulative_principal += principal_paid

            schedule.append({
                'month': month,
                'payment': round(payment, 2),
                'principal': round(principal_paid, 2),
                'interest': round(interest, 2),
                'balance': round(max(0, balance), 2),
                'cumulative_interest': round(cumulative_interest, 2),
                'cumulative_principal': round(cumulative_principal, 2),
            })

        return pd.DataFrame(schedule)


def standard_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Monthly principal-and-interest payment for a fixed-rate loan."""
    return Mortgage(principal, annual_rate_pct, term_years).monthly_payment


def remaining_balance(
    principal: float,
    annual_rate_pct: float,
    term_years: int,
    months_elapsed: int,
) -> float:
    """Outstanding balance after ``months_elapsed`` scheduled payments."""
    return Mortgage(principal, annual_rate_pct, term_years).balance_at_month(months_elapsed)
