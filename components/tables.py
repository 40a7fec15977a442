"""Streamlit metric panels and tables for calculator results."""

import pandas as pd
import streamlit as st

from src.buydown import BuydownResult
from src.cash_out import LTV_WARNING_THRESHOLD, CashOutResult
from src.purchase import PurchaseResult
from src.refinance import RefinanceResult
from src.rent_vs_buy import RentVsBuyResult
from src.reverse import HECM_MIN_AGE, ReverseMortgageResult


def format_currency(value: float, decimals: int = 0) -> str:
    return f"${value:,.{decimals}f}"


def display_amortization_table(
    schedule: pd.DataFrame,
    title: str = "Amortization Schedule",
) -> None:
    """Display the schedule aggregated to one row per year."""
    st.subheader(title)

    schedule_copy = schedule.copy()
    schedule_copy['year'] = ((schedule_copy['month'] - 1) // 12) + 1

    yearly = schedule_copy.groupby('year').agg({
        'payment': 'sum',
        'principal': 'sum',
        'interest': 'sum',
        'balance': 'last',
    }).reset_index()

    yearly.columns = ['Year', 'Total Payments', 'Principal Paid', 'Interest Paid', 'End Balance']

    display_df = yearly.copy()
    for col in ['Total Payments', 'Principal Paid', 'Interest Paid', 'End Balance']:
        display_df[col] = display_df[col].apply(lambda x: f"${x:,.2f}")

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
    )


def display_purchase_summary(result: PurchaseResult) -> None:
    st.metric("Total Monthly Payment", format_currency(result.total_monthly, 2))

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Principal & Interest", format_currency(result.monthly_pi, 2))
    with col2:
        st.metric("Property Tax", format_currency(result.monthly_tax, 2))
    with col3:
        st.metric("Insurance", format_currency(result.monthly_insurance, 2))

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Loan Amount", format_currency(result.principal))
    with col2:
        st.metric("Total Interest", format_currency(result.total_interest))


def display_refinance_summary(result: RefinanceResult) -> None:
    """Display refinance comparison metrics."""
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Current Payment", format_currency(result.current_payment, 2))

    with col2:
        st.metric(
            "New Payment",
            format_currency(result.new_payment, 2),
            delta=f"${-result.monthly_savings:,.2f}/mo",
            delta_color="inverse",
        )

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Monthly Savings", format_currency(result.monthly_savings, 2))

    with col2:
        if result.breaks_even:
            months = result.break_even_months
            st.metric("Break-even", f"{months:.0f} months ({months / 12:.1f} years)")
        else:
            st.metric("Break-even", "Never")

    if not result.breaks_even:
        st.warning("The proposed loan does not lower the monthly payment, so closing costs are never recovered.")


def display_cash_out_summary(result: CashOutResult) -> None:
    col1, col2 = st.columns(2)

    with col1:
        st.metric("New Loan Amount", format_currency(result.new_loan_amount))
        st.metric("Cash to You", format_currency(result.total_cash_to_borrower))

    with col2:
        st.metric("New Monthly P&I", format_currency(result.new_monthly_pi, 2))
        st.metric("Loan-to-Value", f"{result.ltv_percent:.1f}%")

    if result.exceeds_ltv_cap:
        st.warning(
            f"LTV above {LTV_WARNING_THRESHOLD:.0f}%. Most lenders cap cash-out "
            "refinances at this level."
        )


def display_buydown_schedule(result: BuydownResult) -> None:
    """Display the buydown schedule with its upfront cost."""
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Upfront Cost", format_currency(result.total_cost))
    with col2:
        st.metric("Base Payment", format_currency(result.base_payment, 2))

    display_df = result.schedule_frame().rename(columns={
        'period': 'Period',
        'rate': 'Rate',
        'payment': 'Monthly Payment',
        'savings': 'Savings',
    })
    display_df['Rate'] = display_df['Rate'].apply(lambda x: f"{x:.3f}%")
    for col in ['Monthly Payment', 'Savings']:
        display_df[col] = display_df[col].apply(lambda x: f"${x:,.2f}")

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
    )


def display_reverse_mortgage_summary(result: ReverseMortgageResult) -> None:
    if not result.is_eligible:
        st.error(f"Not eligible: HECM borrowers must be at least {HECM_MIN_AGE} years old.")
        return

    st.metric("Net Cash Available", format_currency(result.net_cash_available))

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Gross Principal Limit", format_currency(result.gross_principal_limit))
        st.metric("Existing Mortgage Payoff", format_currency(result.payoff_amount))
    with col2:
        st.metric("Closing Costs & MIP", format_currency(result.closing_costs))
        st.metric("Principal Limit Factor", f"{result.principal_limit_factor:.1%}")

    st.caption(
        "The principal limit factor is a heuristic approximation of the HUD "
        "tables. Use a licensed HECM counselor for real figures."
    )


def display_rent_vs_buy_summary(result: RentVsBuyResult) -> None:
    final = result.points[-1]

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(f"Rent Paid ({final.year} yrs)", format_currency(final.cumulative_rent_cost))
    with col2:
        st.metric("Net Cost of Buying", format_currency(final.net_buying_cost))
    with col3:
        st.metric("Home Equity", format_currency(final.equity))

    if result.crossover_year is None:
        st.info(f"Renting stays cheaper for the full {final.year}-year horizon.")
    else:
        st.success(f"Buying becomes cheaper than renting in year {result.crossover_year}.")
