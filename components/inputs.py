"""Streamlit input components for the six calculators."""

import streamlit as st

from src.buydown import BuydownInputs, BuydownStrategy
from src.cash_out import CashOutInputs
from src.purchase import PurchaseInputs
from src.refinance import RefinanceInputs
from src.rent_vs_buy import MAX_DURATION_YEARS, MIN_DURATION_YEARS, RentVsBuyInputs
from src.reverse import ReverseMortgageInputs

TERM_OPTIONS = [10, 15, 20, 30]

STRATEGY_LABELS = {
    BuydownStrategy.TEMPORARY_2_1: "2-1 Temporary Buydown (2% off Year 1, 1% off Year 2)",
    BuydownStrategy.TEMPORARY_1_0: "1-0 Temporary Buydown (1% off Year 1)",
    BuydownStrategy.PERMANENT: "Permanent Buydown (discount points)",
}


def _term_select(label: str, default: int, key: str, options=None) -> int:
    options = options or TERM_OPTIONS
    return st.selectbox(
        label,
        options=options,
        index=options.index(default),
        format_func=lambda years: f"{years} Years",
        key=key,
    )


def purchase_input_form(key_prefix: str = "purchase") -> PurchaseInputs:
    """Create input form for a new home purchase."""
    defaults = PurchaseInputs()
    col1, col2 = st.columns(2)

    with col1:
        home_price = st.number_input(
            "Home Price ($)",
            min_value=0.0,
            value=defaults.home_price,
            step=5000.0,
            key=f"{key_prefix}_price",
        )

        interest_rate = st.number_input(
            "Interest Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.interest_rate_pct,
            step=0.1,
            format="%.2f",
            key=f"{key_prefix}_rate",
        )

        yearly_tax = st.number_input(
            "Yearly Property Tax ($)",
            min_value=0.0,
            value=defaults.yearly_tax,
            step=100.0,
            key=f"{key_prefix}_tax",
        )

    with col2:
        down_payment = st.number_input(
            "Down Payment ($)",
            min_value=0.0,
            value=defaults.down_payment,
            step=1000.0,
            key=f"{key_prefix}_down",
        )

        term_years = _term_select("Loan Term", defaults.term_years, f"{key_prefix}_term")

        yearly_insurance = st.number_input(
            "Yearly Home Insurance ($)",
            min_value=0.0,
            value=defaults.yearly_insurance,
            step=100.0,
            key=f"{key_prefix}_insurance",
        )

    inputs = PurchaseInputs(
        home_price=home_price,
        down_payment=down_payment,
        interest_rate_pct=interest_rate,
        term_years=term_years,
        yearly_tax=yearly_tax,
        yearly_insurance=yearly_insurance,
    )
    st.caption(f"Down payment: {inputs.down_payment_pct:.1f}% of price")
    return inputs


def refinance_input_form(key_prefix: str = "refi") -> RefinanceInputs:
    """Create input form comparing the current loan with a refinance."""
    defaults = RefinanceInputs()

    st.markdown("**Current Loan**")
    col1, col2 = st.columns(2)
    with col1:
        current_balance = st.number_input(
            "Current Balance ($)",
            min_value=0.0,
            value=defaults.current_balance,
            step=5000.0,
            key=f"{key_prefix}_balance",
        )
    with col2:
        current_rate = st.number_input(
            "Current Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.current_rate_pct,
            step=0.1,
            format="%.2f",
            key=f"{key_prefix}_current_rate",
            help="The current loan is compared as a 30-year fixed",
        )

    st.markdown("**New Loan**")
    col1, col2, col3 = st.columns(3)
    with col1:
        new_rate = st.number_input(
            "New Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.new_rate_pct,
            step=0.1,
            format="%.2f",
            key=f"{key_prefix}_new_rate",
        )
    with col2:
        new_term = _term_select("New Term", defaults.new_term_years, f"{key_prefix}_term")
    with col3:
        closing_costs = st.number_input(
            "Closing Costs ($)",
            min_value=0.0,
            value=defaults.closing_costs,
            step=500.0,
            key=f"{key_prefix}_costs",
        )

    return RefinanceInputs(
        current_balance=current_balance,
        current_rate_pct=current_rate,
        new_rate_pct=new_rate,
        new_term_years=new_term,
        closing_costs=closing_costs,
    )


def cash_out_input_form(key_prefix: str = "cash_out") -> CashOutInputs:
    """Create input form for a cash-out refinance."""
    defaults = CashOutInputs()
    col1, col2 = st.columns(2)

    with col1:
        home_value = st.number_input(
            "Home Value ($)",
            min_value=0.0,
            value=defaults.home_value,
            step=5000.0,
            key=f"{key_prefix}_value",
        )
        cash_requested = st.number_input(
            "Cash Requested ($)",
            min_value=0.0,
            value=defaults.cash_requested,
            step=1000.0,
            key=f"{key_prefix}_cash",
        )

    with col2:
        current_balance = st.number_input(
            "Current Balance ($)",
            min_value=0.0,
            value=defaults.current_balance,
            step=5000.0,
            key=f"{key_prefix}_balance",
        )
        new_rate = st.number_input(
            "New Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.new_rate_pct,
            step=0.1,
            format="%.2f",
            key=f"{key_prefix}_rate",
        )

    new_term = _term_select("New Term", defaults.new_term_years, f"{key_prefix}_term", [15, 20, 30])

    return CashOutInputs(
        home_value=home_value,
        current_balance=current_balance,
        cash_requested=cash_requested,
        new_rate_pct=new_rate,
        new_term_years=new_term,
    )


def buydown_input_form(key_prefix: str = "buydown") -> BuydownInputs:
    """Create input form for rate buydown strategies."""
    defaults = BuydownInputs()
    col1, col2 = st.columns(2)

    with col1:
        loan_amount = st.number_input(
            "Loan Amount ($)",
            min_value=0.0,
            value=defaults.loan_amount,
            step=5000.0,
            key=f"{key_prefix}_amount",
        )
    with col2:
        base_rate = st.number_input(
            "Base Interest Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.base_rate_pct,
            step=0.1,
            format="%.2f",
            key=f"{key_prefix}_rate",
        )

    strategy = st.radio(
        "Buydown Strategy",
        options=list(BuydownStrategy),
        format_func=lambda s: STRATEGY_LABELS[s],
        key=f"{key_prefix}_strategy",
    )

    points = defaults.points
    if strategy == BuydownStrategy.PERMANENT:
        points = st.slider(
            "Discount Points",
            min_value=0.0,
            max_value=4.0,
            value=defaults.points,
            step=0.25,
            key=f"{key_prefix}_points",
            help="Each point costs 1% of the loan and lowers the rate about 0.25%",
        )

    return BuydownInputs(
        loan_amount=loan_amount,
        base_rate_pct=base_rate,
        term_years=defaults.term_years,
        strategy=strategy,
        points=points,
    )


def reverse_mortgage_input_form(key_prefix: str = "reverse") -> ReverseMortgageInputs:
    """Create input form for the HECM estimator."""
    defaults = ReverseMortgageInputs()
    col1, col2 = st.columns(2)

    with col1:
        age = st.number_input(
            "Youngest Borrower Age",
            min_value=18,
            max_value=110,
            value=defaults.age,
            step=1,
            key=f"{key_prefix}_age",
        )
        current_balance = st.number_input(
            "Existing Mortgage Balance ($)",
            min_value=0.0,
            value=defaults.current_balance,
            step=5000.0,
            key=f"{key_prefix}_balance",
        )

    with col2:
        home_value = st.number_input(
            "Home Value ($)",
            min_value=0.0,
            value=defaults.home_value,
            step=5000.0,
            key=f"{key_prefix}_value",
        )
        expected_rate = st.number_input(
            "Expected Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=defaults.expected_rate_pct,
            step=0.125,
            format="%.3f",
            key=f"{key_prefix}_rate",
        )

    return ReverseMortgageInputs(
        age=int(age),
        home_value=home_value,
        current_balance=current_balance,
        expected_rate_pct=expected_rate,
    )


def rent_vs_buy_input_form(key_prefix: str = "rvb") -> RentVsBuyInputs:
    """Create input form for the rent versus buy projection."""
    defaults = RentVsBuyInputs()
    col1, col2 = st.columns(2)

    with col1:
        home_price = st.number_input(
            "Home Price ($)",
            min_value=0.0,
            value=defaults.home_price,
            step=5000.0,
            key=f"{key_prefix}_price",
        )
        appreciation = st.number_input(
            "Home Appreciation (%/yr)",
            min_value=-10.0,
            max_value=20.0,
            value=defaults.appreciation_pct,
            step=0.5,
            key=f"{key_prefix}_appreciation",
        )

    with col2:
        monthly_rent = st.number_input(
            "Monthly Rent ($)",
            min_value=0.0,
            value=defaults.monthly_rent,
            step=100.0,
            key=f"{key_prefix}_rent",
        )
        rent_increase = st.number_input(
            "Rent Increase (%/yr)",
            min_value=-10.0,
            max_value=20.0,
            value=defaults.rent_increase_pct,
            step=0.5,
            key=f"{key_prefix}_rent_increase",
        )

    duration = st.slider(
        "Years to Compare",
        min_value=MIN_DURATION_YEARS,
        max_value=MAX_DURATION_YEARS,
        value=defaults.duration_years,
        key=f"{key_prefix}_duration",
    )

    return RentVsBuyInputs(
        home_price=home_price,
        monthly_rent=monthly_rent,
        appreciation_pct=appreciation,
        rent_increase_pct=rent_increase,
        duration_years=duration,
    )
