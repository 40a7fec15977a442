"""Mortgage Calculator Suite - Streamlit Application."""

import logging
import os

import streamlit as st

from components.charts import (
    create_amortization_chart,
    create_buydown_chart,
    create_ltv_gauge,
    create_payment_breakdown_chart,
    create_payment_comparison_chart,
    create_refinance_break_even_chart,
    create_rent_vs_buy_chart,
    create_reverse_mortgage_chart,
)
from components.inputs import (
    buydown_input_form,
    cash_out_input_form,
    purchase_input_form,
    refinance_input_form,
    rent_vs_buy_input_form,
    reverse_mortgage_input_form,
)
from components.insights import render_financial_insights
from components.tables import (
    display_amortization_table,
    display_buydown_schedule,
    display_cash_out_summary,
    display_purchase_summary,
    display_refinance_summary,
    display_rent_vs_buy_summary,
    display_reverse_mortgage_summary,
)
from src.advisory import CalculatorType, build_snapshot
from src.buydown import calculate_buydown
from src.cash_out import calculate_cash_out
from src.mortgage import Mortgage
from src.purchase import calculate_purchase
from src.refinance import calculate_refinance, generate_break_even_chart_data
from src.rent_vs_buy import simulate_rent_vs_buy
from src.reverse import calculate_reverse_mortgage, equity_breakdown

logging.basicConfig(
    level=os.environ.get("MORTGAGE_SUITE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page configuration
st.set_page_config(
    page_title="Mortgage Calculator Suite",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .stMetric {
        background-color: #f0f2f6;
        padding: 10px;
        border-radius: 5px;
    }
    .stMetric label, .stMetric [data-testid="stMetricValue"], .stMetric [data-testid="stMetricDelta"] {
        color: #262730 !important;
    }
</style>
""", unsafe_allow_html=True)

PAGES = [
    "Purchase",
    "Refinance",
    "Reverse Mortgage",
    "Rent vs Buy",
    "Rate Buydown",
    "Cash-Out",
]


def main():
    """Main application entry point."""
    st.title("🏠 Mortgage Calculator Suite")
    st.markdown("*All calculations are estimates for informational purposes only.*")

    st.sidebar.title("Calculators")
    page = st.sidebar.radio("Select Calculator", options=PAGES)

    st.sidebar.divider()

    st.sidebar.markdown("### Quick Reference")
    with st.sidebar.expander("P&I"):
        st.markdown("""
        **Principal and Interest.**

        The amortizing part of the payment, before property tax and insurance escrow.
        """)
    with st.sidebar.expander("Break-even"):
        st.markdown("""
        **When refinance savings repay the closing costs.**

        Closing costs divided by monthly savings. If you stay in the home longer than this, the refinance pays off.
        """)
    with st.sidebar.expander("LTV"):
        st.markdown("""
        **Loan-to-Value.**

        Loan amount divided by home value. Most lenders cap cash-out refinances at 80%.
        """)
    with st.sidebar.expander("Discount Points"):
        st.markdown("""
        **Upfront fee to lower the rate for the life of the loan.**

        One point costs 1% of the loan and typically lowers the rate by about 0.25%.
        """)
    with st.sidebar.expander("HECM / PLF"):
        st.markdown("""
        **Home Equity Conversion Mortgage.**

        The Principal Limit Factor is the share of home value available to borrowers aged 62 and older. This tool approximates it; HUD publishes the real tables.
        """)

    if page == "Purchase":
        purchase_page()
    elif page == "Refinance":
        refinance_page()
    elif page == "Reverse Mortgage":
        reverse_mortgage_page()
    elif page == "Rent vs Buy":
        rent_vs_buy_page()
    elif page == "Rate Buydown":
        buydown_page()
    elif page == "Cash-Out":
        cash_out_page()


def purchase_page():
    """Monthly payment for a new purchase."""
    st.header("Home Purchase")

    col1, col2 = st.columns(2)

    with col1:
        inputs = purchase_input_form()

    result = calculate_purchase(inputs)

    with col2:
        display_purchase_summary(result)
        st.plotly_chart(create_payment_breakdown_chart(result.payment_breakdown()), use_container_width=True)

    render_financial_insights(CalculatorType.PURCHASE, build_snapshot(inputs, result))

    if result.principal > 0:
        mortgage = Mortgage(result.principal, inputs.interest_rate_pct, max(1, inputs.term_years))
        schedule = mortgage.amortization_schedule()
        with st.expander("Amortization"):
            st.plotly_chart(create_amortization_chart(schedule), use_container_width=True)
            display_amortization_table(schedule)


def refinance_page():
    """Current loan against a proposed refinance."""
    st.header("Refinance")

    col1, col2 = st.columns(2)

    with col1:
        inputs = refinance_input_form()

    result = calculate_refinance(inputs)

    with col2:
        display_refinance_summary(result)
        st.plotly_chart(
            create_payment_comparison_chart(result.current_payment, result.new_payment),
            use_container_width=True,
        )

    render_financial_insights(CalculatorType.REFINANCE, build_snapshot(inputs, result))

    if result.breaks_even:
        months_to_show = max(24, int(result.break_even_months * 2))
        chart_data = generate_break_even_chart_data(inputs, months_to_show=min(months_to_show, 360))
        st.plotly_chart(create_refinance_break_even_chart(chart_data), use_container_width=True)


def reverse_mortgage_page():
    """HECM principal limit and net cash estimate."""
    st.header("Reverse Mortgage (HECM) Estimator")

    col1, col2 = st.columns(2)

    with col1:
        inputs = reverse_mortgage_input_form()

    result = calculate_reverse_mortgage(inputs)

    with col2:
        display_reverse_mortgage_summary(result)
        if result.is_eligible:
            st.plotly_chart(
                create_reverse_mortgage_chart(equity_breakdown(inputs, result)),
                use_container_width=True,
            )

    render_financial_insights(CalculatorType.REVERSE_MORTGAGE, build_snapshot(inputs, result))


def rent_vs_buy_page():
    """Cumulative rent against the net cost of owning."""
    st.header("Rent vs Buy")

    inputs = rent_vs_buy_input_form()
    result = simulate_rent_vs_buy(inputs)

    display_rent_vs_buy_summary(result)
    st.plotly_chart(
        create_rent_vs_buy_chart(result.to_frame(), result.crossover_year),
        use_container_width=True,
    )

    assumptions = inputs.assumptions
    st.caption(
        f"Assumes {assumptions.down_payment_pct:.0f}% down, {assumptions.mortgage_rate_pct}% "
        f"{assumptions.loan_term_years}-year fixed, {assumptions.closing_costs_pct:.0f}% closing costs, "
        f"and yearly maintenance/tax/insurance of {assumptions.maintenance_pct}%/"
        f"{assumptions.property_tax_pct}%/{assumptions.insurance_pct}% of the current home value."
    )

    render_financial_insights(CalculatorType.RENT_VS_BUY, build_snapshot(inputs, result))


def buydown_page():
    """Temporary and permanent rate buydowns."""
    st.header("Rate Buydown")

    col1, col2 = st.columns(2)

    with col1:
        inputs = buydown_input_form()

    result = calculate_buydown(inputs)

    with col2:
        display_buydown_schedule(result)
        st.plotly_chart(create_buydown_chart(result.schedule_frame()), use_container_width=True)

    render_financial_insights(CalculatorType.BUYDOWN, build_snapshot(inputs, result))


def cash_out_page():
    """Cash-out refinance sizing."""
    st.header("Cash-Out Refinance")

    col1, col2 = st.columns(2)

    with col1:
        inputs = cash_out_input_form()

    result = calculate_cash_out(inputs)

    with col2:
        display_cash_out_summary(result)
        st.plotly_chart(create_ltv_gauge(result.ltv_percent), use_container_width=True)

    render_financial_insights(CalculatorType.CASH_OUT, build_snapshot(inputs, result))


if __name__ == "__main__":
    main()
