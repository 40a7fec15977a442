"""AI advisor panel shown under each calculator."""

import streamlit as st

from src.advisory import AdvisoryClient, CalculatorType, InsightDebouncer

PLACEHOLDER_TEXT = "Enter your information to see personalized mortgage strategies."


@st.cache_resource
def get_advisory_client() -> AdvisoryClient:
    """Shared Gemini client for the whole server process."""
    return AdvisoryClient()


def _get_debouncer(calculator_type: CalculatorType) -> InsightDebouncer:
    key = f"insight_debouncer_{calculator_type.value}"
    if key not in st.session_state:
        st.session_state[key] = InsightDebouncer(get_advisory_client().get_insight)
    return st.session_state[key]


@st.fragment(run_every=1.0)
def _insight_panel(calculator_type: CalculatorType) -> None:
    # Polls the debouncer; the request itself runs on a timer thread
    debouncer = _get_debouncer(calculator_type)

    with st.container(border=True):
        st.markdown("#### AI Advisor Insights")
        if debouncer.pending:
            st.caption("Analyzing your numbers...")
        elif debouncer.latest:
            st.markdown(debouncer.latest)
        else:
            st.caption(PLACEHOLDER_TEXT)


def render_financial_insights(calculator_type: CalculatorType, snapshot: dict) -> None:
    """Request advice for the snapshot once inputs settle and display it."""
    _get_debouncer(calculator_type).submit(calculator_type, snapshot)
    _insight_panel(calculator_type)
