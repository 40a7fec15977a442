"""Plotly chart components for the calculator pages."""

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from typing import List, Optional, Tuple

from src.cash_out import LTV_WARNING_THRESHOLD

PIE_COLORS = ['#2563eb', '#10b981', '#f59e0b', '#e2e8f0']


def _breakdown_pie(slices: List[Tuple[str, float]], title: str, colors: List[str]) -> go.Figure:
    labels = [label for label, _ in slices]
    values = [max(0.0, value) for _, value in slices]

    fig = go.Figure(go.Pie(
        labels=labels,
        values=values,
        hole=0.55,
        marker=dict(colors=colors[:len(slices)]),
        sort=False,
        hovertemplate='%{label}<br>$%{value:,.0f} (%{percent})<extra></extra>',
    ))

    fig.update_layout(
        title=title,
        legend=dict(orientation='h', yanchor='top', y=-0.05),
    )

    return fig


def create_payment_breakdown_chart(slices: List[Tuple[str, float]]) -> go.Figure:
    """Donut chart of the monthly payment components."""
    return _breakdown_pie(slices, 'Monthly Payment Breakdown', PIE_COLORS)


def create_reverse_mortgage_chart(slices: List[Tuple[str, float]]) -> go.Figure:
    """Donut chart of where the home value goes under a HECM."""
    return _breakdown_pie(
        slices,
        'Home Equity Allocation',
        ['#94a3b8', '#f59e0b', '#10b981', '#e2e8f0'],
    )


def create_amortization_chart(schedule: pd.DataFrame) -> go.Figure:
    """Create interactive amortization chart showing balance, principal, and interest over time."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['balance'],
        name='Remaining Balance',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='Month %{x}<br>Balance: $%{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['cumulative_principal'],
        name='Principal Paid',
        fill='tozeroy',
        line=dict(color='#2ca02c', width=1),
        fillcolor='rgba(44, 160, 44, 0.3)',
        hovertemplate='Month %{x}<br>Principal Paid: $%{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['cumulative_interest'],
        name='Interest Paid',
        line=dict(color='#d62728', width=2, dash='dash'),
        hovertemplate='Month %{x}<br>Interest Paid: $%{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Loan Amortization Over Time',
        xaxis_title='Month',
        yaxis_title='Amount ($)',
        hovermode='x unified',
        legend=dict(yanchor='top', y=0.99, xanchor='right', x=0.99),
        yaxis=dict(tickformat='$,.0f'),
    )

    return fig


def create_payment_comparison_chart(current_payment: float, new_payment: float) -> go.Figure:
    """Bar chart of the current against the proposed monthly payment."""
    fig = go.Figure(go.Bar(
        x=['Current', 'Proposed'],
        y=[current_payment, new_payment],
        marker_color=['#94a3b8', '#2563eb'],
        text=[f'${current_payment:,.0f}', f'${new_payment:,.0f}'],
        textposition='outside',
        hovertemplate='%{x}: $%{y:,.2f}<extra></extra>',
    ))

    fig.update_layout(
        title='Monthly Payment Comparison',
        yaxis_title='Monthly P&I ($)',
        yaxis=dict(tickformat='$,.0f'),
        showlegend=False,
    )

    return fig


def create_refinance_break_even_chart(break_even_data: pd.DataFrame) -> go.Figure:
    """Create break-even analysis chart for refinancing."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=break_even_data['month'],
        y=break_even_data['current_cumulative'],
        name='Keep Current Loan',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='Month %{x}<br>Cumulative: $%{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=break_even_data['month'],
        y=break_even_data['new_cumulative'],
        name='Refinance',
        line=dict(color='#2ca02c', width=2),
        hovertemplate='Month %{x}<br>Cumulative: $%{y:,.0f}<extra></extra>',
    ))

    ahead = break_even_data['savings'].to_numpy() > 0
    if ahead.any():
        break_even_month = int(break_even_data['month'].iloc[int(np.argmax(ahead))])
        fig.add_vline(
            x=break_even_month,
            line_dash='dash',
            line_color='gray',
            annotation_text=f'Break-even: Month {break_even_month}',
        )

    fig.update_layout(
        title='Cumulative Cost Comparison',
        xaxis_title='Month',
        yaxis_title='Cumulative Payments ($)',
        hovermode='x unified',
        yaxis=dict(tickformat='$,.0f'),
        legend=dict(yanchor='top', y=0.99, xanchor='left', x=0.01),
    )

    return fig


def create_ltv_gauge(ltv_percent: float) -> go.Figure:
    """Gauge of the cash-out LTV with the 80% lender cap marked."""
    shown = ltv_percent if np.isfinite(ltv_percent) else 150.0
    bar_color = '#e11d48' if ltv_percent > LTV_WARNING_THRESHOLD else '#2563eb'

    fig = go.Figure(go.Indicator(
        mode='gauge+number',
        value=shown,
        number=dict(suffix='%', valueformat='.1f'),
        gauge=dict(
            axis=dict(range=[0, max(120.0, shown)]),
            bar=dict(color=bar_color),
            threshold=dict(
                line=dict(color='#f59e0b', width=3),
                thickness=0.8,
                value=LTV_WARNING_THRESHOLD,
            ),
        ),
        title=dict(text='Loan-to-Value'),
    ))

    return fig


def create_buydown_chart(schedule: pd.DataFrame) -> go.Figure:
    """Bar chart of the monthly payment in each buydown period."""
    colors = ['#2563eb'] * len(schedule)
    if len(schedule) > 1:
        # Last temporary period is the unsubsidized base payment
        colors[-1] = '#94a3b8'

    fig = go.Figure(go.Bar(
        x=schedule['period'],
        y=schedule['payment'],
        marker_color=colors,
        customdata=schedule['rate'],
        hovertemplate='%{x}<br>Payment: $%{y:,.2f}<br>Rate: %{customdata:.2f}%<extra></extra>',
    ))

    fig.update_layout(
        title='Monthly Payment by Period',
        yaxis_title='Monthly P&I ($)',
        yaxis=dict(tickformat='$,.0f'),
        showlegend=False,
    )

    return fig


def create_rent_vs_buy_chart(projection: pd.DataFrame, crossover_year: Optional[int] = None) -> go.Figure:
    """Line chart of cumulative rent against the net cost of owning."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=projection['year'],
        y=projection['rent_cost'],
        name='Cumulative Rent',
        line=dict(color='#f59e0b', width=3),
        hovertemplate='Year %{x}<br>Rent: $%{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=projection['year'],
        y=projection['buy_cost'],
        name='Net Cost of Buying',
        line=dict(color='#2563eb', width=3),
        hovertemplate='Year %{x}<br>Buying: $%{y:,.0f}<extra></extra>',
    ))

    if crossover_year is not None:
        fig.add_vline(
            x=crossover_year,
            line_dash='dash',
            line_color='#10b981',
            annotation_text=f'Buying wins: Year {crossover_year}',
        )

    fig.update_layout(
        title='Rent vs Buy Over Time',
        xaxis_title='Year',
        yaxis_title='Cumulative Cost ($)',
        hovermode='x unified',
        yaxis=dict(tickformat='$,.0f'),
        legend=dict(yanchor='top', y=0.99, xanchor='left', x=0.01),
    )

    return fig
