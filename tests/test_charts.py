"""Tests for Plotly chart builders."""

from components.charts import (
    create_buydown_chart,
    create_ltv_gauge,
    create_payment_breakdown_chart,
    create_refinance_break_even_chart,
    create_rent_vs_buy_chart,
)
from src.buydown import BuydownInputs, BuydownStrategy, calculate_buydown
from src.purchase import PurchaseInputs, calculate_purchase
from src.refinance import RefinanceInputs, generate_break_even_chart_data
from src.rent_vs_buy import RentVsBuyInputs, simulate_rent_vs_buy


class TestCharts:
    """Smoke tests for figure construction."""

    def test_payment_breakdown(self):
        result = calculate_purchase(PurchaseInputs())
        fig = create_payment_breakdown_chart(result.payment_breakdown())

        assert list(fig.data[0].labels) == ['Principal & Interest', 'Property Tax', 'Home Insurance']

    def test_break_even_marker(self):
        data = generate_break_even_chart_data(RefinanceInputs(), months_to_show=36)
        fig = create_refinance_break_even_chart(data)

        assert len(fig.data) == 2
        assert fig.layout.shapes[0].x0 == 18

    def test_rent_vs_buy_without_crossover(self):
        result = simulate_rent_vs_buy(RentVsBuyInputs(monthly_rent=100, appreciation_pct=0))
        fig = create_rent_vs_buy_chart(result.to_frame(), result.crossover_year)

        assert len(fig.data) == 2
        assert len(fig.layout.shapes) == 0

    def test_single_period_buydown(self):
        inputs = BuydownInputs(strategy=BuydownStrategy.PERMANENT)
        fig = create_buydown_chart(calculate_buydown(inputs).schedule_frame())

        assert list(fig.data[0].marker.color) == ['#2563eb']

    def test_ltv_gauge_handles_infinite(self):
        fig = create_ltv_gauge(float('inf'))

        assert fig.data[0].value == 150.0
