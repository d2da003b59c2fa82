"""Plotly figure builders for price and performance charts."""

from __future__ import annotations

import plotly.graph_objects as go

from ..analytics.performance import performance_frame
from ..domain import ComparisonResult, PriceSeries
from ..utils.formatting import format_short_date, format_timeframe

SERIES_COLORS = ("#22c55e", "#3b82f6")
AREA_COLOR = "#10b981"


def _empty_figure(title: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text="No data to display", showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper")
    fig.update_layout(title=title, template="plotly_white")
    return fig


def make_comparison_chart(result: ComparisonResult | None, title: str | None = None) -> go.Figure:
    """Line chart of two $100 investments over the same window."""
    if title is None:
        timeframe = format_timeframe(result.timeframe) if result else ""
        title = f"Performance of $100 Investment ({timeframe})" if timeframe else "Performance of $100 Investment"

    if result is None or not (result.series1 or result.series2):
        return _empty_figure(title)

    fig = go.Figure()
    for ticker, points, color in (
        (result.ticker1, result.series1, SERIES_COLORS[0]),
        (result.ticker2, result.series2, SERIES_COLORS[1]),
    ):
        frame = performance_frame(points)
        fig.add_trace(
            go.Scatter(
                x=frame["date"],
                y=frame["value"],
                mode="lines",
                name=ticker,
                line=dict(color=color, width=2),
                hovertemplate="%{y:$,.2f}<extra>" + ticker + "</extra>",
            )
        )

    fig.update_layout(
        title=title,
        xaxis_title="Time",
        yaxis_title="Value",
        hovermode="x unified",
        template="plotly_white",
        legend_title="Ticker",
    )
    fig.update_yaxes(tickprefix="$", tickformat=",.2f")

    return fig


def make_price_area_chart(prices: PriceSeries, title: str) -> go.Figure:
    """Area chart of adjusted close prices for a single symbol."""
    if not prices:
        return _empty_figure(title)

    labels = [format_short_date(point.date) for point in prices]
    fig = go.Figure(
        go.Scatter(
            x=[point.date for point in prices],
            y=[point.price for point in prices],
            customdata=labels,
            mode="lines",
            name="Price",
            fill="tozeroy",
            line=dict(color=AREA_COLOR),
            hovertemplate="Date: %{customdata}<br>Price: %{y:$,.2f}<extra></extra>",
        )
    )
    fig.update_layout(title=title, xaxis_title="Date", yaxis_title="Price", template="plotly_white")
    fig.update_xaxes(tickformat="%b %-d")
    fig.update_yaxes(tickprefix="$", tickformat=",.2f", autorange=True)

    return fig
