"""Chart data frames and plotly figures for the dashboard."""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from fund_dashboard.domain.models import FundSeries, SimulationResult

PRIMARY_COLOR = "#4f46e5"
FILL_COLOR = "rgba(79, 70, 229, 0.15)"


def series_to_frame(series: FundSeries) -> pd.DataFrame:
    frame = pd.DataFrame(
        {
            "date": pd.to_datetime([point.timestamp for point in series], unit="ms", utc=True),
            "price": [point.price for point in series],
        },
        columns=["date", "price"],
    )
    return frame


def growth_frame(series: FundSeries, result: SimulationResult) -> pd.DataFrame:
    """Value of the simulated holding on every date from the start point onwards."""
    frame = series_to_frame(series)
    start = pd.to_datetime(result.start_point.timestamp, unit="ms", utc=True)
    held = frame[frame["date"] >= start].copy()
    held["value"] = held["price"] * result.units
    return held.reset_index(drop=True)


def price_history_figure(series: FundSeries, fund_name: str, color: str = PRIMARY_COLOR) -> go.Figure:
    frame = series_to_frame(series)
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=frame["date"],
            y=frame["price"],
            mode="lines",
            name=fund_name,
            line=dict(color=color, width=3),
            fill="tozeroy",
            fillcolor=FILL_COLOR,
            hovertemplate="%{x|%A, %d %B %Y}<br>%{y:.2f}<extra></extra>",
        )
    )
    y_min = float(frame["price"].min()) if not frame.empty else 0.0
    y_max = float(frame["price"].max()) if not frame.empty else 1.0
    padding = (y_max - y_min) * 0.05 or 1.0
    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(showgrid=False, tickformat="%b %y", rangeslider=dict(visible=True)),
        yaxis=dict(showgrid=True, gridcolor="#e2e8f0", tickformat=".2f", range=[y_min - padding, y_max + padding]),
        margin=dict(l=0, r=0, t=10, b=0),
        height=420,
        showlegend=False,
    )
    return fig


def growth_figure(frame: pd.DataFrame, currency: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=frame["date"],
            y=frame["value"],
            mode="lines",
            name="Holding value",
            line=dict(color="#059669", width=2),
            hovertemplate=f"%{{x|%d %b %Y}}<br>{currency} %{{y:,.2f}}<extra></extra>",
        )
    )
    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(showgrid=False),
        yaxis=dict(showgrid=True, gridcolor="#e2e8f0"),
        margin=dict(l=0, r=0, t=10, b=0),
        height=260,
        showlegend=False,
    )
    return fig
