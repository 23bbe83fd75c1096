"""Streamlit front-end for the fund price dashboard."""
from __future__ import annotations

from datetime import datetime

import pandas as pd
import streamlit as st

from fund_dashboard.application.factories import (
    build_analyze_use_case,
    build_calculator,
    build_load_use_case,
    build_simulator,
)
from fund_dashboard.application.use_cases import AnalyzeFundUseCase
from fund_dashboard.config import SETTINGS
from fund_dashboard.domain.dates import timestamp_year
from fund_dashboard.domain.models import FundCollection, ViewMode
from fund_dashboard.domain.services import classify_fund
from fund_dashboard.domain.state import (
    AppState,
    begin_analysis,
    clear_analysis,
    current_series,
    finish_analysis,
    initial_state,
    select_fund,
    set_principal,
    set_start_date,
    set_view_mode,
)
from fund_dashboard.logging_setup import setup_logging
from fund_dashboard.presentation.charts import growth_figure, growth_frame, price_history_figure
from fund_dashboard.presentation.formatting import (
    format_money,
    format_percent,
    format_price,
    sentiment_badge,
)
from fund_dashboard.presentation.report import render_csv, series_csv, summaries_to_rows

setup_logging(SETTINGS.log_level)
st.set_page_config(page_title="CAL Analytics", layout="wide")
st.title("Market Overview")
st.caption("Track and analyze historical unit trust performance.")

VIEW_LABELS = {ViewMode.MANAGER: "Fund Manager", ViewMode.INVESTOR: "Investor"}


@st.cache_resource(ttl=SETTINGS.cache_ttl_seconds, show_spinner=False)
def load_collection() -> FundCollection:
    return build_load_use_case(SETTINGS).execute()


@st.cache_resource(show_spinner=False)
def get_analyzer() -> AnalyzeFundUseCase:
    return build_analyze_use_case(SETTINGS)


def commit(state: AppState) -> AppState:
    st.session_state["app_state"] = state
    return state


calculator = build_calculator(SETTINGS)
simulator = build_simulator(SETTINGS)

with st.spinner("Loading fund data..."):
    collection = load_collection()

state = st.session_state.get("app_state")
if state is None or state.collection is not collection:
    state = commit(initial_state(collection))

if not state.selected_fund:
    st.info("No fund data available.")
    st.stop()

names = collection.fund_names()
col_fund, col_view = st.columns([3, 2])
with col_fund:
    selected = st.selectbox("Fund", names, index=names.index(state.selected_fund))
with col_view:
    view_label = st.radio(
        "View",
        list(VIEW_LABELS.values()),
        index=list(VIEW_LABELS).index(state.view_mode),
        horizontal=True,
    )
state = select_fund(state, selected)
state = commit(set_view_mode(state, next(mode for mode, label in VIEW_LABELS.items() if label == view_label)))

series = current_series(state)
stats = calculator.compute_stats(series)
currency = SETTINGS.currency

card1, card2, card3, card4 = st.columns(4)
if stats is not None:
    card1.metric(
        "Current NAV",
        f"{currency} {format_price(stats.latest_price)}",
        delta=format_percent(stats.daily_change),
        help=f"Updated {stats.as_of}",
    )
    card2.metric("YTD Return", format_percent(stats.ytd_return), help="Since Jan 1st")
    card3.metric("Volatility (Annual)", format_percent(stats.volatility), help="Risk Metric")
card4.metric("Fund Type", classify_fund(state.selected_fund).value, help="Asset Class")

chart_col, side_col = st.columns([2, 1])

with chart_col:
    st.subheader("NAV Performance History")
    st.plotly_chart(price_history_figure(series, state.selected_fund), use_container_width=True)
    st.download_button(
        "Download price history CSV",
        data=series_csv(series),
        file_name=f"{state.selected_fund}.csv",
        mime="text/csv",
    )

    if state.view_mode == ViewMode.INVESTOR:
        st.subheader("Investment Simulator")
        date_range = simulator.allowed_date_range(series)
        if date_range is not None:
            min_date, max_date = date_range
            default_start = state.start_date or simulator.default_start_date(
                series, datetime.now(SETTINGS.timezone).date()
            )
            default_start = min(max(default_start, min_date), max_date)

            in_col, out_col = st.columns(2)
            with in_col:
                amount = st.number_input(
                    f"Investment Amount ({currency})",
                    min_value=1.0,
                    value=float(state.principal),
                    step=1000.0,
                )
                start = st.date_input(
                    "Start Date",
                    value=default_start,
                    min_value=min_date,
                    max_value=max_date,
                    key=f"start_date::{state.selected_fund}",
                )
            state = commit(set_start_date(set_principal(state, amount), start))
            result = simulator.simulate(series, state.principal, state.start_date)

            with out_col:
                if result is None:
                    st.info("Enter details to simulate investment")
                else:
                    st.metric("Projected Value", format_money(result.final_value, currency))
                    st.metric(
                        "Total Profit",
                        format_money(result.profit, currency, signed=True),
                        delta=f"{format_percent(result.percent)} Return",
                    )
                    st.caption(f"Bought {result.units:,.4f} units at {format_price(result.start_point.price)} on {result.start_point.date}")
            if result is not None:
                st.plotly_chart(growth_figure(growth_frame(series, result), currency), use_container_width=True)
    else:
        st.subheader("All Funds")
        summaries = calculator.summarize_collection(collection)
        st.dataframe(pd.DataFrame(summaries_to_rows(summaries)), hide_index=True, use_container_width=True)
        st.download_button(
            "Download overview CSV",
            data=render_csv(summaries),
            file_name="fund_overview.csv",
            mime="text/csv",
        )

with side_col:
    st.subheader("AI Market Analyst")
    if state.ai_result is None:
        st.caption(f"Generate an instant technical analysis of {state.selected_fund}.")
        if st.button("Generate Insight", disabled=state.analyzing, use_container_width=True):
            fund_name = state.selected_fund
            state = commit(begin_analysis(state))
            with st.spinner("Analyzing Market..."):
                analysis = get_analyzer().execute(fund_name, series)
            if analysis is not None:
                state = commit(finish_analysis(state, fund_name, analysis))
            else:
                state = commit(clear_analysis(state))
            st.rerun()
    else:
        st.markdown(f"{sentiment_badge(state.ai_result.sentiment)} · Based on recent data")
        st.write(state.ai_result.summary)
        for point in state.ai_result.key_points:
            st.markdown(f"- {point}")
        if st.button("Clear Analysis"):
            state = commit(clear_analysis(state))
            st.rerun()

    st.subheader("Fund Details")
    details = {
        "Inception Date": str(timestamp_year(series[0].timestamp, SETTINGS.timezone)) if series else "N/A",
        "Data Points": str(len(series)),
        "Min Price (All-time)": format_price(stats.min_price, 2) if stats else "N/A",
        "Max Price (All-time)": format_price(stats.max_price, 2) if stats else "N/A",
    }
    st.table(pd.DataFrame(details.items(), columns=["Detail", "Value"]).set_index("Detail"))
