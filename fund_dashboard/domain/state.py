"""Dashboard application state and the pure functions that evolve it.

The presentation layer keeps exactly one ``AppState`` and replaces it with the
value returned by these functions; nothing mutates a state in place.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from .models import AiAnalysisResult, FundCollection, FundDataPoint, ViewMode

DEFAULT_PRINCIPAL = 100_000.0


@dataclass(frozen=True)
class AppState:
    collection: FundCollection
    selected_fund: str = ""
    view_mode: ViewMode = ViewMode.MANAGER
    ai_result: AiAnalysisResult | None = None
    analyzing: bool = False
    principal: float = DEFAULT_PRINCIPAL
    start_date: date | None = None


def initial_state(collection: FundCollection) -> AppState:
    names = collection.fund_names()
    return AppState(collection=collection, selected_fund=names[0] if names else "")


def current_series(state: AppState) -> tuple[FundDataPoint, ...]:
    if not state.selected_fund or state.selected_fund not in state.collection:
        return ()
    return state.collection[state.selected_fund]


def select_fund(state: AppState, fund_name: str) -> AppState:
    if fund_name not in state.collection:
        raise KeyError(fund_name)
    if fund_name == state.selected_fund:
        return state
    return replace(state, selected_fund=fund_name, ai_result=None, analyzing=False, start_date=None)


def set_view_mode(state: AppState, view_mode: ViewMode) -> AppState:
    return replace(state, view_mode=ViewMode(view_mode))


def begin_analysis(state: AppState) -> AppState:
    return replace(state, analyzing=True)


def finish_analysis(state: AppState, fund_name: str, result: AiAnalysisResult) -> AppState:
    # A result for a fund that is no longer selected is discarded.
    if fund_name != state.selected_fund:
        return replace(state, analyzing=False)
    return replace(state, ai_result=result, analyzing=False)


def clear_analysis(state: AppState) -> AppState:
    return replace(state, ai_result=None, analyzing=False)


def set_principal(state: AppState, principal: float) -> AppState:
    if not principal > 0:
        raise ValueError(f"Principal must be positive, got {principal!r}")
    return replace(state, principal=float(principal))


def set_start_date(state: AppState, start_date: date | None) -> AppState:
    return replace(state, start_date=start_date)
