"""Domain services computing fund metrics and investment projections."""
from __future__ import annotations

import math
from bisect import bisect_left
from datetime import date, timezone, tzinfo
from typing import Mapping

import numpy as np
import pandas as pd

from .dates import (
    DateLike,
    date_to_timestamp_ms,
    shift_years,
    timestamp_date,
    timestamp_year,
    to_timestamp_ms,
)
from .models import (
    AssetClass,
    DerivedStats,
    FundDataPoint,
    FundSeries,
    FundSummary,
    SimulationResult,
)

DEFAULT_VOLATILITY_WINDOW = 30
DEFAULT_TRADING_DAYS = 252


def _pct_change(current: float, base: float) -> float:
    # A zero base must surface as inf/nan rather than raise.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((np.float64(current) - np.float64(base)) / np.float64(base) * 100)


def find_start_index(series: FundSeries, when: int) -> int | None:
    """Index of the first point at or after ``when`` (epoch ms)."""
    timestamps = [point.timestamp for point in series]
    index = bisect_left(timestamps, when)
    if index >= len(series):
        return None
    return index


def classify_fund(name: str) -> AssetClass:
    if "Equity" in name:
        return AssetClass.EQUITY
    if "Income" in name:
        return AssetClass.FIXED_INCOME
    return AssetClass.BALANCED


class FundMetricsCalculator:
    """Derives headline statistics from a sorted price series."""

    def __init__(
        self,
        tz: tzinfo | None = None,
        volatility_window: int = DEFAULT_VOLATILITY_WINDOW,
        trading_days: int = DEFAULT_TRADING_DAYS,
    ) -> None:
        self._tz = tz or timezone.utc
        self._window = volatility_window
        self._trading_days = trading_days

    def compute_stats(self, series: FundSeries) -> DerivedStats | None:
        if not series:
            return None

        latest = series[-1]
        prev = series[-2] if len(series) > 1 else latest
        ytd_start = self._ytd_start(series, latest)
        prices = [point.price for point in series]

        return DerivedStats(
            latest_price=latest.price,
            as_of=latest.date,
            as_of_timestamp=latest.timestamp,
            daily_change=_pct_change(latest.price, prev.price),
            ytd_return=_pct_change(latest.price, ytd_start.price),
            volatility=self.volatility(prices),
            min_price=min(prices),
            max_price=max(prices),
        )

    def volatility(self, prices: list[float]) -> float:
        """Annualized volatility in percent over the trailing window."""
        window = pd.Series(prices[-self._window:], dtype="float64")
        returns = (window.diff() / window.shift(1)).iloc[1:].dropna()
        if len(returns) < 2:
            return 0.0
        deviation = returns.std(ddof=1)
        return float(deviation * math.sqrt(self._trading_days) * 100)

    def one_year_return(self, series: FundSeries) -> float | None:
        if not series:
            return None
        latest = series[-1]
        cutoff = shift_years(timestamp_date(latest.timestamp, self._tz), -1)
        index = find_start_index(series, date_to_timestamp_ms(cutoff, self._tz))
        start = series[index] if index is not None else series[0]
        return _pct_change(latest.price, start.price)

    def summarize_fund(self, name: str, series: FundSeries) -> FundSummary | None:
        stats = self.compute_stats(series)
        if stats is None:
            return None
        return FundSummary(
            name=name,
            current_price=stats.latest_price,
            one_year_return=self.one_year_return(series) or 0.0,
            ytd_return=stats.ytd_return,
            volatility=stats.volatility,
            min_price=stats.min_price,
            max_price=stats.max_price,
            last_updated=stats.as_of,
        )

    def summarize_collection(self, collection: Mapping[str, FundSeries]) -> list[FundSummary]:
        summaries: list[FundSummary] = []
        for name, series in collection.items():
            summary = self.summarize_fund(name, series)
            if summary is not None:
                summaries.append(summary)
        return summaries

    def _ytd_start(self, series: FundSeries, latest: FundDataPoint) -> FundDataPoint:
        year = timestamp_year(latest.timestamp, self._tz)
        for point in series:
            if timestamp_year(point.timestamp, self._tz) == year:
                return point
        return series[0]


class InvestmentSimulator:
    """Projects a lump-sum investment forward using unit-based scaling."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz or timezone.utc

    def simulate(self, series: FundSeries, principal: float, start_date: DateLike) -> SimulationResult | None:
        if not principal > 0:
            raise ValueError(f"Principal must be positive, got {principal!r}")
        if not series:
            return None
        start_timestamp = to_timestamp_ms(start_date, self._tz)
        if start_timestamp is None:
            raise ValueError(f"Unrecognised start date: {start_date!r}")

        index = find_start_index(series, start_timestamp)
        if index is None:
            return None

        start_point = series[index]
        end_point = series[-1]
        with np.errstate(divide="ignore", invalid="ignore"):
            units = float(np.float64(principal) / np.float64(start_point.price))
            final_value = float(np.float64(units) * end_point.price)
        profit = final_value - principal
        return SimulationResult(
            final_value=final_value,
            profit=profit,
            percent=profit / principal * 100,
            units=units,
            start_point=start_point,
            end_point=end_point,
        )

    def default_start_date(self, series: FundSeries, today: date) -> date:
        """One calendar year before ``today``, never earlier than the first data point."""
        one_year_ago = shift_years(today, -1)
        if not series:
            return one_year_ago
        earliest = timestamp_date(series[0].timestamp, self._tz)
        return max(one_year_ago, earliest)

    def allowed_date_range(self, series: FundSeries) -> tuple[date, date] | None:
        if not series:
            return None
        return (
            timestamp_date(series[0].timestamp, self._tz),
            timestamp_date(series[-1].timestamp, self._tz),
        )


def compute_stats(series: FundSeries) -> DerivedStats | None:
    return FundMetricsCalculator().compute_stats(series)


def simulate(series: FundSeries, principal: float, start_date: DateLike) -> SimulationResult | None:
    return InvestmentSimulator().simulate(series, principal, start_date)
