"""Domain models for the fund dashboard.

These dataclasses capture the canonical shape of normalized fund price data
and of everything derived from it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence


@dataclass(frozen=True)
class FundDataPoint:
    """A single NAV observation as published by the data source."""

    date: str
    price: float
    timestamp: int


FundSeries = Sequence[FundDataPoint]


class FundCollection(Mapping[str, tuple[FundDataPoint, ...]]):
    """Read-only mapping of fund name to its price series, oldest first."""

    def __init__(self, funds: Mapping[str, Iterable[FundDataPoint]] | None = None) -> None:
        data = {name: tuple(points) for name, points in (funds or {}).items()}
        self._funds = MappingProxyType(data)

    def __getitem__(self, name: str) -> tuple[FundDataPoint, ...]:
        return self._funds[name]

    def __iter__(self):
        return iter(self._funds)

    def __len__(self) -> int:
        return len(self._funds)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{name!r}: {len(points)}" for name, points in self._funds.items())
        return f"FundCollection({{{sizes}}})"

    def fund_names(self) -> list[str]:
        return list(self._funds)


class Sentiment(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class ViewMode(str, Enum):
    MANAGER = "MANAGER"
    INVESTOR = "INVESTOR"


class AssetClass(str, Enum):
    EQUITY = "Equity"
    FIXED_INCOME = "Fixed Income"
    BALANCED = "Balanced"


@dataclass(frozen=True)
class DerivedStats:
    """Headline metrics for one fund, recomputed whenever the selection changes."""

    latest_price: float
    as_of: str
    as_of_timestamp: int
    daily_change: float
    ytd_return: float
    volatility: float
    min_price: float
    max_price: float


@dataclass(frozen=True)
class SimulationResult:
    final_value: float
    profit: float
    percent: float
    units: float
    start_point: FundDataPoint
    end_point: FundDataPoint


@dataclass(frozen=True)
class FundSummary:
    """One row of the fund-manager overview table."""

    name: str
    current_price: float
    one_year_return: float
    ytd_return: float
    volatility: float
    min_price: float
    max_price: float
    last_updated: str


@dataclass(frozen=True)
class AiAnalysisResult:
    summary: str
    sentiment: Sentiment
    key_points: tuple[str, ...] = field(default_factory=tuple)
