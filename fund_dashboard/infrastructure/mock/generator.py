"""Synthetic fund history used when the real data cannot be loaded."""
from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone, tzinfo

from fund_dashboard.domain.dates import date_to_timestamp_ms
from fund_dashboard.domain.models import FundCollection, FundDataPoint

MOCK_FUNDS = (
    "CAL Balanced Fund",
    "CAL Quantitative Equity",
    "CAL Income Fund",
    "CAL Gilt Edge",
)
MOCK_DAYS = 1000
START_PRICE = 100.0


def walk_parameters(fund_name: str) -> tuple[float, float]:
    """Return ``(trend, volatility)`` for a fund's random walk."""
    volatility = 0.02 if "Equity" in fund_name else 0.005
    trend = 0.0003 if "Income" in fund_name else 0.0005
    return trend, volatility


class MockFundGenerator:
    def __init__(
        self,
        rng: random.Random | None = None,
        end_date: date | None = None,
        tz: tzinfo | None = None,
        fund_names: tuple[str, ...] = MOCK_FUNDS,
        days: int = MOCK_DAYS,
    ) -> None:
        self._rng = rng or random.Random()
        self._tz = tz or timezone.utc
        self._end_date = end_date
        self._fund_names = fund_names
        self._days = days

    def generate(self) -> FundCollection:
        end_date = self._end_date or datetime.now(self._tz).date()
        return FundCollection({name: self._walk(name, end_date) for name in self._fund_names})

    def _walk(self, fund_name: str, end_date: date) -> list[FundDataPoint]:
        trend, volatility = walk_parameters(fund_name)
        price = START_PRICE
        points: list[FundDataPoint] = []
        for offset in range(self._days, -1, -1):
            day = end_date - timedelta(days=offset)
            change = (self._rng.random() - 0.45) * volatility
            price = price * (1 + trend + change)
            points.append(
                FundDataPoint(
                    date=day.isoformat(),
                    price=round(price, 2),
                    timestamp=date_to_timestamp_ms(day, self._tz),
                )
            )
        return points


def generate_mock_data(seed: int | None = None, end_date: date | None = None) -> FundCollection:
    return MockFundGenerator(rng=random.Random(seed), end_date=end_date).generate()
