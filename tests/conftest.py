from datetime import date, timedelta, timezone
from typing import Callable, Sequence

import pytest

from fund_dashboard.domain.dates import date_to_timestamp_ms
from fund_dashboard.domain.models import FundDataPoint


def build_series(prices: Sequence[float], start: date = date(2023, 1, 2)) -> tuple[FundDataPoint, ...]:
    points = []
    for offset, price in enumerate(prices):
        day = start + timedelta(days=offset)
        points.append(
            FundDataPoint(
                date=day.isoformat(),
                price=float(price),
                timestamp=date_to_timestamp_ms(day, timezone.utc),
            )
        )
    return tuple(points)


@pytest.fixture
def make_series() -> Callable[..., tuple[FundDataPoint, ...]]:
    return build_series
