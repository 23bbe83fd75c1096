"""Down-sampling of price series before they are sent to a language model."""
from __future__ import annotations

from fund_dashboard.domain.models import FundDataPoint, FundSeries

DEFAULT_SAMPLE_SIZE = 50


def sample_series(series: FundSeries, sample_size: int = DEFAULT_SAMPLE_SIZE) -> list[FundDataPoint]:
    """Evenly stride through ``series`` keeping at most ``sample_size`` points.

    The stride is anchored on the newest point so the latest price is always
    part of the sample. Points are returned oldest first.
    """
    if sample_size <= 0:
        return []
    if len(series) <= sample_size:
        return list(series)
    step = len(series) // sample_size
    strided = list(series[::-1][::step][:sample_size])
    strided.reverse()
    return strided
