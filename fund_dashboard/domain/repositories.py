"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Any, Protocol

from .models import AiAnalysisResult, FundSeries


class RawFundDataSource(Protocol):
    """Provides the undecoded fund price document."""

    def fetch_document(self) -> Any:
        ...


class MarketAnalyst(Protocol):
    """Produces a natural-language reading of a fund's recent prices."""

    def analyze(self, fund_name: str, series: FundSeries) -> AiAnalysisResult:
        ...
