"""Application services orchestrating data loading and fund analysis."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable

from fund_dashboard.domain.models import AiAnalysisResult, FundCollection, FundSeries
from fund_dashboard.domain.repositories import MarketAnalyst, RawFundDataSource
from fund_dashboard.infrastructure.parsing.documents import decode_document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FundLoadContext:
    source: RawFundDataSource
    fallback: Callable[[], FundCollection]
    tz: tzinfo | None = None


class LoadFundsUseCase:
    """Fetch and normalize fund data, substituting the fallback on any failure."""

    def __init__(self, context: FundLoadContext) -> None:
        self._context = context

    def execute(self) -> FundCollection:
        try:
            document = self._context.source.fetch_document()
            collection = decode_document(document, self._context.tz)
        except Exception:
            logger.exception("Error loading fund data; using mock data")
            return self._context.fallback()

        if not collection:
            logger.warning("Parsing failed or empty data; using mock data")
            return self._context.fallback()

        logger.info("Loaded %d funds", len(collection))
        return collection


class AnalyzeFundUseCase:
    def __init__(self, analyst: MarketAnalyst) -> None:
        self._analyst = analyst

    def execute(self, fund_name: str, series: FundSeries) -> AiAnalysisResult | None:
        if not series:
            return None
        return self._analyst.analyze(fund_name, series)
