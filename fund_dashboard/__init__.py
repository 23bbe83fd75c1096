"""Domain-driven fund price dashboard toolkit."""
from fund_dashboard.application.use_cases import AnalyzeFundUseCase, FundLoadContext, LoadFundsUseCase
from fund_dashboard.domain.services import (
    FundMetricsCalculator,
    InvestmentSimulator,
    compute_stats,
    simulate,
)
from fund_dashboard.infrastructure.ai.openai_analyst import OpenAiMarketAnalyst
from fund_dashboard.infrastructure.mock.generator import MockFundGenerator
from fund_dashboard.infrastructure.repositories.http_repository import (
    JsonFileFundRepository,
    RemoteJsonFundRepository,
)

__all__ = [
    "AnalyzeFundUseCase",
    "FundLoadContext",
    "LoadFundsUseCase",
    "FundMetricsCalculator",
    "InvestmentSimulator",
    "compute_stats",
    "simulate",
    "OpenAiMarketAnalyst",
    "MockFundGenerator",
    "JsonFileFundRepository",
    "RemoteJsonFundRepository",
]
