"""Builders wiring use cases to their infrastructure from ``Settings``."""
from __future__ import annotations

import random
from pathlib import Path

from fund_dashboard.application.use_cases import AnalyzeFundUseCase, FundLoadContext, LoadFundsUseCase
from fund_dashboard.config import Settings
from fund_dashboard.domain.models import FundCollection
from fund_dashboard.domain.repositories import RawFundDataSource
from fund_dashboard.domain.services import FundMetricsCalculator, InvestmentSimulator
from fund_dashboard.infrastructure.ai.openai_analyst import OpenAiMarketAnalyst
from fund_dashboard.infrastructure.mock.generator import MockFundGenerator
from fund_dashboard.infrastructure.repositories.http_repository import (
    JsonFileFundRepository,
    RemoteJsonFundRepository,
)


def build_mock_generator(settings: Settings, seed: int | None = None) -> MockFundGenerator:
    seed = settings.mock_seed if seed is None else seed
    return MockFundGenerator(rng=random.Random(seed), tz=settings.timezone)


def build_source(settings: Settings, path: Path | str | None = None) -> RawFundDataSource:
    if path is not None:
        return JsonFileFundRepository(path)
    return RemoteJsonFundRepository(settings.data_url, timeout=settings.request_timeout)


def build_load_use_case(settings: Settings, path: Path | str | None = None, seed: int | None = None) -> LoadFundsUseCase:
    generator = build_mock_generator(settings, seed)
    context = FundLoadContext(
        source=build_source(settings, path),
        fallback=generator.generate,
        tz=settings.timezone,
    )
    return LoadFundsUseCase(context)


def load_mock_collection(settings: Settings, seed: int | None = None) -> FundCollection:
    return build_mock_generator(settings, seed).generate()


def build_analyze_use_case(settings: Settings) -> AnalyzeFundUseCase:
    analyst = OpenAiMarketAnalyst(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        sample_size=settings.ai_sample_size,
    )
    return AnalyzeFundUseCase(analyst)


def build_calculator(settings: Settings) -> FundMetricsCalculator:
    return FundMetricsCalculator(
        tz=settings.timezone,
        volatility_window=settings.volatility_window,
        trading_days=settings.trading_days,
    )


def build_simulator(settings: Settings) -> InvestmentSimulator:
    return InvestmentSimulator(tz=settings.timezone)
