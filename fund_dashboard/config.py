"""Central configuration for the fund dashboard package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo

DEFAULT_DATA_URL = "https://raw.githubusercontent.com/SASINDU20013d/CAL-DATA/main/cal_full_history_data.json"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(slots=True, frozen=True)
class Settings:
    data_url: str
    request_timeout: float
    timezone: tzinfo
    mock_seed: int | None
    volatility_window: int
    trading_days: int
    ai_sample_size: int
    openai_api_key: str | None
    openai_model: str
    cache_ttl_seconds: int
    log_level: str
    currency: str


def load_settings() -> Settings:
    return Settings(
        data_url=os.getenv("FUND_DATA_URL", DEFAULT_DATA_URL),
        request_timeout=_env_float("FUND_DATA_TIMEOUT", 15.0),
        timezone=timezone.utc,
        mock_seed=_env_int("FUND_MOCK_SEED", None),
        volatility_window=30,
        trading_days=252,
        ai_sample_size=60,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4.1-mini"),
        cache_ttl_seconds=_env_int("FUND_CACHE_TTL", 3600) or 0,
        log_level=os.getenv("FUND_LOG_LEVEL", "INFO").upper(),
        currency=os.getenv("FUND_CURRENCY", "LKR"),
    )


SETTINGS = load_settings()
