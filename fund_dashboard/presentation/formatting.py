"""Display formatting for prices, returns and analysis results."""
from __future__ import annotations

import math

from fund_dashboard.domain.models import Sentiment

NOT_AVAILABLE = "n/a"

SENTIMENT_BADGES = {
    Sentiment.BULLISH: ":green[BULLISH]",
    Sentiment.BEARISH: ":red[BEARISH]",
    Sentiment.NEUTRAL: ":gray[NEUTRAL]",
}


def format_price(value: float, decimals: int = 4) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:,.{decimals}f}"


def format_percent(value: float | None, decimals: int = 2) -> str:
    if value is None or not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}%"


def format_money(value: float, currency: str, signed: bool = False) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    sign = ""
    if value < 0:
        sign = "-"
    elif signed:
        sign = "+"
    return f"{sign}{currency} {abs(value):,.2f}"


def sentiment_badge(sentiment: Sentiment) -> str:
    return SENTIMENT_BADGES[sentiment]
