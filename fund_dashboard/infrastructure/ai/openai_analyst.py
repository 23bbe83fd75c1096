"""OpenAI-backed market analyst producing structured fund commentary."""
from __future__ import annotations

import json
import logging
from typing import Any

from openai import OpenAI

from fund_dashboard.domain.models import AiAnalysisResult, FundSeries, Sentiment
from fund_dashboard.domain.repositories import MarketAnalyst
from fund_dashboard.infrastructure.ai.sampling import sample_series

logger = logging.getLogger(__name__)

FALLBACK_RESULT = AiAnalysisResult(
    summary="AI Analysis currently unavailable. Please check API configuration or try again later.",
    sentiment=Sentiment.NEUTRAL,
    key_points=("Unable to fetch insights.",),
)

RESPONSE_SCHEMA = {
    "name": "fund_analysis",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "summary": {"type": "string"},
            "sentiment": {"type": "string", "enum": [s.value for s in Sentiment]},
            "keyPoints": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["summary", "sentiment", "keyPoints"],
        "additionalProperties": False,
    },
}

SYSTEM_PROMPT = (
    "You are a unit trust market analyst. Provide educational commentary, not financial advice. "
    "Keep it concise and return JSON matching the schema."
)


class AnalysisFormatError(ValueError):
    """Raised when the model response does not match the expected shape."""


def build_prompt(fund_name: str, series: FundSeries, sample_size: int) -> str:
    sample = [{"date": point.date, "price": point.price} for point in sample_series(series, sample_size)]
    return (
        f'Analyze the following historical pricing data for the unit trust fund named "{fund_name}".\n'
        "The data provided is a sampled time series of dates and NAV (prices).\n\n"
        f"Data: {json.dumps(sample, ensure_ascii=True)}\n\n"
        "Please provide:\n"
        "1. A concise summary of the recent trend (last 2 months).\n"
        "2. The overall sentiment (bullish, bearish, or neutral).\n"
        "3. Three key observations or potential risks/opportunities for an investor.\n"
    )


def parse_analysis(text: str | None) -> AiAnalysisResult:
    if not text:
        raise AnalysisFormatError("No response text from model")
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise AnalysisFormatError(f"Expected a JSON object, got {type(payload).__name__}")

    summary = payload.get("summary")
    key_points = payload.get("keyPoints")
    if not isinstance(summary, str):
        raise AnalysisFormatError("Missing summary")
    if not isinstance(key_points, list) or not all(isinstance(p, str) for p in key_points):
        raise AnalysisFormatError("keyPoints must be a list of strings")
    try:
        sentiment = Sentiment(str(payload.get("sentiment", "")).lower())
    except ValueError as exc:
        raise AnalysisFormatError(f"Unknown sentiment {payload.get('sentiment')!r}") from exc

    return AiAnalysisResult(summary=summary, sentiment=sentiment, key_points=tuple(key_points))


class OpenAiMarketAnalyst(MarketAnalyst):
    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4.1-mini",
        sample_size: int = 60,
        client: Any | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._sample_size = sample_size
        self._client = client

    def analyze(self, fund_name: str, series: FundSeries) -> AiAnalysisResult:
        client = self._get_client()
        if client is None:
            logger.warning("OPENAI_API_KEY is not configured; returning fallback analysis")
            return FALLBACK_RESULT

        prompt = build_prompt(fund_name, series, self._sample_size)
        try:
            response = client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_schema", "json_schema": RESPONSE_SCHEMA},
            )
            result = parse_analysis(response.choices[0].message.content)
        except Exception:
            logger.exception("Market analysis failed for %s", fund_name)
            return FALLBACK_RESULT

        logger.info("Market analysis for %s: %s", fund_name, result.sentiment.value)
        return result

    def _get_client(self) -> Any | None:
        if self._client is None and self._api_key:
            self._client = OpenAI(api_key=self._api_key)
        return self._client
