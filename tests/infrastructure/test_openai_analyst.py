import json
from types import SimpleNamespace

import pytest

from fund_dashboard.domain.models import Sentiment
from fund_dashboard.infrastructure.ai.openai_analyst import (
    FALLBACK_RESULT,
    AnalysisFormatError,
    OpenAiMarketAnalyst,
    parse_analysis,
)
from fund_dashboard.infrastructure.ai.sampling import sample_series


class FakeCompletions:
    def __init__(self, content=None, error: Exception | None = None) -> None:
        self._content = content
        self._error = error
        self.requests: list[dict] = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self._error is not None:
            raise self._error
        message = SimpleNamespace(content=self._content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(completions: FakeCompletions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_sample_keeps_all_points_when_short(make_series):
    series = make_series(range(1, 41))

    assert sample_series(series, 50) == list(series)


def test_sample_of_200_points(make_series):
    series = make_series(range(1, 201))

    sample = sample_series(series, 50)

    assert len(sample) == 50
    assert sample[-1] == series[-1]
    assert [p.timestamp for p in sample] == sorted(p.timestamp for p in sample)
    assert sample[-2] == series[-5]


def test_sample_of_uneven_length(make_series):
    series = make_series(range(1, 131))

    sample = sample_series(series, 60)

    assert len(sample) == 60
    assert sample[-1] == series[-1]


def test_analysis_returns_parsed_result(make_series):
    payload = {"summary": "Steady climb", "sentiment": "bullish", "keyPoints": ["Low drawdown", "New high"]}
    completions = FakeCompletions(content=json.dumps(payload))
    analyst = OpenAiMarketAnalyst(api_key=None, model="test-model", sample_size=60, client=make_client(completions))

    result = analyst.analyze("CAL Balanced Fund", make_series(range(100, 300)))

    assert result.summary == "Steady climb"
    assert result.sentiment is Sentiment.BULLISH
    assert result.key_points == ("Low drawdown", "New high")
    request = completions.requests[0]
    assert request["model"] == "test-model"
    assert request["response_format"]["type"] == "json_schema"
    prompt = request["messages"][-1]["content"]
    assert '"CAL Balanced Fund"' in prompt
    data = json.loads(prompt.split("Data: ", 1)[1].split("\n", 1)[0])
    assert len(data) == 60
    assert data[-1]["price"] == 299.0


def test_missing_api_key_returns_fallback(make_series):
    analyst = OpenAiMarketAnalyst(api_key=None)

    assert analyst.analyze("CAL Gilt Edge", make_series([1, 2])) == FALLBACK_RESULT


def test_client_error_returns_fallback(make_series):
    completions = FakeCompletions(error=RuntimeError("network down"))
    analyst = OpenAiMarketAnalyst(api_key="key", client=make_client(completions))

    assert analyst.analyze("CAL Gilt Edge", make_series([1, 2])) == FALLBACK_RESULT


@pytest.mark.parametrize(
    "content",
    [
        None,
        "",
        "not json",
        json.dumps(["a list"]),
        json.dumps({"summary": "x", "sentiment": "euphoric", "keyPoints": []}),
        json.dumps({"summary": "x", "sentiment": "neutral", "keyPoints": "one"}),
    ],
)
def test_malformed_response_returns_fallback(make_series, content):
    analyst = OpenAiMarketAnalyst(api_key="key", client=make_client(FakeCompletions(content=content)))

    result = analyst.analyze("CAL Gilt Edge", make_series([1, 2]))

    assert result == FALLBACK_RESULT
    assert result.sentiment is Sentiment.NEUTRAL
    assert result.key_points == ("Unable to fetch insights.",)


def test_parse_analysis_rejects_missing_summary():
    with pytest.raises(AnalysisFormatError):
        parse_analysis(json.dumps({"sentiment": "neutral", "keyPoints": []}))
