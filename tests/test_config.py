import pytest

from fund_dashboard.config import load_settings


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("FUND_DATA_TIMEOUT", "2.5")
    monkeypatch.setenv("FUND_MOCK_SEED", "42")
    monkeypatch.setenv("FUND_CACHE_TTL", "")

    settings = load_settings()

    assert settings.request_timeout == 2.5
    assert settings.mock_seed == 42
    assert settings.cache_ttl_seconds == 3600


@pytest.mark.parametrize(
    "name, value",
    [("FUND_DATA_TIMEOUT", "soon"), ("FUND_MOCK_SEED", "1.5"), ("FUND_CACHE_TTL", "hour")],
)
def test_malformed_numbers_name_the_variable(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        load_settings()
