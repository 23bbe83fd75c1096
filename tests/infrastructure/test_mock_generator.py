import random
from datetime import date

from fund_dashboard.infrastructure.mock.generator import (
    MOCK_FUNDS,
    MockFundGenerator,
    generate_mock_data,
    walk_parameters,
)


def test_generates_four_funds_of_1001_points():
    collection = generate_mock_data(seed=7, end_date=date(2024, 3, 1))

    assert list(collection) == list(MOCK_FUNDS)
    for series in collection.values():
        assert len(series) == 1001
        assert series[-1].date == "2024-03-01"
        assert series[0].date == "2021-06-05"
        assert all(a.timestamp < b.timestamp for a, b in zip(series, series[1:]))
        assert all(round(p.price, 2) == p.price for p in series)


def test_same_seed_is_reproducible():
    first = generate_mock_data(seed=3, end_date=date(2024, 1, 1))
    second = generate_mock_data(seed=3, end_date=date(2024, 1, 1))

    assert dict(first) == dict(second)


def test_walk_follows_formula():
    rng = random.Random(11)
    draw = random.Random(11).random()
    generator = MockFundGenerator(rng=rng, end_date=date(2024, 1, 1), fund_names=("CAL Income Fund",), days=0)

    series = generator.generate()["CAL Income Fund"]

    trend, volatility = walk_parameters("CAL Income Fund")
    expected = 100 * (1 + trend + (draw - 0.45) * volatility)
    assert len(series) == 1
    assert series[0].price == round(expected, 2)


def test_walk_parameters_by_category():
    assert walk_parameters("CAL Quantitative Equity") == (0.0005, 0.02)
    assert walk_parameters("CAL Income Fund") == (0.0003, 0.005)
    assert walk_parameters("CAL Gilt Edge") == (0.0005, 0.005)
