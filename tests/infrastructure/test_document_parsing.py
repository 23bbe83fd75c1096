import math

import pytest

from fund_dashboard.domain.services import compute_stats
from fund_dashboard.infrastructure.parsing.documents import decode_document
from fund_dashboard.infrastructure.parsing.utils import parse_price, resolve_field


def test_flat_records_grouped_and_sorted():
    document = [
        {"fund_name": "Alpha", "nav": "12.5", "date": "2023-01-03"},
        {"fund": "Beta", "price": 7, "timestamp": "2023-01-01"},
        {"fund_name": "Alpha", "unit_price": "11,000.25", "date": "2023-01-01"},
        {"name": "Alpha", "value": 12.0, "time": "2023-01-02"},
    ]

    collection = decode_document(document)

    assert sorted(collection) == ["Alpha", "Beta"]
    assert [p.date for p in collection["Alpha"]] == ["2023-01-01", "2023-01-02", "2023-01-03"]
    assert [p.price for p in collection["Alpha"]] == [11000.25, 12.0, 12.5]
    assert collection["Beta"][0].price == 7.0
    timestamps = [p.timestamp for p in collection["Alpha"]]
    assert timestamps == sorted(timestamps)


def test_flat_records_default_name_and_price():
    collection = decode_document([{"date": "2023-01-01"}])

    assert list(collection) == ["Unknown Fund"]
    assert collection["Unknown Fund"][0].price == 0.0


def test_flat_records_missing_fields_dropped():
    document = [
        {"fund_name": "Alpha", "nav": "abc", "date": "2023-01-01"},
        {"fund_name": "Alpha", "nav": "1.0"},
        {"fund_name": "Alpha", "nav": "1.0", "date": ""},
        "not a record",
        {"fund_name": "Alpha", "nav": "2.0", "date": "2023-01-02"},
    ]

    collection = decode_document(document)

    assert [p.price for p in collection["Alpha"]] == [2.0]


def test_fund_mapping_defaults_price_and_drops_bad_dates():
    document = {
        "Gamma": [
            {"date": "2023-01-02"},
            {"nav": "3.0", "date": "not a date"},
            {"nav": "10.5", "date": "2023-01-01"},
        ],
        "metadata": {"source": "scraper"},
    }

    collection = decode_document(document)

    assert list(collection) == ["Gamma"]
    assert [(p.date, p.price) for p in collection["Gamma"]] == [("2023-01-01", 10.5), ("2023-01-02", 0.0)]


def test_fund_mapping_with_no_usable_records_is_omitted():
    collection = decode_document({"Empty": [{"nav": "1"}], "Also": []})

    assert len(collection) == 0


@pytest.mark.parametrize("document", [None, 42, "text"])
def test_unknown_shapes_decode_to_empty(document):
    assert len(decode_document(document)) == 0


def test_ties_keep_source_order():
    document = [
        {"fund_name": "Alpha", "nav": "1", "date": "2023-01-01"},
        {"fund_name": "Alpha", "nav": "2", "date": "2023-01-01"},
    ]

    assert [p.price for p in decode_document(document)["Alpha"]] == [1.0, 2.0]


def test_collection_is_read_only():
    collection = decode_document([{"fund_name": "Alpha", "nav": "1", "date": "2023-01-01"}])

    with pytest.raises(TypeError):
        collection["Beta"] = ()  # type: ignore[index]
    assert isinstance(collection["Alpha"], tuple)


def test_resolve_field_skips_blank_values():
    record = {"nav": "", "price": None, "unit_price": " 5 "}

    assert resolve_field(record, ("nav", "price", "unit_price")) == " 5 "
    assert resolve_field({}, ("nav",), default="x") == "x"


def test_parse_price():
    assert parse_price(" 1,234.5 ") == 1234.5
    assert parse_price(None) == 0.0
    assert math.isnan(parse_price("n/a"))
    assert math.isnan(parse_price(True))


def test_numeric_zero_price_falls_through_to_next_field():
    collection = decode_document(
        [
            {"fund_name": "Alpha", "nav": 0, "price": "9.5", "date": "2023-01-01"},
            {"fund_name": "Alpha", "nav": 0, "date": "2023-01-02"},
            {"fund_name": "Alpha", "nav": "0", "price": "4", "date": "2023-01-03"},
        ]
    )

    assert [p.price for p in collection["Alpha"]] == [9.5, 0.0, 0.0]


def test_out_of_range_numeric_dates_are_dropped():
    collection = decode_document({"Alpha": [{"nav": "1", "date": 1.7e15}, {"nav": "2", "date": "2023-01-01"}]})

    assert [p.price for p in collection["Alpha"]] == [2.0]
    assert compute_stats(collection["Alpha"]).latest_price == 2.0
