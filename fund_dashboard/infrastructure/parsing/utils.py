"""Shared parsing utilities for loosely shaped fund price records."""
from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Sequence

NAME_FIELDS = ("fund_name", "fund", "name")
PRICE_FIELDS = ("nav", "price", "unit_price", "value")
DATE_FIELDS = ("date", "timestamp", "time")

UNKNOWN_FUND = "Unknown Fund"


def is_present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def is_price_present(value: object) -> bool:
    """A numeric zero does not count, so a later price field can supply the figure."""
    if isinstance(value, (int, float)) and value == 0:
        return False
    return is_present(value)


def resolve_field(
    record: Mapping[str, Any],
    candidates: Sequence[str],
    default: Any = None,
    present: Callable[[object], bool] = is_present,
) -> Any:
    """Return the first present value among ``candidates``, in order."""
    for key in candidates:
        value = record.get(key)
        if present(value):
            return value
    return default


def parse_price(value: object) -> float:
    """Parse a NAV figure; anything unreadable becomes NaN."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip()
    if not s:
        return 0.0
    for ch in [",", " "]:
        s = s.replace(ch, "")
    try:
        return float(s)
    except ValueError:
        return math.nan


def resolve_name(record: Mapping[str, Any]) -> str:
    return str(resolve_field(record, NAME_FIELDS, UNKNOWN_FUND)).strip()


def resolve_price(record: Mapping[str, Any]) -> float:
    return parse_price(resolve_field(record, PRICE_FIELDS, 0, present=is_price_present))


def resolve_date(record: Mapping[str, Any]) -> object:
    return resolve_field(record, DATE_FIELDS)
