"""Conversions between loosely formatted dates and epoch-millisecond timestamps."""
from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone, tzinfo

import pandas as pd

DateLike = date | datetime | str | int | float

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
# Parsed timestamps must stay convertible back through pandas.
MIN_TIMESTAMP_MS = pd.Timestamp.min.value // 1_000_000 + 1
MAX_TIMESTAMP_MS = pd.Timestamp.max.value // 1_000_000


def _in_range(timestamp: int) -> bool:
    return MIN_TIMESTAMP_MS <= timestamp <= MAX_TIMESTAMP_MS


def to_timestamp_ms(value: object, tz: tzinfo) -> int | None:
    """Parse ``value`` into epoch milliseconds, or ``None`` when it is not a date.

    Numbers are read as epoch milliseconds and must fall inside the range
    pandas can represent. Naive datetimes and date-only strings are
    interpreted in ``tz``. ``date`` and ``datetime`` objects are converted
    exactly, whatever their year.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value) or not _in_range(int(value)):
            return None
        return int(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=tz)
        return (value - EPOCH) // _ONE_MS
    if isinstance(value, date):
        return date_to_timestamp_ms(value, tz)

    text = str(value).strip()
    if not text:
        return None
    try:
        parsed = pd.to_datetime(text, errors="coerce")
        if parsed is pd.NaT or pd.isna(parsed):
            return None
        if parsed.tzinfo is None:
            parsed = parsed.tz_localize(tz)
        timestamp = int((parsed - EPOCH) // pd.Timedelta(milliseconds=1))
    except (ValueError, OverflowError):
        return None
    return timestamp if _in_range(timestamp) else None


def from_timestamp_ms(timestamp: int, tz: tzinfo) -> datetime:
    return pd.Timestamp(timestamp, unit="ms", tz="UTC").tz_convert(tz).to_pydatetime()


def timestamp_year(timestamp: int, tz: tzinfo) -> int:
    return from_timestamp_ms(timestamp, tz).year


def timestamp_date(timestamp: int, tz: tzinfo) -> date:
    return from_timestamp_ms(timestamp, tz).date()


def date_to_timestamp_ms(value: date, tz: tzinfo) -> int:
    return (datetime.combine(value, time(), tzinfo=tz) - EPOCH) // _ONE_MS


def shift_years(value: date, years: int) -> date:
    """Move ``value`` by whole calendar years, mapping Feb 29 to Feb 28."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)
