"""Decode raw fund price documents into a ``FundCollection``.

Two document shapes are accepted:

* a flat array of records, each naming its own fund;
* an object mapping fund name to an array of records.

Records that cannot be resolved to a name, a numeric price and a parseable
date are dropped.
"""
from __future__ import annotations

import logging
import math
from collections import defaultdict
from datetime import timezone, tzinfo
from typing import Any, Iterable, Mapping

from fund_dashboard.domain.dates import to_timestamp_ms
from fund_dashboard.domain.models import FundCollection, FundDataPoint
from fund_dashboard.infrastructure.parsing.utils import (
    resolve_date,
    resolve_name,
    resolve_price,
)

logger = logging.getLogger(__name__)


def to_data_point(record: object, tz: tzinfo) -> FundDataPoint | None:
    if not isinstance(record, Mapping):
        return None
    price = resolve_price(record)
    if math.isnan(price):
        return None
    raw_date = resolve_date(record)
    timestamp = to_timestamp_ms(raw_date, tz)
    if timestamp is None:
        return None
    return FundDataPoint(date=str(raw_date).strip(), price=price, timestamp=timestamp)


def decode_record_array(records: Iterable[Any], tz: tzinfo) -> dict[str, list[FundDataPoint]]:
    funds: dict[str, list[FundDataPoint]] = defaultdict(list)
    dropped = 0
    for record in records:
        point = to_data_point(record, tz)
        name = resolve_name(record) if isinstance(record, Mapping) else ""
        if point is None or not name:
            dropped += 1
            continue
        funds[name].append(point)
    if dropped:
        logger.debug("Dropped %d unusable records from flat document", dropped)
    return dict(funds)


def decode_fund_mapping(document: Mapping[str, Any], tz: tzinfo) -> dict[str, list[FundDataPoint]]:
    funds: dict[str, list[FundDataPoint]] = {}
    for name, records in document.items():
        if not isinstance(records, list):
            continue
        points = [point for point in (to_data_point(record, tz) for record in records) if point is not None]
        if len(points) < len(records):
            logger.debug("Dropped %d unusable records for %s", len(records) - len(points), name)
        if points:
            funds[str(name)] = points
    return funds


def decode_document(document: Any, tz: tzinfo | None = None) -> FundCollection:
    """Normalize a decoded JSON document; unknown shapes give an empty collection."""
    tz = tz or timezone.utc
    if isinstance(document, list):
        funds = decode_record_array(document, tz)
    elif isinstance(document, Mapping):
        funds = decode_fund_mapping(document, tz)
    else:
        logger.warning("Unrecognised fund document of type %s", type(document).__name__)
        funds = {}

    return FundCollection(
        {name: sorted(points, key=lambda point: point.timestamp) for name, points in funds.items()}
    )
