"""Tabular report generators for fund summaries and price series."""
from __future__ import annotations

import csv
import io
from typing import Sequence

from fund_dashboard.domain.models import FundSeries, FundSummary
from fund_dashboard.presentation.formatting import format_percent, format_price


def summaries_to_rows(summaries: Sequence[FundSummary]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in summaries:
        rows.append(
            {
                "fund": item.name,
                "current_price": format_price(item.current_price),
                "one_year_return": format_percent(item.one_year_return),
                "ytd_return": format_percent(item.ytd_return),
                "volatility": format_percent(item.volatility),
                "min_price": format_price(item.min_price, 2),
                "max_price": format_price(item.max_price, 2),
                "last_updated": item.last_updated,
            }
        )
    return rows


def render_csv(summaries: Sequence[FundSummary]) -> bytes:
    rows = summaries_to_rows(summaries)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def series_csv(series: FundSeries) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["date", "price", "timestamp"])
    for point in series:
        writer.writerow([point.date, point.price, point.timestamp])
    return buffer.getvalue().encode("utf-8")


def render_text_table(summaries: Sequence[FundSummary]) -> str:
    rows = summaries_to_rows(summaries)
    if not rows:
        return "No funds loaded."
    headers = list(rows[0].keys())
    widths = {col: max(len(col), *(len(row[col]) for row in rows)) for col in headers}
    lines = ["  ".join(col.ljust(widths[col]) for col in headers)]
    lines.append("  ".join("-" * widths[col] for col in headers))
    for row in rows:
        lines.append("  ".join(row[col].ljust(widths[col]) for col in headers))
    return "\n".join(lines)
