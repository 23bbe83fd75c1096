"""Command-line entrypoint for fund summaries and investment simulation."""
from __future__ import annotations

import argparse
import sys
from datetime import date, datetime

from fund_dashboard.application.factories import (
    build_calculator,
    build_load_use_case,
    build_simulator,
    load_mock_collection,
)
from fund_dashboard.config import SETTINGS
from fund_dashboard.domain.services import classify_fund
from fund_dashboard.logging_setup import setup_logging
from fund_dashboard.presentation.formatting import format_money, format_percent, format_price
from fund_dashboard.presentation.report import render_text_table


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize historical fund prices and simulate investments")
    parser.add_argument("--source", type=str, help="Read fund data from a local JSON file instead of the remote URL")
    parser.add_argument("--mock", action="store_true", help="Use generated mock data")
    parser.add_argument("--seed", type=int, help="Seed for mock data generation")
    parser.add_argument("--fund", type=str, help="Show detailed statistics for this fund")
    parser.add_argument("--amount", type=float, default=100_000.0, help="Principal for the simulator")
    parser.add_argument("--start", type=str, help="Simulation start date (YYYY-MM-DD)")
    args = parser.parse_args(argv)
    if args.amount <= 0:
        parser.error("--amount must be positive")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    setup_logging(SETTINGS.log_level)

    if args.mock:
        collection = load_mock_collection(SETTINGS, seed=args.seed)
    else:
        collection = build_load_use_case(SETTINGS, path=args.source, seed=args.seed).execute()

    calculator = build_calculator(SETTINGS)
    print("Fund Overview")
    print("=============")
    print(render_text_table(calculator.summarize_collection(collection)))

    if not args.fund:
        return 0
    if args.fund not in collection:
        print(f"\nUnknown fund: {args.fund}", file=sys.stderr)
        return 2

    series = collection[args.fund]
    stats = calculator.compute_stats(series)
    print(f"\n{args.fund} ({classify_fund(args.fund).value})")
    print("-" * (len(args.fund) + 2))
    if stats is not None:
        print(f"Current NAV: {format_price(stats.latest_price)} as of {stats.as_of}")
        print(f"Daily change: {format_percent(stats.daily_change)}")
        print(f"YTD return: {format_percent(stats.ytd_return)}")
        print(f"Volatility (annual): {format_percent(stats.volatility)}")
        print(f"All-time range: {format_price(stats.min_price, 2)} - {format_price(stats.max_price, 2)}")

    simulator = build_simulator(SETTINGS)
    start: date = (
        date.fromisoformat(args.start)
        if args.start
        else simulator.default_start_date(series, datetime.now(SETTINGS.timezone).date())
    )
    result = simulator.simulate(series, args.amount, start)
    if result is None:
        print(f"\nNo prices on or after {start.isoformat()}; nothing to simulate.")
        return 0

    print(f"\nInvesting {format_money(args.amount, SETTINGS.currency)} on {result.start_point.date}")
    print(f"Projected value: {format_money(result.final_value, SETTINGS.currency)}")
    print(f"Total profit: {format_money(result.profit, SETTINGS.currency, signed=True)}")
    print(f"Return: {format_percent(result.percent)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
