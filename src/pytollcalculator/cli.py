"""Command-line entry point.

Examples:
  pytollcalculator fee --vehicle Car 2024-03-04T07:00 2024-03-04T08:05
  pytollcalculator fee --breakdown 2024-03-04T06:20 2024-03-04T06:45
  pytollcalculator holidays 2024

Optional environment variables:
  LOG_LEVEL
  TOLL_VEHICLE_TYPE
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import traceback
from collections.abc import Sequence

from .client import TollCalculator
from .exceptions import PyTollCalculatorError
from .models import FeeBreakdown, VehicleType
from .util import parse_timestamp, parse_vehicle_type

_LOGGER = logging.getLogger(__name__)
_DEFAULT_VEHICLE = VehicleType.CAR.value


def _print_exception(label: str, exc: Exception, *, trace: bool) -> None:
    print(f"{label}: {exc.__class__.__name__}: {exc}", file=sys.stderr)
    if trace:
        traceback.print_exc()


def _format_breakdown(breakdown: FeeBreakdown) -> list[str]:
    lines = [
        f"- {interval.start.strftime('%H:%M')} fee={interval.fee} passages={interval.passages}"
        for interval in breakdown.intervals
    ]
    if breakdown.capped:
        lines.append(f"Uncapped total: {breakdown.uncapped_total}")
    return lines


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pytollcalculator",
        description="Calculate daily congestion toll fees.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (default: LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--traceback",
        action="store_true",
        help="Print full tracebacks on errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fee_parser = subparsers.add_parser("fee", help="Total fee for one day of passages.")
    fee_parser.add_argument(
        "--vehicle",
        dest="vehicle",
        help="Vehicle type (default: TOLL_VEHICLE_TYPE or Car).",
    )
    fee_parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print each charge interval.",
    )
    fee_parser.add_argument(
        "timestamps",
        nargs="*",
        help="Passage times in ISO 8601 format, all on the same day.",
    )

    holidays_parser = subparsers.add_parser("holidays", help="List toll-free dates of a year.")
    holidays_parser.add_argument("year", type=int, help="Calendar year.")
    return parser.parse_args(argv)


def _run_fee(calculator: TollCalculator, args: argparse.Namespace) -> None:
    vehicle = parse_vehicle_type(
        args.vehicle or os.getenv("TOLL_VEHICLE_TYPE") or _DEFAULT_VEHICLE
    )
    timestamps = [parse_timestamp(value) for value in args.timestamps]
    breakdown = calculator.get_breakdown(vehicle, timestamps)
    if args.breakdown:
        for line in _format_breakdown(breakdown):
            print(line)
    print(breakdown.total)


def _run_holidays(calculator: TollCalculator, args: argparse.Namespace) -> None:
    for day in sorted(calculator.toll_free_dates(args.year)):
        print(day.isoformat())


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    log_level = args.log_level.upper()
    if args.debug and log_level == "INFO":
        log_level = "DEBUG"
    logging.basicConfig(level=log_level)
    _LOGGER.debug("Running %s command", args.command)

    calculator = TollCalculator()
    try:
        if args.command == "fee":
            _run_fee(calculator, args)
        else:
            _run_holidays(calculator, args)
    except PyTollCalculatorError as exc:
        _print_exception("Error", exc, trace=args.traceback)
        return 1
    return 0
