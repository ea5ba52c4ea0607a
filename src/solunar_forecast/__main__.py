"""Command-line entrypoint for solunar_forecast."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from datetime import datetime

from solunar_forecast.config import Settings, load_settings
from solunar_forecast.contracts import Location
from solunar_forecast.scoring.forecast import best_day, forecast
from solunar_forecast.scoring.ratings import format_clock, rate_score
from solunar_forecast.scoring.solunar import compute_solunar_data


def _parse_iso_datetime(value: str) -> datetime:
    """Parse ISO date/datetime; naive values are local civil time."""
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid datetime: {value}") from exc


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None)
    parser.add_argument("--lon", type=float, default=None)


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="solunar_forecast",
        description="Solunar fishing forecast command-line interface.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command")
    day = subparsers.add_parser("day", help="Print solunar data for one date as JSON.")
    day.add_argument("--date", type=_parse_iso_datetime, default=None)
    _add_location_args(day)

    multi = subparsers.add_parser("forecast", help="Print a day-by-day forecast summary.")
    multi.add_argument("--start", type=_parse_iso_datetime, default=None)
    multi.add_argument("--days", type=int, required=True)
    _add_location_args(multi)

    return parser


def _resolve_location(
    parser: argparse.ArgumentParser, args: argparse.Namespace, settings: Settings
) -> Location:
    """Resolve CLI coordinates, falling back to configured settings."""
    if args.lat is None and args.lon is None:
        return settings.location
    if args.lat is None or args.lon is None:
        parser.error("--lat and --lon must be provided together")
    try:
        return Location(latitude=args.lat, longitude=args.lon)
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        return 0

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    location = _resolve_location(parser, args, settings)

    if args.command == "day":
        try:
            data = compute_solunar_data(args.date or datetime.now(), location)
        except ValueError as exc:
            parser.error(str(exc))
        payload = data.to_dict()
        payload["rating"] = rate_score(data.daily_score).value
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    if args.command == "forecast":
        if args.days <= 0:
            parser.error("--days must be positive")
        try:
            results = forecast(args.start or datetime.now(), args.days, location)
        except ValueError as exc:
            parser.error(str(exc))
        for data in results:
            rating = rate_score(data.daily_score)
            hours = ",".join(f"{best.hour:02d}" for best in data.best_times) or "-"
            print(
                f"{data.date.isoformat()} {data.moon_phase.emoji} "
                f"score={data.daily_score} rating={rating.label} "
                f"sunrise={format_clock(data.sun_times.sunrise)} "
                f"sunset={format_clock(data.sun_times.sunset)} "
                f"best_hours={hours}"
            )
        print(f"best_day={best_day(results).date.isoformat()}")
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
