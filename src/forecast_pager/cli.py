"""
Command-line interface for the application.

Reads a saved forecast payload (``data/2.5/forecast`` JSON) and pages
through it one day at a time.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError

from forecast_pager import __version__
from forecast_pager.analysis import ForecastView
from forecast_pager.config import get_settings
from forecast_pager.datasources.openweathermap import parse_response
from forecast_pager.formatting import date_label, format_temperature, local_time_label

if TYPE_CHECKING:
    from datetime import tzinfo

    from forecast_pager.schemas import ViewState

logger = logging.getLogger(__name__)


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise argparse.ArgumentTypeError(f"unknown time zone: {name}") from exc


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="forecast-pager",
        description="Page through a 5-day / 3-hour weather forecast one day at a time",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    days_parser = subparsers.add_parser("days", help="List the days in a forecast payload")
    days_parser.add_argument("payload", type=Path, help="Forecast JSON file")
    days_parser.add_argument(
        "--tz",
        type=_zone,
        default=None,
        help="Display time zone (default: timezone from settings)",
    )

    show_parser = subparsers.add_parser("show", help="Show the forecast for one day")
    show_parser.add_argument("payload", type=Path, help="Forecast JSON file")
    show_parser.add_argument(
        "--day",
        type=int,
        default=0,
        help="Day offset from the first forecast day (default: 0, clamped to the last day)",
    )
    show_parser.add_argument(
        "--tz",
        type=_zone,
        default=None,
        help="Display time zone (default: timezone from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_view(path: Path, tz: tzinfo | None) -> tuple[ForecastView, str | None]:
    """Read a payload file into a loaded view. Returns the view and city name."""
    with path.open(encoding="utf-8") as f:
        payload = json.load(f)
    logger.debug("Read forecast payload from %s", path)
    response = parse_response(payload)
    view = ForecastView(tz)
    view.load(response.samples())
    city = response.city.name if response.city else None
    return view, city


def format_day(state: ViewState, tz: tzinfo) -> list[str]:
    """Text lines for the selected day of a view state."""
    if not state.has_data or state.selected_date is None:
        return ["No weather data available"]

    lines = [f"Date: {date_label(state.selected_date)} ({state.selected_date})"]
    for sample in state.samples:
        time = local_time_label(sample.timestamp, tz)
        temp = format_temperature(sample.temperature_kelvin)
        lines.append(f"  {time}  {sample.description:<24} {temp:>6}")
    prev_mark = "< previous" if state.can_go_previous else ""
    next_mark = "next >" if state.can_go_next else ""
    lines.append(f"{prev_mark:<12}{next_mark:>12}".rstrip())
    return lines


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Time zone: {settings.timezone}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_days(args: argparse.Namespace) -> int:
    """Handle the 'days' command: one line per forecast day."""
    try:
        view, city = _load_view(args.payload, args.tz)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not view.has_data:
        print("No weather data available")
        return 0

    if city:
        print(f"Forecast for {city}")
    for group in view.day_groups():
        print(f"{group.date}  {date_label(group.date):<12} {len(group.samples)} samples")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command: print a single day."""
    try:
        view, city = _load_view(args.payload, args.tz)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for _ in range(max(args.day, 0)):
        if not view.next():
            break

    if city:
        print(f"Weather at {city}:")
    for line in format_day(view.state(), view.tz):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "days": cmd_days,
        "show": cmd_show,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
