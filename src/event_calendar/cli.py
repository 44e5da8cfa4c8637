"""Command-line interface for rule-based calendar events."""

import argparse
import logging
import sys
from datetime import date

from event_calendar import __version__
from event_calendar.config import VALID_MONTH_SPANS, get_settings
from event_calendar.dates.algorithms import calculate_easter, first_day_of_iso_week
from event_calendar.errors import EventFileError, ResolveError
from event_calendar.events.listing import (
    display_month_year,
    events_in_period,
    format_event_list,
    period_bounds,
    years_to_load,
)
from event_calendar.events.loader import load_events_for_years

logger = logging.getLogger(__name__)


def _month(value: str) -> int:
    month = int(value)
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"invalid month {month}, must be between 1 and 12")
    return month


def _week(value: str) -> int:
    week = int(value)
    if not 1 <= week <= 53:
        raise argparse.ArgumentTypeError(f"invalid week {week}, must be between 1 and 53")
    return week


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="event-calendar",
        description="Event Calendar - resolve recurring event rules into dates",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Events command
    events_parser = subparsers.add_parser(
        "events", help="List events for a month or range of months"
    )
    events_parser.add_argument(
        "--year", type=int, help="Year to list (default: current year)"
    )
    events_parser.add_argument(
        "--month", type=_month, help="First month to list, 1-12 (default: current month)"
    )
    events_parser.add_argument(
        "--week",
        type=_week,
        help="ISO week number, 1-53. Requires --year and overrides --month",
    )
    events_parser.add_argument(
        "--months",
        type=int,
        choices=VALID_MONTH_SPANS,
        help="Number of months to list",
    )
    events_parser.add_argument(
        "--events", dest="events_file", help="Path to the events file"
    )
    events_parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors"
    )

    # Easter command
    easter_parser = subparsers.add_parser("easter", help="Show Easter Sunday for a year")
    easter_parser.add_argument("year", type=int)

    # Week command
    week_parser = subparsers.add_parser(
        "week", help="Show the Monday of an ISO week"
    )
    week_parser.add_argument("year", type=int)
    week_parser.add_argument("week", type=_week)

    return parser


def _list_events(args: argparse.Namespace, today: date) -> int:
    settings = get_settings()

    if args.week and args.year is None:
        logger.error("--week requires --year to be specified")
        return 2

    year, month = display_month_year(
        args.year or today.year,
        args.month or today.month,
        week=args.week,
        today=today,
    )
    num_months = args.months or settings.num_months
    events_file = args.events_file or settings.events_file

    try:
        events = load_events_for_years(
            events_file, years_to_load(year, month, num_months)
        )
    except EventFileError as e:
        logger.error(str(e))
        return 1

    start, end = period_bounds(year, month, num_months)
    color = settings.color and not args.no_color
    for line in format_event_list(events_in_period(events, start, end), today, color=color):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.logging_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "events":
        return _list_events(args, date.today())

    if args.command == "easter":
        print(calculate_easter(args.year).isoformat())
        return 0

    if args.command == "week":
        try:
            monday = first_day_of_iso_week(args.year, args.week)
        except ResolveError as e:
            logger.error(str(e))
            return 1
        print(monday.isoformat())
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
