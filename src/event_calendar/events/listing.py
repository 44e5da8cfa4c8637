"""Helpers for listing resolved events over a display period."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

from event_calendar.dates.algorithms import first_day_of_iso_week
from event_calendar.errors import ResolveError
from event_calendar.models.color import STYLE_BOLD, STYLE_RESET, Color
from event_calendar.models.event import Event

logger = logging.getLogger(__name__)


def display_month_year(
    year: int,
    month: int,
    week: int | None = None,
    today: date | None = None,
) -> tuple[int, int]:
    """Determine the first (year, month) to display.

    When `week` is given, the month containing the Monday of that ISO week is
    used. If the week does not exist in `year`, a warning is logged and the
    current month is used instead.
    """
    if not week:
        return year, month

    try:
        monday = first_day_of_iso_week(year, week)
    except ResolveError as e:
        today = today or date.today()
        logger.warning(
            f"Error determining date from year/week: {e}. "
            "Falling back to current month/year."
        )
        return today.year, today.month
    return monday.year, monday.month


def _add_months(year: int, month: int, count: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + count
    return index // 12, index % 12 + 1


def years_to_load(start_year: int, start_month: int, num_months: int) -> list[int]:
    """Context years needed to cover `num_months` starting at the given month."""
    end_year, _ = _add_months(start_year, start_month, num_months - 1)
    return list(range(start_year, end_year + 1))


def period_bounds(start_year: int, start_month: int, num_months: int) -> tuple[date, date]:
    """First and last day of a span of whole months."""
    next_year, next_month = _add_months(start_year, start_month, num_months)
    start = date(start_year, start_month, 1)
    end = date(next_year, next_month, 1) - timedelta(days=1)
    return start, end


def events_in_period(events: Iterable[Event], start: date, end: date) -> list[Event]:
    """Events between `start` and `end` inclusive, deduplicated and sorted by date.

    Events sharing a date and description are listed once (the first wins).
    """
    unique: dict[tuple[date, str], Event] = {}
    for event in events:
        if start <= event.date <= end:
            unique.setdefault(event.dedup_key, event)
    return sorted(unique.values(), key=lambda e: e.date)


def day_suffix(day: int) -> str:
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"


def _plural(count: int) -> str:
    return "" if abs(count) == 1 else "s"


def format_event_line(event: Event, today: date, color: bool = True) -> str:
    """Format one event for the event list.

    Example: ` 4th Jul, Fri: 🎂 Alex's birthday (Age: 35) (In 12 days)`
    """
    d = event.date
    label = f"{d.day:2d}{day_suffix(d.day)} {d.strftime('%b')}, {d.strftime('%a')}"
    if color:
        label = f"{event.fg_code}{event.bg_code}{label} {STYLE_RESET}"
    else:
        label = f"{label} "

    line = f"{label}: {event.display_emoji} {event.description}"

    age = event.age_on(today)
    if age is not None:
        line += f" (Age: {age})"

    days = event.days_until(today)
    if days == 0:
        countdown = "(Today)"
    elif days > 0:
        countdown = f"(In {days} day{_plural(days)})"
    else:
        countdown = f"({-days} day{_plural(days)} ago)"

    if color:
        highlight = Color.GREEN if days > 0 else Color.BLUE
        countdown = f"{highlight.fg}{countdown}{STYLE_RESET}"
    return f"{line} {countdown}"


def format_event_list(events: Iterable[Event], today: date, color: bool = True) -> list[str]:
    """Lines of the event list, including its heading."""
    heading = "Events for displayed period:"
    lines = [f"{STYLE_BOLD}{heading}{STYLE_RESET}" if color else heading]
    formatted = [format_event_line(event, today, color=color) for event in events]
    if not formatted:
        formatted = ["No events in the displayed period."]
    return lines + formatted
