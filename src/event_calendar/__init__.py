"""Rule-based calendar events.

Resolves a small recurrence-rule language (fixed dates, annual dates,
nth-weekday rules, Easter offsets, weekend shifts and anniversaries) into
concrete dates for a requested year.
"""

from event_calendar.dates.algorithms import (
    calculate_easter,
    first_day_of_iso_week,
    nth_weekday_of_month,
)
from event_calendar.errors import (
    EventCalendarError,
    EventFileError,
    MalformedLineError,
    ResolveError,
    RuleParseError,
)
from event_calendar.events.loader import load_events, parse_events
from event_calendar.models.event import Event
from event_calendar.rules.grammar import classify
from event_calendar.rules.resolver import resolve

__version__ = "0.1.0"

__all__ = [
    "calculate_easter",
    "first_day_of_iso_week",
    "nth_weekday_of_month",
    "classify",
    "resolve",
    "load_events",
    "parse_events",
    "Event",
    "EventCalendarError",
    "EventFileError",
    "MalformedLineError",
    "ResolveError",
    "RuleParseError",
]
