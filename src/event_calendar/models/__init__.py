"""Domain models for rule-based calendar events."""

from event_calendar.models.color import STYLE_BOLD, STYLE_RESET, Color
from event_calendar.models.event import Event, EventCategory
from event_calendar.models.rule import (
    AbsoluteDate,
    DateRule,
    EasterOffset,
    MonthDay,
    NthWeekday,
    ResolvedOccurrence,
    WeekendShift,
)

__all__ = [
    # Color
    "Color",
    "STYLE_BOLD",
    "STYLE_RESET",
    # Event
    "Event",
    "EventCategory",
    # Rule
    "AbsoluteDate",
    "DateRule",
    "EasterOffset",
    "MonthDay",
    "NthWeekday",
    "ResolvedOccurrence",
    "WeekendShift",
]
