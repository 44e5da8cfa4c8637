"""Loading events files and listing resolved events."""

from event_calendar.events.listing import (
    display_month_year,
    events_in_period,
    format_event_line,
    format_event_list,
    period_bounds,
    years_to_load,
)
from event_calendar.events.loader import (
    load_events,
    load_events_for_years,
    parse_events,
)

__all__ = [
    "load_events",
    "load_events_for_years",
    "parse_events",
    "display_month_year",
    "events_in_period",
    "format_event_line",
    "format_event_list",
    "period_bounds",
    "years_to_load",
]
