"""Calendar date algorithms (Easter, nth weekday, ISO weeks)."""

from event_calendar.dates.algorithms import (
    calculate_easter,
    first_day_of_iso_week,
    make_date,
    nth_weekday_of_month,
)

__all__ = [
    "calculate_easter",
    "first_day_of_iso_week",
    "make_date",
    "nth_weekday_of_month",
]
