"""Calendar date algorithms.

Pure functions used by the rule resolver and by the CLI's month/year
derivation:
- Easter Sunday (anonymous Gregorian algorithm)
- Nth occurrence of a weekday in a month
- Monday of an ISO week

All dates are naive `datetime.date` values in the proleptic Gregorian
calendar.
"""

from __future__ import annotations

from datetime import date, timedelta

from event_calendar.errors import ResolveError

# Upper bound on the day-by-day scan in first_day_of_iso_week
ISO_WEEK_SCAN_LIMIT_DAYS = 370


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling day overflow into the following month.

    `make_date(2023, 2, 30)` is March 2nd, 2023. `day` is expected to be in
    1..31 and `month` in 1..12.

    Raises:
        ResolveError: If the date falls outside years 1..9999
    """
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as e:
        raise ResolveError(f"no date {year:04d}-{month:02d}-{day:02d}: {e}") from e


def calculate_easter(year: int) -> date:
    """Calculate Easter Sunday for a year (anonymous Gregorian algorithm).

    Args:
        year: Gregorian year

    Returns:
        Date of Easter Sunday, always between March 22 and April 25
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def nth_weekday_of_month(year: int, month: int, nth: int, weekday: int) -> date:
    """Find the nth occurrence of a weekday in a month.

    If the month has fewer than `nth` occurrences, the last occurrence is
    returned instead, so `nth=5` reads as "last".

    Args:
        year: Gregorian year
        month: Month (1-12)
        nth: Occurrence (1-5)
        weekday: Weekday using Python's convention (Monday=0 .. Sunday=6)

    Returns:
        Date of the occurrence

    Raises:
        ResolveError: If month, nth or weekday is out of range
    """
    if not 1 <= nth <= 5:
        raise ResolveError(f"invalid 'nth' value: {nth}, must be between 1 and 5")
    if not 1 <= month <= 12:
        raise ResolveError(f"invalid month: {month}, must be between 1 and 12")
    if not 0 <= weekday <= 6:
        raise ResolveError(f"invalid weekday: {weekday}, must be between 0 and 6")

    first_of_month = date(year, month, 1)
    days_to_add = (weekday - first_of_month.weekday()) % 7
    first_occurrence = first_of_month + timedelta(days=days_to_add)

    occurrence = first_occurrence + timedelta(weeks=nth - 1)
    if occurrence.month != month:
        # Only a 5th occurrence can overflow; fall back to the 4th (the last)
        occurrence = first_occurrence + timedelta(weeks=nth - 2)
    return occurrence


def first_day_of_iso_week(year: int, week: int) -> date:
    """Find the Monday of an ISO week.

    Scans forward from January 1st of `year` until a day belonging to the
    target ISO week is found, then steps back to that week's Monday. The
    Monday may fall in December of the previous year.

    Args:
        year: ISO year
        week: ISO week number (1-53)

    Returns:
        Monday of the requested week

    Raises:
        ResolveError: If the week is out of range or does not exist in `year`
            (e.g. week 53 of a 52-week year)
    """
    if not 1 <= week <= 53:
        raise ResolveError(f"invalid week number: {week}")

    current = date(year, 1, 1)
    for _ in range(ISO_WEEK_SCAN_LIMIT_DAYS):
        iso_year, iso_week, _weekday = current.isocalendar()
        if iso_year == year and iso_week == week:
            break
        if iso_year > year:
            if week == 1 and iso_year == year + 1 and iso_week == 1:
                break
            raise ResolveError(
                f"could not find a day in week {week} of year {year} (overshot)"
            )
        current += timedelta(days=1)
    else:
        raise ResolveError(
            f"could not find a day in week {week} of year {year} "
            f"after {ISO_WEEK_SCAN_LIMIT_DAYS} days"
        )

    monday = current - timedelta(days=current.weekday())
    iso_year, iso_week, _weekday = monday.isocalendar()
    if iso_week == week and (
        iso_year == year or (iso_year == year + 1 and week == 1)
    ):
        return monday
    raise ResolveError(
        f"could not determine first day of ISO week {week} for year {year} "
        f"(got {monday.isoformat()}, ISO {iso_year}-W{iso_week:02d})"
    )
