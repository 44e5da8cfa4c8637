"""Resolve date rules to concrete dates for a context year.

The same rule resolves to different dates for different context years:
`E+1` is Easter Monday of whichever year is asked for, while `07/04/1990`
always resolves to the literal date and is flagged as an anniversary
candidate for the loader to reconcile.
"""

from __future__ import annotations

from datetime import timedelta
from functools import singledispatch

from event_calendar.dates.algorithms import (
    calculate_easter,
    make_date,
    nth_weekday_of_month,
)
from event_calendar.errors import ResolveError
from event_calendar.models.rule import (
    AbsoluteDate,
    DateRule,
    EasterOffset,
    MonthDay,
    NthWeekday,
    ResolvedOccurrence,
)


def resolve(rule: DateRule, context_year: int) -> ResolvedOccurrence:
    """Resolve a rule against a context year.

    Args:
        rule: Parsed rule from `classify`
        context_year: Year annual rules are resolved in

    Returns:
        ResolvedOccurrence with the date and its annual/anniversary flags

    Raises:
        ResolveError: If the rule has no date in the context year or the
            resulting date is outside the supported range
    """
    try:
        return _resolve(rule, context_year)
    except (ValueError, OverflowError) as e:
        raise ResolveError(f"cannot resolve {rule!r} for {context_year}: {e}") from e


@singledispatch
def _resolve(rule, context_year: int) -> ResolvedOccurrence:
    raise ResolveError(f"unsupported rule type: {type(rule).__name__}")


@_resolve.register(EasterOffset)
def _resolve_easter(rule: EasterOffset, context_year: int) -> ResolvedOccurrence:
    easter = calculate_easter(context_year)
    return ResolvedOccurrence(
        date=easter + timedelta(days=rule.days),
        is_annual=True,
    )


@_resolve.register(NthWeekday)
def _resolve_nth_weekday(rule: NthWeekday, context_year: int) -> ResolvedOccurrence:
    # Rule weekdays are 1=Mon..7=Sun, Python's are 0=Mon..6=Sun
    occurrence = nth_weekday_of_month(
        context_year, rule.month, rule.nth, rule.weekday - 1
    )
    return ResolvedOccurrence(date=occurrence, is_annual=True)


@_resolve.register(MonthDay)
def _resolve_month_day(rule: MonthDay, context_year: int) -> ResolvedOccurrence:
    pinned = rule.year is not None
    base = make_date(rule.year if pinned else context_year, rule.month, rule.day)

    resolved = base
    shift = rule.weekend_shift
    if shift is not None and shift.applies_to(base):
        resolved = base + timedelta(days=shift.offset_days)

    return ResolvedOccurrence(
        date=resolved,
        is_annual=not pinned,
        specific_year_in_rule=pinned,
    )


@_resolve.register(AbsoluteDate)
def _resolve_absolute(rule: AbsoluteDate, context_year: int) -> ResolvedOccurrence:
    literal = make_date(rule.year, rule.month, rule.day)
    return ResolvedOccurrence(
        date=literal,
        is_annual=False,
        is_anniversary_candidate=True,
        anniversary_base_date=literal,
        specific_year_in_rule=True,
    )
