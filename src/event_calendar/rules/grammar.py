"""Date rule grammar.

Classifies the rule text of an events line into a `DateRule` variant. The
matchers are tried in a fixed priority order and the first match wins:

1. Easter offset:      `E`, `E+7`, `E-3`
2. Nth weekday:        `MM/D#N` (D: 1=Mon .. 7=Sun, N: 1-5)
3. Month/day:          `MM/DD`, `MM/DD?`, `MM/DD?YYYY`, `MM/DD?D+N`, `MM/DD?D-N`
                       (D: 0=Sun .. 6=Sat)
4. US absolute date:   `MM/DD/YYYY`
5. Day-first date:     `DD-MM-YYYY`
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from pydantic import ValidationError

from event_calendar.errors import RuleParseError
from event_calendar.models.rule import (
    AbsoluteDate,
    DateRule,
    EasterOffset,
    MonthDay,
    NthWeekday,
    WeekendShift,
)

EASTER_PATTERN = re.compile(r"^E(?P<sign>[+-]?)(?P<days>\d*)$")
NTH_WEEKDAY_PATTERN = re.compile(r"^(?P<month>\d{1,2})/(?P<weekday>[1-7])#(?P<nth>[1-5])$")
MONTH_DAY_PATTERN = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})"
    r"(?:\?(?:(?P<year>\d{4})|(?P<shift_weekday>[0-6])(?P<shift_offset>[+-]\d+))?)?$"
)
US_DATE_PATTERN = re.compile(r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})$")
DAY_FIRST_DATE_PATTERN = re.compile(r"^(?P<day>\d{1,2})-(?P<month>\d{1,2})-(?P<year>\d{4})$")


def _build_easter(match: re.Match[str]) -> EasterOffset:
    days = int(match["days"]) if match["days"] else 0
    if match["sign"] == "-":
        days = -days
    return EasterOffset(days=days)


def _build_nth_weekday(match: re.Match[str]) -> NthWeekday:
    return NthWeekday(
        month=int(match["month"]),
        weekday=int(match["weekday"]),
        nth=int(match["nth"]),
    )


def _build_month_day(match: re.Match[str]) -> MonthDay:
    shift = None
    if match["shift_weekday"] is not None:
        shift = WeekendShift(
            weekday=int(match["shift_weekday"]),
            offset_days=int(match["shift_offset"]),
        )
    return MonthDay(
        month=int(match["month"]),
        day=int(match["day"]),
        year=int(match["year"]) if match["year"] else None,
        weekend_shift=shift,
    )


def _build_absolute(match: re.Match[str]) -> AbsoluteDate:
    return AbsoluteDate(
        year=int(match["year"]),
        month=int(match["month"]),
        day=int(match["day"]),
    )


@dataclass(frozen=True)
class RuleMatcher:
    """A named rule pattern and the builder for its `DateRule` variant."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], DateRule]


# Priority order matters: the first matching pattern wins.
RULE_MATCHERS: tuple[RuleMatcher, ...] = (
    RuleMatcher("easter offset", EASTER_PATTERN, _build_easter),
    RuleMatcher("MM/D#N", NTH_WEEKDAY_PATTERN, _build_nth_weekday),
    RuleMatcher("MM/DD", MONTH_DAY_PATTERN, _build_month_day),
    RuleMatcher("MM/DD/YYYY", US_DATE_PATTERN, _build_absolute),
    RuleMatcher("DD-MM-YYYY", DAY_FIRST_DATE_PATTERN, _build_absolute),
)


def classify(text: str) -> DateRule:
    """Parse rule text into a `DateRule`.

    Args:
        text: Rule text, e.g. "E+1", "5/1#1", "12/25", "07/04/1990"

    Returns:
        The matching rule variant

    Raises:
        RuleParseError: If the text matches no rule form, the month/day is
            out of range for the matched form, or a number cannot be converted
    """
    rule_text = text.strip()
    for matcher in RULE_MATCHERS:
        match = matcher.pattern.match(rule_text)
        if not match:
            continue
        try:
            return matcher.build(match)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][-1]) for err in e.errors())
            raise RuleParseError(
                f"invalid {fields} in {matcher.name} rule: '{rule_text}'",
                text=rule_text,
            ) from e
        except ValueError as e:
            # int() refuses digit strings past the interpreter's conversion limit
            raise RuleParseError(
                f"number too large in {matcher.name} rule: '{rule_text[:40]}'",
                text=rule_text,
            ) from e
    raise RuleParseError(f"unknown date format: '{rule_text}'", text=rule_text)
