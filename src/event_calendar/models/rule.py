"""Date rule models.

A date rule is the part of an events line before the first ';'. The grammar
matcher turns the rule text into one of the `DateRule` variants below and the
resolver turns a variant plus a context year into a `ResolvedOccurrence`.

## Rule forms

| Text          | Variant         | Meaning                                        |
|---------------|-----------------|------------------------------------------------|
| `E`, `E+7`    | `EasterOffset`  | Days relative to Easter Sunday                 |
| `5/1#1`       | `NthWeekday`    | 1st Monday of May (weekday 1=Mon .. 7=Sun)     |
| `12/25`       | `MonthDay`      | Every December 25th                            |
| `12/25?2024`  | `MonthDay`      | December 25th, 2024 only                       |
| `03/17?0+1`   | `MonthDay`      | March 17th, moved 1 day later if on a Sunday   |
| `07/04/1990`  | `AbsoluteDate`  | A historical date (anniversary candidate)      |
| `04-07-1990`  | `AbsoluteDate`  | Same date, day-first                           |
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EasterOffset(BaseModel):
    """A date relative to Easter Sunday of the context year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["easter"] = "easter"
    days: int = Field(default=0, description="Signed offset from Easter Sunday")


class NthWeekday(BaseModel):
    """The nth occurrence of a weekday in a month, e.g. 4th Thursday of November."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nth_weekday"] = "nth_weekday"
    month: int = Field(..., ge=1, le=12)
    weekday: int = Field(..., ge=1, le=7, description="1=Monday .. 7=Sunday")
    nth: int = Field(..., ge=1, le=5)


class WeekendShift(BaseModel):
    """Move a date by `offset_days` when it falls on `weekday`."""

    model_config = ConfigDict(frozen=True)

    weekday: int = Field(..., ge=0, le=6, description="0=Sunday .. 6=Saturday")
    offset_days: int

    def applies_to(self, value: date) -> bool:
        return value.isoweekday() % 7 == self.weekday


class MonthDay(BaseModel):
    """A month/day pair, annual unless pinned to a year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["month_day"] = "month_day"
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    year: int | None = Field(
        default=None, ge=1, le=9999, description="Pinned year (disables recurrence)"
    )
    weekend_shift: WeekendShift | None = None


class AbsoluteDate(BaseModel):
    """A literal historical date, usable as an anniversary base."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["absolute"] = "absolute"
    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)


DateRule = Annotated[
    Union[EasterOffset, NthWeekday, MonthDay, AbsoluteDate],
    Field(discriminator="kind"),
]


@dataclass(frozen=True)
class ResolvedOccurrence:
    """A rule resolved against one context year."""

    date: date
    is_annual: bool = False
    is_anniversary_candidate: bool = False
    anniversary_base_date: date | None = None
    specific_year_in_rule: bool = False
