"""Resolved calendar event models."""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from event_calendar.models.color import Color


class EventCategory(str, Enum):
    """Known event categories, used to pick a default emoji."""

    GLOBAL = "global"
    ANNIVERSARY = "anniversary"
    BIRTHDAY = "birthday"
    HOLIDAY = "holiday"
    CHURCH = "church"
    FUN = "fun"

    # Locale tags
    HR = "hr"
    IE = "ie"
    US = "us"

    DEFAULT = "default"

    @classmethod
    def from_tag(cls, tag: str | None) -> EventCategory:
        """Map a free-form category tag to a known category.

        Unknown tags map to DEFAULT.
        """
        if not tag:
            return cls.DEFAULT
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.DEFAULT

    @property
    def emoji(self) -> str:
        """Default emoji shown when an event does not set its own."""
        return _CATEGORY_EMOJI[self]

    @property
    def recurs_from_base_date(self) -> bool:
        """Whether events of this category repeat yearly from a historical date."""
        return self in (EventCategory.BIRTHDAY, EventCategory.ANNIVERSARY)


_CATEGORY_EMOJI: dict[EventCategory, str] = {
    EventCategory.GLOBAL: "🌍",
    EventCategory.ANNIVERSARY: "📌",
    EventCategory.BIRTHDAY: "🎂",
    EventCategory.HOLIDAY: "🏖️",
    EventCategory.CHURCH: "✝️",
    EventCategory.FUN: "🎉",
    EventCategory.HR: "🇭🇷",
    EventCategory.IE: "🇮🇪",
    EventCategory.US: "🇺🇸",
    EventCategory.DEFAULT: "📅",
}


class Event(BaseModel):
    """A calendar event resolved for one context year.

    Events are immutable. Two events describing the same day and text are
    treated as duplicates when listed (see `dedup_key`).
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Date of the event in the context year")
    original_rule_text: str = Field(..., description="Date rule as written in the file")
    description: str = Field(default="", description="Event text after the tag")
    category: str = Field(default="default", description="Category tag as written")

    is_annual: bool = Field(default=False, description="Repeats every year")
    is_anniversary: bool = Field(
        default=False, description="Birthday/anniversary with a known base date"
    )
    anniversary_base_date: datetime.date | None = Field(
        default=None, description="Historical date the anniversary counts from"
    )
    recurrence_rule_text: str = Field(
        default="", description="Rule text for recurring rules (e.g. 'E+1', '5/1#1')"
    )
    specific_year_rule: bool = Field(
        default=False, description="The rule itself names a year"
    )

    fg_color: Color = Field(default=Color.GREEN, description="Highlight foreground")
    bg_color: Color | None = Field(default=None, description="Highlight background")
    emoji: str = Field(default="", description="Explicit emoji from the tag, if any")

    @property
    def category_tag(self) -> EventCategory:
        return EventCategory.from_tag(self.category)

    @property
    def display_emoji(self) -> str:
        """Explicit emoji, falling back to the category default."""
        return self.emoji or self.category_tag.emoji

    @property
    def fg_code(self) -> str:
        return self.fg_color.fg

    @property
    def bg_code(self) -> str:
        return self.bg_color.bg if self.bg_color else ""

    @property
    def dedup_key(self) -> tuple[datetime.date, str]:
        return (self.date, self.description)

    def age_on(self, today: datetime.date) -> int | None:
        """Completed years since the anniversary base date as of `today`.

        Returns None for non-anniversaries and for base dates in the future.
        """
        if not self.is_anniversary or self.anniversary_base_date is None:
            return None
        base = self.anniversary_base_date
        age = today.year - base.year
        if (today.month, today.day) < (base.month, base.day):
            age -= 1
        return age if age >= 0 else None

    def days_until(self, today: datetime.date) -> int:
        """Signed number of days from `today` to the event (negative if past)."""
        return (self.date - today).days
