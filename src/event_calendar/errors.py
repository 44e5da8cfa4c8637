"""Exceptions raised while parsing and resolving event rules.

Per-line errors (`RuleParseError`, `ResolveError`, `MalformedLineError`) are
caught by the event loader, logged with the offending line number and the
line is dropped. `EventFileError` is the only error that reaches callers of
`load_events`.
"""

from __future__ import annotations

from pathlib import Path


class EventCalendarError(Exception):
    """Base exception for event calendar errors."""

    def __init__(
        self,
        message: str,
        text: str | None = None,
        line_number: int | None = None,
    ):
        super().__init__(message)
        self.text = text
        self.line_number = line_number


class RuleParseError(EventCalendarError):
    """Raised when a date rule has unknown syntax or an out-of-range month/day."""

    pass


class ResolveError(EventCalendarError):
    """Raised when a parsed rule cannot be turned into a concrete date."""

    pass


class MalformedLineError(EventCalendarError):
    """Raised when an events line has no ';' between rule and description."""

    pass


class EventFileError(EventCalendarError):
    """Raised when the events file exists but cannot be read."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message, text=str(path))
        self.path = Path(path)
