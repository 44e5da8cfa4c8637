"""Events file loader.

Reads an events file and resolves every rule in it for a context year.

## File format

One event per line, UTF-8:

```
<date-rule>;[<category>[,<fg>[,<bg>[,<emoji>]]]] <description>
```

Blank lines and lines starting with `#` are ignored. Example:

```
# Church
E+1;[church,magenta] Easter Monday
5/1#1;[holiday] Labour Day (1st Monday of May)
12/25;[holiday,red,white,🎄] Christmas
07/04/1990;[birthday] Alex's birthday
03/17?0+1;[fun] St. Patrick's (shift if Sunday)
```

## Error handling

A bad line never aborts the load. Lines with unknown rule syntax, an
unresolvable rule or no ';' are logged as warnings with their line number
and skipped. A missing file yields no events. Only a file that exists but
cannot be read raises `EventFileError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from event_calendar.config import get_settings
from event_calendar.dates.algorithms import make_date
from event_calendar.errors import (
    EventCalendarError,
    EventFileError,
    MalformedLineError,
)
from event_calendar.models.color import Color
from event_calendar.models.event import Event, EventCategory
from event_calendar.models.rule import AbsoluteDate
from event_calendar.rules.grammar import classify
from event_calendar.rules.resolver import resolve
from event_calendar.rules.tags import decorate

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
RULE_SEPARATOR = ";"


def parse_events(
    lines: Iterable[str],
    context_year: int,
    *,
    default_fg: Color | None = None,
    source: str = "<string>",
) -> list[Event]:
    """Resolve events from lines of an events file.

    Args:
        lines: Raw lines (with or without trailing newlines)
        context_year: Year annual rules are resolved in
        default_fg: Foreground for events whose tag has none
            (default: configured `default_fg_color`)
        source: Name used in diagnostics

    Returns:
        Events in file order. Year-pinned rules outside `context_year` are
        left out.
    """
    if default_fg is None:
        default_fg = get_settings().default_fg_color

    events: list[Event] = []
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        try:
            event = _parse_line(line, line_number, context_year, default_fg, source)
        except EventCalendarError as e:
            logger.warning(f"{source} line {line_number}: skipping event: {e}")
            continue

        if event is not None:
            events.append(event)
    return events


def _parse_line(
    line: str,
    line_number: int,
    context_year: int,
    default_fg: Color,
    source: str,
) -> Event | None:
    """Build the event for one non-blank, non-comment line.

    Returns None when a year-pinned rule does not apply to `context_year`.
    """
    rule_text, sep, rest = line.partition(RULE_SEPARATOR)
    if not sep:
        raise MalformedLineError(
            f"malformed event (missing '{RULE_SEPARATOR}'): {line}",
            text=line,
            line_number=line_number,
        )
    rule_text = rule_text.strip()

    decoration = decorate(rest.strip(), default_fg)

    try:
        rule = classify(rule_text)
        occurrence = resolve(rule, context_year)

        event_date = occurrence.date
        is_annual = occurrence.is_annual
        base_date = occurrence.anniversary_base_date
        is_anniversary = (
            EventCategory.from_tag(decoration.category).recurs_from_base_date
            and occurrence.is_anniversary_candidate
            and base_date is not None
        )

        if is_anniversary:
            event_date = make_date(context_year, base_date.month, base_date.day)
            is_annual = True
        elif is_annual and event_date.year != context_year:
            event_date = make_date(context_year, event_date.month, event_date.day)
        elif occurrence.specific_year_in_rule and event_date.year != context_year:
            logger.debug(
                f"{source} line {line_number}: '{rule_text}' is pinned to "
                f"{event_date.year}, not shown in {context_year}"
            )
            return None
    except EventCalendarError as e:
        e.line_number = line_number
        raise

    if not decoration.tagged:
        logger.warning(
            f"{source} line {line_number}: no [category] tag, "
            f"treating as plain description: {decoration.description}"
        )

    return Event(
        date=event_date,
        original_rule_text=rule_text,
        description=decoration.description,
        category=decoration.category,
        is_annual=is_annual,
        is_anniversary=is_anniversary,
        anniversary_base_date=base_date,
        recurrence_rule_text="" if isinstance(rule, AbsoluteDate) else rule_text,
        specific_year_rule=occurrence.specific_year_in_rule,
        fg_color=decoration.fg_color,
        bg_color=decoration.bg_color,
        emoji=decoration.emoji,
    )


def load_events(
    path: Path | str,
    context_year: int,
    *,
    default_fg: Color | None = None,
) -> list[Event]:
    """Load and resolve all events in a file for a context year.

    Args:
        path: Events file
        context_year: Year annual rules are resolved in
        default_fg: Foreground for events whose tag has none

    Returns:
        Resolved events; empty if the file does not exist

    Raises:
        EventFileError: If the file exists but cannot be read or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info(f"Events file '{path}' not found. No events will be loaded.")
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise EventFileError(f"reading events file '{path}': {e}", path) from e

    return parse_events(
        text.splitlines(),
        context_year,
        default_fg=default_fg,
        source=str(path),
    )


def load_events_for_years(
    path: Path | str,
    years: Iterable[int],
    *,
    default_fg: Color | None = None,
) -> list[Event]:
    """Load events for several context years and concatenate them.

    A year whose load fails is logged and skipped.
    """
    events: list[Event] = []
    for year in years:
        try:
            events.extend(load_events(path, year, default_fg=default_fg))
        except EventFileError as e:
            logger.warning(f"Could not load events for year {year}: {e}")
    return events
