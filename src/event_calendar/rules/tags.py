"""Event tag parsing.

The description part of an events line may start with a bracketed tag:

    [category, fg, bg, emoji] Description text

Any trailing fields may be left out: `[holiday]`, `[church,magenta]` and
`[holiday,red,white,🎄]` are all valid. Colors are names from the ANSI
palette (see `Color`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from event_calendar.models.color import Color

DEFAULT_CATEGORY = "default"
DEFAULT_FG_COLOR = Color.GREEN

TAG_PATTERN = re.compile(r"^\s*\[(?P<tag>[^\]]*)\]\s*(?P<text>.*)$", re.DOTALL)


@dataclass(frozen=True)
class Decoration:
    """Presentation metadata split off an event description."""

    category: str
    fg_color: Color
    bg_color: Color | None
    emoji: str
    description: str
    tagged: bool = True  # False when the description had no [..] tag


def decorate(description: str, default_fg: Color = DEFAULT_FG_COLOR) -> Decoration:
    """Split the optional bracketed tag off an event description.

    Args:
        description: Text after the ';' of an events line
        default_fg: Foreground used when the tag omits or misspells one

    Returns:
        Decoration with category, colors, emoji and the remaining text
    """
    match = TAG_PATTERN.match(description)
    if not match:
        return Decoration(
            category=DEFAULT_CATEGORY,
            fg_color=default_fg,
            bg_color=None,
            emoji="",
            description=description.strip(),
            tagged=False,
        )

    fields = [part.strip() for part in match["tag"].split(",", 3)]
    fields += [""] * (4 - len(fields))
    category, fg_name, bg_name, emoji = fields

    return Decoration(
        category=category or DEFAULT_CATEGORY,
        fg_color=Color.parse(fg_name) or default_fg,
        bg_color=Color.parse(bg_name),
        emoji=emoji,
        description=match["text"].strip(),
    )
