"""Terminal color palette for event highlighting."""

from __future__ import annotations

from enum import Enum

# ANSI SGR styles
STYLE_RESET = "\033[0m"
STYLE_BOLD = "\033[1m"


class Color(str, Enum):
    """The eight basic ANSI colors an event tag may name."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @classmethod
    def parse(cls, name: str | None) -> Color | None:
        """Look up a color by name, ignoring case and surrounding whitespace.

        Returns None for empty or unrecognized names so the caller can apply
        its own default.
        """
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None

    @property
    def ansi_offset(self) -> int:
        """Position of this color in the ANSI palette (0-7)."""
        return list(Color).index(self)

    @property
    def fg(self) -> str:
        """ANSI escape sequence for this color as foreground."""
        return f"\033[{30 + self.ansi_offset}m"

    @property
    def bg(self) -> str:
        """ANSI escape sequence for this color as background."""
        return f"\033[{40 + self.ansi_offset}m"
