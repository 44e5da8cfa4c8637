"""Application configuration.

Configuration is loaded from environment variables (prefixed with
`EVENT_CALENDAR_`) or a `.env` file using pydantic-settings. Command-line
flags override these values.

## Optional Environment Variables

- EVENT_CALENDAR_EVENTS_FILE: Path to the events file (default: events.txt)
- EVENT_CALENDAR_DEFAULT_FG_COLOR: Highlight color for events whose tag has
  none (default: green)
- EVENT_CALENDAR_NUM_MONTHS: Months to list, one of 1, 3, 6, 12 (default: 1)
- EVENT_CALENDAR_COLOR: Use ANSI colors in output (default: true)
- EVENT_CALENDAR_LOG_LEVEL: Logging level (default: WARNING)
- EVENT_CALENDAR_DEBUG: Enable debug logging (default: false)

## Example .env file

```
EVENT_CALENDAR_EVENTS_FILE=~/.config/events.txt
EVENT_CALENDAR_DEFAULT_FG_COLOR=white
EVENT_CALENDAR_NUM_MONTHS=3
```
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from event_calendar.models.color import Color

VALID_MONTH_SPANS = (1, 3, 6, 12)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVENT_CALENDAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Events
    events_file: Path = Field(
        default=Path("events.txt"),
        description="Events file with one date rule per line",
    )
    default_fg_color: Color = Field(
        default=Color.GREEN,
        description="Highlight color for events whose tag sets none",
    )

    # Display
    num_months: int = Field(default=1, description="Months to list (1, 3, 6 or 12)")
    color: bool = True

    @field_validator("events_file", mode="after")
    @classmethod
    def expand_events_file(cls, v: Path) -> Path:
        """Expand '~' in the events file path."""
        return v.expanduser()

    @field_validator("default_fg_color", mode="before")
    @classmethod
    def normalize_color_name(cls, v):
        """Accept color names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("num_months")
    @classmethod
    def validate_num_months(cls, v: int) -> int:
        """Only whole calendar rows of 1, 3, 6 or 12 months are supported."""
        if v not in VALID_MONTH_SPANS:
            raise ValueError(f"num_months must be 1, 3, 6 or 12, got {v}")
        return v

    @property
    def logging_level(self) -> int:
        """Numeric logging level, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
