"""Pytest fixtures for event calendar tests.

This module provides test fixtures that ensure:
1. Settings never come from the developer's environment or a stray .env file
2. Events files are written to a per-test temporary directory
"""

import os
from datetime import date
from pathlib import Path

import pytest

from event_calendar.models.color import Color
from event_calendar.models.event import Event


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Clear EVENT_CALENDAR_* variables and the settings cache for each test."""
    for key in list(os.environ):
        if key.startswith("EVENT_CALENDAR_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    from event_calendar.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Events File Fixtures
# =============================================================================


SAMPLE_EVENTS = """\
# Sample events file

E+1;[church,magenta] Easter Monday
E-2;[church] Good Friday
5/1#1;[holiday] Labour Day (1st Monday of May)
5/1#5;[us,blue] Memorial Day
12/25;[holiday,red,white,🎄] Christmas
07/04/1990;[birthday] Alex's birthday
03/17?0+1;[fun] St. Patrick's (shift if Sunday)
12/25?2024;[fun] Christmas party 2024
bad-line-no-semicolon
not-a-rule;[fun] Broken rule
01/01;No tag at all
"""


@pytest.fixture
def events_file(tmp_path: Path) -> Path:
    """Events file with one line of every rule form plus a few bad lines."""
    path = tmp_path / "events.txt"
    path.write_text(SAMPLE_EVENTS, encoding="utf-8")
    return path


@pytest.fixture
def write_events(tmp_path: Path):
    """Factory writing the given text to an events file and returning its path."""

    def _write(text: str, name: str = "events.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def birthday_event() -> Event:
    """Alex's birthday resolved for 2024."""
    return Event(
        date=date(2024, 7, 4),
        original_rule_text="07/04/1990",
        description="Alex's birthday",
        category="birthday",
        is_annual=True,
        is_anniversary=True,
        anniversary_base_date=date(1990, 7, 4),
        specific_year_rule=True,
        fg_color=Color.GREEN,
    )


@pytest.fixture
def christmas_event() -> Event:
    """Christmas 2024 with explicit colors and emoji."""
    return Event(
        date=date(2024, 12, 25),
        original_rule_text="12/25",
        description="Christmas",
        category="holiday",
        is_annual=True,
        recurrence_rule_text="12/25",
        fg_color=Color.RED,
        bg_color=Color.WHITE,
        emoji="🎄",
    )
