"""Tests for the command-line interface."""

from pathlib import Path

import pytest

from event_calendar import __version__
from event_calendar.cli import main


class TestCLI:
    """Tests for CLI commands."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert capsys.readouterr().out.strip() == f"event-calendar {__version__}"

    def test_easter(self, capsys):
        assert main(["easter", "2024"]) == 0
        assert capsys.readouterr().out.strip() == "2024-03-31"

    def test_week(self, capsys):
        assert main(["week", "2025", "1"]) == 0
        assert capsys.readouterr().out.strip() == "2024-12-30"

    def test_missing_week(self, capsys):
        assert main(["week", "2021", "53"]) == 1
        assert capsys.readouterr().out == ""

    def test_week_out_of_range(self):
        with pytest.raises(SystemExit):
            main(["week", "2024", "54"])

    def test_events(self, events_file: Path, capsys):
        code = main([
            "events", "--year", "2024", "--month", "7",
            "--events", str(events_file), "--no-color",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Events for displayed period:" in out
        assert " 4th Jul, Thu : 🎂 Alex's birthday" in out
        assert "Christmas" not in out

    def test_events_range_crossing_year(self, events_file: Path, capsys):
        code = main([
            "events", "--year", "2024", "--month", "12", "--months", "6",
            "--events", str(events_file), "--no-color",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "25th Dec, Wed : 🎄 Christmas" in out
        assert "Christmas party 2024" in out
        # 2025 events come from the second context year
        assert "21st Apr, Mon : ✝️ Easter Monday" in out

    def test_events_by_week(self, events_file: Path, capsys):
        code = main([
            "events", "--year", "2024", "--week", "27",
            "--events", str(events_file), "--no-color",
        ])
        assert code == 0
        assert "Alex's birthday" in capsys.readouterr().out

    def test_week_requires_year(self, events_file: Path):
        assert main(["events", "--week", "10", "--events", str(events_file)]) == 2

    def test_events_file_from_settings(self, events_file: Path, monkeypatch, capsys):
        monkeypatch.setenv("EVENT_CALENDAR_EVENTS_FILE", str(events_file))
        assert main(["events", "--year", "2024", "--month", "5", "--no-color"]) == 0
        assert "Memorial Day" in capsys.readouterr().out

    def test_missing_events_file(self, tmp_path: Path, capsys):
        code = main([
            "events", "--year", "2024", "--month", "1",
            "--events", str(tmp_path / "missing.txt"), "--no-color",
        ])
        assert code == 0
        assert "No events in the displayed period." in capsys.readouterr().out

    def test_invalid_month(self):
        with pytest.raises(SystemExit):
            main(["events", "--month", "13"])
