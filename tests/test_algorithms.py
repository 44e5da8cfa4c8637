"""Tests for calendar date algorithms."""

from datetime import date, timedelta

import pytest

from event_calendar.dates.algorithms import (
    calculate_easter,
    first_day_of_iso_week,
    make_date,
    nth_weekday_of_month,
)
from event_calendar.errors import ResolveError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


class TestEaster:
    """Tests for Easter Sunday calculation."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2000, date(2000, 4, 23)),
            (2018, date(2018, 4, 1)),
            (2019, date(2019, 4, 21)),
            (2023, date(2023, 4, 9)),
            (2024, date(2024, 3, 31)),
            (2025, date(2025, 4, 20)),
        ],
    )
    def test_known_dates(self, year: int, expected: date):
        """Test Easter against published dates."""
        assert calculate_easter(year) == expected

    def test_earliest_and_latest_possible(self):
        """Test the extreme Easter dates."""
        assert calculate_easter(1818) == date(1818, 3, 22)
        assert calculate_easter(2285) == date(2285, 3, 22)
        assert calculate_easter(1943) == date(1943, 4, 25)
        assert calculate_easter(2038) == date(2038, 4, 25)

    def test_always_sunday_in_range(self):
        """Test Easter is a Sunday between March 22 and April 25."""
        for year in range(1583, 2600):
            easter = calculate_easter(year)
            assert easter.weekday() == SUNDAY
            assert date(year, 3, 22) <= easter <= date(year, 4, 25)


class TestNthWeekdayOfMonth:
    """Tests for nth weekday lookup."""

    def test_first_monday_of_may(self):
        """Test 1st Monday of May 2024 (May 1st is a Wednesday)."""
        assert nth_weekday_of_month(2024, 5, 1, MONDAY) == date(2024, 5, 6)

    def test_first_day_is_target_weekday(self):
        """Test when the 1st of the month is itself the weekday."""
        # January 1st, 2024 is a Monday
        assert nth_weekday_of_month(2024, 1, 1, MONDAY) == date(2024, 1, 1)

    def test_fourth_thursday_of_november(self):
        """Test US Thanksgiving."""
        assert nth_weekday_of_month(2024, 11, 4, THURSDAY) == date(2024, 11, 28)
        assert nth_weekday_of_month(2025, 11, 4, THURSDAY) == date(2025, 11, 27)

    def test_fifth_occurrence_exists(self):
        """Test a real 5th occurrence is returned as-is."""
        # September 2024 has Mondays on 2, 9, 16, 23, 30
        assert nth_weekday_of_month(2024, 9, 5, MONDAY) == date(2024, 9, 30)

    def test_fifth_occurrence_falls_back_to_last(self):
        """Test a missing 5th occurrence returns the 4th (last) one."""
        # May 2024 has Mondays on 6, 13, 20, 27
        assert nth_weekday_of_month(2024, 5, 5, MONDAY) == date(2024, 5, 27)

    def test_december_does_not_roll_into_next_year(self):
        """Test the fallback near the end of the year."""
        # December 2024 has Fridays on 6, 13, 20, 27
        assert nth_weekday_of_month(2024, 12, 5, FRIDAY) == date(2024, 12, 27)

    def test_never_leaves_month(self):
        """Test every result lies in the requested month."""
        for year in (2023, 2024, 2025):
            for month in range(1, 13):
                for weekday in range(7):
                    fourth = nth_weekday_of_month(year, month, 4, weekday)
                    fifth = nth_weekday_of_month(year, month, 5, weekday)
                    assert fourth.month == month
                    assert fifth.month == month
                    assert fifth.weekday() == weekday
                    if (fourth + timedelta(weeks=1)).month != month:
                        assert fifth == fourth

    @pytest.mark.parametrize("nth", [0, 6, -1])
    def test_invalid_nth(self, nth: int):
        """Test nth outside 1..5 is rejected."""
        with pytest.raises(ResolveError):
            nth_weekday_of_month(2024, 5, nth, MONDAY)

    def test_invalid_month(self):
        """Test month outside 1..12 is rejected."""
        with pytest.raises(ResolveError):
            nth_weekday_of_month(2024, 13, 1, MONDAY)


class TestFirstDayOfISOWeek:
    """Tests for ISO week to Monday conversion."""

    def test_week_one_starting_on_january_first(self):
        """Test 2024, where January 1st is a Monday."""
        assert first_day_of_iso_week(2024, 1) == date(2024, 1, 1)

    def test_week_one_starting_in_previous_december(self):
        """Test 2025, whose week 1 starts on December 30th, 2024."""
        assert first_day_of_iso_week(2025, 1) == date(2024, 12, 30)

    def test_week_one_after_week_53(self):
        """Test 2021, where January 1st still belongs to 2020-W53."""
        assert first_day_of_iso_week(2021, 1) == date(2021, 1, 4)

    def test_week_53_in_long_year(self):
        """Test week 53 of a 53-week year."""
        assert first_day_of_iso_week(2020, 53) == date(2020, 12, 28)

    def test_week_53_in_short_year(self):
        """Test week 53 of a 52-week year is reported as an error."""
        with pytest.raises(ResolveError):
            first_day_of_iso_week(2021, 53)

    @pytest.mark.parametrize("week", [0, 54, -3])
    def test_invalid_week_number(self, week: int):
        """Test week numbers outside 1..53 are rejected."""
        with pytest.raises(ResolveError):
            first_day_of_iso_week(2024, week)

    def test_monday_of_every_week(self):
        """Test weeks 1..52 map to a Monday in the same ISO week."""
        for year in range(2015, 2031):
            for week in range(1, 53):
                monday = first_day_of_iso_week(year, week)
                iso_year, iso_week, iso_weekday = monday.isocalendar()
                assert (iso_year, iso_week, iso_weekday) == (year, week, 1)


class TestMakeDate:
    """Tests for overflow-tolerant date construction."""

    def test_valid_date(self):
        assert make_date(2024, 7, 4) == date(2024, 7, 4)

    def test_february_overflow(self):
        """Test day overflow rolls into the next month."""
        assert make_date(2023, 2, 30) == date(2023, 3, 2)
        assert make_date(2024, 2, 30) == date(2024, 3, 1)

    def test_leap_day_in_common_year(self):
        assert make_date(2023, 2, 29) == date(2023, 3, 1)

    def test_april_31st(self):
        assert make_date(2024, 4, 31) == date(2024, 5, 1)

    @pytest.mark.parametrize("year", [0, 10000])
    def test_year_out_of_range(self, year: int):
        with pytest.raises(ResolveError):
            make_date(year, 7, 4)

    def test_overflow_past_last_supported_day(self):
        with pytest.raises(ResolveError):
            make_date(9999, 12, 32)
