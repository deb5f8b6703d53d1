"""
Tests for Hijri <-> Julian Day Number conversion and calendar queries.
"""

from __future__ import annotations

import pytest

from hijri_calendar.conversion.gregorian import gregorian_to_julian, julian_to_gregorian
from hijri_calendar.conversion.hijri import (
    ISLAMIC_EPOCH,
    LEAP_YEAR_RESIDUES,
    MONTH_NAMES,
    add_days,
    days_elapsed_in_year,
    days_in_month,
    days_in_year,
    hijri_to_julian,
    is_leap_year,
    julian_to_hijri,
    month_name,
)


def _all_days(year: int):
    for month in range(1, 13):
        for day in range(1, days_in_month(year, month) + 1):
            yield year, month, day


class TestLeapYear:
    """Tests for the 30-year leap cycle."""

    def test_1432_is_common(self):
        """1432 % 30 == 22, which is not a leap residue."""
        assert 1432 % 30 == 22
        assert 22 not in LEAP_YEAR_RESIDUES
        assert is_leap_year(1432) is False

    def test_1431_is_leap(self):
        """1431 % 30 == 21 is a leap residue."""
        assert is_leap_year(1431) is True

    def test_eleven_leap_years_per_cycle(self):
        """Each 30-year cycle has exactly 11 leap years."""
        assert sum(is_leap_year(year) for year in range(1, 31)) == 11
        assert sum(is_leap_year(year) for year in range(1411, 1441)) == 11

    @pytest.mark.parametrize("year", [1, 3, 10 * 30 + 1, 30, 60])
    def test_residues_are_exact(self, year: int):
        """Residues 1 and 0 are not leap years (no substring matching)."""
        assert not is_leap_year(year)

    def test_days_in_year(self):
        """355 days in leap years, 354 otherwise."""
        assert days_in_year(1431) == 355
        assert days_in_year(1432) == 354

    def test_leap_years_match_epoch_arithmetic(self):
        """The year length implied by hijri_to_julian agrees with is_leap_year."""
        for year in range(1, 91):
            length = hijri_to_julian(year + 1, 1, 1) - hijri_to_julian(year, 1, 1)
            assert length == days_in_year(year)


class TestMonths:
    """Tests for month lengths and names."""

    def test_odd_months_have_30_days(self):
        """Month 7 (Rajab) is odd, so it has 30 days."""
        assert days_in_month(1432, 7) == 30
        assert days_in_month(1432, 1) == 30

    def test_even_months_have_29_days(self):
        """Even months have 29 days."""
        assert days_in_month(1432, 8) == 29
        assert days_in_month(1432, 2) == 29

    def test_dhu_al_hijjah(self):
        """Month 12 gets a 30th day only in leap years."""
        assert days_in_month(1431, 12) == 30
        assert days_in_month(1432, 12) == 29

    def test_days_elapsed_in_year(self):
        """Cumulative days include the given month."""
        assert days_elapsed_in_year(1432, 0) == 0
        assert days_elapsed_in_year(1432, 1) == 30
        assert days_elapsed_in_year(1432, 6) == 177
        assert days_elapsed_in_year(1432, 12) == 354
        assert days_elapsed_in_year(1431, 12) == 355

    def test_month_names(self):
        """Names are 1-indexed."""
        assert len(MONTH_NAMES) == 12
        assert month_name(1) == "Muharram"
        assert month_name(7) == "Rajab"
        assert month_name(9) == "Ramadan"
        assert month_name(12) == "Dhu al-Hijjah"


class TestHijriToJulian:
    """Tests for hijri_to_julian."""

    def test_epoch(self):
        """1 Muharram 1 AH is the Islamic epoch."""
        assert hijri_to_julian(1, 1, 1) == ISLAMIC_EPOCH
        assert julian_to_gregorian(hijri_to_julian(1, 1, 1)) == (622, 7, 19)

    def test_known_date(self):
        """27 Rajab 1432 is 2011-06-29."""
        jd = hijri_to_julian(1432, 7, 27)
        assert jd == 2455741.5
        assert julian_to_gregorian(jd) == (2011, 6, 29)

    def test_month_offsets(self):
        """Month starts follow the 30/29 alternation."""
        for month in range(1, 12):
            gap = hijri_to_julian(1432, month + 1, 1) - hijri_to_julian(1432, month, 1)
            assert gap == days_in_month(1432, month)


class TestJulianToHijri:
    """Tests for julian_to_hijri."""

    def test_epoch(self):
        """The epoch converts back to 1/1/1."""
        assert julian_to_hijri(ISLAMIC_EPOCH) == (1, 1, 1)

    def test_from_gregorian(self):
        """2011-03-22 is 16 Rabi' al-thani 1432."""
        assert julian_to_hijri(gregorian_to_julian(2011, 3, 22)) == (1432, 4, 16)

    def test_first_of_1432(self):
        """1 Muharram 1432 is 2010-12-08."""
        assert julian_to_hijri(gregorian_to_julian(2010, 12, 8)) == (1432, 1, 1)
        assert julian_to_hijri(gregorian_to_julian(2010, 12, 7)) == (1431, 12, 30)

    def test_fractional_day(self):
        """Input is normalized to the civil day before conversion."""
        assert julian_to_hijri(2455741.5) == (1432, 7, 27)
        assert julian_to_hijri(2455741.99) == (1432, 7, 27)

    def test_returns_ints(self):
        """Components are plain ints."""
        result = julian_to_hijri(2455741.5)
        assert all(type(part) is int for part in result)

    @pytest.mark.parametrize("year", [1, 2, 29, 30, 31, 1431, 1432, 1445, 1446, 9999])
    def test_round_trip_whole_year(self, year: int):
        """Every day of the year round-trips through the Julian Day Number."""
        for ymd in _all_days(year):
            assert julian_to_hijri(hijri_to_julian(*ymd)) == ymd

    def test_consecutive_days(self):
        """Consecutive Julian days map to consecutive Hijri dates."""
        start = hijri_to_julian(1440, 1, 1)
        previous = julian_to_hijri(start)
        for offset in range(1, 3 * 355):
            current = julian_to_hijri(start + offset)
            assert current == add_days(*previous, 1)
            previous = current


class TestAddDays:
    """Tests for add_days."""

    def test_no_rollover(self):
        """27 Rajab 1432 + 2 days is 29 Rajab (Rajab has 30 days)."""
        assert add_days(1432, 7, 27, 2) == (1432, 7, 29)

    def test_30_day_month_rollover(self):
        """Day 30 exists in Rajab; the next day starts Sha'aban."""
        assert add_days(1432, 7, 29, 1) == (1432, 7, 30)
        assert add_days(1432, 7, 29, 2) == (1432, 8, 1)

    def test_29_day_month_rollover(self):
        """Sha'aban has 29 days."""
        assert add_days(1432, 8, 28, 1) == (1432, 8, 29)
        assert add_days(1432, 8, 29, 1) == (1432, 9, 1)

    def test_year_rollover(self):
        """Dhu al-Hijjah wraps to Muharram of the next year."""
        assert add_days(1432, 12, 29, 1) == (1433, 1, 1)
        assert add_days(1431, 12, 29, 1) == (1431, 12, 30)
        assert add_days(1431, 12, 30, 1) == (1432, 1, 1)

    def test_zero_days(self):
        """Adding zero days returns the same date."""
        assert add_days(1432, 7, 27, 0) == (1432, 7, 27)

    def test_full_year(self):
        """Adding a year's worth of days lands on the same date next year."""
        assert add_days(1432, 1, 1, 354) == (1433, 1, 1)
        assert add_days(1431, 1, 1, 355) == (1432, 1, 1)

    def test_negative_days(self):
        """Negative counts are rejected."""
        with pytest.raises(ValueError):
            add_days(1432, 7, 27, -1)
