"""
Gregorian and Hijri date objects.

Both types are immutable and validated on construction. Conversions
between them go through the Julian Day Number:

    date = HijriDate(1432, 7, 27)
    date.as_string()          # "27, Rajab 1432"
    date.to_gregorian()       # GregorianDate(year=2011, month=6, day=29)
    date.add_days(2)          # HijriDate(year=1432, month=7, day=29)
    print(date.month_grid())

Module-level functions mirror the methods for callers that work with
explicit values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from hijri_calendar.conversion import gregorian, hijri
from hijri_calendar.core.exceptions import InvalidJulianDayError, InvalidYearError
from hijri_calendar.grid import month_start_index, render_month_grid
from hijri_calendar.validation import (
    MAX_HIJRI_YEAR,
    ensure_valid,
    validate_gregorian_date,
    validate_hijri_date,
)

logger = logging.getLogger(__name__)


def _check_julian_day(jd: float, calendar: str) -> None:
    if not math.isfinite(jd):
        raise InvalidJulianDayError(jd, calendar=calendar)


@dataclass(frozen=True, order=True)
class GregorianDate:
    """A date in the proleptic Gregorian calendar."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        result = validate_gregorian_date(self.year, self.month, self.day)
        ensure_valid(result, self.year, self.month, self.day, calendar="gregorian")

    @classmethod
    def from_date(cls, value: date) -> GregorianDate:
        """Build from a datetime.date (or datetime)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> GregorianDate:
        """Today's date from the host clock (local time)."""
        return cls.from_date(date.today())

    @classmethod
    def from_julian_day(cls, jd: float) -> GregorianDate:
        """
        Build from a Julian Day Number.

        Raises:
            InvalidJulianDayError: If jd is NaN or infinite
        """
        _check_julian_day(jd, "gregorian")
        return cls(*gregorian.julian_to_gregorian(jd))

    def to_julian_day(self) -> float:
        return gregorian.gregorian_to_julian(self.year, self.month, self.day)

    def to_hijri(self) -> HijriDate:
        """
        Convert to the Hijri calendar.

        Raises:
            InvalidYearError: If the date falls outside Hijri years 1-9999
        """
        return HijriDate.from_julian_day(self.to_julian_day())

    def to_date(self) -> date:
        """Convert to datetime.date (years 1-9999 only)."""
        return date(self.year, self.month, self.day)

    def isoweekday(self) -> int:
        """Day of week, Monday=1 .. Sunday=7."""
        return gregorian.iso_weekday(self.to_julian_day())

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "iso": self.isoformat(),
        }

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True, order=True)
class HijriDate:
    """
    A date in the arithmetic Hijri calendar.

    Args:
        year: Hijri year (1-9999)
        month: Month (1-12, 1 = Muharram)
        day: Day of month (1-29 or 1-30 depending on the month)

    Raises:
        InvalidYearError, InvalidMonthError, InvalidDayError: on out-of-range values
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        result = validate_hijri_date(self.year, self.month, self.day)
        ensure_valid(result, self.year, self.month, self.day, calendar="hijri")

    @classmethod
    def today(cls) -> HijriDate:
        """Today's Hijri date, converted from the host's local Gregorian date."""
        today_gregorian = GregorianDate.today()
        result = today_gregorian.to_hijri()
        logger.debug("Today %s is %s", today_gregorian, result)
        return result

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> HijriDate:
        """Convert a Gregorian date given as explicit values."""
        return GregorianDate(year, month, day).to_hijri()

    @classmethod
    def from_julian_day(cls, jd: float) -> HijriDate:
        """
        Build from a Julian Day Number.

        Raises:
            InvalidJulianDayError: If jd is NaN or infinite
            InvalidYearError: If jd falls outside Hijri years 1-9999
        """
        _check_julian_day(jd, "hijri")
        return cls(*hijri.julian_to_hijri(jd))

    def to_julian_day(self) -> float:
        return hijri.hijri_to_julian(self.year, self.month, self.day)

    def to_gregorian(self) -> GregorianDate:
        result = GregorianDate.from_julian_day(self.to_julian_day())
        logger.debug("%s -> %s", self, result)
        return result

    @property
    def month_name(self) -> str:
        return hijri.month_name(self.month)

    def is_leap_year(self) -> bool:
        return hijri.is_leap_year(self.year)

    def days_in_year(self) -> int:
        return hijri.days_in_year(self.year)

    def days_in_month(self) -> int:
        return hijri.days_in_month(self.year, self.month)

    def days_elapsed_in_year(self) -> int:
        """Days in this year's months up to and including the current month."""
        return hijri.days_elapsed_in_year(self.year, self.month)

    def add_days(self, days: int) -> HijriDate:
        """
        Return the date `days` days later.

        Raises:
            ValueError: If days is negative
            InvalidYearError: If the result passes year 9999
        """
        last_day = hijri.hijri_to_julian(MAX_HIJRI_YEAR + 1, 1, 1) - 1
        if days > last_day - self.to_julian_day():
            raise InvalidYearError(f">{MAX_HIJRI_YEAR}", details={"days": days})
        return HijriDate(*hijri.add_days(self.year, self.month, self.day, days))

    def start_index(self) -> int:
        """Weekday column (0=Saturday .. 6=Friday) of the first of this month."""
        return month_start_index(self.year, self.month)

    def month_grid(self) -> str:
        """Text calendar of this date's month."""
        return render_month_grid(self.year, self.month)

    def as_string(self) -> str:
        """Format as "DD, MonthName YYYY", e.g. "27, Rajab 1432"."""
        return f"{self.day:02d}, {self.month_name} {self.year:04d}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "month_name": self.month_name,
            "formatted": self.as_string(),
        }

    def __str__(self) -> str:
        return self.as_string()


AnyDate = Union[GregorianDate, HijriDate]


def today() -> HijriDate:
    """Today's Hijri date."""
    return HijriDate.today()


def as_string(value: HijriDate) -> str:
    return value.as_string()


def from_gregorian(year: int, month: int, day: int) -> HijriDate:
    """Convert a Gregorian date to a HijriDate."""
    return HijriDate.from_gregorian(year, month, day)


def to_gregorian(value: HijriDate) -> GregorianDate:
    """Convert a HijriDate to a GregorianDate."""
    return value.to_gregorian()


def to_julian_day_number(value: AnyDate) -> float:
    """Julian Day Number of a Gregorian or Hijri date."""
    return value.to_julian_day()


def from_julian_day_number(jd: float) -> HijriDate:
    """Hijri date of a Julian Day Number."""
    return HijriDate.from_julian_day(jd)
