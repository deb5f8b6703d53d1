"""
Arithmetic Hijri calendar <-> Julian Day Number conversion.

The tabular calendar uses a 30-year cycle with 11 leap years. Odd months
have 30 days and even months 29, except Dhu al-Hijjah which gets a 30th
day in leap years. Dates may differ by +/-1 day from the observed lunar
calendar.
"""

from __future__ import annotations

import math

ISLAMIC_EPOCH = 1948439.5

MONTH_NAMES = (
    "Muharram",
    "Safar",
    "Rabi' al-awwal",
    "Rabi' al-thani",
    "Jumada al-awwal",
    "Jumada al-thani",
    "Rajab",
    "Sha'aban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

# Years of the 30-year cycle (year % 30) that have 355 days
LEAP_YEAR_RESIDUES = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})


def month_name(month: int) -> str:
    """Name of a Hijri month (1 = Muharram)."""
    return MONTH_NAMES[month - 1]


def is_leap_year(year: int) -> bool:
    """Check whether a Hijri year has 355 days."""
    return year % 30 in LEAP_YEAR_RESIDUES


def days_in_year(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def days_in_month(year: int, month: int) -> int:
    """Number of days in a Hijri month (29 or 30)."""
    if month % 2 == 1 or (month == 12 and is_leap_year(year)):
        return 30
    return 29


def days_elapsed_in_year(year: int, month: int) -> int:
    """
    Total days of months 1 through `month` of a Hijri year.

    days_elapsed_in_year(year, 12) == days_in_year(year);
    days_elapsed_in_year(year, 0) == 0.
    """
    return sum(days_in_month(year, m) for m in range(1, month + 1))


def hijri_to_julian(year: int, month: int, day: int) -> float:
    """
    Convert a Hijri date to its Julian Day Number.

    Args:
        year: Hijri year
        month: Month (1-12)
        day: Day of month

    Returns:
        Julian Day Number at the start of the day (ends in .5)
    """
    return (
        day
        + math.ceil(29.5 * (month - 1))
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + ISLAMIC_EPOCH
    ) - 1


def julian_to_hijri(jd: float) -> tuple[int, int, int]:
    """
    Convert a Julian Day Number to a Hijri date.

    The month is estimated from the distance to 1 Muharram of the year
    and capped at 12; the day is then measured from the first of that
    month. Both steps go through hijri_to_julian so the pair round-trips.

    Args:
        jd: Julian Day Number

    Returns:
        (year, month, day) tuple
    """
    jd = math.floor(jd) + 0.5
    year = (30 * int(jd - ISLAMIC_EPOCH) + 10646) // 10631
    month = min(12, math.ceil((jd - (29 + hijri_to_julian(year, 1, 1))) / 29.5) + 1)
    day = int(jd - hijri_to_julian(year, month, 1)) + 1

    return year, month, day


def add_days(year: int, month: int, day: int, days: int) -> tuple[int, int, int]:
    """
    Move a Hijri date forward one day at a time.

    Args:
        year: Hijri year
        month: Month (1-12)
        day: Day of month
        days: Number of days to add (>= 0)

    Returns:
        (year, month, day) tuple

    Raises:
        ValueError: If days is negative
    """
    if days < 0:
        raise ValueError(f"Cannot add a negative number of days: {days}")

    for _ in range(days):
        day += 1
        if day >= 29:
            if day > days_in_month(year, month):
                day = 1
                month += 1
                if month > 12:
                    month = 1
                    year += 1

    return year, month, day
