"""
Proleptic Gregorian calendar <-> Julian Day Number conversion.

Julian Day Numbers are floats anchored at noon, so a whole civil day
ends in .5 (2000-01-01 is 2451544.5). No range checks happen here:
year 0 and negative years extrapolate the Gregorian rules backwards.
"""

from __future__ import annotations

import math

GREGORIAN_EPOCH = 1721425.5

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    """Check the Gregorian leap rule (every 4th year, except non-400th centuries)."""
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def days_in_gregorian_month(year: int, month: int) -> int:
    """Number of days in a proleptic Gregorian month."""
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def gregorian_to_julian(year: int, month: int, day: int) -> float:
    """
    Convert a proleptic Gregorian date to its Julian Day Number.

    Args:
        year: Gregorian year
        month: Month (1-12)
        day: Day of month

    Returns:
        Julian Day Number at the start of the day (ends in .5)
    """
    if month <= 2:
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = -1
    else:
        correction = -2

    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * (year - 1)
        + (year - 1) // 4
        - (year - 1) // 100
        + (year - 1) // 400
        + (367 * month - 362) // 12
        + correction
        + day
    )


def julian_to_gregorian(jd: float) -> tuple[int, int, int]:
    """
    Convert a Julian Day Number to a proleptic Gregorian date.

    The day count is split into 400-year, 100-year, 4-year and 1-year
    cycles. The last day of a 400-year cycle (cent == 4) and of a 4-year
    cycle (yindex == 4) already belong to the year just counted.

    Args:
        jd: Julian Day Number

    Returns:
        (year, month, day) tuple
    """
    wjd = math.floor(jd - 0.5) + 0.5
    depoch = int(wjd - GREGORIAN_EPOCH)

    quadricent, dqc = divmod(depoch, 146097)
    cent, dcent = divmod(dqc, 36524)
    quad, dquad = divmod(dcent, 1461)
    yindex = dquad // 365

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = int(wjd - gregorian_to_julian(year, 1, 1))
    if wjd < gregorian_to_julian(year, 3, 1):
        leapadj = 0
    elif is_gregorian_leap_year(year):
        leapadj = 1
    else:
        leapadj = 2

    month = ((yearday + leapadj) * 12 + 373) // 367
    day = int(wjd - gregorian_to_julian(year, month, 1)) + 1

    return year, month, day


def iso_weekday(jd: float) -> int:
    """
    ISO day of week (Monday=1 .. Sunday=7) of the civil day containing jd.

    Same answer as datetime.date.isoweekday() for the Gregorian date,
    without the year 1-9999 restriction of datetime.
    """
    return math.floor(jd + 0.5) % 7 + 1
