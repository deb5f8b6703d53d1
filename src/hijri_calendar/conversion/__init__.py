"""Calendar arithmetic: Gregorian and Hijri dates through Julian Day Numbers."""

from hijri_calendar.conversion.gregorian import (
    GREGORIAN_EPOCH,
    days_in_gregorian_month,
    gregorian_to_julian,
    is_gregorian_leap_year,
    iso_weekday,
    julian_to_gregorian,
)
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

__all__ = [
    "GREGORIAN_EPOCH",
    "ISLAMIC_EPOCH",
    "LEAP_YEAR_RESIDUES",
    "MONTH_NAMES",
    "add_days",
    "days_elapsed_in_year",
    "days_in_gregorian_month",
    "days_in_month",
    "days_in_year",
    "gregorian_to_julian",
    "hijri_to_julian",
    "is_gregorian_leap_year",
    "is_leap_year",
    "iso_weekday",
    "julian_to_gregorian",
    "julian_to_hijri",
    "month_name",
]
