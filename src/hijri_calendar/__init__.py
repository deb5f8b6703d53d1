"""
hijri-calendar - Gregorian <-> Hijri date conversion.

Converts between the proleptic Gregorian calendar and the arithmetic
(tabular) Hijri calendar through Julian Day Numbers. Results may be one
day off from the observed lunar calendar.
"""

__version__ = "0.4.0"

from hijri_calendar.conversion import (
    MONTH_NAMES,
    add_days,
    days_elapsed_in_year,
    days_in_month,
    days_in_year,
    gregorian_to_julian,
    hijri_to_julian,
    is_leap_year,
    julian_to_gregorian,
    julian_to_hijri,
)
from hijri_calendar.core.config import Config
from hijri_calendar.core.exceptions import (
    ConfigurationError,
    HijriCalendarError,
    InvalidDateError,
    InvalidDayError,
    InvalidJulianDayError,
    InvalidMonthError,
    InvalidYearError,
)
from hijri_calendar.dates import (
    GregorianDate,
    HijriDate,
    as_string,
    from_gregorian,
    from_julian_day_number,
    to_gregorian,
    to_julian_day_number,
    today,
)
from hijri_calendar.grid import month_start_index, render_month_grid
from hijri_calendar.validation import (
    ValidationResult,
    validate_gregorian_date,
    validate_hijri_date,
)

__all__ = [
    "__version__",
    "MONTH_NAMES",
    "Config",
    "GregorianDate",
    "HijriDate",
    "HijriCalendarError",
    "ConfigurationError",
    "InvalidDateError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidJulianDayError",
    "ValidationResult",
    "add_days",
    "as_string",
    "days_elapsed_in_year",
    "days_in_month",
    "days_in_year",
    "from_gregorian",
    "from_julian_day_number",
    "gregorian_to_julian",
    "hijri_to_julian",
    "is_leap_year",
    "julian_to_gregorian",
    "julian_to_hijri",
    "month_start_index",
    "render_month_grid",
    "to_gregorian",
    "to_julian_day_number",
    "today",
    "validate_gregorian_date",
    "validate_hijri_date",
]
