"""Core modules for hijri-calendar."""

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

__all__ = [
    "Config",
    "HijriCalendarError",
    "ConfigurationError",
    "InvalidDateError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidJulianDayError",
]
