"""
Custom exceptions for hijri-calendar.

Exception hierarchy:
    HijriCalendarError (base)
    ├── ConfigurationError
    └── InvalidDateError
        ├── InvalidYearError
        ├── InvalidMonthError
        ├── InvalidDayError
        └── InvalidJulianDayError
"""

from __future__ import annotations

from typing import Any


class HijriCalendarError(Exception):
    """Base exception for all hijri-calendar errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Additional error details (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(HijriCalendarError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Missing config file given explicitly
        - Invalid YAML syntax
        - Unknown output format or log level
    """

    pass


class InvalidDateError(HijriCalendarError, ValueError):
    """
    Raised when a date is built from out-of-range values.

    Only the date constructors raise it; the conversion functions take
    their inputs as given.
    """

    field = "date"

    def __init__(
        self,
        value: Any,
        calendar: str = "hijri",
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize invalid date error.

        Args:
            value: The rejected value
            calendar: Calendar the value was meant for ("hijri" or "gregorian")
            details: Additional error details
        """
        super().__init__(f"Invalid {self.field} [{value}]", details)
        self.value = value
        self.calendar = calendar

    def __str__(self) -> str:
        return f"[{self.calendar}] {self.message}"


class InvalidYearError(InvalidDateError):
    """Raised when the year is not an integer in the supported range."""

    field = "year"


class InvalidMonthError(InvalidDateError):
    """Raised when the month is outside 1-12."""

    field = "month"


class InvalidDayError(InvalidDateError):
    """Raised when the day does not exist in its month."""

    field = "day"


class InvalidJulianDayError(InvalidDateError):
    """Raised when a Julian Day Number is not a finite number."""

    field = "julian day"
