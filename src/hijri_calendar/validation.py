"""
Range checks for date construction.

The checks return a ValidationResult instead of raising so callers can
test a triple without exception handling; ensure_valid() converts a
failed result into the matching InvalidDateError subclass.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from hijri_calendar.conversion.gregorian import days_in_gregorian_month
from hijri_calendar.conversion.hijri import days_in_month
from hijri_calendar.core.exceptions import (
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
)

# Hijri years are written with four digits
MIN_HIJRI_YEAR = 1
MAX_HIJRI_YEAR = 9999

MIN_GREGORIAN_YEAR = 1


class ValidationResult(Enum):
    """Outcome of a date range check"""

    VALID = "valid"
    INVALID_YEAR = "year"
    INVALID_MONTH = "month"
    INVALID_DAY = "day"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_hijri_date(year: Any, month: Any, day: Any) -> ValidationResult:
    """
    Check a Hijri (year, month, day) triple.

    Year, month and day are checked in that order; the first failure wins.
    """
    if not _is_int(year) or not MIN_HIJRI_YEAR <= year <= MAX_HIJRI_YEAR:
        return ValidationResult.INVALID_YEAR
    if not _is_int(month) or not 1 <= month <= 12:
        return ValidationResult.INVALID_MONTH
    if not _is_int(day) or not 1 <= day <= days_in_month(year, month):
        return ValidationResult.INVALID_DAY
    return ValidationResult.VALID


def validate_gregorian_date(year: Any, month: Any, day: Any) -> ValidationResult:
    """Check a proleptic Gregorian (year, month, day) triple."""
    if not _is_int(year) or year < MIN_GREGORIAN_YEAR:
        return ValidationResult.INVALID_YEAR
    if not _is_int(month) or not 1 <= month <= 12:
        return ValidationResult.INVALID_MONTH
    if not _is_int(day) or not 1 <= day <= days_in_gregorian_month(year, month):
        return ValidationResult.INVALID_DAY
    return ValidationResult.VALID


def ensure_valid(
    result: ValidationResult,
    year: Any,
    month: Any,
    day: Any,
    calendar: str = "hijri",
) -> None:
    """
    Raise the error matching a failed ValidationResult.

    Raises:
        InvalidYearError: result is INVALID_YEAR
        InvalidMonthError: result is INVALID_MONTH
        InvalidDayError: result is INVALID_DAY
    """
    if result is ValidationResult.INVALID_YEAR:
        raise InvalidYearError(year, calendar=calendar)
    if result is ValidationResult.INVALID_MONTH:
        raise InvalidMonthError(month, calendar=calendar)
    if result is ValidationResult.INVALID_DAY:
        raise InvalidDayError(day, calendar=calendar, details={"year": year, "month": month})
