"""
Text month calendar for the Hijri calendar.

Weeks start on Saturday:

        Rajab [1432]

    Sat  Sun  Mon  Tue  Wed  Thu  Fri
                                    1
      2    3    4    5    6    7    8
    ...
"""

from __future__ import annotations

from hijri_calendar.conversion.gregorian import iso_weekday
from hijri_calendar.conversion.hijri import (
    days_elapsed_in_year,
    days_in_month,
    hijri_to_julian,
    month_name,
)

WEEKDAY_HEADER = "Sat  Sun  Mon  Tue  Wed  Thu  Fri"
CELL_WIDTH = 5


def month_start_index(year: int, month: int) -> int:
    """
    Column of the first day of a Hijri month (0=Saturday .. 6=Friday).

    Starts from the weekday of 1 Muharram and advances it by the days of
    the months before `month`. The weekday is read straight from the
    Julian Day Number, which is the ISO weekday of the Gregorian
    equivalent date.
    """
    index = (iso_weekday(hijri_to_julian(year, 1, 1)) + 1) % 7

    if month > 1:
        index = (index + days_elapsed_in_year(year, month - 1)) % 7

    return index


def render_month_grid(year: int, month: int) -> str:
    """
    Render a Hijri month as a 7-column text calendar.

    Args:
        year: Hijri year
        month: Month (1-12)

    Returns:
        Title line, weekday header and day rows
    """
    start = month_start_index(year, month)

    calendar = f"\n\t{month_name(month)} [{year:04d}]\n"
    calendar += f"\n{WEEKDAY_HEADER}\n"
    calendar += " " * CELL_WIDTH * start

    for day in range(1, days_in_month(year, month) + 1):
        calendar += f"{day:3d}  "
        if (start + day) % 7 == 0:
            calendar += "\n"

    return f"{calendar}\n\n"
