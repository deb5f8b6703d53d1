"""
Hijri calendar CLI - Click-based command line interface.

Usage:
    hijri today                        # Today's Hijri date
    hijri from-gregorian 2011 3 22     # Gregorian -> Hijri
    hijri to-gregorian 1432 7 27       # Hijri -> Gregorian
    hijri calendar 1432 7              # Month calendar
    hijri leap 1432                    # Leap year check
    hijri --format json today          # JSON output
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click

from hijri_calendar.conversion import hijri
from hijri_calendar.core.config import Config
from hijri_calendar.core.exceptions import HijriCalendarError
from hijri_calendar.dates import HijriDate, from_gregorian, from_julian_day_number
from hijri_calendar.grid import month_start_index, render_month_grid

# Windows UTF-8 encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

T = TypeVar("T")


def handle_errors(f: Callable[..., T]) -> Callable[..., T]:
    """Decorator turning library errors into Click errors (exit code 1)."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except HijriCalendarError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def emit(ctx: click.Context, text: str, payload: dict[str, Any]) -> None:
    """Print text or JSON depending on the selected output format."""
    if ctx.obj["format"] == "json":
        click.echo(json.dumps(payload, ensure_ascii=False))
    else:
        click.echo(text)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="YAML config file")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default from config, else text)",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@handle_errors
def cli(
    ctx: click.Context,
    config_path: str | None,
    output_format: str | None,
    verbose: bool,
) -> None:
    """Hijri Calendar

    Convert dates between the Gregorian and the arithmetic Hijri
    calendar. Hijri dates may differ by one day from the observed
    lunar calendar.

        hijri today
        hijri from-gregorian 2011 3 22
        hijri calendar 1432 7
    """
    config = Config(config_path)
    level = "DEBUG" if verbose else config.log_level
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)

    ctx.obj = {
        "config": config,
        "format": output_format or config.output_format,
    }

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.pass_context
@handle_errors
def today(ctx: click.Context) -> None:
    """Today's Hijri date."""
    date = HijriDate.today()
    emit(ctx, date.as_string(), date.as_dict())


@cli.command("from-gregorian")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.pass_context
@handle_errors
def from_gregorian_cmd(ctx: click.Context, year: int, month: int, day: int) -> None:
    """Convert a Gregorian date to Hijri.

    Example:
        hijri from-gregorian 2011 3 22
    """
    date = from_gregorian(year, month, day)
    emit(ctx, date.as_string(), date.as_dict())


@cli.command("to-gregorian")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.pass_context
@handle_errors
def to_gregorian_cmd(ctx: click.Context, year: int, month: int, day: int) -> None:
    """Convert a Hijri date to Gregorian (YYYY-MM-DD).

    Example:
        hijri to-gregorian 1432 7 27
    """
    date = HijriDate(year, month, day).to_gregorian()
    emit(ctx, date.isoformat(), date.as_dict())


@cli.command()
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.pass_context
@handle_errors
def julian(ctx: click.Context, year: int, month: int, day: int) -> None:
    """Julian Day Number of a Hijri date."""
    date = HijriDate(year, month, day)
    jd = date.to_julian_day()
    emit(ctx, f"{jd:.1f}", {"hijri": date.as_dict(), "julian_day": jd})


@cli.command("from-julian")
@click.argument("jd", type=float)
@click.pass_context
@handle_errors
def from_julian_cmd(ctx: click.Context, jd: float) -> None:
    """Hijri date of a Julian Day Number."""
    date = from_julian_day_number(jd)
    emit(ctx, date.as_string(), date.as_dict())


@cli.command()
@click.argument("year", type=int, required=False)
@click.argument("month", type=int, required=False)
@click.pass_context
@handle_errors
def calendar(ctx: click.Context, year: int | None, month: int | None) -> None:
    """Month calendar (default: current Hijri month).

    Example:
        hijri calendar 1432 7
    """
    if year is None and month is None:
        current = HijriDate.today()
        year, month = current.year, current.month
    elif year is None or month is None:
        raise click.UsageError("Give both YEAR and MONTH, or neither.")
    else:
        # Validates year and month
        HijriDate(year, month, 1)

    payload = {
        "year": year,
        "month": month,
        "month_name": hijri.month_name(month),
        "start_index": month_start_index(year, month),
        "days": hijri.days_in_month(year, month),
    }
    emit(ctx, render_month_grid(year, month), payload)


@cli.command()
@click.argument("year", type=int)
@click.pass_context
@handle_errors
def leap(ctx: click.Context, year: int) -> None:
    """Leap year check for a Hijri year."""
    # Validates year
    HijriDate(year, 1, 1)
    is_leap = hijri.is_leap_year(year)
    days = hijri.days_in_year(year)
    text = f"{year} is {'a' if is_leap else 'not a'} leap year ({days} days)"
    emit(ctx, text, {"year": year, "leap": is_leap, "days": days})


@cli.command()
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.pass_context
@handle_errors
def info(ctx: click.Context, year: int, month: int) -> None:
    """Days in a Hijri month and days elapsed through it."""
    date = HijriDate(year, month, 1)
    payload = {
        "year": year,
        "month": month,
        "month_name": date.month_name,
        "days_in_month": date.days_in_month(),
        "days_elapsed": date.days_elapsed_in_year(),
        "days_in_year": date.days_in_year(),
    }
    text = (
        f"{date.month_name} {year:04d}: {payload['days_in_month']} days, "
        f"{payload['days_elapsed']} of {payload['days_in_year']} days elapsed"
    )
    emit(ctx, text, payload)


@cli.command("add-days")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.argument("days", type=click.IntRange(min=0))
@click.pass_context
@handle_errors
def add_days_cmd(ctx: click.Context, year: int, month: int, day: int, days: int) -> None:
    """Hijri date DAYS days after the given date.

    Example:
        hijri add-days 1432 7 27 2
    """
    date = HijriDate(year, month, day).add_days(days)
    emit(ctx, date.as_string(), date.as_dict())


if __name__ == "__main__":
    cli()
