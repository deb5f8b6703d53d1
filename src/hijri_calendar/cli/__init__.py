"""Command line interface for hijri-calendar."""

from hijri_calendar.cli.main import cli

__all__ = ["cli"]
