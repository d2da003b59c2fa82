"""Display formatting for currency and dates."""

from __future__ import annotations

from datetime import date


def format_currency(value: float) -> str:
    """Format a number as US dollars, e.g. ``-1234.5`` -> ``-$1,234.50``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_short_date(day: date) -> str:
    """Month abbreviation and day of month, e.g. ``Jun 15``."""
    return f"{day:%b} {day.day}"


def format_timeframe(timeframe: str) -> str:
    if timeframe == "all":
        return "All Time"
    years = timeframe.rstrip("y")
    return f"{years} Year" if years == "1" else f"{years} Years"
