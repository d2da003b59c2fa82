"""Map timeframe tokens to concrete date windows."""

from __future__ import annotations

from datetime import date, timedelta

COMPARISON_YEARS = {"1y": 1, "3y": 3, "5y": 5}
FETCH_YEARS = {"1y": 1, "2y": 2, "3y": 3, "5y": 5}
EPOCH = date(1970, 1, 1)
API_DEFAULT_TIMEFRAME = "2y"


def subtract_years(day: date, years: int) -> date:
    """Move ``day`` back by whole calendar years.

    A Feb 29 that does not exist in the target year rolls over to Mar 1.
    """
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return date(day.year - years, 3, 1)


def resolve_start(end_date: date, token: str) -> date:
    """Return the first date of the comparison window ending at ``end_date``.

    The window reaches one extra day back so the close before the period is
    used as the base. ``"all"`` maps to ``date.min``. Unknown tokens behave
    like ``"1y"``.
    """
    if token == "all":
        return date.min
    years = COMPARISON_YEARS.get(token, 1)
    return subtract_years(end_date, years) - timedelta(days=1)


def fetch_window(end_date: date, token: str | None) -> tuple[date, date]:
    """Date range requested from the provider for an API timeframe."""
    if token == "all":
        return EPOCH, end_date
    years = FETCH_YEARS.get(token or API_DEFAULT_TIMEFRAME, FETCH_YEARS[API_DEFAULT_TIMEFRAME])
    return subtract_years(end_date, years), end_date
