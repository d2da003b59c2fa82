"""Rebase price series to the value of a $100 investment."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timezone

import pandas as pd

from ..domain import PerformancePoint, PerformanceSeries, RawPricePoint
from ..utils.logging import get_logger

logger = get_logger(__name__)

INITIAL_INVESTMENT = 100.0


def to_utc_timestamp(day: date) -> int:
    """Seconds since the epoch at UTC midnight of ``day``."""
    return int(datetime.combine(day, time.min, tzinfo=timezone.utc).timestamp())


def normalize_performance(series: Iterable[RawPricePoint], start_date: date) -> PerformanceSeries | None:
    """Rebase ``series`` to 100 at the first point on or after ``start_date``.

    Returns ``None`` when there is no point inside the window or the base price
    is not positive.
    """
    prices = sorted(series, key=lambda point: point.date)

    start_index = next((i for i, point in enumerate(prices) if point.date >= start_date), None)
    if start_index is None:
        logger.warning("No data found on or after %s", start_date.isoformat())
        return None

    base_price = prices[start_index].price
    if base_price <= 0:
        logger.warning("Non-positive base price %s on %s", base_price, prices[start_index].date.isoformat())
        return None

    points = tuple(
        PerformancePoint(time=to_utc_timestamp(point.date), value=INITIAL_INVESTMENT * (point.price / base_price))
        for point in prices[start_index:]
    )
    # Unreachable once a base exists.
    final_value = points[-1].value if points else INITIAL_INVESTMENT

    return PerformanceSeries(points=points, final_value=final_value)


def performance_frame(points: Iterable[PerformancePoint]) -> pd.DataFrame:
    """Convert performance points to a ``date``/``value`` frame for charting."""
    frame = pd.DataFrame([(point.time, point.value) for point in points], columns=["time", "value"])
    frame["date"] = pd.to_datetime(frame["time"], unit="s")
    return frame[["date", "value"]]
