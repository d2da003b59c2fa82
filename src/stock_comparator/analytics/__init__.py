"""Pure calculations on price series."""

from .performance import normalize_performance, performance_frame, to_utc_timestamp
from .summary import build_summary
from .timeframes import fetch_window, resolve_start

__all__ = [
    "build_summary",
    "fetch_window",
    "normalize_performance",
    "performance_frame",
    "resolve_start",
    "to_utc_timestamp",
]
