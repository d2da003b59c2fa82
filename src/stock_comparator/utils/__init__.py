"""Utility helpers."""

from .errors import (
    ComparisonError,
    DataProcessingError,
    DataRetrievalError,
    FetchFailedError,
    SymbolNotFoundError,
)
from .formatting import format_currency, format_short_date, format_timeframe
from .logging import get_logger

__all__ = [
    "ComparisonError",
    "DataProcessingError",
    "DataRetrievalError",
    "FetchFailedError",
    "SymbolNotFoundError",
    "format_currency",
    "format_short_date",
    "format_timeframe",
    "get_logger",
]
