"""Custom exceptions."""

from __future__ import annotations

from collections.abc import Sequence


class DataRetrievalError(Exception):
    """Raised when a provider fails to return usable data."""


class SymbolNotFoundError(DataRetrievalError):
    """Raised when the provider has no data at all for a symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Stock symbol {symbol} not found or no data available")
        self.symbol = symbol


class ComparisonError(Exception):
    """Base class for failures shown to the user instead of a comparison."""

    def __init__(self, message: str, tickers: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.tickers = tuple(tickers)


class FetchFailedError(ComparisonError):
    """One or both provider lookups failed."""

    def __init__(self, message: str, tickers: Sequence[str] = (), not_found: bool = False) -> None:
        super().__init__(message, tickers)
        self.not_found = not_found


class DataProcessingError(ComparisonError):
    """A fetched series had no usable data inside the requested window."""
