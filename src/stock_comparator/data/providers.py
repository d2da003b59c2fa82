"""Provider protocol for fetching price data."""

from __future__ import annotations

from typing import Protocol

from ..domain import StockData, StockQuery


class PricesProvider(Protocol):
    """Abstraction for price data sources."""

    def fetch_stock(self, query: StockQuery) -> StockData:
        """Fetch daily prices and the display name for one symbol.

        Raises ``SymbolNotFoundError`` when the symbol has no data and
        ``DataRetrievalError`` for any other failure.
        """
        raise NotImplementedError
