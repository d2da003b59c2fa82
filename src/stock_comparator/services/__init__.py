"""Service layer entry points."""

from .comparison_service import compare_tickers, fetch_pair
from .prices_service import get_stock
from .trigger import DebouncedTrigger, TriggerSnapshot, TriggerState

__all__ = [
    "DebouncedTrigger",
    "TriggerSnapshot",
    "TriggerState",
    "compare_tickers",
    "fetch_pair",
    "get_stock",
]
