"""Tests for the Streamlit entrypoint, driven through streamlit's AppTest."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from conftest import make_series
from stock_comparator.domain import StockData
from stock_comparator.utils import SymbolNotFoundError

MAIN_SCRIPT = str(Path(__file__).parent.parent / "main.py")


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(MAIN_SCRIPT, default_timeout=10)
    at.run()
    assert not at.exception
    return at


# ============================================================================
# Tests: price history tab
# ============================================================================


class TestPriceHistoryTab:
    def test_lookup_only_reruns_for_its_own_inputs(self, app):
        data = StockData("AAPL", "Apple Inc.", make_series(date(2024, 6, 12), [10.0, 11.0, 12.0]))
        with patch("stock_comparator.services.get_stock", return_value=data) as mock_get_stock:
            app.text_input(key="lookup_symbol").input("aapl").run()
            assert mock_get_stock.call_count == 1
            assert mock_get_stock.call_args.args[1:] == ("AAPL", "2y")

            # Comparator inputs do not concern the history lookup.
            app.text_input(key="ticker1").input("MSFT").run()
            app.radio(key="comparison_timeframe").set_value("3y").run()
            assert mock_get_stock.call_count == 1

            app.radio(key="lookup_timeframe").set_value("5y").run()
            assert mock_get_stock.call_count == 2
            assert mock_get_stock.call_args.args[1:] == ("AAPL", "5y")

        assert not app.exception
        assert app.metric[0].value == "$12.00"

    def test_failed_lookup_is_not_repeated(self, app):
        with patch("stock_comparator.services.get_stock", side_effect=SymbolNotFoundError("NOPE")) as mock_get_stock:
            app.text_input(key="lookup_symbol").input("NOPE").run()
            app.text_input(key="ticker1").input("AAPL").run()

        assert mock_get_stock.call_count == 1
        assert not app.exception
        assert app.error[0].value == "Stock symbol NOPE not found or no data available"
