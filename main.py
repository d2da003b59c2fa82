"""Streamlit entrypoint for the stock performance comparator."""

from __future__ import annotations

import sys
from functools import partial
from pathlib import Path

# --- Ensure src is on path for local imports ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

import streamlit as st

from stock_comparator.analytics import build_summary  # noqa: E402
from stock_comparator.config import get_settings  # noqa: E402
from stock_comparator.data import YFinancePricesProvider  # noqa: E402
from stock_comparator.domain import TIMEFRAMES  # noqa: E402
from stock_comparator.services import DebouncedTrigger, compare_tickers, get_stock  # noqa: E402
from stock_comparator.utils import (  # noqa: E402
    DataRetrievalError,
    SymbolNotFoundError,
    format_currency,
    format_timeframe,
)
from stock_comparator.viz import make_comparison_chart, make_price_area_chart  # noqa: E402

LOOKUP_TIMEFRAMES = ("1y", "2y", "3y", "5y", "all")


def get_trigger() -> DebouncedTrigger:
    """One trigger per browser session, surviving Streamlit reruns."""
    if "comparison_trigger" not in st.session_state:
        settings = get_settings()
        provider = YFinancePricesProvider()
        st.session_state.comparison_trigger = DebouncedTrigger(
            partial(compare_tickers, provider),
            delay=settings.debounce_seconds,
        )
    return st.session_state.comparison_trigger


def render_comparator() -> None:
    st.subheader("Compare Two Stocks")
    st.caption("Enter two stock tickers and select a timeframe to see how a $100 investment would have performed.")

    settings = get_settings()
    col1, col2 = st.columns(2)
    with col1:
        ticker1 = st.text_input("Ticker 1", placeholder="e.g., AAPL", key="ticker1").strip().upper()
    with col2:
        ticker2 = st.text_input("Ticker 2", placeholder="e.g., MSFT", key="ticker2").strip().upper()

    timeframe = st.radio(
        "Timeframe",
        options=list(TIMEFRAMES),
        index=TIMEFRAMES.index(settings.default_timeframe),
        format_func=format_timeframe,
        horizontal=True,
        key="comparison_timeframe",
    )

    trigger = get_trigger()
    inputs = (ticker1, ticker2, timeframe)
    if st.session_state.get("comparison_inputs") != inputs:
        st.session_state.comparison_inputs = inputs
        trigger.update(ticker1, ticker2, timeframe)

    if trigger.loading:
        with st.spinner("Loading comparison data..."):
            trigger.wait()

    snapshot = trigger.snapshot()
    if snapshot.error:
        st.error(snapshot.error)
    result = snapshot.result
    if result is None:
        return

    st.plotly_chart(make_comparison_chart(result), use_container_width=True)

    left, right = st.columns(2)
    left.metric(result.ticker1, format_currency(result.final_value1))
    right.metric(result.ticker2, format_currency(result.final_value2))

    summary = build_summary(result).set_index("ticker")
    summary["final_value"] = summary["final_value"].map(format_currency)
    summary["total_return_pct"] = summary["total_return_pct"].map("{:.2f}%".format)
    st.dataframe(summary, width="stretch")


def render_price_history() -> None:
    st.subheader("Price History")

    col1, col2 = st.columns([2, 3])
    with col1:
        symbol = st.text_input("Symbol", placeholder="e.g., AAPL", key="lookup_symbol").strip().upper()
    with col2:
        timeframe = st.radio(
            "Timeframe",
            options=list(LOOKUP_TIMEFRAMES),
            index=1,
            format_func=format_timeframe,
            horizontal=True,
            key="lookup_timeframe",
        )

    if not symbol:
        st.info("Enter a ticker symbol to see its price history.")
        return

    inputs = (symbol, timeframe)
    if st.session_state.get("history_inputs") != inputs:
        data, error = None, ""
        try:
            with st.spinner(f"Fetching {symbol}..."):
                data = get_stock(YFinancePricesProvider(), symbol, timeframe)
        except SymbolNotFoundError as err:
            error = str(err)
        except DataRetrievalError as err:
            error = f"Failed to fetch data: {err}"
        # Recorded only after the lookup settles.
        st.session_state.history_data = data
        st.session_state.history_error = error
        st.session_state.history_inputs = inputs

    if st.session_state.history_error:
        st.error(st.session_state.history_error)
        return
    data = st.session_state.history_data

    title = f"{data.name or data.symbol} ({data.symbol})"
    st.plotly_chart(make_price_area_chart(data.prices, title=title), use_container_width=True)
    latest = data.prices[-1]
    st.metric(f"Adjusted close on {latest.date.isoformat()}", format_currency(latest.price))


def main() -> None:
    st.set_page_config(page_title="Stock Comparator", layout="wide")
    st.title("Stock Performance Comparator")
    st.caption("Streamlit + yfinance + Plotly")

    tab_compare, tab_history = st.tabs(["📈 Comparator", "🕰️ Price History"])
    with tab_compare:
        render_comparator()
    with tab_history:
        render_price_history()


if __name__ == "__main__":
    main()
