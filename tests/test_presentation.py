"""Tests for formatting helpers, settings and chart builders."""

from __future__ import annotations

from datetime import date
from typing import get_args

import pytest

from conftest import make_series
from stock_comparator.analytics import normalize_performance
from stock_comparator.config import get_settings
from stock_comparator.domain import TIMEFRAMES, ComparisonResult, Timeframe
from stock_comparator.utils import format_currency, format_short_date, format_timeframe
from stock_comparator.viz import make_comparison_chart, make_price_area_chart


class TestFormatting:
    def test_currency(self):
        assert format_currency(1234.5) == "$1,234.50"

    def test_negative_currency(self):
        assert format_currency(-0.456) == "-$0.46"

    def test_short_date(self):
        assert format_short_date(date(2024, 6, 5)) == "Jun 5"

    @pytest.mark.parametrize(
        "token, label", [("1y", "1 Year"), ("3y", "3 Years"), ("5y", "5 Years"), ("all", "All Time")]
    )
    def test_timeframe(self, token, label):
        assert format_timeframe(token) == label


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("STOCK_COMPARATOR_DEBOUNCE_MS", "STOCK_COMPARATOR_DEFAULT_TIMEFRAME", "STOCK_COMPARATOR_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.debounce_ms == 500
        assert settings.debounce_seconds == 0.5
        assert settings.default_timeframe == "1y"
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("STOCK_COMPARATOR_DEBOUNCE_MS", "250")
        monkeypatch.setenv("STOCK_COMPARATOR_DEFAULT_TIMEFRAME", "5Y")
        monkeypatch.setenv("STOCK_COMPARATOR_LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.debounce_seconds == 0.25
        assert settings.default_timeframe == "5y"
        assert settings.log_level == "DEBUG"

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("STOCK_COMPARATOR_DEBOUNCE_MS", "soon")
        monkeypatch.setenv("STOCK_COMPARATOR_DEFAULT_TIMEFRAME", "2y")
        monkeypatch.setenv("STOCK_COMPARATOR_LOG_LEVEL", "LOUD")
        settings = get_settings()
        assert settings.debounce_ms == 500
        assert settings.default_timeframe == "1y"
        assert settings.log_level == "INFO"


class TestCharts:
    def test_comparison_chart_has_two_traces(self):
        start = date(2024, 1, 1)
        perf1 = normalize_performance(make_series(start, [10.0, 15.0]), start)
        perf2 = normalize_performance(make_series(start, [20.0, 24.0]), start)
        result = ComparisonResult("AAPL", "MSFT", perf1.points, perf2.points, perf1.final_value, perf2.final_value, "3y")

        fig = make_comparison_chart(result)

        assert [trace.name for trace in fig.data] == ["AAPL", "MSFT"]
        assert list(fig.data[0].y) == pytest.approx([100.0, 150.0])
        assert fig.layout.yaxis.tickprefix == "$"
        assert "3 Years" in fig.layout.title.text

    def test_comparison_chart_without_result(self):
        fig = make_comparison_chart(None)
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No data to display"

    def test_price_area_chart(self):
        prices = make_series(date(2024, 6, 14), [10.0, 11.0])
        fig = make_price_area_chart(prices, title="Apple Inc. (AAPL)")
        trace = fig.data[0]
        assert trace.fill == "tozeroy"
        assert list(trace.y) == [10.0, 11.0]
        assert list(trace.customdata) == ["Jun 14", "Jun 15"]

    def test_price_area_chart_empty(self):
        fig = make_price_area_chart((), title="Nothing")
        assert len(fig.data) == 0


class TestTimeframeOptions:
    def test_options_match_timeframe_literal(self):
        assert TIMEFRAMES == get_args(Timeframe) == ("1y", "3y", "5y", "all")

    def test_every_option_has_a_label(self):
        assert [format_timeframe(token) for token in TIMEFRAMES] == ["1 Year", "3 Years", "5 Years", "All Time"]
