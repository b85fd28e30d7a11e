"""Tests for the ASCII terminal formatters."""

from __future__ import annotations

from price_analyzer.analysis.engine import analyze_price_history
from price_analyzer.reporting.formatters import format_report, format_report_table


class TestFormatReport:
    def test_header_and_key_lines(self, sample_report):
        text = format_report(sample_report)
        assert "=== Price Analysis: cabbage ===" in text
        assert "Observations:   3 (latest 2025-03-20)" in text
        assert "Current price:  100.00   [HIGH]" in text
        assert "Trend slope:    -10.000 (falling)" in text
        assert "Recommendation: HOLD (confidence 0.39)" in text

    def test_lists_every_risk_factor(self, sample_report):
        text = format_report(sample_report)
        assert "    - historic high-price range" in text
        assert "    - sharp trend reversal" in text

    def test_thousands_separator(self, make_series):
        report = analyze_price_history("beef", make_series([12500, 12000]))
        assert "12,500.00" in format_report(report)


class TestFormatReportTable:
    def test_empty(self):
        text = format_report_table([])
        assert "=== Market Price Analysis ===" in text
        assert "(all markets)" in text
        assert "(no items with usable price history)" in text

    def test_market_name_in_header(self, sample_report):
        assert "Market: east" in format_report_table([sample_report], market_name="east")

    def test_sorted_by_confidence_then_name(self, make_series):
        # newest-first [80, 90, 100] is a decline and outscores the rises
        falling = analyze_price_history("zucchini", make_series([80, 90, 100]))
        rising = analyze_price_history("apple", make_series([100, 90, 80]))
        same = analyze_price_history("banana", make_series([100, 90, 80]))
        text = format_report_table([rising, same, falling])
        assert falling.confidence > rising.confidence == same.confidence
        positions = [text.index(name) for name in ("zucchini", "apple", "banana")]
        assert positions == sorted(positions)

    def test_row_shows_recommendation(self, sample_report):
        text = format_report_table([sample_report])
        row = next(ln for ln in text.splitlines() if "cabbage" in ln)
        assert "HOLD" in row
        assert "0.39" in row
