"""Tests for price_analyzer.reporting.export."""

from __future__ import annotations

import csv
import json

from price_analyzer.reporting.export import (
    REPORT_EXPORT_COLUMNS,
    export_to_csv,
    export_to_json,
    flatten_report_for_export,
    report_to_dict,
)


class TestFlattenReport:
    def test_keys_match_export_columns(self, sample_report):
        row = flatten_report_for_export(sample_report)
        assert list(row) == REPORT_EXPORT_COLUMNS

    def test_values(self, sample_report):
        row = flatten_report_for_export(sample_report)
        assert row["name"] == "cabbage"
        assert row["latest_date"] == "2025-03-20"
        assert row["average_price"] == "90.00"
        assert row["bb_middle"] == "90.00"
        assert row["bb_position"] == "BETWEEN"
        assert row["recommendation"] == "HOLD"
        assert row["confidence"] == 0.39
        assert row["risk_factors"] == "historic high-price range; sharp trend reversal"


class TestReportToDict:
    def test_nested_and_json_ready(self, sample_report):
        data = report_to_dict(sample_report)
        assert data["bollinger_bands"]["middle_band"] == "90.00"
        assert data["latest_date"] == "2025-03-20"
        json.dumps(data)


class TestExportToCsv:
    def test_writes_header_and_rows(self, tmp_path, sample_report):
        path = export_to_csv(
            [flatten_report_for_export(sample_report)],
            tmp_path / "out" / "reports.csv",
            fieldnames=REPORT_EXPORT_COLUMNS,
        )
        with path.open(encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 1
        assert rows[0]["name"] == "cabbage"
        assert rows[0]["predicted_price_7d"] == "40.0"

    def test_empty_records_writes_empty_file(self, tmp_path):
        path = export_to_csv([], tmp_path / "empty.csv")
        assert path.read_text(encoding="utf-8") == ""


class TestExportToJson:
    def test_round_trips_unicode(self, tmp_path, sample_report):
        data = report_to_dict(sample_report)
        data["name"] = "배추"
        path = export_to_json(data, tmp_path / "nested" / "report.json")
        text = path.read_text(encoding="utf-8")
        assert "배추" in text
        assert json.loads(text)["recommendation"] == "HOLD"
