"""
Export helpers for spreadsheets and manual analysis.

All writers create parent directories, write to disk and return the written
``Path``.  They accept generic ``list[dict]`` / ``dict`` data to stay
decoupled from specific report shapes.

CSV exports are flat (no nested dicts) so they load directly in Excel or
pandas without any pre-processing step.

``flatten_report_for_export()`` is the adapter from a
``PriceAnalysisReport`` to one flat row: Bollinger bands become
``bb_*`` columns and risk factors are joined with ``"; "``.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from price_analyzer.models.report import PriceAnalysisReport

REPORT_EXPORT_COLUMNS: list[str] = [
    "name",
    "observation_count",
    "latest_date",
    "current_price",
    "average_price",
    "median_price",
    "min_price",
    "max_price",
    "moving_average_7d",
    "moving_average_30d",
    "volatility",
    "trend_slope",
    "trend_direction",
    "price_level",
    "rsi_14",
    "bb_upper",
    "bb_middle",
    "bb_lower",
    "bb_position",
    "seasonality_score",
    "market_sentiment",
    "predicted_price_7d",
    "predicted_price_30d",
    "recommendation",
    "confidence",
    "risk_factors",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Decimal and date values are serialised with ``str()``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, default=str, ensure_ascii=False), encoding="utf-8"
    )
    return path


def report_to_dict(report: PriceAnalysisReport) -> dict:
    """JSON-ready nested dict of a report (decimals become strings)."""
    return report.model_dump(mode="json")


def flatten_report_for_export(report: PriceAnalysisReport) -> dict:
    """Flatten one report into a single CSV row keyed by ``REPORT_EXPORT_COLUMNS``."""
    bands = report.bollinger_bands
    return {
        "name":                report.name,
        "observation_count":   report.observation_count,
        "latest_date":         report.latest_date.isoformat(),
        "current_price":       str(report.current_price),
        "average_price":       str(report.average_price),
        "median_price":        str(report.median_price),
        "min_price":           str(report.min_price),
        "max_price":           str(report.max_price),
        "moving_average_7d":   str(report.moving_average_7d),
        "moving_average_30d":  str(report.moving_average_30d),
        "volatility":          round(report.volatility, 4),
        "trend_slope":         round(report.trend_slope, 4),
        "trend_direction":     report.trend_direction.value,
        "price_level":         report.price_level.value,
        "rsi_14":              round(report.rsi_14, 2),
        "bb_upper":            str(bands.upper_band),
        "bb_middle":           str(bands.middle_band),
        "bb_lower":            str(bands.lower_band),
        "bb_position":         bands.position.value,
        "seasonality_score":   round(report.seasonality_score, 4),
        "market_sentiment":    report.market_sentiment.value,
        "predicted_price_7d":  str(report.predicted_price_7d),
        "predicted_price_30d": str(report.predicted_price_30d),
        "recommendation":      report.recommendation.value,
        "confidence":          round(report.confidence, 2),
        "risk_factors":        "; ".join(r.value for r in report.risk_factors),
    }
