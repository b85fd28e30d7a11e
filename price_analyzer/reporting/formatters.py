"""
ASCII terminal formatters for CLI reporting commands.

All formatters accept ``PriceAnalysisReport`` objects and return plain
multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Money values are shown with two decimals and thousands separators; the
underlying report keeps full ``Decimal`` precision (forecasts in particular
carry the unrounded float adjustment).
"""

from __future__ import annotations

from decimal import Decimal

from price_analyzer.models.report import PriceAnalysisReport


def _money(value: Decimal) -> str:
    return f"{value:,.2f}"


# ── Single report ─────────────────────────────────────────────────────────────


def format_report(report: PriceAnalysisReport) -> str:
    """Format one report as a labelled block.

    Example::

        === Price Analysis: cabbage ===
          Observations:   42 (latest 2025-03-01)
          Current price:  3,980.00   [LOW]
          ...
          Recommendation: BUY (confidence 0.67)

    Returns:
        Multi-line string.
    """
    bands = report.bollinger_bands
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Price Analysis: {report.name} ===")
    lines.append(
        f"  Observations:   {report.observation_count} "
        f"(latest {report.latest_date.isoformat()})"
    )
    lines.append(
        f"  Current price:  {_money(report.current_price)}   [{report.price_level}]"
    )
    lines.append(
        f"  Average/median: {_money(report.average_price)} / "
        f"{_money(report.median_price)}"
    )
    lines.append(
        f"  Range:          {_money(report.min_price)} - {_money(report.max_price)}"
    )
    lines.append(
        f"  MA 7 / MA 30:   {_money(report.moving_average_7d)} / "
        f"{_money(report.moving_average_30d)}"
    )
    lines.append(f"  Volatility:     {report.volatility:.2f}")
    lines.append(
        f"  Trend slope:    {report.trend_slope:+.3f} ({report.trend_direction})"
    )
    lines.append(f"  RSI(14):        {report.rsi_14:.1f}")
    lines.append(
        f"  Bollinger:      {_money(bands.lower_band)} / {_money(bands.middle_band)} / "
        f"{_money(bands.upper_band)}  [{bands.position}]"
    )
    lines.append(f"  Seasonality:    {report.seasonality_score:.2f}")
    lines.append(f"  Sentiment:      {report.market_sentiment}")
    lines.append(
        f"  Forecast 7d:    {_money(report.predicted_price_7d)}"
    )
    lines.append(
        f"  Forecast 30d:   {_money(report.predicted_price_30d)}"
    )
    lines.append("  Risk factors:")
    for risk in report.risk_factors:
        lines.append(f"    - {risk}")
    lines.append(
        f"  Recommendation: {report.recommendation} "
        f"(confidence {report.confidence:.2f})"
    )
    return "\n".join(lines)


# ── Market table ──────────────────────────────────────────────────────────────


def format_report_table(
    reports: list[PriceAnalysisReport],
    market_name: str | None = None,
) -> str:
    """Format many reports as one ASCII table, most confident buys first.

    Columns: item, observations, current price, level, RSI, 7d forecast,
    sentiment, recommendation, confidence.

    Args:
        reports:     Reports to show.
        market_name: Optional market name for the header.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Market Price Analysis ===")
    lines.append(f"  Market: {market_name or '(all markets)'}")

    if not reports:
        lines.append("")
        lines.append("  (no items with usable price history)")
        return "\n".join(lines)

    header = (
        f"  {'Item':<24}  {'Obs':>4}  {'Current':>12}  {'Level':<6}  "
        f"{'RSI':>5}  {'7d':>12}  {'Sentiment':<9}  {'Action':<11}  {'Conf':>4}"
    )
    lines.append("")
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    ordered = sorted(reports, key=lambda r: (-r.confidence, r.name))
    for r in ordered:
        lines.append(
            f"  {r.name[:24]:<24}  {r.observation_count:>4}  "
            f"{_money(r.current_price):>12}  {r.price_level.value:<6}  "
            f"{r.rsi_14:>5.1f}  {_money(r.predicted_price_7d):>12}  "
            f"{r.market_sentiment.value:<9}  {r.recommendation.value:<11}  "
            f"{r.confidence:>4.2f}"
        )

    return "\n".join(lines)
