"""
Price analysis orchestration.

``analyze_price_history(name, observations)`` is the single public entry
point.  It runs the calculators in dependency order:

    1. series       -> newest-first ordering
    2. statistics   -> current / average / median / min / max, MA7, MA30,
                       volatility
    3. trend        -> OLS slope over the last ≤30 points
    4. indicators   -> price level, RSI(14), Bollinger(20, 2), seasonality
    5. signals      -> sentiment, 7d / 30d forecasts, risk flags
    6. scorer       -> score, confidence, recommendation

and hands every value to ``build_report()`` in one call.

The engine is pure: no I/O, no module state, no mutation of the inputs.
Calling it twice on the same observations yields equal reports.  An empty
history yields ``None`` ("insufficient data"), never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from price_analyzer.analysis import indicators, signals, statistics, trend
from price_analyzer.analysis.scorer import compute_score, determine_recommendation
from price_analyzer.analysis.series import prepare_series, series_prices
from price_analyzer.models.observation import PriceObservation
from price_analyzer.models.report import BollingerBands, PriceAnalysisReport
from price_analyzer.taxonomy.signal_taxonomy import (
    MarketSentiment,
    PriceLevel,
    Recommendation,
    RiskFactor,
    TrendDirection,
)

logger = logging.getLogger(__name__)

SHORT_MA_PERIOD = 7
LONG_MA_PERIOD = 30


def analyze_price_history(
    name: str,
    observations: Iterable[PriceObservation],
) -> PriceAnalysisReport | None:
    """Analyze one item's price history.

    Args:
        name:         Item name, copied onto the report.
        observations: Price observations in any order.  Prices are assumed
                      to be positive; they are not re-validated here.

    Returns:
        A fully populated ``PriceAnalysisReport``, or ``None`` when
        ``observations`` is empty.
    """
    series = prepare_series(observations)
    if not series:
        logger.debug("No price history for %r; skipping analysis.", name)
        return None

    prices = series_prices(series)

    current = statistics.current_price(prices)
    low = statistics.min_price(prices)
    high = statistics.max_price(prices)
    ma_30 = statistics.moving_average(prices, LONG_MA_PERIOD)
    vol = statistics.volatility(prices)

    slope = trend.trend_slope(prices)

    level = indicators.price_level(current, low, high)
    rsi_14 = indicators.rsi(prices)
    bands = indicators.bollinger_bands(prices)
    seasonality = indicators.seasonality_score(series)

    sentiment = signals.market_sentiment(slope, rsi_14, bands.position, current, ma_30)
    forecasts = {
        days: signals.forecast_price(
            days, current, low, high, slope, seasonality, vol, rsi_14
        )
        for days in signals.FORECAST_HORIZONS_DAYS
    }
    risks = signals.identify_risk_factors(vol, rsi_14, bands.position, level, slope)

    components = compute_score(
        level, slope, current, ma_30, rsi_14, bands.position, seasonality
    )
    confidence = components.confidence
    grade = determine_recommendation(confidence)

    logger.debug(
        "Analyzed %r: %d obs, level=%s, slope=%.3f, rsi=%.1f -> %s (%.2f)",
        name, len(series), level, slope, rsi_14, grade, confidence,
    )

    return build_report(
        name=name,
        observation_count=len(series),
        latest_date=series[0].observed_on,
        current_price=current,
        average_price=statistics.average_price(prices),
        median_price=statistics.median_price(prices),
        min_price=low,
        max_price=high,
        moving_average_7d=statistics.moving_average(prices, SHORT_MA_PERIOD),
        moving_average_30d=ma_30,
        volatility=vol,
        trend_slope=slope,
        trend_direction=trend.classify_trend(slope),
        price_level=level,
        rsi_14=rsi_14,
        bollinger_bands=bands,
        seasonality_score=seasonality,
        market_sentiment=sentiment,
        predicted_price_7d=forecasts[7],
        predicted_price_30d=forecasts[30],
        risk_factors=risks,
        recommendation=grade,
        confidence=confidence,
    )


def build_report(
    *,
    name: str,
    observation_count: int,
    latest_date: date,
    current_price: Decimal,
    average_price: Decimal,
    median_price: Decimal,
    min_price: Decimal,
    max_price: Decimal,
    moving_average_7d: Decimal,
    moving_average_30d: Decimal,
    volatility: float,
    trend_slope: float,
    trend_direction: TrendDirection,
    price_level: PriceLevel,
    rsi_14: float,
    bollinger_bands: BollingerBands,
    seasonality_score: float,
    market_sentiment: MarketSentiment,
    predicted_price_7d: Decimal,
    predicted_price_30d: Decimal,
    risk_factors: tuple[RiskFactor, ...],
    recommendation: Recommendation,
    confidence: float,
) -> PriceAnalysisReport:
    """Create the immutable report in a single validated construction."""
    return PriceAnalysisReport(
        name=name,
        observation_count=observation_count,
        latest_date=latest_date,
        current_price=current_price,
        average_price=average_price,
        median_price=median_price,
        min_price=min_price,
        max_price=max_price,
        moving_average_7d=moving_average_7d,
        moving_average_30d=moving_average_30d,
        volatility=volatility,
        trend_slope=trend_slope,
        trend_direction=trend_direction,
        price_level=price_level,
        rsi_14=rsi_14,
        bollinger_bands=bollinger_bands,
        seasonality_score=seasonality_score,
        market_sentiment=market_sentiment,
        predicted_price_7d=predicted_price_7d,
        predicted_price_30d=predicted_price_30d,
        risk_factors=risk_factors,
        recommendation=recommendation,
        confidence=confidence,
    )
