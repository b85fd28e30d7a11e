"""
Derived signals: market sentiment vote, point forecasts and risk flags.

These consume the outputs of ``statistics``, ``trend`` and ``indicators``;
none of them look at the raw series again.

Sentiment vote
--------------
Each signal casts one vote:

    trend slope   < -0.5 -> bullish        > 0.5 -> bearish
    RSI           < 30   -> bullish        > 70  -> bearish
    Bollinger     BELOW_LOWER -> bullish   ABOVE_UPPER -> bearish
    current vs MA30   current > MA30 -> bullish, otherwise bearish

"Bullish" here means favourable to a buyer.  Majority wins; a tie is NEUTRAL.

Forecast
--------
    forecast = current + slope*d + (seasonality - 0.5)*0.1*d + rsi_adjustment

where ``rsi_adjustment`` is ``∓ volatility*0.05`` for RSI above 70 / below 30.
The result is clamped to ``[0.5*min, 2.0*max]``.
"""

from __future__ import annotations

from decimal import Decimal

from price_analyzer.taxonomy.signal_taxonomy import (
    BandPosition,
    MarketSentiment,
    PriceLevel,
    RiskFactor,
)

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0
RSI_EXTREME_OVERBOUGHT = 80.0
RSI_EXTREME_OVERSOLD = 20.0

SLOPE_SIGNAL = 0.5
SLOPE_SHARP = 2.0
HIGH_VOLATILITY = 20.0

FORECAST_HORIZONS_DAYS: tuple[int, ...] = (7, 30)

_FLOOR_FACTOR = Decimal("0.5")
_CEILING_FACTOR = Decimal("2.0")


def market_sentiment(
    trend_slope: float,
    rsi_14: float,
    band_position: BandPosition,
    current: Decimal,
    moving_average_30d: Decimal,
) -> MarketSentiment:
    """Majority vote over trend, RSI, band position and the 30-point MA."""
    bullish = 0
    bearish = 0

    if trend_slope < -SLOPE_SIGNAL:
        bullish += 1
    elif trend_slope > SLOPE_SIGNAL:
        bearish += 1

    if rsi_14 > RSI_OVERBOUGHT:
        bearish += 1
    elif rsi_14 < RSI_OVERSOLD:
        bullish += 1

    if band_position is BandPosition.BELOW_LOWER:
        bullish += 1
    elif band_position is BandPosition.ABOVE_UPPER:
        bearish += 1

    if current > moving_average_30d:
        bullish += 1
    else:
        bearish += 1

    if bullish > bearish:
        return MarketSentiment.BULLISH
    if bearish > bullish:
        return MarketSentiment.BEARISH
    return MarketSentiment.NEUTRAL


def forecast_price(
    days_ahead: int,
    current: Decimal,
    low: Decimal,
    high: Decimal,
    trend_slope: float,
    seasonality_score: float,
    volatility: float,
    rsi_14: float,
) -> Decimal:
    """Point forecast ``days_ahead`` days out.

    Args:
        days_ahead:        Horizon in days (7 and 30 are reported).
        current:           Most recent price.
        low:               Historical minimum (floor = 0.5 * low).
        high:              Historical maximum (ceiling = 2.0 * high).
        trend_slope:       OLS slope from ``trend.trend_slope``.
        seasonality_score: Score in [0, 1]; 0.5 is neutral.
        volatility:        Full-series standard deviation.
        rsi_14:            RSI value in [0, 100].

    Returns:
        Forecast price, clamped to the reasonable range.
    """
    trend_component = trend_slope * days_ahead
    seasonal_component = (seasonality_score - 0.5) * 0.1 * days_ahead
    volatility_component = volatility * 0.05

    rsi_adjustment = 0.0
    if rsi_14 > RSI_OVERBOUGHT:
        rsi_adjustment = -volatility_component
    elif rsi_14 < RSI_OVERSOLD:
        rsi_adjustment = volatility_component

    total_change = trend_component + seasonal_component + rsi_adjustment
    predicted = current + Decimal(repr(total_change))

    floor = low * _FLOOR_FACTOR
    ceiling = high * _CEILING_FACTOR
    return min(max(predicted, floor), ceiling)


def identify_risk_factors(
    volatility: float,
    rsi_14: float,
    band_position: BandPosition,
    level: PriceLevel,
    trend_slope: float,
) -> tuple[RiskFactor, ...]:
    """Threshold-based risk flags, in a fixed order.

    Returns ``(RiskFactor.NO_MAJOR_RISK,)`` when nothing fires.
    """
    risks: list[RiskFactor] = []

    if volatility > HIGH_VOLATILITY:
        risks.append(RiskFactor.HIGH_VOLATILITY)

    if rsi_14 > RSI_EXTREME_OVERBOUGHT:
        risks.append(RiskFactor.EXTREME_OVERBOUGHT)
    elif rsi_14 < RSI_EXTREME_OVERSOLD:
        risks.append(RiskFactor.EXTREME_OVERSOLD)

    if band_position is BandPosition.ABOVE_UPPER:
        risks.append(RiskFactor.UPPER_BAND_BREACH)
    elif band_position is BandPosition.BELOW_LOWER:
        risks.append(RiskFactor.LOWER_BAND_BREACH)

    if level is PriceLevel.HIGH:
        risks.append(RiskFactor.HISTORIC_HIGH_PRICE)

    if abs(trend_slope) > SLOPE_SHARP:
        risks.append(RiskFactor.SHARP_TREND_REVERSAL)

    return tuple(risks) or (RiskFactor.NO_MAJOR_RISK,)
