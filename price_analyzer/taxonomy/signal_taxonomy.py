"""
Signal taxonomy for price analysis reports.

Every classifier in the analysis engine returns one of these closed variants
instead of a free-form string, so downstream code (scorer, formatters, export)
can match on them exhaustively:

  - ``PriceLevel``      — where the current price sits inside [min, max].
  - ``BandPosition``    — current price relative to the Bollinger bands.
  - ``MarketSentiment`` — outcome of the signal vote.
  - ``TrendDirection``  — human label for the regression slope.
  - ``Recommendation``  — the 5-level buy/hold/sell grade.
  - ``RiskFactor``      — textual risk flags attached to a report.

Usage example::

    from price_analyzer.taxonomy.signal_taxonomy import PriceLevel, Recommendation

    level = PriceLevel.LOW
    grade = Recommendation.STRONG_BUY

This module has NO imports from any other ``price_analyzer`` package.
"""

from enum import StrEnum


class PriceLevel(StrEnum):
    """Tri-partition of the current price within the historical range."""

    LOW = "LOW"
    """Current price is in the bottom third of [min, max]."""

    MEDIUM = "MEDIUM"
    """Middle third, or the range is degenerate (min == max)."""

    HIGH = "HIGH"
    """Top third of [min, max]."""


class BandPosition(StrEnum):
    """Current price relative to the Bollinger(20, 2) envelope."""

    ABOVE_UPPER = "ABOVE_UPPER"
    BETWEEN = "BETWEEN"
    BELOW_LOWER = "BELOW_LOWER"


class MarketSentiment(StrEnum):
    """Majority result of the bullish/bearish signal vote."""

    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


class TrendDirection(StrEnum):
    """Display label for the trend slope (±0.5 dead band)."""

    RISING = "rising"
    FALLING = "falling"
    FLAT = "flat"


class Recommendation(StrEnum):
    """Purchase recommendation, ordered from most to least aggressive."""

    STRONG_BUY = "STRONG_BUY"
    BUY = "BUY"
    HOLD = "HOLD"
    SELL = "SELL"
    STRONG_SELL = "STRONG_SELL"


class RiskFactor(StrEnum):
    """Threshold-based risk flags.  ``NO_MAJOR_RISK`` is emitted alone."""

    HIGH_VOLATILITY = "high volatility"
    EXTREME_OVERBOUGHT = "extreme overbought"
    EXTREME_OVERSOLD = "extreme oversold"
    UPPER_BAND_BREACH = "upper band breach"
    LOWER_BAND_BREACH = "lower band breach"
    HISTORIC_HIGH_PRICE = "historic high-price range"
    SHARP_TREND_REVERSAL = "sharp trend reversal"
    NO_MAJOR_RISK = "no major risk"


# Most aggressive first; used for ordering and monotonicity checks.
RECOMMENDATION_ORDER: tuple[Recommendation, ...] = (
    Recommendation.STRONG_BUY,
    Recommendation.BUY,
    Recommendation.HOLD,
    Recommendation.SELL,
    Recommendation.STRONG_SELL,
)
