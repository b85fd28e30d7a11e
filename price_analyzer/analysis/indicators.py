"""
Oscillator-style indicators: price level, RSI(14), Bollinger(20, 2), seasonality.

Every indicator has a deterministic neutral fallback instead of raising:

    price_level        -> MEDIUM when max == min
    rsi                -> 50.0 with fewer than period + 1 points
    bollinger_bands    -> window shrinks to the series length
    seasonality_score  -> 0.5 with fewer than 12 points or no data for the
                          current month

RSI flat-series quirk
---------------------
The RSI short-circuits to 100.0 whenever the average loss is zero, which
includes a perfectly flat series (no gains either), so a flat series
reports 100.0.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from decimal import Decimal

from price_analyzer.analysis.statistics import (
    divide_half_up,
    moving_average,
    windowed_std_dev,
)
from price_analyzer.models.observation import PriceObservation
from price_analyzer.models.report import BollingerBands
from price_analyzer.taxonomy.signal_taxonomy import BandPosition, PriceLevel

RSI_PERIOD = 14
RSI_NEUTRAL = 50.0

BOLLINGER_PERIOD = 20
BOLLINGER_K = 2

SEASONALITY_MIN_OBS = 12
SEASONALITY_NEUTRAL = 0.5

_LOW_FRACTION = Decimal("0.33")
_HIGH_FRACTION = Decimal("0.67")


def price_level(current: Decimal, low: Decimal, high: Decimal) -> PriceLevel:
    """Classify ``current`` into the bottom, middle or top third of [low, high]."""
    price_range = high - low
    if price_range == 0:
        return PriceLevel.MEDIUM

    low_threshold = low + price_range * _LOW_FRACTION
    high_threshold = low + price_range * _HIGH_FRACTION

    if current < low_threshold:
        return PriceLevel.LOW
    if current > high_threshold:
        return PriceLevel.HIGH
    return PriceLevel.MEDIUM


def rsi(prices: Sequence[Decimal], period: int = RSI_PERIOD) -> float:
    """Simplified relative strength index over the last ``period`` deltas.

    Delta ``i`` is ``prices[i-1] - prices[i]`` (newer minus older).  Gains and
    losses are plain sums divided by ``period``; no Wilder smoothing.
    """
    if len(prices) < period + 1:
        return RSI_NEUTRAL

    gain = 0.0
    loss = 0.0
    for i in range(1, period + 1):
        change = float(prices[i - 1]) - float(prices[i])
        if change > 0:
            gain += change
        else:
            loss += abs(change)

    avg_gain = gain / period
    avg_loss = loss / period
    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def bollinger_bands(
    prices: Sequence[Decimal],
    period: int = BOLLINGER_PERIOD,
    k: int = BOLLINGER_K,
) -> BollingerBands:
    """Bollinger envelope around the ``period``-point moving average."""
    middle = moving_average(prices, period)
    std_dev = windowed_std_dev(prices, period)
    width = Decimal(repr(k * std_dev))

    upper = middle + width
    lower = middle - width

    current = prices[0]
    if current > upper:
        position = BandPosition.ABOVE_UPPER
    elif current < lower:
        position = BandPosition.BELOW_LOWER
    else:
        position = BandPosition.BETWEEN

    return BollingerBands(
        upper_band=upper,
        middle_band=middle,
        lower_band=lower,
        position=position,
    )


def seasonality_score(series: Sequence[PriceObservation]) -> float:
    """Score how the current month's prices compare with other months.

    Each calendar month present in the series gets its mean price (2dp).
    The current month's mean is divided by the mean of all monthly means and
    mapped onto [0, 1] with ``clamp((ratio - 0.5) * 2, 0, 1)``; a ratio of
    1.0 (an average month) scores 1.0, a month at half the usual price 0.0.

    Args:
        series: Newest-first observations.

    Returns:
        Score in [0, 1]; 0.5 when there is too little data.
    """
    if len(series) < SEASONALITY_MIN_OBS:
        return SEASONALITY_NEUTRAL

    by_month: dict[int, list[Decimal]] = defaultdict(list)
    for obs in series:
        by_month[obs.observed_on.month].append(obs.price)

    monthly_avg = {
        month: divide_half_up(sum(prices, Decimal(0)), len(prices))
        for month, prices in by_month.items()
    }

    current_month = series[0].observed_on.month
    if current_month not in monthly_avg:
        return SEASONALITY_NEUTRAL

    overall = divide_half_up(sum(monthly_avg.values(), Decimal(0)), len(monthly_avg))
    if overall == 0:
        return SEASONALITY_NEUTRAL

    ratio = float(divide_half_up(monthly_avg[current_month], overall, places=4))
    return min(1.0, max(0.0, (ratio - 0.5) * 2))
