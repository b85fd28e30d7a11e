"""
Descriptive statistics, moving averages and standard deviations.

All inputs are price lists ordered newest-first (index 0 = current price),
as produced by ``series.series_prices()``.

Rounding
--------
Means that stay in money terms (average, median of an even count, moving
averages) are ``Decimal`` rounded to 2 fractional digits, ROUND_HALF_UP.
Dispersion figures (volatility, windowed std-dev) are plain floats.

Two standard deviations
-----------------------
``volatility()`` is taken over the *entire* series around the full average.
``windowed_std_dev()`` is taken over the most recent ``period`` points around
their own moving average and is what the Bollinger bands use.  The two are
kept separate; the risk flags use the full-series figure.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext


def divide_half_up(numerator: Decimal, denominator: Decimal | int, places: int = 2) -> Decimal:
    """Divide and round the quotient to ``places`` digits, half-up."""
    with localcontext() as ctx:
        ctx.prec = 60
        quotient = Decimal(numerator) / Decimal(denominator)
        return quotient.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def current_price(prices: Sequence[Decimal]) -> Decimal:
    return prices[0]


def average_price(prices: Sequence[Decimal]) -> Decimal:
    """Full-series mean, 2dp half-up."""
    return divide_half_up(sum(prices, Decimal(0)), len(prices))


def median_price(prices: Sequence[Decimal]) -> Decimal:
    """Median; the mean of the two central values (2dp) for an even count."""
    ordered = sorted(prices)
    size = len(ordered)
    mid = size // 2
    if size % 2 == 0:
        return divide_half_up(ordered[mid - 1] + ordered[mid], 2)
    return ordered[mid]


def min_price(prices: Sequence[Decimal]) -> Decimal:
    return min(prices)


def max_price(prices: Sequence[Decimal]) -> Decimal:
    return max(prices)


def moving_average(prices: Sequence[Decimal], period: int) -> Decimal:
    """Mean of the ``period`` most recent prices.

    Falls back to the full-series average when fewer than ``period`` prices
    are available.
    """
    if len(prices) < period:
        return average_price(prices)
    return divide_half_up(sum(prices[:period], Decimal(0)), period)


def volatility(prices: Sequence[Decimal]) -> float:
    """Population standard deviation of the full series around its average."""
    avg = average_price(prices)
    squared = [float(p - avg) ** 2 for p in prices]
    if not squared:
        return 0.0
    return math.sqrt(math.fsum(squared) / len(squared))


def windowed_std_dev(prices: Sequence[Decimal], period: int) -> float:
    """Standard deviation of the most recent ``period`` prices.

    The window shrinks to the series length for short series.  Deviations
    are measured from ``moving_average(prices, period)``.
    """
    period = min(period, len(prices))
    if period == 0:
        return 0.0
    avg = moving_average(prices, period)
    squared = [float(p - avg) ** 2 for p in prices[:period]]
    return math.sqrt(math.fsum(squared) / len(squared))
