"""
Trend estimator: ordinary-least-squares slope of price against recency index.

The x axis is the position in the newest-first series (0 = most recent),
not calendar time, so irregular sampling is ignored.  Only the most recent
``TREND_WINDOW`` points are used.

Sign convention: the slope is reported as computed against that index.  The
sentiment vote, the scorer and ``classify_trend()`` all treat slope < -0.5
as "falling" (favourable to buyers) and slope > 0.5 as "rising".
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from price_analyzer.taxonomy.signal_taxonomy import TrendDirection

TREND_WINDOW = 30
TREND_DEAD_BAND = 0.5


def trend_slope(prices: Sequence[Decimal], window: int = TREND_WINDOW) -> float:
    """OLS slope over the most recent ``min(len(prices), window)`` prices.

    Returns 0.0 for fewer than two points or a zero denominator.
    """
    if len(prices) < 2:
        return 0.0

    n = min(len(prices), window)
    ys = [float(p) for p in prices[:n]]
    xs = range(n)

    sum_x = float(sum(xs))
    sum_y = math.fsum(ys)
    sum_xy = math.fsum(x * y for x, y in zip(xs, ys))
    sum_xx = float(sum(x * x for x in xs))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0
    return (n * sum_xy - sum_x * sum_y) / denominator


def classify_trend(slope: float) -> TrendDirection:
    if slope > TREND_DEAD_BAND:
        return TrendDirection.RISING
    if slope < -TREND_DEAD_BAND:
        return TrendDirection.FALLING
    return TrendDirection.FLAT
