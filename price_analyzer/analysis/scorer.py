"""
Recommendation scoring: converts indicator outputs into a 0–100 buy score,
a confidence in [0, 1] and one of five recommendation grades.

Score formula (sum of fixed points, maximum 100)
------------------------------------------------
    price_level_points   25   LOW 25 | MEDIUM 12 | HIGH 0
    trend_points         20   slope < -0.5 -> 20 | slope < 0.5 -> 8 | else 0
    moving_avg_points    20   current < MA30 -> 20 | else 4
    rsi_points           15   RSI < 30 -> 15 | RSI > 70 -> 0 | else 5
    band_points          10   BELOW_LOWER 10 | BETWEEN 5 | ABOVE_UPPER 0
    seasonality_points   10   score > 0.7 -> 10 | score > 0.3 -> 5 | else 0

    confidence = total / 100

Grade thresholds (first match wins)
-----------------------------------
    confidence >= 0.80 -> STRONG_BUY
    confidence >= 0.65 -> BUY
    confidence >= 0.35 -> HOLD
    confidence >= 0.20 -> SELL
    otherwise          -> STRONG_SELL
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from price_analyzer.taxonomy.signal_taxonomy import (
    BandPosition,
    PriceLevel,
    Recommendation,
)

MAX_SCORE = 100.0

_LEVEL_POINTS: dict[PriceLevel, float] = {
    PriceLevel.LOW:    25.0,
    PriceLevel.MEDIUM: 12.0,
    PriceLevel.HIGH:    0.0,
}

_BAND_POINTS: dict[BandPosition, float] = {
    BandPosition.BELOW_LOWER: 10.0,
    BandPosition.BETWEEN:      5.0,
    BandPosition.ABOVE_UPPER:  0.0,
}

# (minimum confidence, grade), most aggressive first
_GRADE_THRESHOLDS: tuple[tuple[float, Recommendation], ...] = (
    (0.80, Recommendation.STRONG_BUY),
    (0.65, Recommendation.BUY),
    (0.35, Recommendation.HOLD),
    (0.20, Recommendation.SELL),
)


@dataclass(frozen=True)
class ScoreComponents:
    """Points awarded by each scoring factor.

    Attributes:
        price_level_points: 0–25, from the LOW/MEDIUM/HIGH classification.
        trend_points:       0–20, from the trend slope.
        moving_avg_points:  4 or 20, current price vs the 30-point MA.
        rsi_points:         0–15, from RSI(14).
        band_points:        0–10, from the Bollinger position.
        seasonality_points: 0–10, from the seasonality score.
    """

    price_level_points: float
    trend_points:       float
    moving_avg_points:  float
    rsi_points:         float
    band_points:        float
    seasonality_points: float

    @property
    def total(self) -> float:
        return (
            self.price_level_points
            + self.trend_points
            + self.moving_avg_points
            + self.rsi_points
            + self.band_points
            + self.seasonality_points
        )

    @property
    def confidence(self) -> float:
        return self.total / MAX_SCORE


def compute_score(
    level: PriceLevel,
    trend_slope: float,
    current: Decimal,
    moving_average_30d: Decimal,
    rsi_14: float,
    band_position: BandPosition,
    seasonality_score: float,
) -> ScoreComponents:
    """Award points for each factor.  See the module docstring for the table."""
    if trend_slope < -0.5:
        trend_points = 20.0
    elif trend_slope < 0.5:
        trend_points = 8.0
    else:
        trend_points = 0.0

    moving_avg_points = 20.0 if current < moving_average_30d else 4.0

    if rsi_14 < 30:
        rsi_points = 15.0
    elif rsi_14 > 70:
        rsi_points = 0.0
    else:
        rsi_points = 5.0

    if seasonality_score > 0.7:
        seasonality_points = 10.0
    elif seasonality_score > 0.3:
        seasonality_points = 5.0
    else:
        seasonality_points = 0.0

    return ScoreComponents(
        price_level_points=_LEVEL_POINTS[level],
        trend_points=trend_points,
        moving_avg_points=moving_avg_points,
        rsi_points=rsi_points,
        band_points=_BAND_POINTS[band_position],
        seasonality_points=seasonality_points,
    )


def determine_recommendation(confidence: float) -> Recommendation:
    """Map a confidence in [0, 1] to a grade (first threshold met wins)."""
    for threshold, grade in _GRADE_THRESHOLDS:
        if confidence >= threshold:
            return grade
    return Recommendation.STRONG_SELL
