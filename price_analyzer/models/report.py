"""
Price analysis output models.

``BollingerBands`` is the band envelope computed for one analysis.

``PriceAnalysisReport`` is the sole output of the analysis engine: every
statistic, indicator, forecast, risk flag and the final recommendation for a
single item.  It is produced in one pass by ``analysis.engine.build_report``
and is frozen — nothing downstream may patch individual fields.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from price_analyzer.taxonomy.signal_taxonomy import (
    BandPosition,
    MarketSentiment,
    PriceLevel,
    Recommendation,
    RiskFactor,
    TrendDirection,
)


class BollingerBands(BaseModel):
    """Bollinger(20, 2σ) envelope and the current price's position in it.

    Attributes:
        upper_band: ``middle_band + 2σ``.
        middle_band: 20-point moving average (full average for short series).
        lower_band: ``middle_band - 2σ``.
        position: Where the current price sits relative to the bands.
    """

    model_config = ConfigDict(frozen=True)

    upper_band: Decimal
    middle_band: Decimal
    lower_band: Decimal
    position: BandPosition

    @model_validator(mode="after")
    def validate_band_order(self) -> "BollingerBands":
        if not self.lower_band <= self.middle_band <= self.upper_band:
            raise ValueError(
                f"Bands out of order: lower={self.lower_band}, "
                f"middle={self.middle_band}, upper={self.upper_band}."
            )
        return self


class PriceAnalysisReport(BaseModel):
    """Technical-analysis report for one item's price history.

    Attributes:
        name: Item name the history belongs to.
        observation_count: Number of observations analyzed.
        latest_date: Date of the most recent observation.
        current_price: Price of the most recent observation.
        average_price: Full-series mean, 2dp half-up.
        median_price: Full-series median.
        min_price: Lowest observed price.
        max_price: Highest observed price.
        moving_average_7d: 7-point moving average (full average fallback).
        moving_average_30d: 30-point moving average (full average fallback).
        volatility: Population std-dev of the full series.
        trend_slope: OLS slope over the most recent ≤30 points (index 0 = newest).
        trend_direction: Display label for ``trend_slope``.
        price_level: LOW / MEDIUM / HIGH within [min, max].
        rsi_14: Simplified 14-period RSI in [0, 100].
        bollinger_bands: Bollinger(20, 2) envelope.
        seasonality_score: Month-of-year relative price score in [0, 1].
        market_sentiment: Result of the signal vote.
        predicted_price_7d: Point forecast 7 days ahead.
        predicted_price_30d: Point forecast 30 days ahead.
        risk_factors: Ordered risk flags (never empty).
        recommendation: 5-level grade derived from ``confidence``.
        confidence: Weighted score / 100, in [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    name: str
    observation_count: int
    latest_date: date
    current_price: Decimal
    average_price: Decimal
    median_price: Decimal
    min_price: Decimal
    max_price: Decimal
    moving_average_7d: Decimal
    moving_average_30d: Decimal
    volatility: float
    trend_slope: float
    trend_direction: TrendDirection
    price_level: PriceLevel
    rsi_14: float
    bollinger_bands: BollingerBands
    seasonality_score: float
    market_sentiment: MarketSentiment
    predicted_price_7d: Decimal
    predicted_price_30d: Decimal
    risk_factors: tuple[RiskFactor, ...]
    recommendation: Recommendation
    confidence: float

    @field_validator("observation_count")
    @classmethod
    def validate_observation_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"observation_count must be >= 1, got {v}.")
        return v

    @field_validator("rsi_14")
    @classmethod
    def validate_rsi_range(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"rsi_14 must be in [0, 100], got {v}.")
        return v

    @field_validator("seasonality_score")
    @classmethod
    def validate_seasonality_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"seasonality_score must be in [0, 1], got {v}.")
        return v

    @field_validator("confidence")
    @classmethod
    def validate_confidence_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"confidence must be in [0, 1], got {v}.")
        return v

    @field_validator("risk_factors")
    @classmethod
    def validate_risk_factors_not_empty(
        cls, v: tuple[RiskFactor, ...]
    ) -> tuple[RiskFactor, ...]:
        if not v:
            raise ValueError("risk_factors must contain at least one entry.")
        return v

    @model_validator(mode="after")
    def validate_price_range(self) -> "PriceAnalysisReport":
        if self.min_price > self.max_price:
            raise ValueError(
                f"min_price ({self.min_price}) must be <= max_price ({self.max_price})."
            )
        return self
