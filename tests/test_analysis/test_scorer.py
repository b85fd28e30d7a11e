"""
Tests for price_analyzer/analysis/scorer.py.

What we test
------------
compute_score():
  - Each factor awards the documented points, including boundary values.
  - Best case totals 100 (confidence 1.0); worst case totals 4.

ScoreComponents:
  - total is the plain sum; confidence is total / 100.

determine_recommendation():
  - Threshold edges at 0.80 / 0.65 / 0.35 / 0.20 (inclusive).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from price_analyzer.analysis.scorer import (
    ScoreComponents,
    compute_score,
    determine_recommendation,
)
from price_analyzer.taxonomy.signal_taxonomy import (
    BandPosition,
    PriceLevel,
    Recommendation,
)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _score(
    level: PriceLevel = PriceLevel.MEDIUM,
    slope: float = 0.0,
    current: str = "100",
    ma30: str = "100",
    rsi: float = 50.0,
    position: BandPosition = BandPosition.BETWEEN,
    seasonality: float = 0.5,
) -> ScoreComponents:
    return compute_score(
        level=level,
        trend_slope=slope,
        current=Decimal(current),
        moving_average_30d=Decimal(ma30),
        rsi_14=rsi,
        band_position=position,
        seasonality_score=seasonality,
    )


# ── compute_score ─────────────────────────────────────────────────────────────

class TestComputeScore:
    def test_best_case_is_full_marks(self):
        c = _score(
            level=PriceLevel.LOW,
            slope=-1.0,
            current="90",
            rsi=20.0,
            position=BandPosition.BELOW_LOWER,
            seasonality=0.8,
        )
        assert c.total == 100.0
        assert c.confidence == 1.0

    def test_worst_case_keeps_moving_average_floor(self):
        c = _score(
            level=PriceLevel.HIGH,
            slope=1.0,
            current="110",
            rsi=80.0,
            position=BandPosition.ABOVE_UPPER,
            seasonality=0.2,
        )
        assert c.total == 4.0
        assert c.confidence == pytest.approx(0.04)

    @pytest.mark.parametrize(
        ("level", "points"),
        [(PriceLevel.LOW, 25.0), (PriceLevel.MEDIUM, 12.0), (PriceLevel.HIGH, 0.0)],
    )
    def test_price_level_points(self, level, points):
        assert _score(level=level).price_level_points == points

    @pytest.mark.parametrize(
        ("slope", "points"),
        [(-0.51, 20.0), (-0.5, 8.0), (0.0, 8.0), (0.49, 8.0), (0.5, 0.0), (3.0, 0.0)],
    )
    def test_trend_points(self, slope, points):
        assert _score(slope=slope).trend_points == points

    def test_moving_average_points(self):
        assert _score(current="99.99").moving_avg_points == 20.0
        assert _score(current="100").moving_avg_points == 4.0
        assert _score(current="150").moving_avg_points == 4.0

    @pytest.mark.parametrize(
        ("rsi", "points"),
        [(29.9, 15.0), (30.0, 5.0), (70.0, 5.0), (70.1, 0.0)],
    )
    def test_rsi_points(self, rsi, points):
        assert _score(rsi=rsi).rsi_points == points

    @pytest.mark.parametrize(
        ("position", "points"),
        [
            (BandPosition.BELOW_LOWER, 10.0),
            (BandPosition.BETWEEN, 5.0),
            (BandPosition.ABOVE_UPPER, 0.0),
        ],
    )
    def test_band_points(self, position, points):
        assert _score(position=position).band_points == points

    @pytest.mark.parametrize(
        ("seasonality", "points"),
        [(1.0, 10.0), (0.71, 10.0), (0.7, 5.0), (0.31, 5.0), (0.3, 0.0), (0.0, 0.0)],
    )
    def test_seasonality_points(self, seasonality, points):
        assert _score(seasonality=seasonality).seasonality_points == points


class TestScoreComponents:
    def test_total_is_sum_of_points(self):
        c = ScoreComponents(25.0, 20.0, 4.0, 5.0, 5.0, 5.0)
        assert c.total == 64.0
        assert c.confidence == pytest.approx(0.64)

    def test_is_frozen(self):
        c = ScoreComponents(0.0, 0.0, 4.0, 0.0, 0.0, 0.0)
        with pytest.raises(AttributeError):
            c.rsi_points = 15.0  # type: ignore[misc]


# ── determine_recommendation ─────────────────────────────────────────────────

class TestDetermineRecommendation:
    @pytest.mark.parametrize(
        ("confidence", "expected"),
        [
            (1.0, Recommendation.STRONG_BUY),
            (0.80, Recommendation.STRONG_BUY),
            (0.79, Recommendation.BUY),
            (0.65, Recommendation.BUY),
            (0.64, Recommendation.HOLD),
            (0.35, Recommendation.HOLD),
            (0.34, Recommendation.SELL),
            (0.20, Recommendation.SELL),
            (0.19, Recommendation.STRONG_SELL),
            (0.0, Recommendation.STRONG_SELL),
        ],
    )
    def test_thresholds(self, confidence, expected):
        assert determine_recommendation(confidence) is expected

    def test_score_derived_confidences_hit_thresholds_exactly(self):
        # 80 and 65 points are reachable sums; integer / 100 must not drift below.
        assert determine_recommendation(80 / 100) is Recommendation.STRONG_BUY
        assert determine_recommendation(65 / 100) is Recommendation.BUY
        assert determine_recommendation(35 / 100) is Recommendation.HOLD
        assert determine_recommendation(20 / 100) is Recommendation.SELL
