"""
Shared pytest fixtures for the price analyzer test suite.

Provides:
  - ``make_series``: factory building newest-first daily observations from a
    list of prices.
  - Sample series with hand-computed expectations used across modules.
  - ``sample_report``: a report produced by the real engine.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Callable

import pytest

from price_analyzer.analysis.engine import analyze_price_history
from price_analyzer.models.observation import MarketPriceRow, PriceObservation
from price_analyzer.models.report import PriceAnalysisReport

SeriesFactory = Callable[..., list[PriceObservation]]


def build_series(
    prices: list[float | int | str | Decimal],
    latest: date = date(2025, 3, 20),
) -> list[PriceObservation]:
    """Daily observations; ``prices[0]`` is dated ``latest``, each next one a day earlier."""
    return [
        PriceObservation(observed_on=latest - timedelta(days=i), price=Decimal(str(p)))
        for i, p in enumerate(prices)
    ]


@pytest.fixture
def make_series() -> SeriesFactory:
    return build_series


@pytest.fixture
def three_point_series() -> list[PriceObservation]:
    """[(d0, 100), (d-1, 90), (d-2, 80)]; the newest price is the highest."""
    return build_series([100, 90, 80])


@pytest.fixture
def flat_series() -> list[PriceObservation]:
    """20 identical prices of 500, all dated in March 2025."""
    return build_series([500] * 20)


@pytest.fixture
def sample_report(three_point_series) -> PriceAnalysisReport:
    report = analyze_price_history("cabbage", three_point_series)
    assert report is not None
    return report


@pytest.fixture
def sample_market_rows() -> list[MarketPriceRow]:
    """Two items across two markets plus rows the batch analyzer must drop."""
    return [
        MarketPriceRow(item_name="cabbage", market_name="east", observed_on=date(2025, 3, 3), price_text="3,980원"),
        MarketPriceRow(item_name="cabbage", market_name="east", observed_on=date(2025, 3, 2), price_text="4,100원"),
        MarketPriceRow(item_name="apple", market_name="west", observed_on=date(2025, 3, 3), price_text="1200"),
        MarketPriceRow(item_name="cabbage", market_name="west", observed_on=date(2025, 3, 1), price_text="4,300"),
        MarketPriceRow(item_name="  ", market_name="east", observed_on=date(2025, 3, 3), price_text="999"),
        MarketPriceRow(item_name="radish", market_name="east", observed_on=date(2025, 3, 3), price_text="0"),
        MarketPriceRow(item_name="radish", market_name="east", observed_on=date(2025, 3, 2), price_text=""),
    ]
