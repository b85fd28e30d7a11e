"""Series preparation: order observations newest-first before any calculation."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from price_analyzer.models.observation import PriceObservation


def prepare_series(observations: Iterable[PriceObservation]) -> list[PriceObservation]:
    """Return the observations sorted by date, most recent first.

    Observations sharing a date keep their input order (the sort is stable);
    nothing is deduplicated or filtered.
    """
    return sorted(observations, key=lambda o: o.observed_on, reverse=True)


def series_prices(series: list[PriceObservation]) -> list[Decimal]:
    """Prices of a prepared series, index 0 = most recent."""
    return [o.price for o in series]
