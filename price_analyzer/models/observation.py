"""
Price observation models — engine input and raw market rows.

Two layers:
  1. ``MarketPriceRow``   — a row exactly as read from a market price table;
                            the price is still the raw text (e.g. ``"3,980원"``).
  2. ``PriceObservation`` — a ``{date, price}`` pair fed to the analysis engine.

Both models are frozen (immutable) after construction.  The engine sorts its
input but never mutates an observation.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_price_text(text: Optional[str]) -> Decimal:
    """Convert a raw price string to ``Decimal``.

    Every character other than digits and ``.`` is dropped first, so
    ``"1,250원"`` parses as ``1250``.  Blank or unparsable text yields
    ``Decimal(0)``, which the batch analyzer treats as "no price".
    """
    if text is None or not text.strip():
        return Decimal(0)
    cleaned = _NON_NUMERIC.sub("", text)
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return Decimal(0)


class PriceObservation(BaseModel):
    """A single dated price for one item.

    Attributes:
        observed_on: Calendar date of the observation.
        price: Observed price.  Callers are expected to supply positive
            values only; the model does not re-validate them.
    """

    model_config = ConfigDict(frozen=True)

    observed_on: date
    price: Decimal


class MarketPriceRow(BaseModel):
    """One raw price row from a market price table.

    Attributes:
        item_name: Item display name; may be blank in dirty source data.
        market_name: Market the price was surveyed at, or ``None``.
        observed_on: Survey date.
        price_text: Raw price string as published.
    """

    model_config = ConfigDict(frozen=True)

    item_name: str
    market_name: Optional[str] = None
    observed_on: date
    price_text: str = ""

    @field_validator("item_name")
    @classmethod
    def strip_item_name(cls, v: str) -> str:
        return v.strip()

    @field_validator("market_name")
    @classmethod
    def blank_market_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def price(self) -> Decimal:
        """Parsed price; ``Decimal(0)`` when the text is blank or unparsable."""
        return parse_price_text(self.price_text)

    def to_observation(self) -> PriceObservation:
        return PriceObservation(observed_on=self.observed_on, price=self.price)
