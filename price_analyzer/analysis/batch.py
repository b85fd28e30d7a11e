"""
Market-wide batch analysis.

Takes the raw ``MarketPriceRow`` records of one or more markets, groups them
by item and runs ``analyze_price_history`` for every item.

Row filtering (applied before grouping)
---------------------------------------
- Rows whose ``item_name`` is blank are dropped.
- Rows whose parsed price is zero are dropped; this covers blank and
  unparsable price text as well as a literal ``"0"``.
- When ``market_name`` is given, rows from other markets are dropped.

Items keep the order in which they first appear in the input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from price_analyzer.analysis.engine import analyze_price_history
from price_analyzer.models.observation import MarketPriceRow, PriceObservation
from price_analyzer.models.report import PriceAnalysisReport

logger = logging.getLogger(__name__)


def group_rows_by_item(
    rows: Iterable[MarketPriceRow],
    market_name: Optional[str] = None,
) -> dict[str, list[PriceObservation]]:
    """Group usable rows into per-item observation lists.

    Args:
        rows:        Raw market rows in any order.
        market_name: Optional market filter (exact match).

    Returns:
        Insertion-ordered dict of item name -> observations.
    """
    groups: dict[str, list[PriceObservation]] = {}
    dropped = 0
    for row in rows:
        if market_name is not None and row.market_name != market_name:
            continue
        if not row.item_name or row.price == 0:
            dropped += 1
            continue
        groups.setdefault(row.item_name, []).append(row.to_observation())

    if dropped:
        logger.debug("Dropped %d row(s) with a blank item name or zero price.", dropped)
    return groups


def analyze_market(
    rows: Iterable[MarketPriceRow],
    market_name: Optional[str] = None,
) -> list[PriceAnalysisReport]:
    """Analyze every item found in ``rows``.

    Returns:
        One report per item with at least one usable observation, in
        first-seen item order.
    """
    groups = group_rows_by_item(rows, market_name=market_name)

    reports: list[PriceAnalysisReport] = []
    for item_name, observations in groups.items():
        report = analyze_price_history(item_name, observations)
        if report is not None:
            reports.append(report)

    logger.info(
        "Market %s: analyzed %d item(s), %d observation(s).",
        market_name or "(all)",
        len(reports),
        sum(len(obs) for obs in groups.values()),
    )
    return reports
