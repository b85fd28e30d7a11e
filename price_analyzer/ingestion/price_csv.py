"""
CSV parser for local price history files.

Format — comma delimited, with a header row.
Required columns:
  item_name, date, price

Optional columns:
  market_name   (empty string → None)

Date format:
  date → YYYY-MM-DD

Price values are kept as raw text on ``MarketPriceRow`` and parsed by
``parse_price_text`` (thousands separators and currency suffixes such as
``"3,980원"`` are accepted).  Rows with a blank name or zero price are NOT
rejected here; the batch analyzer filters them so dirty exports still load.
"""

from __future__ import annotations

import csv
import logging
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from price_analyzer.models.observation import MarketPriceRow

logger = logging.getLogger(__name__)

REQUIRED_CSV_COLUMNS = frozenset({"item_name", "date", "price"})


def parse_price_csv(path: Path) -> list[MarketPriceRow]:
    """Parse a CSV file of item prices into :class:`MarketPriceRow` objects.

    All rows are validated before any are returned. If **any** row fails,
    a single :class:`ValueError` is raised listing the first 10 failures.

    Args:
        path: Path to the CSV file (must exist).

    Returns:
        List of validated rows in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If required columns are missing or any row fails validation.
    """
    if not path.exists():
        raise FileNotFoundError(f"Price CSV file not found: {path}")

    with open(path, encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None:
            raise ValueError(f"CSV file is empty or has no header row: {path}")

        actual_cols = {c.strip() for c in reader.fieldnames}
        missing = REQUIRED_CSV_COLUMNS - actual_cols
        if missing:
            raise ValueError(
                f"CSV missing required columns: {sorted(missing)}\n"
                f"Found columns: {sorted(actual_cols)}"
            )

        rows = list(reader)

    if not rows:
        logger.warning("Price CSV is empty (header only): %s", path)
        return []

    parsed: list[MarketPriceRow] = []
    errors: list[tuple[int, str]] = []

    for i, row in enumerate(rows):
        line_no = i + 2  # 1-based, skip header row
        try:
            parsed.append(_row_to_price_row(row))
        except (ValueError, ValidationError) as exc:
            errors.append((line_no, str(exc)))

    if errors:
        max_shown = 10
        detail = "\n".join(f"  Row {ln}: {msg}" for ln, msg in errors[:max_shown])
        suffix = f"\n  … and {len(errors) - max_shown} more" if len(errors) > max_shown else ""
        raise ValueError(
            f"{len(errors)} row(s) failed validation in {path.name}:\n{detail}{suffix}"
        )

    logger.info("Parsed %d price rows from %s", len(parsed), path.name)
    return parsed


# ── Private helpers ────────────────────────────────────────────────────────────

def _row_to_price_row(row: dict[str, str]) -> MarketPriceRow:
    """Convert a CSV row dict to a validated :class:`MarketPriceRow`."""
    # DictReader files surplus cells under the key None.
    clean = {k.strip(): (v or "").strip() for k, v in row.items() if k is not None}

    raw_date = clean.get("date", "")
    if not raw_date:
        raise ValueError("date is required")
    try:
        observed_on = date.fromisoformat(raw_date)
    except ValueError:
        raise ValueError(f"invalid date '{raw_date}', expected YYYY-MM-DD") from None

    return MarketPriceRow(
        item_name=clean.get("item_name", ""),
        market_name=clean.get("market_name") or None,
        observed_on=observed_on,
        price_text=clean.get("price", ""),
    )
