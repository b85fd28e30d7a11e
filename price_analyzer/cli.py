"""
Price Analyzer — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate the price CSV.
  4. Run the analysis engine.
  5. Report result to stdout (and optionally export to disk).

Install and run::

    pip install -e .
    price-analyzer --help
    price-analyzer validate-config
    price-analyzer analyze cabbage --file data/raw/prices.csv
    price-analyzer analyze-market --market "Gwangjang Market" --csv-out
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="price-analyzer",
    help="Grocery price analyzer — technical analysis of item price histories.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from price_analyzer.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from price_analyzer.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_rows_or_exit(prices_file: Optional[str], config):
    """Parse the price CSV, exiting with code 1 on any parse failure."""
    from price_analyzer.ingestion.price_csv import parse_price_csv

    path = Path(prices_file) if prices_file else Path(config.data.prices_file)
    try:
        return parse_price_csv(path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] CSV parse failed:\n{exc}", err=True)
        raise typer.Exit(code=1)


def _default_output(config, stem: str, suffix: str) -> Path:
    return Path(config.output.output_dir) / f"{stem}_{date.today().isoformat()}{suffix}"


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Prices file:      {config.data.prices_file}")
    typer.echo(f"  Default market:   {config.data.default_market or '(all)'}")
    typer.echo(f"  Output dir:       {config.output.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("analyze")
def analyze(
    item_name: str = typer.Argument(..., help="Item to analyze (exact name)."),
    prices_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Price CSV (default: config.data.prices_file).",
    ),
    market: Optional[str] = typer.Option(
        None,
        "--market",
        "-m",
        help="Only use rows from this market.",
    ),
    json_out: bool = typer.Option(
        False,
        "--json-out",
        help="Also write the report as JSON under config.output.output_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Analyze the price history of a single item.

    Exits with code 1 when the item has no usable price rows.
    """
    from price_analyzer.analysis.batch import group_rows_by_item
    from price_analyzer.analysis.engine import analyze_price_history
    from price_analyzer.reporting.export import export_to_json, report_to_dict
    from price_analyzer.reporting.formatters import format_report

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    rows = _load_rows_or_exit(prices_file, config)
    groups = group_rows_by_item(rows, market_name=market or config.data.default_market)

    report = analyze_price_history(item_name, groups.get(item_name.strip(), []))
    if report is None:
        typer.echo(f"[ERROR] No usable price history for '{item_name}'.", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_report(report))

    if json_out:
        out = export_to_json(
            report_to_dict(report), _default_output(config, "analysis", ".json")
        )
        typer.echo(f"\n  Written: {out}")


@app.command("analyze-market")
def analyze_market_cmd(
    prices_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Price CSV (default: config.data.prices_file).",
    ),
    market: Optional[str] = typer.Option(
        None,
        "--market",
        "-m",
        help="Only analyze rows from this market (default: config.data.default_market).",
    ),
    csv_out: bool = typer.Option(
        False,
        "--csv-out",
        help="Write one flat row per item to a CSV under config.output.output_dir.",
    ),
    json_out: bool = typer.Option(
        False,
        "--json-out",
        help="Write all reports as a JSON array under config.output.output_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Analyze every item in the price CSV (optionally one market only)."""
    from price_analyzer.analysis.batch import analyze_market
    from price_analyzer.reporting.export import (
        REPORT_EXPORT_COLUMNS,
        export_to_csv,
        export_to_json,
        flatten_report_for_export,
        report_to_dict,
    )
    from price_analyzer.reporting.formatters import format_report_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    market_name = market or config.data.default_market
    rows = _load_rows_or_exit(prices_file, config)
    reports = analyze_market(rows, market_name=market_name)

    typer.echo(format_report_table(reports, market_name))

    if csv_out:
        out = export_to_csv(
            [flatten_report_for_export(r) for r in reports],
            _default_output(config, "market_analysis", ".csv"),
            fieldnames=REPORT_EXPORT_COLUMNS,
        )
        typer.echo(f"\n  Written: {out}")

    if json_out:
        out = export_to_json(
            [report_to_dict(r) for r in reports],
            _default_output(config, "market_analysis", ".json"),
        )
        typer.echo(f"\n  Written: {out}")


if __name__ == "__main__":
    app()
