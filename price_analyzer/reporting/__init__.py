"""
price_analyzer.reporting — Report formatting and export.

It does NOT compute anything — reports come from ``analysis.engine``.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — CSV/JSON flat-file export helpers.
"""
