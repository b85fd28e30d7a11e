"""
Tests for price_analyzer.config — layered TOML + env configuration.

Covers:
  - load_config(): explicit path, local.toml merge, env overrides,
    missing file, invalid log level
  - _deep_merge() nested behaviour
  - committed config/default.toml loads cleanly
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from price_analyzer.config import AppConfig, _deep_merge, load_config

_ENV_VARS = (
    "PRICE_ANALYZER_PRICES_FILE",
    "PRICE_ANALYZER_OUTPUT_DIR",
    "PRICE_ANALYZER_LOG_LEVEL",
    "PRICE_ANALYZER_DEBUG",
)

BASE_TOML = """
[project]
debug = false

[data]
prices_file = "prices/base.csv"

[output]
output_dir = "out"

[logging]
level = "info"
log_file = ""
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _write_config(tmp_path: Path, content: str = BASE_TOML) -> Path:
    p = tmp_path / "default.toml"
    p.write_text(content, encoding="utf-8")
    return p


class TestLoadConfig:
    def test_values_from_file(self, tmp_path):
        cfg = load_config(_write_config(tmp_path))
        assert isinstance(cfg, AppConfig)
        assert cfg.data.prices_file == "prices/base.csv"
        assert cfg.data.default_market is None
        assert cfg.output.output_dir == "out"
        assert cfg.logging.level == "INFO"
        assert cfg.logging.log_file == ""
        assert cfg.debug is False

    def test_missing_sections_use_defaults(self, tmp_path):
        cfg = load_config(_write_config(tmp_path, "[project]\n"))
        assert cfg.data.prices_file == "data/raw/prices.csv"
        assert cfg.output.output_dir == "data/outputs"
        assert cfg.logging.json_format is False

    def test_local_toml_overrides(self, tmp_path):
        path = _write_config(tmp_path)
        (tmp_path / "local.toml").write_text(
            '[data]\ndefault_market = "east"\n', encoding="utf-8"
        )
        cfg = load_config(path)
        assert cfg.data.default_market == "east"
        assert cfg.data.prices_file == "prices/base.csv"

    def test_env_overrides_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRICE_ANALYZER_PRICES_FILE", "env.csv")
        monkeypatch.setenv("PRICE_ANALYZER_OUTPUT_DIR", "env_out")
        monkeypatch.setenv("PRICE_ANALYZER_LOG_LEVEL", "debug")
        monkeypatch.setenv("PRICE_ANALYZER_DEBUG", "yes")
        cfg = load_config(_write_config(tmp_path))
        assert cfg.data.prices_file == "env.csv"
        assert cfg.output.output_dir == "env_out"
        assert cfg.logging.level == "DEBUG"
        assert cfg.debug is True

    def test_project_debug_flag(self, tmp_path):
        cfg = load_config(_write_config(tmp_path, "[project]\ndebug = true\n"))
        assert cfg.debug is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "missing.toml")

    def test_invalid_log_level(self, tmp_path):
        path = _write_config(tmp_path, '[logging]\nlevel = "LOUD"\n')
        with pytest.raises(ValidationError, match="Log level must be one of"):
            load_config(path)

    def test_committed_default_config_loads(self):
        cfg = load_config()
        assert cfg.data.prices_file == "data/raw/prices.csv"
        assert cfg.logging.level == "INFO"

    def test_config_is_frozen(self, tmp_path):
        cfg = load_config(_write_config(tmp_path))
        with pytest.raises(ValidationError):
            cfg.debug = True  # type: ignore[misc]


class TestDeepMerge:
    def test_nested_keys_merge(self):
        base = {"data": {"a": 1, "b": 2}, "debug": False}
        merged = _deep_merge(base, {"data": {"b": 3}})
        assert merged == {"data": {"a": 1, "b": 3}, "debug": False}

    def test_base_not_mutated(self):
        base = {"data": {"a": 1}}
        _deep_merge(base, {"data": {"a": 2}})
        assert base == {"data": {"a": 1}}

    def test_scalar_replaces_dict(self):
        assert _deep_merge({"x": {"a": 1}}, {"x": 5}) == {"x": 5}
