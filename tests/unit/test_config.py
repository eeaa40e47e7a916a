"""Unit tests for config.py"""

import pytest

from linediff.config import load_config


def test_load_config_defaults():
    """Settings defaults are used when no linediff.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.context_lines == 3
    assert settings.max_lines == 8000
    assert settings.max_output_lines == 4000
    assert settings.path_label == "unknown"


def test_load_config_reads_yaml(tmp_path):
    """linediff.yaml in the working directory is applied."""
    (tmp_path / "linediff.yaml").write_text("context_lines: 5\nmax_lines: 100\n")
    settings = load_config()
    assert settings.context_lines == 5
    assert settings.max_lines == 100


def test_load_config_env_overrides_yaml(tmp_path, monkeypatch):
    """LINEDIFF_CONTEXT_LINES takes precedence over linediff.yaml."""
    (tmp_path / "linediff.yaml").write_text("context_lines: 5\n")
    monkeypatch.setenv("LINEDIFF_CONTEXT_LINES", "1")
    assert load_config().context_lines == 1


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("LINEDIFF_MAX_OUTPUT_LINES", "100")
    settings = load_config(overrides={"max_output_lines": 50})
    assert settings.max_output_lines == 50


def test_load_config_ignores_none_overrides(monkeypatch):
    monkeypatch.setenv("LINEDIFF_WORKERS", "2")
    assert load_config(overrides={"workers": None}).workers == 2


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when linediff.yaml contains invalid YAML."""
    (tmp_path / "linediff.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid linediff.yaml"):
        load_config()


def test_load_config_yaml_not_a_mapping(tmp_path):
    (tmp_path / "linediff.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"context_lines": -1},
    {"max_lines": 0},
    {"max_output_lines": 3},
    {"workers": 0},
    {"log_level": "LOUD"},
])
def test_load_config_rejects_invalid_values(overrides):
    """Out-of-range values fail pydantic validation (a ValueError subclass)."""
    with pytest.raises(ValueError):
        load_config(overrides=overrides)
