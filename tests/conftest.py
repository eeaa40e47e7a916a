"""Root test configuration: isolate tests from LINEDIFF_* env vars, linediff.yaml, and log handlers"""

import logging

import pytest

from linediff.config import Settings


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run each test from an empty directory with no LINEDIFF_* overrides set."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"LINEDIFF_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI attached to captured streams during a test."""
    yield
    logger = logging.getLogger("linediff")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
