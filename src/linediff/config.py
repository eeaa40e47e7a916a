"""Application configuration: settings schema and linediff.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "linediff.yaml"


class Settings(BaseModel):
    context_lines:    int = Field(default=3,    ge=0, description="Unchanged lines shown around each change")
    max_lines:        int = Field(default=8000, ge=1, description="Inputs with more lines are not diffed")
    max_output_lines: int = Field(default=4000, ge=4, description="Cap on rendered diff lines, headers included")
    path_label:       str = Field(default="unknown", description="Label used in diff headers when none is given")
    workers:          int = Field(default=4,    ge=1, description="Thread pool size for change summaries")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from linediff.yaml, then LINEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"LINEDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
