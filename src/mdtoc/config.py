"""Application configuration: settings schema and mdtoc.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "mdtoc.yaml"


class Settings(BaseModel):
    min_depth:    int = Field(default=2, ge=2, description="Fewest '#' markers a heading needs to be listed")
    start_marker: Optional[str] = Field(default=None, description="TOC start marker; None = a 'TOC:' line")
    stop_marker:  Optional[str] = Field(default=None, description="TOC stop marker; None = next blank line")
    regex:        bool = Field(default=False, description="Treat start/stop markers as regular expressions")
    skip_fences:  bool = Field(default=False, description="Ignore heading lines inside code blocks")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdtoc.yaml, then MDTOC_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDTOC_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
