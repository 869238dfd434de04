"""YAML config loader and dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from climatecast.config.schema import EngineConfig


def load_config(path: str | Path) -> EngineConfig:
    """Load and validate config from a YAML file.

    An empty file yields the defaults.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return EngineConfig(**raw)


def get_config_value(config: EngineConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'archive.timeout'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
