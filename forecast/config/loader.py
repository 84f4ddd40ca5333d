"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from forecast.config.schema import ForecastConfig


def load_config(path: str | Path | None) -> ForecastConfig:
    """Load and validate config from a YAML file.

    No path, or an empty file, yields the defaults.
    """
    if path is None:
        return ForecastConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return ForecastConfig(**raw)


def get_config_value(config: ForecastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'conversion.kelvin_offset'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(
    config: ForecastConfig, dotted_key: str, value: Any
) -> ForecastConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new ForecastConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return ForecastConfig(**data)
