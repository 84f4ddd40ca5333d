"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from forecast.models.forecast import CityContext


@pytest.fixture
def london() -> CityContext:
    return CityContext(
        name="London",
        timezone_offset_seconds=0,
        sunrise_epoch=1709361420,
        sunset_epoch=1709401620,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def london_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "conversion": {"kelvin_offset": 273.15},
        "grouping": {"day_boundary": "epoch-offset"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
