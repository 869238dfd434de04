"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path

import numpy as np
import pytest
import yaml

from climatecast.config.schema import EngineConfig
from climatecast.models.request import ForecastRequest
from climatecast.models.statistics import WeatherStatistics

TODAY = date(2025, 6, 1)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def power_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "power_daily_point.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "archive": {"years_of_data": 5, "max_workers": 2},
        "forecast": {"random_seed": 7},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def valid_request() -> ForecastRequest:
    return ForecastRequest(
        name="Test Location",
        latitude=25.0,
        longitude=30.0,
        country="Test Country",
        target_date=date(2025, 12, 25),
    )


@pytest.fixture
def sample_stats() -> WeatherStatistics:
    return WeatherStatistics(
        avg_temperature=25.0,
        avg_temperature_min=20.0,
        avg_temperature_max=30.0,
        avg_precipitation=5.0,
        max_precipitation=12.0,
        avg_wind_speed=10.0,
        max_wind_speed=16.0,
        avg_humidity=60.0,
        avg_pressure=1013.25,
        extreme_heat_probability=10.0,
        extreme_cold_probability=5.0,
        heavy_rain_probability=15.0,
        high_wind_probability=8.0,
    )
