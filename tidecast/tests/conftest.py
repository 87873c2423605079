"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from tidecast.config.schema import TideOffsetConfig, TidecastConfig
from tidecast.models.raw import TideResponse, WeatherResponse

FIXTURE_DIR = Path(__file__).parent / "fixtures"

WEATHER_URL = "https://weather.test/Mortlake?format=j1"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def offsets() -> TideOffsetConfig:
    """London Bridge to Chiswick Bridge corrections."""
    return TideOffsetConfig(low_tide_offset_minutes=144, high_tide_offset_minutes=46)


@pytest.fixture
def config(offsets: TideOffsetConfig) -> TidecastConfig:
    return TidecastConfig(
        offsets=offsets,
        sources={
            "tide_base_url": "https://tides.test",
            "weather_url": WEATHER_URL,
            "timeout_seconds": 5.0,
        },
    )


@pytest.fixture
def tide_json() -> dict:
    return load_fixture("pla_tides_2022_12.json")


@pytest.fixture
def weather_json() -> dict:
    return load_fixture("wttr_mortlake.json")


@pytest.fixture
def tide_response(tide_json: dict) -> TideResponse:
    return TideResponse.model_validate(tide_json)


@pytest.fixture
def weather_response(weather_json: dict) -> WeatherResponse:
    return WeatherResponse.model_validate(weather_json)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "offsets": {"low_tide_offset_minutes": 144, "high_tide_offset_minutes": 46},
        "sources": {"timeout_seconds": 10.0},
    }
    path = tmp_path / "tidecast.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
