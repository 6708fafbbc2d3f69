"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from skycast.config.schema import SkycastConfig
from skycast.ingest.decoders import (
    decode_current_conditions,
    decode_forecast_list,
    decode_locations,
)
from skycast.ingest.openweather import OpenWeatherProvider
from skycast.models.forecast import ForecastList
from skycast.models.location import Location
from skycast.models.weather import CurrentConditions
from skycast.storage.database import connect, run_migrations
from skycast.storage.kv_store import MemoryStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    return load_fixture("owm_forecast_mandaluyong.json")


@pytest.fixture
def current_payload() -> dict:
    return load_fixture("owm_current_mendez.json")


@pytest.fixture
def forecast_list(forecast_payload: dict) -> ForecastList:
    return decode_forecast_list(forecast_payload)


@pytest.fixture
def current_conditions(current_payload: dict) -> CurrentConditions:
    return decode_current_conditions(current_payload)


@pytest.fixture
def london_results() -> list[Location]:
    return decode_locations(load_fixture("owm_geocode_london.json"))


@pytest.fixture
def nyc() -> Location:
    return Location(
        name="New York City",
        lat=40.7127,
        lon=-73.998,
        country="United States",
        state="New York",
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def tmp_db(tmp_path: Path) -> sqlite3.Connection:
    """A migrated temporary SQLite database."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def provider(
    current_conditions: CurrentConditions,
    forecast_list: ForecastList,
    london_results: list[Location],
) -> MagicMock:
    """Provider mock answering every call with the fixture payloads."""
    mock = MagicMock(spec=OpenWeatherProvider)
    mock.fetch_current_conditions.return_value = current_conditions
    mock.fetch_forecast_list.return_value = forecast_list
    mock.geocode_by_name.return_value = london_results
    mock.reverse_geocode.return_value = decode_locations(
        load_fixture("owm_reverse_nyc.json")
    )
    return mock


@pytest.fixture
def default_config() -> SkycastConfig:
    return SkycastConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "test-key", "timeout": 5.0},
        "display": {"default_unit": "imperial"},
        "storage": {"db_path": str(tmp_path / "skycast.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
