"""Tests for the OpenWeatherMap provider with mocked httpx."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from skycast.config.schema import SkycastConfig
from skycast.ingest.errors import ErrorKind, NetworkError
from skycast.ingest.http_client import HttpClient
from skycast.ingest.openweather import OpenWeatherProvider
from skycast.models.units import TemperatureUnit

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"

DATA = "https://test-owm.example.com/data/2.5"
GEO = "https://test-owm.example.com/geo/1.0"


def _load(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def owm() -> OpenWeatherProvider:
    return OpenWeatherProvider(
        api_key="secret",
        http=HttpClient(max_retries=0),
        data_base_url=DATA,
        geo_base_url=GEO,
    )


class TestFetchCurrentConditions:
    @respx.mock
    def test_success(self, owm: OpenWeatherProvider, current_payload: dict):
        route = respx.get(f"{DATA}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )

        current = owm.fetch_current_conditions(14.1196, 120.9091, TemperatureUnit.IMPERIAL)
        assert current.name == "Mendez-Nuñez"
        params = route.calls[0].request.url.params
        assert params["lat"] == "14.1196"
        assert params["lon"] == "120.9091"
        assert params["units"] == "imperial"
        assert params["appid"] == "secret"

    @respx.mock
    def test_unauthorized(self, owm: OpenWeatherProvider):
        respx.get(f"{DATA}/weather").mock(
            return_value=httpx.Response(401, json={"cod": 401, "message": "Invalid API key"})
        )

        with pytest.raises(NetworkError) as exc_info:
            owm.fetch_current_conditions(0.0, 0.0, TemperatureUnit.METRIC)
        assert exc_info.value.kind == ErrorKind.UNAUTHORIZED


class TestFetchForecastList:
    @respx.mock
    def test_success(self, owm: OpenWeatherProvider, forecast_payload: dict):
        route = respx.get(f"{DATA}/forecast").mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        forecast = owm.fetch_forecast_list(14.5776, 121.0337, TemperatureUnit.STANDARD)
        assert forecast.timezone_offset_seconds == 28800
        assert len(forecast.samples) == 3
        assert route.calls[0].request.url.params["units"] == "standard"

    @respx.mock
    def test_malformed_payload(self, owm: OpenWeatherProvider):
        respx.get(f"{DATA}/forecast").mock(
            return_value=httpx.Response(200, json={"cod": "200", "list": []})
        )

        with pytest.raises(NetworkError) as exc_info:
            owm.fetch_forecast_list(0.0, 0.0, TemperatureUnit.METRIC)
        assert exc_info.value.kind == ErrorKind.DECODING_ERROR


class TestGeocoding:
    @respx.mock
    def test_geocode_by_name_default_limit(self, owm: OpenWeatherProvider):
        route = respx.get(f"{GEO}/direct").mock(
            return_value=httpx.Response(200, json=_load("owm_geocode_london.json"))
        )

        locations = owm.geocode_by_name("London")
        assert len(locations) == 4
        assert locations[0].state_country == "England, GB"
        params = route.calls[0].request.url.params
        assert params["q"] == "London"
        assert params["limit"] == "5"

    @respx.mock
    def test_geocode_by_name_explicit_limit(self, owm: OpenWeatherProvider):
        route = respx.get(f"{GEO}/direct").mock(return_value=httpx.Response(200, json=[]))

        assert owm.geocode_by_name("Atlantis", 2) == []
        assert route.calls[0].request.url.params["limit"] == "2"

    @respx.mock
    def test_reverse_geocode(self, owm: OpenWeatherProvider):
        route = respx.get(f"{GEO}/reverse").mock(
            return_value=httpx.Response(200, json=_load("owm_reverse_nyc.json"))
        )

        [location] = owm.reverse_geocode(40.7128, -74.006)
        assert location.name == "New York"
        params = route.calls[0].request.url.params
        assert params["lat"] == "40.7128"
        assert "limit" not in params

    @respx.mock
    def test_not_found(self, owm: OpenWeatherProvider):
        respx.get(f"{GEO}/reverse").mock(return_value=httpx.Response(404))

        with pytest.raises(NetworkError) as exc_info:
            owm.reverse_geocode(0.0, 0.0)
        assert exc_info.value.kind == ErrorKind.NOT_FOUND


class TestFromConfig:
    def test_uses_config_values(self):
        config = SkycastConfig(
            api={"api_key": "k", "timeout": 3.0, "max_retries": 0, "data_base_url": DATA + "/"},
            search={"geocode_limit": 3},
        )
        owm = OpenWeatherProvider.from_config(config)
        assert owm.api_key == "k"
        assert owm.data_base_url == DATA
        assert owm.geocode_limit == 3
        assert owm.http.timeout == 3.0
        assert owm.http.max_retries == 0
