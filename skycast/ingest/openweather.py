"""OpenWeatherMap implementation of WeatherProvider."""

import logging

from skycast.config.schema import OWM_DATA_BASE_URL, OWM_GEO_BASE_URL, SkycastConfig
from skycast.ingest.decoders import (
    decode_current_conditions,
    decode_forecast_list,
    decode_locations,
)
from skycast.ingest.http_client import HttpClient
from skycast.models.forecast import ForecastList
from skycast.models.location import Location
from skycast.models.units import TemperatureUnit
from skycast.models.weather import CurrentConditions

logger = logging.getLogger(__name__)

DEFAULT_GEOCODE_LIMIT = 5


class OpenWeatherProvider:
    def __init__(
        self,
        api_key: str,
        http: HttpClient | None = None,
        data_base_url: str = OWM_DATA_BASE_URL,
        geo_base_url: str = OWM_GEO_BASE_URL,
        geocode_limit: int = DEFAULT_GEOCODE_LIMIT,
    ):
        self.api_key = api_key
        self.http = http or HttpClient()
        self.data_base_url = data_base_url.rstrip("/")
        self.geo_base_url = geo_base_url.rstrip("/")
        self.geocode_limit = geocode_limit

    @classmethod
    def from_config(cls, config: SkycastConfig) -> "OpenWeatherProvider":
        api = config.api
        return cls(
            api_key=api.api_key,
            http=HttpClient(
                timeout=api.timeout,
                max_retries=api.max_retries,
                retry_base_delay=api.retry_base_delay,
            ),
            data_base_url=api.data_base_url,
            geo_base_url=api.geo_base_url,
            geocode_limit=config.search.geocode_limit,
        )

    def fetch_current_conditions(
        self, lat: float, lon: float, unit: TemperatureUnit
    ) -> CurrentConditions:
        logger.info("REQUEST: current weather lat=%s lon=%s units=%s", lat, lon, unit)
        raw = self.http.get_json(
            f"{self.data_base_url}/weather",
            {"lat": lat, "lon": lon, "units": unit.value, "appid": self.api_key},
        )
        return decode_current_conditions(raw)

    def fetch_forecast_list(
        self, lat: float, lon: float, unit: TemperatureUnit
    ) -> ForecastList:
        logger.info("REQUEST: 5 day forecast lat=%s lon=%s units=%s", lat, lon, unit)
        raw = self.http.get_json(
            f"{self.data_base_url}/forecast",
            {"lat": lat, "lon": lon, "units": unit.value, "appid": self.api_key},
        )
        return decode_forecast_list(raw)

    def geocode_by_name(self, name: str, limit: int | None = None) -> list[Location]:
        logger.info("REQUEST: direct geocode q=%r", name)
        raw = self.http.get_json(
            f"{self.geo_base_url}/direct",
            {"q": name, "limit": limit or self.geocode_limit, "appid": self.api_key},
        )
        return decode_locations(raw)

    def reverse_geocode(self, lat: float, lon: float) -> list[Location]:
        logger.info("REQUEST: reverse geocode lat=%s lon=%s", lat, lon)
        raw = self.http.get_json(
            f"{self.geo_base_url}/reverse",
            {"lat": lat, "lon": lon, "appid": self.api_key},
        )
        return decode_locations(raw)
