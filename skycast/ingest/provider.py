"""The weather provider contract consumed by the view model and API."""

from typing import Protocol

from skycast.models.forecast import ForecastList
from skycast.models.location import Location
from skycast.models.units import TemperatureUnit
from skycast.models.weather import CurrentConditions


class WeatherProvider(Protocol):
    def fetch_current_conditions(
        self, lat: float, lon: float, unit: TemperatureUnit
    ) -> CurrentConditions: ...

    def fetch_forecast_list(
        self, lat: float, lon: float, unit: TemperatureUnit
    ) -> ForecastList: ...

    def geocode_by_name(self, name: str, limit: int | None = None) -> list[Location]: ...

    def reverse_geocode(self, lat: float, lon: float) -> list[Location]: ...
