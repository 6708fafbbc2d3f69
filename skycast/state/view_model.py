"""View-state orchestration: provider calls, aggregation and observable state."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from skycast.aggregation.daily import aggregate_forecast
from skycast.ingest.errors import user_message
from skycast.ingest.provider import WeatherProvider
from skycast.models.forecast import DailySummary
from skycast.models.location import Location
from skycast.models.units import TemperatureUnit
from skycast.models.weather import CurrentConditions
from skycast.state.favorites import is_favorite, toggle_favorite
from skycast.state.observable import Observable
from skycast.storage import preferences_repo
from skycast.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "-------"
PLACEHOLDER_VALUE = "---"


def fetch_weather_bundle(
    provider: WeatherProvider, lat: float, lon: float, unit: TemperatureUnit
) -> tuple[CurrentConditions, list[DailySummary]]:
    """Fetch current conditions and the forecast concurrently, then aggregate.

    Raises whichever error either fetch raised; nothing is returned partially.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        current_future = pool.submit(provider.fetch_current_conditions, lat, lon, unit)
        forecast_future = pool.submit(provider.fetch_forecast_list, lat, lon, unit)
        current = current_future.result()
        forecast = forecast_future.result()
    return current, aggregate_forecast(forecast)


class WeatherViewModel:
    """Holds the observable state a UI or CLI renders from.

    Current conditions and the daily forecast are fetched concurrently and
    applied together; a failure in either leaves both untouched.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        store: KeyValueStore,
        default_unit: TemperatureUnit | None = None,
    ):
        self.provider = provider
        self.store = store

        self.current_location: Observable[Location | None] = Observable(
            preferences_repo.load_location(store)
        )
        self.favorite_locations: Observable[list[Location]] = Observable(
            preferences_repo.load_favorites(store)
        )
        self.current_weather: Observable[CurrentConditions | None] = Observable(
            preferences_repo.load_current_conditions(store)
        )
        self.daily_forecast: Observable[list[DailySummary]] = Observable([])
        self.temperature_unit: Observable[TemperatureUnit] = Observable(
            preferences_repo.load_unit(store, default_unit)
        )
        self.search_results: Observable[list[Location]] = Observable([])
        self.error_message: Observable[str | None] = Observable(None)
        self.is_loading: Observable[bool] = Observable(False)
        self.did_perform_search: Observable[bool] = Observable(False)

        self.current_location.subscribe(self._persist_location)
        self.current_weather.subscribe(self._persist_weather)
        self.temperature_unit.subscribe(
            lambda unit: self._persist(preferences_repo.save_unit, unit)
        )
        self.favorite_locations.subscribe(
            lambda favorites: self._persist(preferences_repo.save_favorites, favorites)
        )

    # --- Actions ---

    def fetch_weather_data(self) -> bool:
        """Refresh current conditions and the daily forecast for the current location.

        Returns True when both fetches succeeded and state was updated.
        """
        location = self.current_location.value
        if location is None:
            return False

        self.is_loading.set(True)
        try:
            try:
                current, daily = fetch_weather_bundle(
                    self.provider, location.lat, location.lon, self.temperature_unit.value
                )
            except Exception as exc:
                logger.warning("Weather fetch failed for %s: %s", location.name, exc)
                self.error_message.set(user_message(exc))
                return False

            self.current_weather.set(current)
            self.daily_forecast.set(daily)
            self.error_message.set(None)
            return True
        finally:
            self.is_loading.set(False)

    def search_city(self, name: str) -> None:
        name = name.strip()
        if not name:
            return
        self.is_loading.set(True)
        self.did_perform_search.set(False)
        try:
            self.search_results.set(self.provider.geocode_by_name(name))
        except Exception as exc:
            logger.warning("City search failed for %r: %s", name, exc)
            self.error_message.set(user_message(exc))
        finally:
            self.is_loading.set(False)
            self.did_perform_search.set(True)

    def select_location(self, location: Location) -> bool:
        self.current_location.set(location)
        return self.fetch_weather_data()

    def select_temperature_unit(self, unit: TemperatureUnit) -> bool:
        self.temperature_unit.set(unit)
        return self.fetch_weather_data()

    def toggle_favorite(self) -> None:
        location = self.current_location.value
        if location is None:
            return
        self.favorite_locations.set(
            toggle_favorite(self.favorite_locations.value, location)
        )

    def select_favorite(self, index: int) -> bool:
        favorites = self.favorite_locations.value
        if not 0 <= index < len(favorites):
            return False
        return self.select_location(favorites[index])

    def remove_favorite(self, index: int) -> Location | None:
        """Drop the favorite at a 0-based position; the rest keep their order."""
        favorites = list(self.favorite_locations.value)
        if not 0 <= index < len(favorites):
            return None
        removed = favorites.pop(index)
        self.favorite_locations.set(favorites)
        return removed

    def resolve_position(self, lat: float, lon: float) -> bool:
        """Reverse-geocode a device position and select the first match."""
        self.is_loading.set(True)
        try:
            locations = self.provider.reverse_geocode(lat, lon)
        except Exception as exc:
            logger.warning("Reverse geocode failed for %s,%s: %s", lat, lon, exc)
            self.error_message.set(user_message(exc))
            return False
        finally:
            self.is_loading.set(False)
        if not locations:
            return False
        return self.select_location(locations[0])

    # --- Display values ---

    @property
    def is_favorite(self) -> bool:
        location = self.current_location.value
        if location is None:
            return False
        return is_favorite(self.favorite_locations.value, location)

    @property
    def location_name(self) -> str:
        location = self.current_location.value
        return location.name if location else PLACEHOLDER_NAME

    @property
    def state_country(self) -> str:
        location = self.current_location.value
        return (location.state_country if location else None) or PLACEHOLDER_NAME

    @property
    def coordinates(self) -> str:
        location = self.current_location.value
        if location is None:
            return PLACEHOLDER_VALUE
        return f"LAT:{location.lat}, LON:{location.lon}"

    @property
    def temperature(self) -> str:
        weather = self.current_weather.value
        if weather is None:
            return PLACEHOLDER_VALUE
        return f"{weather.main.temp:.1f}{self.temperature_unit.value.symbol}"

    @property
    def main_description(self) -> str:
        weather = self.current_weather.value
        return (weather.main_description if weather else None) or PLACEHOLDER_VALUE

    @property
    def weather_icon(self) -> str:
        weather = self.current_weather.value
        return weather.weather_icon if weather else ""

    def _persist_location(self, location: Location | None) -> None:
        if location is not None:
            self._persist(preferences_repo.save_location, location)

    def _persist_weather(self, weather: CurrentConditions | None) -> None:
        if weather is not None:
            self._persist(preferences_repo.save_current_conditions, weather)

    def _persist(self, save: Callable[[KeyValueStore, Any], None], value: Any) -> None:
        """Write through to the store. A failed write is logged; in-memory state stands."""
        try:
            save(self.store, value)
        except Exception:
            logger.exception("Failed to persist state via %s", save.__name__)
