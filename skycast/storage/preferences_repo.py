"""Repository for persisted user state: location, weather, unit and favorites.

Each value is a UTF-8 JSON blob under a fixed key, so the main app and any
widget-style reader sharing the same store see the same state.
"""

import json
import logging

from skycast.ingest.decoders import decode_current_conditions, decode_locations
from skycast.ingest.errors import NetworkError
from skycast.models.location import Location
from skycast.models.units import DEFAULT_UNIT, TemperatureUnit
from skycast.models.weather import CurrentConditions
from skycast.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

CURRENT_LOCATION_KEY = "currentLocation"
CURRENT_WEATHER_KEY = "currentWeather"
TEMPERATURE_UNIT_KEY = "temperatureUnit"
FAVORITE_LOCATIONS_KEY = "favoriteLocations"
SEARCH_RESULTS_KEY = "searchResults"


# --- Location ---

def save_location(store: KeyValueStore, location: Location) -> None:
    _write(store, CURRENT_LOCATION_KEY, location.to_dict())


def load_location(store: KeyValueStore) -> Location | None:
    raw = _read(store, CURRENT_LOCATION_KEY)
    if raw is None:
        return None
    try:
        return Location.from_dict(raw)
    except (KeyError, TypeError, ValueError, AttributeError):
        logger.warning("Discarding unreadable %s blob", CURRENT_LOCATION_KEY)
        return None


# --- Current weather ---

def save_current_conditions(store: KeyValueStore, conditions: CurrentConditions) -> None:
    _write(store, CURRENT_WEATHER_KEY, conditions.to_payload())


def load_current_conditions(store: KeyValueStore) -> CurrentConditions | None:
    raw = _read(store, CURRENT_WEATHER_KEY)
    if raw is None:
        return None
    try:
        return decode_current_conditions(raw)
    except NetworkError:
        logger.warning("Discarding unreadable %s blob", CURRENT_WEATHER_KEY)
        return None


# --- Temperature unit ---

def save_unit(store: KeyValueStore, unit: TemperatureUnit) -> None:
    _write(store, TEMPERATURE_UNIT_KEY, unit.value)


def load_unit(
    store: KeyValueStore, default: TemperatureUnit | None = None
) -> TemperatureUnit:
    raw = _read(store, TEMPERATURE_UNIT_KEY)
    if not isinstance(raw, str):
        return default or DEFAULT_UNIT
    return TemperatureUnit.parse(raw)


# --- Favorites ---

def save_favorites(store: KeyValueStore, locations: list[Location]) -> None:
    _write(store, FAVORITE_LOCATIONS_KEY, [loc.to_dict() for loc in locations])


def load_favorites(store: KeyValueStore) -> list[Location]:
    raw = _read(store, FAVORITE_LOCATIONS_KEY)
    if raw is None:
        return []
    try:
        return decode_locations(raw)
    except NetworkError:
        logger.warning("Discarding unreadable %s blob", FAVORITE_LOCATIONS_KEY)
        return []


def _write(store: KeyValueStore, key: str, value: object) -> None:
    store.set(key, json.dumps(value).encode("utf-8"))


def _read(store: KeyValueStore, key: str) -> object | None:
    blob = store.get(key)
    if blob is None:
        return None
    try:
        return json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Discarding non-JSON blob under %s", key)
        return None


# --- Last search (CLI selection by index) ---

def save_search_results(store: KeyValueStore, locations: list[Location]) -> None:
    _write(store, SEARCH_RESULTS_KEY, [loc.to_dict() for loc in locations])


def load_search_results(store: KeyValueStore) -> list[Location]:
    raw = _read(store, SEARCH_RESULTS_KEY)
    if raw is None:
        return []
    try:
        return decode_locations(raw)
    except NetworkError:
        logger.warning("Discarding unreadable %s blob", SEARCH_RESULTS_KEY)
        return []
