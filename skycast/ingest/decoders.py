"""Decode provider JSON payloads into domain records.

Any missing key or wrong type raises NetworkError(DECODING_ERROR) so malformed
payloads are rejected here, before they can reach the aggregator.
"""

from typing import Any

from skycast.ingest.errors import ErrorKind, NetworkError
from skycast.models.forecast import ForecastList, WeatherSample
from skycast.models.location import GeoCoordinate, Location
from skycast.models.weather import CurrentConditions, MainReadings, WeatherCondition, Wind

_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def decode_current_conditions(raw: Any) -> CurrentConditions:
    try:
        main = raw["main"]
        wind = raw.get("wind") or {}
        return CurrentConditions(
            coordinate=_coordinate(raw["coord"]),
            conditions=[_condition(w) for w in raw["weather"]],
            main=MainReadings(
                temp=float(main["temp"]),
                feels_like=float(main["feels_like"]),
                temp_min=float(main["temp_min"]),
                temp_max=float(main["temp_max"]),
                pressure=int(main["pressure"]),
                humidity=int(main["humidity"]),
                sea_level=_optional_int(main.get("sea_level")),
                grnd_level=_optional_int(main.get("grnd_level")),
            ),
            wind=Wind(
                speed=_optional_float(wind.get("speed")),
                deg=_optional_int(wind.get("deg")),
                gust=_optional_float(wind.get("gust")),
            ),
            cloudiness=int((raw.get("clouds") or {}).get("all", 0)),
            visibility=_optional_int(raw.get("visibility")),
            timestamp=int(raw["dt"]),
            timezone_offset=int(raw["timezone"]),
            city_id=int(raw["id"]),
            name=str(raw["name"]),
            base=str(raw.get("base", "")),
        )
    except _DECODE_ERRORS as e:
        raise NetworkError(
            ErrorKind.DECODING_ERROR, f"Malformed current conditions: {e!r}"
        ) from e


def decode_forecast_list(raw: Any) -> ForecastList:
    try:
        city = raw["city"]
        return ForecastList(
            samples=[_sample(entry) for entry in raw["list"]],
            timezone_offset_seconds=int(city["timezone"]),
            city_name=str(city["name"]),
            coordinate=_coordinate(city["coord"]),
            country=city.get("country"),
        )
    except _DECODE_ERRORS as e:
        raise NetworkError(
            ErrorKind.DECODING_ERROR, f"Malformed forecast list: {e!r}"
        ) from e


def decode_locations(raw: Any) -> list[Location]:
    if not isinstance(raw, list):
        raise NetworkError(
            ErrorKind.DECODING_ERROR,
            f"Expected a list of locations, got {type(raw).__name__}",
        )
    try:
        return [Location.from_dict(entry) for entry in raw]
    except _DECODE_ERRORS as e:
        raise NetworkError(
            ErrorKind.DECODING_ERROR, f"Malformed location: {e!r}"
        ) from e


def _sample(entry: dict) -> WeatherSample:
    main = entry["main"]
    return WeatherSample(
        timestamp=int(entry["dt"]),
        min_temperature=float(main["temp_min"]),
        max_temperature=float(main["temp_max"]),
        timestamp_text=str(entry["dt_txt"]),
        temperature=_optional_float(main.get("temp")),
        precipitation_probability=float(entry.get("pop", 0.0)),
    )


def _coordinate(raw: dict) -> GeoCoordinate:
    return GeoCoordinate(lat=float(raw["lat"]), lon=float(raw["lon"]))


def _condition(raw: dict) -> WeatherCondition:
    return WeatherCondition(
        id=int(raw["id"]),
        main=str(raw["main"]),
        description=str(raw["description"]),
        icon=str(raw["icon"]),
    )


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)
