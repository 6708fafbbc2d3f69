"""JSON API: current conditions, daily forecast and geocoding over HTTP."""

from functools import lru_cache
from typing import NoReturn

from fastapi import Depends, FastAPI, HTTPException, Query

from skycast.aggregation.daily import aggregate_forecast
from skycast.config.loader import load_config
from skycast.ingest.errors import ErrorKind, NetworkError
from skycast.ingest.openweather import OpenWeatherProvider
from skycast.ingest.provider import WeatherProvider
from skycast.models.units import TemperatureUnit
from skycast.state.view_model import fetch_weather_bundle

CONFIG_PATH = "skycast.yaml"

app = FastAPI(title="Skycast", version="0.1.0")

_STATUS_FOR_KIND = {
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
}


@lru_cache(maxsize=1)
def get_provider() -> WeatherProvider:
    return OpenWeatherProvider.from_config(load_config(CONFIG_PATH))


def _raise_http(exc: NetworkError) -> NoReturn:
    raise HTTPException(
        status_code=_STATUS_FOR_KIND.get(exc.kind, 502),
        detail={"kind": exc.kind.value, "message": exc.message},
    ) from exc


@app.get("/api/weather")
def get_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    unit: TemperatureUnit = TemperatureUnit.METRIC,
    provider: WeatherProvider = Depends(get_provider),
):
    """Current conditions plus the per-day forecast, fetched together."""
    try:
        current, daily = fetch_weather_bundle(provider, lat, lon, unit)
    except NetworkError as e:
        _raise_http(e)
    return {
        "unit": unit.value,
        "symbol": unit.symbol,
        "current": current.to_payload(),
        "daily": [d.to_dict() for d in daily],
    }


@app.get("/api/forecast")
def get_forecast(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    unit: TemperatureUnit = TemperatureUnit.METRIC,
    provider: WeatherProvider = Depends(get_provider),
):
    try:
        forecast = provider.fetch_forecast_list(lat, lon, unit)
    except NetworkError as e:
        _raise_http(e)
    return {
        "city": forecast.city_name,
        "timezone_offset_seconds": forecast.timezone_offset_seconds,
        "unit": unit.value,
        "daily": [d.to_dict() for d in aggregate_forecast(forecast)],
    }


@app.get("/api/locations")
def search_locations(
    q: str = Query(..., min_length=1),
    limit: int = Query(5, ge=1, le=5),
    provider: WeatherProvider = Depends(get_provider),
):
    try:
        locations = provider.geocode_by_name(q, limit)
    except NetworkError as e:
        _raise_http(e)
    return [
        {**loc.to_dict(), "id": loc.id, "state_country": loc.state_country}
        for loc in locations
    ]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8777)
