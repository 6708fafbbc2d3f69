"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skycast.models.units import DEFAULT_UNIT, TemperatureUnit

OWM_DATA_BASE_URL = "https://api.openweathermap.org/data/2.5"
OWM_GEO_BASE_URL = "https://api.openweathermap.org/geo/1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    data_base_url: str = OWM_DATA_BASE_URL
    geo_base_url: str = OWM_GEO_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0, le=10)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # the geocoding endpoint caps results at 5
    geocode_limit: int = Field(default=5, ge=1, le=5)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_unit: TemperatureUnit = DEFAULT_UNIT


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/skycast.db"


class SkycastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    search: SearchConfig = SearchConfig()
    display: DisplayConfig = DisplayConfig()
    storage: StorageConfig = StorageConfig()
