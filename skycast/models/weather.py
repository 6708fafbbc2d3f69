"""Current conditions models, mirroring the provider's /weather payload."""

from dataclasses import dataclass, field

from skycast.models.location import GeoCoordinate


@dataclass(frozen=True)
class WeatherCondition:
    id: int
    main: str
    description: str
    icon: str


@dataclass(frozen=True)
class MainReadings:
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    sea_level: int | None = None
    grnd_level: int | None = None


@dataclass(frozen=True)
class Wind:
    speed: float | None = None
    deg: int | None = None
    gust: float | None = None


@dataclass(frozen=True)
class CurrentConditions:
    coordinate: GeoCoordinate
    main: MainReadings
    timestamp: int
    timezone_offset: int
    city_id: int
    name: str
    conditions: list[WeatherCondition] = field(default_factory=list)
    wind: Wind = Wind()
    cloudiness: int = 0
    visibility: int | None = None
    base: str = ""

    @property
    def main_description(self) -> str | None:
        return self.conditions[0].main if self.conditions else None

    @property
    def weather_icon(self) -> str:
        return self.conditions[0].icon if self.conditions else ""

    def to_payload(self) -> dict:
        """Serialize back into the provider's JSON layout."""
        main = {
            "temp": self.main.temp,
            "feels_like": self.main.feels_like,
            "temp_min": self.main.temp_min,
            "temp_max": self.main.temp_max,
            "pressure": self.main.pressure,
            "humidity": self.main.humidity,
        }
        if self.main.sea_level is not None:
            main["sea_level"] = self.main.sea_level
        if self.main.grnd_level is not None:
            main["grnd_level"] = self.main.grnd_level

        payload = {
            "coord": {"lat": self.coordinate.lat, "lon": self.coordinate.lon},
            "weather": [
                {"id": c.id, "main": c.main, "description": c.description, "icon": c.icon}
                for c in self.conditions
            ],
            "base": self.base,
            "main": main,
            "wind": {
                k: v
                for k, v in (
                    ("speed", self.wind.speed),
                    ("deg", self.wind.deg),
                    ("gust", self.wind.gust),
                )
                if v is not None
            },
            "clouds": {"all": self.cloudiness},
            "dt": self.timestamp,
            "timezone": self.timezone_offset,
            "id": self.city_id,
            "name": self.name,
        }
        if self.visibility is not None:
            payload["visibility"] = self.visibility
        return payload
