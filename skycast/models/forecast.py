"""Forecast feed models: 3-hour samples and per-day summaries."""

from dataclasses import dataclass

from skycast.models.location import GeoCoordinate


@dataclass(frozen=True)
class WeatherSample:
    timestamp: int  # UTC epoch seconds
    min_temperature: float
    max_temperature: float
    timestamp_text: str  # "YYYY-MM-DD HH:MM:SS" as reported by the provider
    temperature: float | None = None
    precipitation_probability: float = 0.0


@dataclass(frozen=True)
class ForecastList:
    samples: list[WeatherSample]
    timezone_offset_seconds: int
    city_name: str
    coordinate: GeoCoordinate
    country: str | None = None


@dataclass(frozen=True)
class DailySummary:
    date: str  # YYYY-MM-DD, local to the city
    min_temperature: float
    max_temperature: float

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "min_temperature": self.min_temperature,
            "max_temperature": self.max_temperature,
        }
