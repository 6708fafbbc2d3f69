"""Tests for text and JSON formatters."""

import json
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from skycast.models.forecast import DailySummary
from skycast.models.location import Location
from skycast.models.units import TemperatureUnit
from skycast.models.weather import CurrentConditions
from skycast.reporting.formatters import (
    format_current_text,
    format_daily_json,
    format_daily_text,
    format_location_line,
    format_widget_text,
    rounded_to_int,
    temperature_label,
)
from skycast.state.widget import WidgetSnapshot

DAYS = [
    DailySummary("2024-12-29", 25.73, 25.86),
    DailySummary("2024-12-30", 24.6, 28.64),
]


class TestRounding:
    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (3.5, 4), (2.4, 2), (-2.5, -3), (-2.4, -2), (0.0, 0), (19.31, 19)],
    )
    def test_half_away_from_zero(self, value: float, expected: int):
        assert rounded_to_int(value) == expected

    def test_temperature_label(self):
        assert temperature_label(20.21, TemperatureUnit.METRIC) == "20 °C"
        assert temperature_label(72.5, TemperatureUnit.IMPERIAL) == "73 °F"


class TestDaily:
    def test_text(self):
        text = format_daily_text(DAYS, TemperatureUnit.METRIC)
        assert text.splitlines()[0] == "2-Day Forecast"
        assert "2024-12-30  Min: 24.6°C  Max: 28.6°C" in text

    def test_text_empty(self):
        assert format_daily_text([], TemperatureUnit.METRIC) == "No forecast available"

    def test_json(self):
        data = json.loads(format_daily_json(DAYS, TemperatureUnit.IMPERIAL))
        assert data["unit"] == "imperial"
        assert data["symbol"] == "°F"
        assert data["days"][1] == {
            "date": "2024-12-30",
            "min_temperature": 24.6,
            "max_temperature": 28.64,
        }


class TestCurrent:
    def test_with_location(self, current_conditions: CurrentConditions, nyc: Location):
        text = format_current_text(current_conditions, nyc, TemperatureUnit.METRIC)
        lines = text.splitlines()
        assert lines[0] == "=== New York City ==="
        assert "New York, United States" in lines
        assert "Temperature: 19.3°C" in lines
        assert "Feels like: 20 °C" in lines
        assert "Conditions: Clouds (overcast clouds)" in lines

    def test_without_location_uses_city_name(self, current_conditions: CurrentConditions):
        text = format_current_text(current_conditions, None, TemperatureUnit.STANDARD)
        assert text.startswith("=== Mendez-Nuñez ===")
        assert "Temperature: 19.3K" in text


class TestLocationLine:
    def test_full(self, nyc: Location):
        assert format_location_line(nyc) == (
            "New York City (New York, United States) Lat: 40.7127, Lon: -73.998"
        )

    def test_unknown_region(self):
        line = format_location_line(Location(name="Nowhere", lat=0.0, lon=0.0))
        assert "(Unknown)" in line


class TestWidgetText:
    def test_card(self, nyc: Location, current_conditions: CurrentConditions):
        snapshot = WidgetSnapshot(
            location=nyc,
            weather=current_conditions,
            unit=TemperatureUnit.METRIC,
            generated_at=datetime(2024, 12, 25, 12, 0, tzinfo=UTC),
        )
        assert format_widget_text(snapshot).splitlines() == [
            "New York City",
            "New York, United States",
            "19 °C",
            "Feels like 20 °C",
            "Clouds [04n]",
            "Next update: 2024-12-25 13:00 UTC",
        ]

    def test_without_region_or_conditions(self, current_conditions: CurrentConditions):
        weather = replace(current_conditions, conditions=[])
        snapshot = WidgetSnapshot(
            location=Location(name="Nowhere", lat=0.0, lon=0.0),
            weather=weather,
            unit=TemperatureUnit.IMPERIAL,
            generated_at=datetime(2024, 12, 25, 23, 30, tzinfo=UTC),
        )
        assert format_widget_text(snapshot).splitlines() == [
            "Nowhere",
            "19 °F",
            "Feels like 20 °F",
            "Next update: 2024-12-26 00:30 UTC",
        ]
