"""Tests for temperature unit metadata and parsing."""

import pytest

from skycast.models.units import DEFAULT_UNIT, TemperatureUnit


class TestTemperatureUnit:
    @pytest.mark.parametrize(
        "unit,name,symbol",
        [
            (TemperatureUnit.METRIC, "Celsius", "°C"),
            (TemperatureUnit.IMPERIAL, "Fahrenheit", "°F"),
            (TemperatureUnit.STANDARD, "Kelvin", "K"),
        ],
    )
    def test_display_metadata(self, unit: TemperatureUnit, name: str, symbol: str):
        assert unit.display_name == name
        assert unit.symbol == symbol

    def test_values_are_provider_literals(self):
        assert [u.value for u in TemperatureUnit] == ["metric", "imperial", "standard"]

    def test_default_is_metric(self):
        assert DEFAULT_UNIT == TemperatureUnit.METRIC


class TestParse:
    def test_known_value(self):
        assert TemperatureUnit.parse("imperial") == TemperatureUnit.IMPERIAL

    def test_case_and_whitespace(self):
        assert TemperatureUnit.parse("  Standard ") == TemperatureUnit.STANDARD

    @pytest.mark.parametrize("raw", [None, "", "kelvin", "C"])
    def test_falls_back_to_default(self, raw):
        assert TemperatureUnit.parse(raw) == TemperatureUnit.METRIC
