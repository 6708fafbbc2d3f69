"""Temperature unit enumeration, as understood by the provider's `units` parameter."""

from enum import StrEnum


class TemperatureUnit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, raw: str | None) -> "TemperatureUnit":
        """Resolve a stored string to a unit, falling back to DEFAULT_UNIT."""
        if not raw:
            return DEFAULT_UNIT
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return DEFAULT_UNIT


_DISPLAY_NAMES = {
    TemperatureUnit.METRIC: "Celsius",
    TemperatureUnit.IMPERIAL: "Fahrenheit",
    TemperatureUnit.STANDARD: "Kelvin",
}

_SYMBOLS = {
    TemperatureUnit.METRIC: "°C",
    TemperatureUnit.IMPERIAL: "°F",
    TemperatureUnit.STANDARD: "K",
}

DEFAULT_UNIT = TemperatureUnit.METRIC
