"""Output formatters for current conditions and daily forecasts."""

import json
import math

from skycast.models.forecast import DailySummary
from skycast.models.location import Location
from skycast.models.units import TemperatureUnit
from skycast.models.weather import CurrentConditions
from skycast.state.widget import WidgetSnapshot


def rounded_to_int(value: float) -> int:
    """Round half away from zero, e.g. 2.5 -> 3 and -2.5 -> -3."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def temperature_label(value: float, unit: TemperatureUnit) -> str:
    """Compact widget-style label, e.g. '26 °C'."""
    return f"{rounded_to_int(value)} {unit.symbol}"


def format_current_text(
    conditions: CurrentConditions, location: Location | None, unit: TemperatureUnit
) -> str:
    """Plain text block for the current conditions."""
    name = location.name if location else conditions.name
    lines = [f"=== {name} ==="]
    if location is not None:
        if location.state_country:
            lines.append(location.state_country)
        lines.append(f"LAT:{location.lat}, LON:{location.lon}")
    lines.append(f"Temperature: {conditions.main.temp:.1f}{unit.symbol}")
    lines.append(f"Feels like: {temperature_label(conditions.main.feels_like, unit)}")
    if conditions.conditions:
        first = conditions.conditions[0]
        lines.append(f"Conditions: {first.main} ({first.description})")
    lines.append(
        f"Humidity: {conditions.main.humidity}% | "
        f"Clouds: {conditions.cloudiness}% | "
        f"Pressure: {conditions.main.pressure} hPa"
    )
    if conditions.wind.speed is not None:
        lines.append(f"Wind: {conditions.wind.speed:.1f}")
    return "\n".join(lines)


def format_daily_text(summaries: list[DailySummary], unit: TemperatureUnit) -> str:
    """One line per local day with its min/max."""
    if not summaries:
        return "No forecast available"
    lines = [f"{len(summaries)}-Day Forecast"]
    for s in summaries:
        lines.append(
            f"{s.date}  Min: {s.min_temperature:.1f}{unit.symbol}  "
            f"Max: {s.max_temperature:.1f}{unit.symbol}"
        )
    return "\n".join(lines)


def format_daily_json(summaries: list[DailySummary], unit: TemperatureUnit) -> str:
    """JSON document for programmatic consumption."""
    data = {
        "unit": unit.value,
        "symbol": unit.symbol,
        "days": [s.to_dict() for s in summaries],
    }
    return json.dumps(data, indent=2)


def format_location_line(location: Location) -> str:
    region = location.state_country or "Unknown"
    return f"{location.name} ({region}) Lat: {location.lat}, Lon: {location.lon}"


def format_widget_text(snapshot: WidgetSnapshot) -> str:
    """Compact card mirroring the home-screen widget."""
    unit = snapshot.unit
    main = snapshot.weather.main
    lines = [snapshot.location.name]
    if snapshot.location.state_country:
        lines.append(snapshot.location.state_country)
    lines.append(temperature_label(main.temp, unit))
    lines.append(f"Feels like {temperature_label(main.feels_like, unit)}")
    description = snapshot.weather.main_description
    if description:
        icon = snapshot.weather.weather_icon
        lines.append(f"{description} [{icon}]" if icon else description)
    lines.append(f"Next update: {snapshot.next_update:%Y-%m-%d %H:%M} UTC")
    return "\n".join(lines)
