"""CLI entry point for skycast."""

import argparse
import logging
import sqlite3

from skycast.config.loader import config_hash, get_config_value, load_config, redacted
from skycast.config.schema import SkycastConfig
from skycast.ingest.openweather import OpenWeatherProvider
from skycast.models.units import TemperatureUnit
from skycast.reporting.formatters import (
    format_current_text,
    format_daily_json,
    format_daily_text,
    format_location_line,
    format_widget_text,
)
from skycast.state.view_model import WeatherViewModel
from skycast.state.widget import load_widget_snapshot
from skycast.storage import preferences_repo
from skycast.storage.database import connect, run_migrations
from skycast.storage.kv_store import SqliteStore

DEFAULT_CONFIG = "skycast.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Current weather and daily forecasts from OpenWeatherMap",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Config YAML path")
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    search_p = sub.add_parser("search", help="Search cities by name")
    search_p.add_argument("name", nargs="+", help="City name, e.g. 'London, GB'")

    select_p = sub.add_parser("select", help="Select a result from the last search")
    select_p.add_argument("index", type=int, help="1-based result number")

    locate_p = sub.add_parser("locate", help="Select the city at a coordinate")
    locate_p.add_argument("lat", type=float)
    locate_p.add_argument("lon", type=float)

    sub.add_parser("current", help="Show current conditions")

    forecast_p = sub.add_parser("forecast", help="Show the daily forecast")
    forecast_p.add_argument("--json", action="store_true", help="Emit JSON")

    unit_p = sub.add_parser("unit", help="Show or set the temperature unit")
    unit_p.add_argument(
        "unit", nargs="?", choices=[u.value for u in TemperatureUnit]
    )

    sub.add_parser("favorite", help="Toggle the current location as a favorite")
    favorites_p = sub.add_parser("favorites", help="List or manage favorite locations")
    favorites_sub = favorites_p.add_subparsers(dest="favorites_command")
    fav_select_p = favorites_sub.add_parser("select", help="Select a favorite")
    fav_select_p.add_argument("index", type=int, help="1-based favorite number")
    fav_remove_p = favorites_sub.add_parser("remove", help="Remove a favorite")
    fav_remove_p.add_argument("index", type=int, help="1-based favorite number")

    sub.add_parser("widget", help="Show the last saved conditions without fetching")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Read one config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.timeout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)

    conn = connect(args.db or config.storage.db_path)
    try:
        run_migrations(conn)
        if args.command == "widget":
            return _cmd_widget(SqliteStore(conn), config)
        vm = _build_view_model(config, conn)
        return _dispatch(vm, config, args)
    finally:
        conn.close()


def _build_view_model(config: SkycastConfig, conn: sqlite3.Connection) -> WeatherViewModel:
    return WeatherViewModel(
        OpenWeatherProvider.from_config(config),
        SqliteStore(conn),
        default_unit=config.display.default_unit,
    )


def _dispatch(vm: WeatherViewModel, config: SkycastConfig, args) -> int:
    if args.command == "search":
        return _cmd_search(vm, " ".join(args.name))
    elif args.command == "select":
        return _cmd_select(vm, args.index)
    elif args.command == "locate":
        return _cmd_locate(vm, args.lat, args.lon)
    elif args.command == "current":
        return _cmd_current(vm)
    elif args.command == "forecast":
        return _cmd_forecast(vm, args.json)
    elif args.command == "unit":
        return _cmd_unit(vm, args.unit)
    elif args.command == "favorite":
        return _cmd_favorite(vm)
    elif args.command == "favorites":
        return _cmd_favorites(vm, args.favorites_command, getattr(args, "index", None))
    return 1


def _cmd_search(vm: WeatherViewModel, name: str) -> int:
    vm.search_city(name)
    if vm.error_message.value:
        print(f"Error: {vm.error_message.value}")
        return 1
    results = vm.search_results.value
    preferences_repo.save_search_results(vm.store, results)
    if not results:
        print(f"No results for {name!r}")
        return 0
    for i, location in enumerate(results, start=1):
        print(f"{i}. {format_location_line(location)}")
    return 0


def _cmd_select(vm: WeatherViewModel, index: int) -> int:
    results = preferences_repo.load_search_results(vm.store)
    if not 1 <= index <= len(results):
        print(f"Error: no search result #{index} (run 'search' first)")
        return 1
    if not vm.select_location(results[index - 1]):
        return _print_error(vm)
    return _print_weather(vm)


def _cmd_locate(vm: WeatherViewModel, lat: float, lon: float) -> int:
    if not vm.resolve_position(lat, lon):
        if vm.error_message.value:
            return _print_error(vm)
        print(f"No location found at {lat}, {lon}")
        return 1
    return _print_weather(vm)


def _cmd_current(vm: WeatherViewModel) -> int:
    if vm.current_location.value is None:
        print("No location selected. Use 'search' + 'select' or 'locate'.")
        return 1
    if not vm.fetch_weather_data():
        return _print_error(vm)
    return _print_weather(vm)


def _cmd_forecast(vm: WeatherViewModel, as_json: bool) -> int:
    if vm.current_location.value is None:
        print("No location selected. Use 'search' + 'select' or 'locate'.")
        return 1
    if not vm.fetch_weather_data():
        return _print_error(vm)
    unit = vm.temperature_unit.value
    if as_json:
        print(format_daily_json(vm.daily_forecast.value, unit))
    else:
        print(f"{vm.location_name} ({vm.state_country})")
        print(format_daily_text(vm.daily_forecast.value, unit))
    return 0


def _cmd_unit(vm: WeatherViewModel, raw: str | None) -> int:
    if raw is None:
        unit = vm.temperature_unit.value
        print(f"Unit: {unit.display_name} ({unit.symbol})")
        return 0

    unit = TemperatureUnit.parse(raw)
    print(f"Unit: {unit.display_name} ({unit.symbol})")
    if vm.current_location.value is None:
        vm.temperature_unit.set(unit)
        return 0
    if not vm.select_temperature_unit(unit):
        return _print_error(vm)
    return _print_weather(vm)


def _cmd_favorite(vm: WeatherViewModel) -> int:
    if vm.current_location.value is None:
        print("No location selected.")
        return 1
    vm.toggle_favorite()
    state = "added to" if vm.is_favorite else "removed from"
    print(f"{vm.location_name} {state} favorites")
    return 0


def _cmd_favorites(vm: WeatherViewModel, action: str | None, index: int | None) -> int:
    favorites = vm.favorite_locations.value
    if action is not None:
        if not 1 <= index <= len(favorites):
            print(f"Error: no favorite #{index} (see 'favorites')")
            return 1
        if action == "remove":
            removed = vm.remove_favorite(index - 1)
            print(f"{removed.name} removed from favorites")
            return 0
        if not vm.select_favorite(index - 1):
            return _print_error(vm)
        return _print_weather(vm)
    if not favorites:
        print("No favorites yet")
        return 0
    for i, location in enumerate(favorites, start=1):
        print(f"{i}. {format_location_line(location)}")
    return 0


def _cmd_widget(store: SqliteStore, config: SkycastConfig) -> int:
    snapshot = load_widget_snapshot(store, config.display.default_unit)
    if snapshot is None:
        print("No saved weather yet. Run 'current' or 'select' first.")
        return 1
    print(format_widget_text(snapshot))
    return 0


def _cmd_config(config: SkycastConfig, args) -> int:
    if args.config_command == "show":
        print(redacted(config).model_dump_json(indent=2))
        print(f"hash: {config_hash(config)}")
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(redacted(config), args.key))
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        return 0
    print("Use: config show | config get KEY")
    return 1


def _print_weather(vm: WeatherViewModel) -> int:
    unit = vm.temperature_unit.value
    weather = vm.current_weather.value
    if weather is not None:
        print(format_current_text(weather, vm.current_location.value, unit))
    print(format_daily_text(vm.daily_forecast.value, unit))
    return 0


def _print_error(vm: WeatherViewModel) -> int:
    print(f"Error: {vm.error_message.value}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
