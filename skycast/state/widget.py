"""Home-screen style snapshot built only from persisted state.

Nothing here talks to the provider; the snapshot reflects whatever the last
successful fetch stored.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from skycast.models.common import utc_now
from skycast.models.location import Location
from skycast.models.units import TemperatureUnit
from skycast.models.weather import CurrentConditions
from skycast.storage import preferences_repo
from skycast.storage.kv_store import KeyValueStore

REFRESH_INTERVAL = timedelta(hours=1)


@dataclass(frozen=True)
class WidgetSnapshot:
    location: Location
    weather: CurrentConditions
    unit: TemperatureUnit
    generated_at: datetime

    @property
    def next_update(self) -> datetime:
        return self.generated_at + REFRESH_INTERVAL


def load_widget_snapshot(
    store: KeyValueStore,
    default_unit: TemperatureUnit | None = None,
    now: datetime | None = None,
) -> WidgetSnapshot | None:
    """Assemble a snapshot from the stored location, weather and unit.

    Returns None until both a location and its weather have been persisted.
    """
    location = preferences_repo.load_location(store)
    weather = preferences_repo.load_current_conditions(store)
    if location is None or weather is None:
        return None
    return WidgetSnapshot(
        location=location,
        weather=weather,
        unit=preferences_repo.load_unit(store, default_unit),
        generated_at=now or utc_now(),
    )
