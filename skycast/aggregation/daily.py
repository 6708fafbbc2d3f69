"""Reduce a 3-hour forecast feed into one min/max summary per local day."""

from collections.abc import Iterable

from skycast.models.common import from_epoch
from skycast.models.forecast import DailySummary, ForecastList, WeatherSample


def local_date(timestamp: int, timezone_offset_seconds: int) -> str:
    """Calendar date (YYYY-MM-DD) of a UTC timestamp as seen in the city.

    The offset shifts the instant itself and the result is read on a UTC
    calendar, so the host timezone never leaks into the bucketing key.
    """
    return from_epoch(timestamp + timezone_offset_seconds).date().isoformat()


def aggregate(
    samples: Iterable[WeatherSample], timezone_offset_seconds: int
) -> list[DailySummary]:
    """Group samples by local date and take the envelope of their envelopes.

    Args:
        samples: Forecast entries in any order. May be empty.
        timezone_offset_seconds: The city's UTC offset. Not validated.

    Returns:
        One DailySummary per distinct local date, ascending by date. The daily
        minimum is the lowest sample ``min_temperature`` and the daily maximum
        the highest sample ``max_temperature``.
    """
    envelopes: dict[str, tuple[float, float]] = {}
    for sample in samples:
        day = local_date(sample.timestamp, timezone_offset_seconds)
        current = envelopes.get(day)
        if current is None:
            envelopes[day] = (sample.min_temperature, sample.max_temperature)
        else:
            envelopes[day] = (
                min(current[0], sample.min_temperature),
                max(current[1], sample.max_temperature),
            )

    return [
        DailySummary(date=day, min_temperature=low, max_temperature=high)
        for day, (low, high) in sorted(envelopes.items())
    ]


def aggregate_forecast(forecast: ForecastList) -> list[DailySummary]:
    """Aggregate a decoded forecast using the city's own offset."""
    return aggregate(forecast.samples, forecast.timezone_offset_seconds)
