"""Tests for current conditions derived values and payload round-trip."""

from skycast.ingest.decoders import decode_current_conditions
from skycast.models.location import GeoCoordinate
from skycast.models.weather import CurrentConditions, MainReadings


def _bare_conditions() -> CurrentConditions:
    return CurrentConditions(
        coordinate=GeoCoordinate(lat=1.0, lon=2.0),
        main=MainReadings(
            temp=10.0, feels_like=9.0, temp_min=8.0, temp_max=11.0, pressure=1000, humidity=50
        ),
        timestamp=0,
        timezone_offset=0,
        city_id=1,
        name="Nowhere",
    )


class TestCurrentConditions:
    def test_first_condition_drives_display(self, current_conditions: CurrentConditions):
        assert current_conditions.main_description == "Clouds"
        assert current_conditions.weather_icon == "04n"

    def test_no_conditions(self):
        bare = _bare_conditions()
        assert bare.main_description is None
        assert bare.weather_icon == ""

    def test_payload_round_trip(self, current_conditions: CurrentConditions):
        assert decode_current_conditions(current_conditions.to_payload()) == current_conditions

    def test_payload_omits_missing_optionals(self):
        payload = _bare_conditions().to_payload()
        assert "visibility" not in payload
        assert "sea_level" not in payload["main"]
        assert payload["wind"] == {}
        assert decode_current_conditions(payload) == _bare_conditions()
