"""Geographic location models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCoordinate:
    lat: float
    lon: float


@dataclass(frozen=True, eq=False)
class Location:
    """A named place. Two locations are equal when their coordinates match,
    regardless of how the provider spelled the name, state or country."""

    name: str
    lat: float
    lon: float
    country: str | None = None
    state: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return (self.lat, self.lon) == (other.lat, other.lon)

    def __hash__(self) -> int:
        return hash((self.lat, self.lon))

    @property
    def id(self) -> str:
        return f"{self.lat}-{self.lon}"

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(lat=self.lat, lon=self.lon)

    @property
    def state_country(self) -> str | None:
        parts = [p for p in (self.state, self.country) if p]
        return ", ".join(parts) if parts else None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "country": self.country,
            "state": self.state,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        return cls(
            name=str(data["name"]),
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            country=data.get("country"),
            state=data.get("state"),
        )
