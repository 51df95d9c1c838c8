"""Data models for weather snapshots and the hazard event feed."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

HazardType = Literal["flood", "landslide", "storm", "earthquake", "tsunami"]
Severity = Literal["low", "medium", "high"]

HAZARD_TYPES: tuple[HazardType, ...] = ("flood", "landslide", "storm", "earthquake", "tsunami")
SEVERITIES: tuple[Severity, ...] = ("low", "medium", "high")


def _drop_none(value: Any) -> Any:
    """Recursively remove ``None``-valued keys so absent fields stay absent."""
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


@dataclass(frozen=True)
class PlaceQuery:
    """Free-text location lookup, e.g. ``"Jakarta"``."""

    name: str


@dataclass(frozen=True)
class CoordinateQuery:
    """Explicit coordinates; skips geocoding."""

    latitude: float
    longitude: float


LocationQuery = PlaceQuery | CoordinateQuery


@dataclass(frozen=True)
class ResolvedLocation:
    """Coordinates for one request, with an optional geocoder label."""

    latitude: float
    longitude: float
    label: str | None = None
    timezone: str | None = None


@dataclass(frozen=True)
class CurrentConditions:
    """Current conditions block.  Fields missing upstream stay ``None``."""

    time: str | None = None
    temperature: float | None = None
    feels_like: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    code: int | None = None
    description: str = "Unknown"


@dataclass(frozen=True)
class HourlyForecast:
    """One hourly entry, zipped by index from the provider arrays."""

    time: str
    temperature: float | None = None
    code: int | None = None
    description: str = "Unknown"


@dataclass
class WeatherSnapshot:
    """Normalized forecast response for one location."""

    latitude: float | None
    longitude: float | None
    timezone: str | None
    current: CurrentConditions
    hourly: list[HourlyForecast] = field(default_factory=list)
    location: str | None = None
    provider: str = "open-meteo"

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload; ``None`` values are omitted rather than zeroed."""
        return _drop_none(
            {
                "location": self.location,
                "coordinates": {"latitude": self.latitude, "longitude": self.longitude},
                "timezone": self.timezone,
                "current": asdict(self.current),
                "hourly": [asdict(h) for h in self.hourly],
                "provider": self.provider,
            }
        )


@dataclass(frozen=True)
class EventLocation:
    """Point location of a hazard event."""

    lat: float
    lon: float
    name: str | None = None


@dataclass(frozen=True)
class Timeframe:
    """Start (ISO 8601) and optional end of a hazard event."""

    start: str
    end: str | None = None


@dataclass(frozen=True)
class HazardEvent:
    """A single baseline or synthetic hazard event."""

    id: str
    type: HazardType
    severity: Severity
    country: str
    location: EventLocation
    timeframe: Timeframe
    description: str
    confidence: float
    source: str

    def to_dict(self) -> dict[str, Any]:
        return _drop_none(asdict(self))


@dataclass(frozen=True)
class RegionBox:
    """Named lat/lon bounding box used to bias synthetic sampling."""

    name: str
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def contains(self, lat: float, lon: float) -> bool:
        """Inclusive bounds check."""
        return self.lat_min <= lat <= self.lat_max and self.lon_min <= lon <= self.lon_max


@dataclass(frozen=True)
class FeedRequest:
    """Hazard feed query.  All fields optional."""

    country: str | None = None
    types: frozenset[str] = frozenset()
    count: int | None = None
