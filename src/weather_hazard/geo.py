"""Location resolution: free-text names or explicit coordinates."""

from __future__ import annotations

import logging
import math

from requests import Session

from weather_hazard.config import WeatherHazardConfig
from weather_hazard.errors import InvalidRequest, NotFound, UpstreamUnavailable
from weather_hazard.fetchers.open_meteo import fetch_geocoding
from weather_hazard.models import CoordinateQuery, LocationQuery, PlaceQuery, ResolvedLocation

logger = logging.getLogger(__name__)


def parse_coordinate(raw: str | float | None) -> float | None:
    """Parse a query-string number; unparseable or non-finite values are absent."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def build_query(
    q: str | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> LocationQuery:
    """Pick exactly one query form from loose request inputs.

    Coordinates win when both are present.  Presence is checked with
    ``is not None`` so the equator and prime meridian (0.0) are usable.
    """
    if lat is not None and lon is not None:
        return CoordinateQuery(latitude=lat, longitude=lon)
    if q and q.strip():
        return PlaceQuery(name=q.strip())
    raise InvalidRequest("Provide either q (city name) or lat & lon.")


def resolve(
    query: LocationQuery,
    config: WeatherHazardConfig | None = None,
    session: Session | None = None,
) -> ResolvedLocation:
    """Turn a location query into coordinates.

    Coordinate queries are returned as-is with no outbound call.  Place
    queries cost one geocoding request for the best match; the label joins
    place name and country with ``", "``.

    Raises:
        InvalidRequest: the place name is blank.
        UpstreamUnavailable: the geocoding call failed.
        NotFound: the geocoder returned no results.
    """
    if isinstance(query, CoordinateQuery):
        return ResolvedLocation(latitude=query.latitude, longitude=query.longitude)

    name = query.name.strip() if query.name else ""
    if not name:
        raise InvalidRequest("Provide either q (city name) or lat & lon.")

    if config is None:
        config = WeatherHazardConfig()

    results = fetch_geocoding(
        name,
        timeout=config.request_timeout,
        base_url=config.geocoding_url,
        session=session,
    )
    if not results:
        logger.info("No geocoding match for %r", name)
        raise NotFound("Location not found")

    best = results[0] if isinstance(results, list) else None
    if not isinstance(best, dict) or best.get("latitude") is None or best.get("longitude") is None:
        logger.warning("Geocoding match for %r has no coordinates", name)
        raise UpstreamUnavailable("Geocoding failed")

    label = ", ".join(part for part in (best.get("name"), best.get("country")) if part)
    resolved = ResolvedLocation(
        latitude=best["latitude"],
        longitude=best["longitude"],
        label=label or None,
        timezone=best.get("timezone"),
    )
    logger.info("Resolved %r to %s (%.4f, %.4f)", name, label, resolved.latitude, resolved.longitude)
    return resolved
