"""Open-Meteo geocoding and forecast fetchers."""

from __future__ import annotations

import logging
from typing import Any

from requests import RequestException, Session

from weather_hazard.config import FORECAST_URL, GEOCODING_URL
from weather_hazard.errors import UpstreamUnavailable
from weather_hazard.http import create_session

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "weather_code",
)
HOURLY_FIELDS = ("temperature_2m", "weather_code")


def _get_json(
    session: Session,
    url: str,
    params: dict[str, str | float | int],
    timeout: int,
    what: str,
) -> dict[str, Any]:
    """Single GET; transport errors, non-2xx and non-object bodies become UpstreamUnavailable."""
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = session.get(url, params=params, timeout=timeout)
        if not resp.ok:
            logger.warning("%s returned HTTP %d", what, resp.status_code)
            raise UpstreamUnavailable(f"{what} failed")
        data = resp.json()
    except RequestException as exc:
        logger.warning("%s request failed: %s", what, exc)
        raise UpstreamUnavailable(f"{what} failed") from exc

    if not isinstance(data, dict):
        logger.warning("%s returned a %s body, expected an object", what, type(data).__name__)
        raise UpstreamUnavailable(f"{what} failed")
    return data


def fetch_geocoding(
    name: str,
    timeout: int = 10,
    base_url: str = GEOCODING_URL,
    session: Session | None = None,
) -> list[dict[str, Any]]:
    """Look up the single best match for a place name.

    Returns the provider's ``results`` list, empty when nothing matched.
    """
    if session is None:
        session = create_session()

    data = _get_json(session, base_url, {"name": name, "count": 1}, timeout, "Geocoding")
    return data.get("results") or []


def fetch_forecast(
    latitude: float,
    longitude: float,
    timeout: int = 10,
    base_url: str = FORECAST_URL,
    session: Session | None = None,
) -> dict[str, Any]:
    """Fetch current and hourly conditions; timezone is detected by the provider."""
    if session is None:
        session = create_session()

    params: dict[str, str | float | int] = {
        "latitude": latitude,
        "longitude": longitude,
        "timezone": "auto",
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
    }
    return _get_json(session, base_url, params, timeout, "Weather provider")
