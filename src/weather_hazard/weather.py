"""Weather aggregator: resolve -> fetch forecast -> normalize."""

from __future__ import annotations

import logging
from typing import Any

from requests import Session

from weather_hazard.codes import describe
from weather_hazard.config import WeatherHazardConfig
from weather_hazard.fetchers.open_meteo import fetch_forecast
from weather_hazard.geo import resolve
from weather_hazard.http import create_session
from weather_hazard.models import (
    CurrentConditions,
    HourlyForecast,
    LocationQuery,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

MIN_HOURS = 1
MAX_HOURS = 48


def clamp_hours(hours: int) -> int:
    """Constrain the requested hourly window to [1, 48]."""
    return min(max(int(hours), MIN_HOURS), MAX_HOURS)


def parse_hours(raw: str | int | None, default: int = 12) -> int:
    """Lenient query-string parsing; anything unparseable falls back to *default*."""
    if raw is None or raw == "":
        return default
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return default


def _at(values: list[Any], index: int) -> Any:
    return values[index] if index < len(values) else None


def build_snapshot(
    payload: dict[str, Any],
    hours: int,
    label: str | None = None,
    provider: str = "open-meteo",
) -> WeatherSnapshot:
    """Normalize an Open-Meteo forecast payload into a WeatherSnapshot.

    ``hourly`` holds the first *hours* entries of the provider arrays zipped
    by index; entries are never fabricated past the end of ``hourly.time``.
    Values missing upstream stay ``None``.
    """
    current = payload.get("current") or {}
    hourly = payload.get("hourly") or {}
    times = hourly.get("time") or []
    temps = hourly.get("temperature_2m") or []
    codes = hourly.get("weather_code") or []

    entries = [
        HourlyForecast(
            time=t,
            temperature=_at(temps, i),
            code=_at(codes, i),
            description=describe(_at(codes, i)),
        )
        for i, t in enumerate(times[:hours])
    ]

    return WeatherSnapshot(
        location=label,
        latitude=payload.get("latitude"),
        longitude=payload.get("longitude"),
        timezone=payload.get("timezone"),
        current=CurrentConditions(
            time=current.get("time"),
            temperature=current.get("temperature_2m"),
            feels_like=current.get("apparent_temperature"),
            humidity=current.get("relative_humidity_2m"),
            wind_speed=current.get("wind_speed_10m"),
            code=current.get("weather_code"),
            description=describe(current.get("weather_code")),
        ),
        hourly=entries,
        provider=provider,
    )


def get_weather(
    query: LocationQuery,
    hours: int,
    config: WeatherHazardConfig | None = None,
    session: Session | None = None,
) -> WeatherSnapshot:
    """Resolve a location and return its normalized forecast.

    Steps:
    1. Clamp hours to [1, 48]
    2. Resolve the location (optional geocoding call)
    3. Fetch the forecast for the resolved coordinates
    4. Normalize into a WeatherSnapshot

    Resolver and upstream errors propagate unchanged.  Upstream calls are
    retried only when ``config.upstream_retries`` is positive.
    """
    if config is None:
        config = WeatherHazardConfig()
    if session is None:
        session = create_session(retries=config.upstream_retries)

    hours = clamp_hours(hours)
    location = resolve(query, config=config, session=session)

    logger.info(
        "Fetching forecast for (%.4f, %.4f), %d hours",
        location.latitude,
        location.longitude,
        hours,
    )
    payload = fetch_forecast(
        location.latitude,
        location.longitude,
        timeout=config.request_timeout,
        base_url=config.forecast_url,
        session=session,
    )
    snapshot = build_snapshot(
        payload, hours, label=location.label, provider=config.weather_provider
    )
    logger.debug("Forecast returned %d hourly entries", len(snapshot.hourly))
    return snapshot
