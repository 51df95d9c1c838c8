"""FastAPI boundary for the weather aggregator and the hazard feed."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated, Any

import numpy as np
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from weather_hazard import __version__
from weather_hazard.config import WeatherHazardConfig
from weather_hazard.errors import InternalError, WeatherHazardError
from weather_hazard.exporters import events_to_geojson
from weather_hazard.feed import get_feed, parse_int, parse_types
from weather_hazard.geo import build_query, parse_coordinate
from weather_hazard.models import FeedRequest
from weather_hazard.weather import get_weather, parse_hours

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Load configuration and store startup state for the /health endpoint."""
    application.state.config = WeatherHazardConfig()
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.weather_requests = 0
    application.state.feed_requests = 0
    yield


app = FastAPI(
    title="Weather Hazard API",
    description="Weather snapshots and hazard event feeds for locations worldwide.",
    version=__version__,
    lifespan=lifespan,
)


def _cache_headers(max_age: int) -> dict[str, str]:
    return {"cache-control": f"public, max-age={max_age}"}


@app.get("/health")
def health() -> dict[str, Any]:
    """Server health check with uptime, version, and request counts."""
    now = datetime.now(tz=timezone.utc)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - app.state.start_time).total_seconds(), 1),
        "weather_requests": app.state.weather_requests,
        "feed_requests": app.state.feed_requests,
    }


@app.get("/weather")
def weather(
    q: Annotated[str | None, Query(description="City or place name.")] = None,
    lat: Annotated[str | None, Query(description="Latitude in degrees.")] = None,
    lon: Annotated[str | None, Query(description="Longitude in degrees.")] = None,
    hours: Annotated[str | None, Query(description="Hourly entries to return (1-48).")] = None,
) -> JSONResponse:
    """Current conditions and an hourly forecast for a place or coordinates.

    Coordinates take precedence when both ``lat`` and ``lon`` parse as
    numbers; otherwise ``q`` is geocoded.  Malformed numbers are treated as
    absent rather than rejected.
    """
    config: WeatherHazardConfig = app.state.config
    app.state.weather_requests += 1

    try:
        query = build_query(q, parse_coordinate(lat), parse_coordinate(lon))
        snapshot = get_weather(
            query, parse_hours(hours, default=config.default_hours), config=config
        )
    except WeatherHazardError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except Exception as exc:
        logger.exception("Weather request failed")
        err = InternalError(details=str(exc))
        return JSONResponse(
            status_code=err.status_code,
            content={"error": err.message, "details": err.details},
        )

    return JSONResponse(
        content=snapshot.to_dict(), headers=_cache_headers(config.weather_max_age)
    )


@app.get("/disasters")
def disasters(
    country: Annotated[str | None, Query(description="Country name or substring.")] = None,
    types: Annotated[
        str | None, Query(description="Comma-separated hazard types."),
    ] = None,
    count: Annotated[
        str | None, Query(description="Synthetic events to add (clamped to 10-1000)."),
    ] = None,
    seed: Annotated[
        str | None, Query(description="Seed for reproducible synthetic events."),
    ] = None,
    format: Annotated[
        str, Query(description="Response format: json or geojson."),
    ] = "json",
) -> JSONResponse:
    """Hazard event feed.  Never fails on malformed filters; they match nothing."""
    config: WeatherHazardConfig = app.state.config
    app.state.feed_requests += 1

    seed_value = parse_int(seed)
    rng = np.random.default_rng(seed_value if seed_value is not None and seed_value >= 0 else None)

    request = FeedRequest(
        country=country.lower() if country else None,
        types=parse_types(types),
        count=parse_int(count),
    )
    events = get_feed(request, rng=rng)

    if format.lower() == "geojson":
        content: dict[str, Any] = events_to_geojson(events, source=config.feed_provider)
    else:
        content = {"events": [e.to_dict() for e in events], "provider": config.feed_provider}

    return JSONResponse(content=content, headers=_cache_headers(config.feed_max_age))
