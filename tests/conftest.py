"""Shared fixtures for weather_hazard tests."""

from __future__ import annotations

from datetime import datetime, timezone

import numpy as np
import pytest

FIXED_NOW = datetime(2026, 10, 19, 6, 0, tzinfo=timezone.utc)


def make_forecast(hours_available: int = 24, **overrides) -> dict:
    """Open-Meteo style forecast payload with *hours_available* hourly entries."""
    payload = {
        "latitude": -6.25,
        "longitude": 106.875,
        "timezone": "Asia/Jakarta",
        "current": {
            "time": "2026-10-19T13:00",
            "temperature_2m": 31.4,
            "apparent_temperature": 36.2,
            "relative_humidity_2m": 68,
            "wind_speed_10m": 9.7,
            "weather_code": 95,
        },
        "hourly": {
            "time": [f"2026-10-19T{h % 24:02d}:00" for h in range(hours_available)],
            "temperature_2m": [25.0 + (h % 10) for h in range(hours_available)],
            "weather_code": [[0, 3, 61, 95][h % 4] for h in range(hours_available)],
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def jakarta_geocode() -> dict:
    return {
        "results": [
            {
                "id": 1642911,
                "name": "Jakarta",
                "country": "Indonesia",
                "latitude": -6.2088,
                "longitude": 106.8456,
                "timezone": "Asia/Jakarta",
            }
        ],
        "generationtime_ms": 0.5,
    }


@pytest.fixture
def forecast_payload() -> dict:
    return make_forecast()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so sampled events are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def forecast_factory():
    """Build forecast payloads with a chosen hourly length or overrides."""
    return make_forecast
