"""Configuration model for the weather and hazard service."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

OutputFormat = Literal["json", "geojson"]

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class WeatherHazardConfig(BaseSettings):
    """All configurable parameters for the weather and hazard service.

    Values can be set via constructor arguments, environment variables
    prefixed with WEATHER_HAZARD_, or defaults.
    """

    model_config = {"env_prefix": "WEATHER_HAZARD_"}

    geocoding_url: str = Field(
        default=GEOCODING_URL, description="Open-Meteo geocoding search endpoint."
    )
    forecast_url: str = Field(
        default=FORECAST_URL, description="Open-Meteo forecast endpoint."
    )
    request_timeout: int = Field(
        default=10, ge=1, le=120, description="HTTP request timeout in seconds."
    )
    upstream_retries: int = Field(
        default=0, ge=0, le=5, description="Retries per upstream GET on 429/5xx; 0 is one attempt."
    )
    default_hours: int = Field(
        default=12, ge=1, le=48, description="Hourly entries returned when none are requested."
    )
    weather_max_age: int = Field(
        default=60, ge=0, description="cache-control max-age (s) for weather responses."
    )
    feed_max_age: int = Field(
        default=30, ge=0, description="cache-control max-age (s) for hazard feed responses."
    )
    weather_provider: str = Field(
        default="open-meteo", description="Provider label reported with weather snapshots."
    )
    feed_provider: str = Field(
        default="internal-sample", description="Provider label reported with the hazard feed."
    )
