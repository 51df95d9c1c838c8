"""Error taxonomy shared by the resolver, the aggregator and the HTTP layer."""

from __future__ import annotations


class WeatherHazardError(Exception):
    """Base class for errors the boundary layer maps to a status code."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequest(WeatherHazardError):
    """Required input is missing."""

    status_code = 400


class NotFound(WeatherHazardError):
    """Geocoding succeeded but matched nothing."""

    status_code = 404


class UpstreamUnavailable(WeatherHazardError):
    """An outbound call failed or returned a non-success status."""

    status_code = 502


class InternalError(WeatherHazardError):
    """Unexpected failure, reported with a diagnostic string."""

    status_code = 500

    def __init__(self, message: str = "Unexpected error", details: str = "") -> None:
        super().__init__(message)
        self.details = details
