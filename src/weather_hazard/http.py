"""Outbound session for the Open-Meteo geocoding and forecast calls."""

from __future__ import annotations

from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_hazard import __version__

USER_AGENT = f"weather-hazard/{__version__}"

# Open-Meteo answers rate limiting with 429 and maintenance with 502-504
RETRY_STATUSES = (429, 502, 503, 504)
RETRY_BACKOFF = 0.5


def create_session(retries: int = 0) -> Session:
    """Session shared by the geocode and forecast calls of one request.

    With the default ``retries=0`` every upstream call is single-attempt and a
    failure fails the request.  A positive ``retries`` (``upstream_retries``
    in the config) re-sends GETs that hit one of ``RETRY_STATUSES``.
    """
    retry = Retry(
        total=retries,
        backoff_factor=RETRY_BACKOFF,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = Session()
    session.headers["User-Agent"] = USER_AGENT
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
