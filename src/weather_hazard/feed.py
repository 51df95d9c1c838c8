"""Hazard event feed: curated baseline plus synthetic, region-biased events."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timezone

import numpy as np

from weather_hazard.data.baseline_events import baseline_events
from weather_hazard.data.regions import boxes_for
from weather_hazard.models import (
    HAZARD_TYPES,
    SEVERITIES,
    EventLocation,
    FeedRequest,
    HazardEvent,
    Timeframe,
)

logger = logging.getLogger(__name__)

MIN_COUNT = 10
MAX_COUNT = 1000

CONFIDENCE_MIN = 0.4
CONFIDENCE_MAX = 0.9

# Non-polar fallback when no regional bias is available
GLOBAL_LAT = (-60.0, 60.0)
GLOBAL_LON = (-180.0, 180.0)
GLOBAL = "Global"

SYNTHETIC_SOURCE = "Synthetic generator"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clamp_count(count: int | None) -> int | None:
    """Clamp a positive count to [10, 1000]; absent or non-positive means none."""
    if count is None or count <= 0:
        return None
    return min(max(count, MIN_COUNT), MAX_COUNT)


def parse_types(raw: str | None) -> frozenset[str]:
    """Split a comma list into a lowercase set, dropping blanks."""
    if not raw:
        return frozenset()
    return frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


def parse_int(raw: str | int | None) -> int | None:
    """Lenient integer parsing for query parameters.

    Reads the leading integer and ignores whatever follows, so ``"12.5"``
    gives 12 and ``"25abc"`` gives 25.  No leading digits means absent.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def generate_events(
    count: int,
    country: str | None,
    rng: np.random.Generator,
    start: str,
) -> list[HazardEvent]:
    """Generate *count* synthetic events, biased toward the country's regions.

    The country label is the requested name in title case when it has region
    boxes, otherwise ``"Global"`` with coordinates drawn from the non-polar
    global band.
    """
    boxes = boxes_for(country)
    label = country.strip().title() if boxes and country else GLOBAL

    events: list[HazardEvent] = []
    for idx in range(1, count + 1):
        hazard = HAZARD_TYPES[int(rng.integers(len(HAZARD_TYPES)))]
        severity = SEVERITIES[int(rng.integers(len(SEVERITIES)))]

        if boxes:
            box = boxes[int(rng.integers(len(boxes)))]
            lat = float(rng.uniform(box.lat_min, box.lat_max))
            lon = float(rng.uniform(box.lon_min, box.lon_max))
            region = box.name
        else:
            lat = float(rng.uniform(*GLOBAL_LAT))
            lon = float(rng.uniform(*GLOBAL_LON))
            region = GLOBAL

        confidence = round(float(rng.uniform(CONFIDENCE_MIN, CONFIDENCE_MAX)), 2)

        events.append(
            HazardEvent(
                id=f"EV-{idx}-{hazard}-{severity}",
                type=hazard,
                severity=severity,
                country=label,
                location=EventLocation(lat=round(lat, 4), lon=round(lon, 4), name=region),
                timeframe=Timeframe(start=start),
                description=f"Potential {severity} {hazard} risk in the {region} region.",
                confidence=confidence,
                source=SYNTHETIC_SOURCE,
            )
        )
    return events


def filter_events(
    events: Iterable[HazardEvent],
    country: str | None = None,
    types: Iterable[str] = (),
) -> list[HazardEvent]:
    """Keep events matching a country substring and/or a type set.

    Country matching is a case-insensitive substring test against
    ``event.country``.  Unrecognised types simply match nothing.
    """
    needle = country.strip().lower() if country else ""
    wanted = frozenset(types)

    result = list(events)
    if needle:
        result = [e for e in result if needle in e.country.lower()]
    if wanted:
        result = [e for e in result if e.type in wanted]
    return result


def get_feed(
    request: FeedRequest,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
) -> list[HazardEvent]:
    """Build the hazard feed for one request.

    Steps:
    1. Start from the baseline events
    2. Append ``clamp(count, 10, 1000)`` synthetic events when count > 0
    3. Filter by country substring, then by type membership

    Order is insertion order: baseline first, then generated.
    """
    if rng is None:
        rng = np.random.default_rng()
    if now is None:
        now = datetime.now(tz=timezone.utc)
    start = now.isoformat()

    events = baseline_events(start)

    count = clamp_count(request.count)
    if count is not None:
        logger.debug("Generating %d synthetic events (country=%r)", count, request.country)
        events.extend(generate_events(count, request.country, rng, start))

    filtered = filter_events(events, request.country, request.types)
    logger.info("Hazard feed: %d of %d events after filtering", len(filtered), len(events))
    return filtered
