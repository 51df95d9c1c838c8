"""GeoJSON exporter for the hazard event feed."""

from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from weather_hazard.models import HazardEvent


def _make_event_feature(event: HazardEvent) -> dict[str, Any]:
    """Create a GeoJSON Point Feature for a hazard event."""
    properties = {
        "id": event.id,
        "type": event.type,
        "severity": event.severity,
        "country": event.country,
        "name": event.location.name,
        "start": event.timeframe.start,
        "end": event.timeframe.end,
        "description": event.description,
        "confidence": event.confidence,
        "source": event.source,
    }
    return {
        "type": "Feature",
        "id": event.id,
        "geometry": {
            "type": "Point",
            "coordinates": [event.location.lon, event.location.lat],
        },
        "properties": {k: v for k, v in properties.items() if v is not None},
    }


def _bbox(events: list[HazardEvent]) -> list[float]:
    lats = [e.location.lat for e in events]
    lons = [e.location.lon for e in events]
    return [min(lons), min(lats), max(lons), max(lats)]


def events_to_geojson(
    events: list[HazardEvent],
    source: str = "weather-hazard",
) -> dict[str, Any]:
    """Build a FeatureCollection with one Point feature per event.

    GeoJSON coordinates are [longitude, latitude] per RFC 7946.  The ``bbox``
    member covers every event and is omitted for an empty feed.
    """
    collection: dict[str, Any] = {
        "type": "FeatureCollection",
        "metadata": {
            "generated": datetime.now(tz=timezone.utc).isoformat(),
            "source": source,
            "event_count": len(events),
            "type_counts": dict(Counter(e.type for e in events)),
        },
        "features": [_make_event_feature(e) for e in events],
    }
    if events:
        collection["bbox"] = _bbox(events)
    return collection


def export_geojson(
    events: list[HazardEvent],
    output_path: Path,
    source: str = "weather-hazard",
) -> Path:
    """Export hazard events as a GeoJSON FeatureCollection file."""
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(events_to_geojson(events, source), f, indent=2, ensure_ascii=False)
    return output_path
