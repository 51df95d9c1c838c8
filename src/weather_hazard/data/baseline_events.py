"""Hand-authored baseline hazard events, always present in the feed.

Covers all five hazard types across Indonesia, Japan, the United States
and India.  ``timeframe.start`` is left empty here and stamped with the
request time by :func:`baseline_events`.
"""

from __future__ import annotations

from dataclasses import replace

from weather_hazard.models import EventLocation, HazardEvent, Timeframe

_UNSTAMPED = Timeframe(start="")

BASELINE_EVENTS: tuple[HazardEvent, ...] = (
    HazardEvent(
        id="ID-JKT-FLD-1",
        type="flood",
        severity="high",
        country="Indonesia",
        location=EventLocation(lat=-6.2088, lon=106.8456, name="Jakarta"),
        timeframe=_UNSTAMPED,
        description="Heavy rainfall may flood Jakarta and surrounding areas within 24 hours.",
        confidence=0.82,
        source="Internal model + Open-Meteo forecast",
    ),
    HazardEvent(
        id="ID-JBR-LND-1",
        type="landslide",
        severity="medium",
        country="Indonesia",
        location=EventLocation(lat=-7.8024, lon=110.3647, name="Yogyakarta / Hills"),
        timeframe=_UNSTAMPED,
        description="Moderate landslide risk on hillsides after medium-intensity rain.",
        confidence=0.66,
        source="Rainfall heuristic + general terrain",
    ),
    HazardEvent(
        id="JP-TKO-ST-1",
        type="storm",
        severity="medium",
        country="Japan",
        location=EventLocation(lat=35.6762, lon=139.6503, name="Tokyo"),
        timeframe=_UNSTAMPED,
        description="Strong winds and heavy rain expected over Tokyo.",
        confidence=0.58,
        source="Open-Meteo forecast",
    ),
    HazardEvent(
        id="US-NYC-FLD-1",
        type="flood",
        severity="low",
        country="United States",
        location=EventLocation(lat=40.7128, lon=-74.006, name="New York"),
        timeframe=_UNSTAMPED,
        description="Localized ponding possible at several points in the city.",
        confidence=0.44,
        source="Open-Meteo forecast",
    ),
    HazardEvent(
        id="IN-MUM-FLD-1",
        type="flood",
        severity="high",
        country="India",
        location=EventLocation(lat=19.076, lon=72.8777, name="Mumbai"),
        timeframe=_UNSTAMPED,
        description="Intense monsoon rain may cause major flooding.",
        confidence=0.86,
        source="Internal model + Open-Meteo",
    ),
    HazardEvent(
        id="ID-ACE-TSU-1",
        type="tsunami",
        severity="high",
        country="Indonesia",
        location=EventLocation(lat=5.55, lon=95.3167, name="Aceh (Coast)"),
        timeframe=_UNSTAMPED,
        description=(
            "Tsunami potential on the Aceh coast linked to offshore seismic activity. "
            "Follow official warnings."
        ),
        confidence=0.73,
        source="Scenario simulation + seismic activity",
    ),
    HazardEvent(
        id="JP-PAC-EQ-1",
        type="earthquake",
        severity="medium",
        country="Japan",
        location=EventLocation(lat=36.2048, lon=138.2529, name="Honshu"),
        timeframe=_UNSTAMPED,
        description="Moderate seismic activity with onshore quake potential. Follow local authorities.",
        confidence=0.51,
        source="Global seismic feed (simulated)",
    ),
)


def baseline_events(start: str) -> list[HazardEvent]:
    """Fresh copy of the baseline with ``timeframe.start`` set to *start*."""
    return [replace(ev, timeframe=Timeframe(start=start)) for ev in BASELINE_EVENTS]
