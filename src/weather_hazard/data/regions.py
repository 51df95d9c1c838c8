"""Sub-regions per country for biasing synthetic event sampling.

Boxes approximate each country's plausible geography; they are not exact
borders and are never used for containment decisions.  Countries missing
from the registry simply have no regional bias.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from weather_hazard.models import RegionBox

# lowercase country name -> ordered, non-empty boxes
REGION_BOXES: Mapping[str, tuple[RegionBox, ...]] = MappingProxyType(
    {
        "indonesia": (
            RegionBox("Sumatra", lat_min=-6.0, lat_max=5.9, lon_min=95.0, lon_max=106.0),
            RegionBox("Jawa", lat_min=-8.5, lat_max=-5.5, lon_min=105.0, lon_max=114.0),
            RegionBox("Kalimantan", lat_min=-3.0, lat_max=3.0, lon_min=108.0, lon_max=117.0),
            RegionBox("Sulawesi", lat_min=-5.5, lat_max=1.6, lon_min=118.0, lon_max=125.0),
            RegionBox("Papua", lat_min=-9.0, lat_max=-1.0, lon_min=131.0, lon_max=141.0),
        ),
        "japan": (
            RegionBox("Honshu", lat_min=34.0, lat_max=41.0, lon_min=136.0, lon_max=141.0),
        ),
        "india": (
            RegionBox("India", lat_min=8.0, lat_max=28.0, lon_min=72.0, lon_max=88.0),
        ),
        "united states": (
            RegionBox("US", lat_min=25.0, lat_max=49.0, lon_min=-124.0, lon_max=-66.0),
        ),
    }
)


def boxes_for(country: str | None) -> tuple[RegionBox, ...]:
    """Return the boxes for a country name, or ``()`` when none are known."""
    if not country:
        return ()
    return REGION_BOXES.get(country.strip().lower(), ())
