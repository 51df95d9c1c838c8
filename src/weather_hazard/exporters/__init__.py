"""Exporters for weather snapshots and hazard feeds."""

from weather_hazard.exporters.geojson_export import events_to_geojson, export_geojson
from weather_hazard.exporters.json_export import export_json

__all__ = ["events_to_geojson", "export_geojson", "export_json"]
