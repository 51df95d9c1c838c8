"""JSON exporter for weather snapshots and hazard events."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def export_json(
    data: Any,
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Export a snapshot, an event, or a list of events to a JSON file.

    Objects exposing ``to_dict()`` are serialized through it so absent
    fields stay absent.
    """
    if isinstance(data, list):
        payload: Any = [item.to_dict() if hasattr(item, "to_dict") else item for item in data]
    elif hasattr(data, "to_dict"):
        payload = data.to_dict()
    else:
        payload = data
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=indent, ensure_ascii=False)
    return output_path
