"""WMO weather-code classification: description, category and icon."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

WeatherCategory = Literal["clear", "cloudy", "fog", "rain", "snow", "thunderstorm", "unknown"]

UNKNOWN = "Unknown"

WEATHER_CODES: Mapping[int, str] = MappingProxyType(
    {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        56: "Freezing drizzle",
        57: "Freezing drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        66: "Freezing rain",
        67: "Freezing rain",
        71: "Slight snow fall",
        73: "Moderate snow fall",
        75: "Heavy snow fall",
        77: "Snow grains",
        80: "Rain showers",
        81: "Rain showers",
        82: "Rain showers",
        85: "Snow showers",
        86: "Snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with hail",
        99: "Thunderstorm with hail",
    }
)

# Disjoint code groups; anything else (drizzle, freezing rain) is "unknown".
_CATEGORY_CODES: dict[WeatherCategory, frozenset[int]] = {
    "clear": frozenset({0, 1}),
    "cloudy": frozenset({2, 3}),
    "fog": frozenset({45, 48}),
    "rain": frozenset({61, 63, 65, 80, 81, 82}),
    "snow": frozenset({71, 73, 75, 77, 85, 86}),
    "thunderstorm": frozenset({95, 96, 99}),
}

_ICONS: dict[WeatherCategory, str] = {
    "clear": "sun",
    "cloudy": "cloud",
    "fog": "fog",
    "rain": "rain",
    "snow": "snow",
    "thunderstorm": "storm",
    "unknown": "cloud",
}


@dataclass(frozen=True)
class WeatherCodeInfo:
    """Classification of a single weather code."""

    code: int | None
    description: str
    category: WeatherCategory
    icon: str


def _as_code(code: Any) -> int | None:
    # bool is an int subclass but never a weather code
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, float) and code.is_integer():
        return int(code)
    return None


def describe(code: Any) -> str:
    """Human-readable description; ``"Unknown"`` for anything not in the table."""
    value = _as_code(code)
    if value is None:
        return UNKNOWN
    return WEATHER_CODES.get(value, UNKNOWN)


def category(code: Any) -> WeatherCategory:
    """Coarse sky/precipitation bucket used for icons and backgrounds."""
    value = _as_code(code)
    if value is not None:
        for name, codes in _CATEGORY_CODES.items():
            if value in codes:
                return name
    return "unknown"


def icon(code: Any) -> str:
    return _ICONS[category(code)]


def classify(code: Any) -> WeatherCodeInfo:
    """Classify a weather code.  Total over all inputs, including ``None``."""
    cat = category(code)
    return WeatherCodeInfo(
        code=_as_code(code),
        description=describe(code),
        category=cat,
        icon=_ICONS[cat],
    )
