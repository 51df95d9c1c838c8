"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from weather_hazard import __version__
from weather_hazard.codes import icon
from weather_hazard.config import OutputFormat, WeatherHazardConfig
from weather_hazard.errors import WeatherHazardError
from weather_hazard.exporters import export_geojson, export_json
from weather_hazard.feed import get_feed, parse_types
from weather_hazard.geo import build_query
from weather_hazard.models import FeedRequest, HazardEvent
from weather_hazard.weather import get_weather

Exporter = Callable[[list[HazardEvent], Path], Path]

EXPORTERS: dict[str, Exporter] = {
    "json": export_json,
    "geojson": export_geojson,
}

_SEVERITY_STYLE = {"high": "red", "medium": "dark_orange", "low": "yellow"}

app = typer.Typer(
    name="weather-hazard",
    help="Weather snapshots and hazard event feeds for locations worldwide.",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"weather-hazard {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


def _fmt(value: Any, unit: str = "") -> str:
    return "-" if value is None else f"{value}{unit}"


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Weather Hazard: forecasts and hazard feeds for any location."""


@app.command()
def weather(
    q: Annotated[
        str | None,
        typer.Option("--q", "-q", help="City or place name."),
    ] = None,
    lat: Annotated[
        float | None,
        typer.Option("--lat", help="Latitude in degrees."),
    ] = None,
    lon: Annotated[
        float | None,
        typer.Option("--lon", help="Longitude in degrees."),
    ] = None,
    hours: Annotated[
        int,
        typer.Option("--hours", "-n", help="Hourly entries to show (1-48)."),
    ] = 12,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the raw snapshot as JSON."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Show current conditions and the hourly forecast for a location."""
    _setup_logging(verbose)
    config = WeatherHazardConfig()

    try:
        snapshot = get_weather(build_query(q, lat, lon), hours, config=config)
    except WeatherHazardError as exc:
        console.print(f"[red]Weather lookup failed:[/red] {exc.message}")
        raise typer.Exit(code=1) from None

    if as_json:
        console.print_json(json.dumps(snapshot.to_dict()))
        return

    cur = snapshot.current
    title = snapshot.location or f"{snapshot.latitude}, {snapshot.longitude}"
    console.print(f"\n[bold]{title}[/bold] ({snapshot.timezone or 'unknown timezone'})")
    console.print(
        f"{cur.description} [dim]({icon(cur.code)})[/dim]  "
        f"{_fmt(cur.temperature, '°C')}, feels like {_fmt(cur.feels_like, '°C')}, "
        f"humidity {_fmt(cur.humidity, '%')}, wind {_fmt(cur.wind_speed, ' km/h')}"
    )

    table = Table(title="Hourly Forecast")
    table.add_column("Time", style="dim")
    table.add_column("Temp", justify="right")
    table.add_column("Conditions")
    for entry in snapshot.hourly:
        table.add_row(entry.time, _fmt(entry.temperature, "°C"), entry.description)
    console.print(table)


@app.command()
def disasters(
    country: Annotated[
        str | None,
        typer.Option("--country", "-c", help="Country name or substring."),
    ] = None,
    types: Annotated[
        str | None,
        typer.Option("--types", "-t", help="Comma-separated hazard types."),
    ] = None,
    count: Annotated[
        int | None,
        typer.Option("--count", "-k", help="Synthetic events to add (clamped to 10-1000)."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", min=0, help="Seed for reproducible synthetic events."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the feed to this file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output file format: json or geojson."),
    ] = "json",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """List hazard events, optionally augmented with synthetic ones."""
    _setup_logging(verbose)

    request = FeedRequest(
        country=country.lower() if country else None,
        types=parse_types(types),
        count=count,
    )
    events = get_feed(request, rng=np.random.default_rng(seed))

    if not events:
        console.print("[yellow]No hazard events matched.[/yellow]")
        raise typer.Exit()

    table = Table(title="Hazard Events")
    table.add_column("ID", style="dim")
    table.add_column("Type", style="bold")
    table.add_column("Severity")
    table.add_column("Country")
    table.add_column("Location")
    table.add_column("Confidence", justify="right")

    for ev in events:
        style = _SEVERITY_STYLE.get(ev.severity, "")
        table.add_row(
            ev.id,
            ev.type,
            f"[{style}]{ev.severity}[/{style}]",
            ev.country,
            f"{ev.location.name or ''} ({ev.location.lat}, {ev.location.lon})",
            f"{ev.confidence:.2f}",
        )

    console.print(table)
    console.print(f"Total events: {len(events)}")

    if output is not None:
        EXPORTERS[output_format](events, output)
        console.print(f"{output_format.upper()} written to [bold]{output}[/bold]")
