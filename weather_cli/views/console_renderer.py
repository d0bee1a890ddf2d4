"""Terminal rendering of weather results."""

import json
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weather_cli.models.weather import WeatherResponse

ERROR_PREFIX = "error: "


def format_number(value: float) -> str:
    """Format a reading without a trailing ``.0`` on whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def weather_rows(weather: WeatherResponse) -> list[tuple[str, str]]:
    """Build the (label, value) rows of the weather table, in display order."""
    return [
        ("City", weather.name),
        ("Temperature (°C)", format_number(weather.main.temp)),
        ("Pressure (hPa)", str(weather.main.pressure)),
        ("Humidity (%)", str(weather.main.humidity)),
        ("Condition", f"{weather.icon} {weather.condition.description}"),
    ]


def build_weather_table(weather: WeatherResponse) -> Table:
    """Build a two-column table for the current conditions."""
    table = Table(show_header=False, box=box.ASCII2, show_lines=False)
    table.add_column("label", justify="center")
    table.add_column("value", justify="center")

    # Text() keeps provider strings from being parsed as markup or emoji codes
    for label, value in weather_rows(weather):
        table.add_row(Text(label), Text(value))

    return table


def render_weather(console: Console, weather: WeatherResponse) -> None:
    """Print the weather table."""
    console.print(build_weather_table(weather))


def format_provider_error(payload: Any) -> str:
    """Format a provider error payload as one compact JSON line."""
    body = json.dumps(payload, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return f"{ERROR_PREFIX}{body}"


def render_provider_error(console: Console, payload: Any) -> None:
    """Print the provider error payload verbatim on a single line."""
    console.print(
        format_provider_error(payload),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
