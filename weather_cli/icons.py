"""Decorative glyphs for OpenWeatherMap condition descriptions."""

from types import MappingProxyType

DEFAULT_ICON = "🌡️"

CONDITION_ICONS = MappingProxyType(
    {
        "clear sky": "☀️",
        "few clouds": "🌤️",
        "scattered clouds": "⛅",
        "broken clouds": "☁️",
        "overcast clouds": "☁️",
        "clouds": "☁️",
        "light rain": "🌦️",
        "drizzle": "🌦️",
        "rain": "🌧️",
        "moderate rain": "🌧️",
        "heavy intensity rain": "🌧️",
        "shower rain": "🌧️",
        "thunderstorm": "⛈️",
        "light snow": "🌨️",
        "snow": "❄️",
        "mist": "🌫️",
        "fog": "🌫️",
        "haze": "🌫️",
    }
)


def icon_for(description: str) -> str:
    """Return the glyph for a description, matching whole strings case-insensitively."""
    return CONDITION_ICONS.get(description.lower(), DEFAULT_ICON)
