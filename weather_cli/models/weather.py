"""Pydantic models for weather data."""

from pydantic import BaseModel, ConfigDict, Field

from weather_cli.icons import icon_for


class Condition(BaseModel):
    """Weather condition entry from OpenWeatherMap."""

    model_config = ConfigDict(strict=True)

    description: str


class MainInfo(BaseModel):
    """Main weather metrics from OpenWeatherMap (metric units)."""

    model_config = ConfigDict(strict=True)

    temp: float
    pressure: int
    humidity: int


class WeatherResponse(BaseModel):
    """Subset of the OpenWeatherMap current weather payload used for display.

    Types are strict: a pressure of ``"1012"`` or ``1012.5`` is rejected
    rather than coerced. Unknown fields are ignored.
    """

    model_config = ConfigDict(strict=True)

    name: str
    main: MainInfo
    weather: list[Condition] = Field(min_length=1)

    @property
    def condition(self) -> Condition:
        """First condition entry; the only one displayed."""
        return self.weather[0]

    @property
    def icon(self) -> str:
        """Glyph for the displayed condition."""
        return icon_for(self.condition.description)
