"""Weather CLI models"""

from weather_cli.models.credentials import Credentials
from weather_cli.models.weather import Condition, MainInfo, WeatherResponse

__all__ = [
    "Credentials",
    "Condition",
    "MainInfo",
    "WeatherResponse",
]
