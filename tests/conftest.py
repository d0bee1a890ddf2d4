"""Pytest configuration and shared fixtures."""

import io
from unittest.mock import AsyncMock

import httpx
import pytest
from rich.console import Console

from weather_cli import config
from weather_cli.config import Settings


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def config_path(tmp_path):
    """Path of a config file inside a temporary directory (not created)."""
    return tmp_path / "config.txt"


@pytest.fixture
def mock_settings(config_path):
    """Settings instance with test values."""
    return Settings(
        config_path=config_path,
        api_url="https://weather.test/data/2.5/weather",
        log_level="DEBUG",
    )


@pytest.fixture
def console():
    """Console writing plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)


@pytest.fixture
def console_output(console):
    """Callable returning everything printed to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def reset_settings_singleton():
    """Clear the cached Settings instance before and after a test."""
    config._settings_instance = None
    yield
    config._settings_instance = None


@pytest.fixture
def mock_weather_response():
    """Mock OpenWeatherMap current weather response for Paris."""
    return {
        "coord": {"lon": 2.3488, "lat": 48.8534},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "base": "stations",
        "main": {
            "temp": 15.0,
            "feels_like": 14.2,
            "temp_min": 14.0,
            "temp_max": 17.0,
            "pressure": 1012,
            "humidity": 60,
        },
        "visibility": 10000,
        "wind": {"speed": 3.5, "deg": 180},
        "clouds": {"all": 0},
        "dt": 1760781600,
        "timezone": 7200,
        "id": 2988507,
        "name": "Paris",
        "cod": 200,
    }


@pytest.fixture
def city_not_found_response():
    """OpenWeatherMap error body for an unknown city."""
    return {"cod": "404", "message": "city not found"}
