import logging
from pathlib import Path

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseSettings):
    """Runtime settings for the weather CLI.

    Every field has a default, so the CLI works without any environment.
    Values can be overridden with ``WEATHER_CLI_*`` environment variables
    (a ``.env`` file in the working directory is loaded by ``main``).
    """

    config_path: Path = Field(default=Path("config.txt"), description="Two-line API key / default city file")
    api_url: str = Field(default=OPENWEATHER_URL, pattern=r"^https?://", description="Current weather endpoint")
    request_timeout: PositiveFloat | None = Field(default=None, description="HTTP timeout in seconds (httpx default if unset)")

    log_level: str = Field(default="WARNING", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_CLI_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got {v!r})")
        return v

    @field_validator("api_url", mode="after")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Strip trailing slashes from the endpoint."""
        return v.rstrip("/")


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide Settings instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
