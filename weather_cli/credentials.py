"""Load the API key and default city, prompting for them on first run."""

from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt

from weather_cli.exceptions import ConfigWriteException
from weather_cli.logging_config import get_logger, log_with_context
from weather_cli.models.credentials import Credentials

API_KEY_PROMPT = "Please enter your OpenWeatherMap API key"
CITY_PROMPT = "Please enter your preferred city, district, or state"

logger = get_logger(__name__)


def read_credentials(config_path: Path) -> Credentials | None:
    """Read credentials from the config file.

    Args:
        config_path: Path to the two-line config file

    Returns:
        Credentials with line 1 as the API key and line 2 as the city,
        or None if the file cannot be read
    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log_with_context(
            logger,
            "debug",
            "Config file not readable, will prompt",
            config_path=str(config_path),
            error=str(e),
            event_type="config_missing",
        )
        return None

    return Credentials.from_text(text)


def _ask(prompt: str, console: Console, stream: TextIO | None) -> str:
    """Ask one question; end of input counts as an empty answer."""
    try:
        return Prompt.ask(prompt, console=console, stream=stream)
    except EOFError:
        console.print()
        return ""


def prompt_for_credentials(console: Console, stream: TextIO | None = None) -> Credentials:
    """Ask for the API key, then the city, one line each.

    Args:
        console: Console the prompts are written to
        stream: Optional input stream (defaults to standard input)

    Returns:
        Credentials with surrounding whitespace trimmed
    """
    api_key = _ask(API_KEY_PROMPT, console, stream)
    city = _ask(CITY_PROMPT, console, stream)
    return Credentials(api_key=api_key.strip(), city=city.strip())


def save_credentials(config_path: Path, credentials: Credentials) -> None:
    """Write credentials to the config file, replacing any existing content.

    Raises:
        ConfigWriteException: If the file cannot be written
    """
    try:
        config_path.write_text(credentials.to_text(), encoding="utf-8")
    except OSError as e:
        raise ConfigWriteException(
            f"Unable to write to config file {config_path}: {e}",
            details={"config_path": str(config_path)},
        ) from e

    log_with_context(
        logger,
        "info",
        "Saved credentials to config file",
        config_path=str(config_path),
        event_type="config_saved",
    )


def load_credentials(config_path: Path, console: Console, stream: TextIO | None = None) -> Credentials:
    """Return stored credentials, or prompt for them and persist the answers.

    Args:
        config_path: Path to the two-line config file
        console: Console used for prompts
        stream: Optional input stream for the prompts

    Returns:
        Credentials for this run

    Raises:
        ConfigWriteException: If newly entered credentials cannot be saved
    """
    credentials = read_credentials(config_path)
    if credentials is not None:
        return credentials

    credentials = prompt_for_credentials(console, stream)
    save_credentials(config_path, credentials)
    return credentials
