"""One weather lookup: credentials, effective city, request, output."""

from collections.abc import Sequence
from typing import TextIO

import httpx
from rich.console import Console

from weather_cli.config import Settings
from weather_cli.credentials import load_credentials
from weather_cli.exceptions import ProviderReportedException
from weather_cli.logging_config import get_logger, log_with_context
from weather_cli.services import weather_service
from weather_cli.views.console_renderer import render_provider_error, render_weather

logger = get_logger(__name__)


def resolve_city(args: Sequence[str], default_city: str) -> str:
    """Pick the city for this run.

    Args:
        args: Command-line arguments after the program name
        default_city: City stored in the config file

    Returns:
        The arguments joined by single spaces, or the default city if there are none
    """
    if args:
        return " ".join(args)
    return default_city


async def run(
    args: Sequence[str],
    settings: Settings,
    console: Console,
    client: httpx.AsyncClient | None = None,
    stdin: TextIO | None = None,
) -> int:
    """Look up and print the current weather once.

    Args:
        args: Command-line arguments after the program name
        settings: Settings instance
        console: Console for prompts and output
        client: Optional HTTP client (a new one is opened and closed otherwise)
        stdin: Optional input stream for the first-run prompts

    Returns:
        Process exit code (0 for a rendered table or a provider error)

    Raises:
        ConfigWriteException: If prompted credentials cannot be saved
        TransportException: If the request fails without a response
        DeserializationException: If the response body has an unexpected shape
    """
    credentials = load_credentials(settings.config_path, console, stdin)
    city = resolve_city(args, credentials.city)

    if client is None:
        async with httpx.AsyncClient() as owned_client:
            response = await weather_service.fetch_current_weather(owned_client, city, credentials.api_key, settings)
    else:
        response = await weather_service.fetch_current_weather(client, city, credentials.api_key, settings)

    try:
        weather = weather_service.parse_weather(response)
    except ProviderReportedException as e:
        log_with_context(
            logger,
            "info",
            "Weather provider reported an error",
            city=city,
            status_code=e.status_code,
            event_type="provider_error",
        )
        render_provider_error(console, e.payload)
        return e.exit_code

    render_weather(console, weather)
    return 0
