"""Weather service for OpenWeatherMap API integration."""

import httpx
from pydantic import ValidationError

from weather_cli.config import Settings, get_settings
from weather_cli.exceptions import DeserializationException, ProviderReportedException, TransportException
from weather_cli.logging_config import get_logger, log_with_context
from weather_cli.models.weather import WeatherResponse

logger = get_logger(__name__)


async def fetch_current_weather(
    client: httpx.AsyncClient,
    city: str,
    api_key: str,
    settings: Settings | None = None,
) -> httpx.Response:
    """Request current weather for a city.

    The city and key are sent as query parameters, so httpx percent-encodes
    them (``New York`` arrives as ``q=New+York``).

    Args:
        client: HTTP client for making the request
        city: Effective city name
        api_key: OpenWeatherMap API key
        settings: Settings instance (defaults to singleton)

    Returns:
        The raw response, whatever its status

    Raises:
        TransportException: If no response was received (DNS, connection, timeout)
    """
    if settings is None:
        settings = get_settings()

    params = {
        "q": city,
        "appid": api_key,
        "units": "metric",
    }
    timeout = settings.request_timeout if settings.request_timeout is not None else httpx.USE_CLIENT_DEFAULT

    log_with_context(logger, "info", "Requesting current weather", city=city, event_type="weather_request")

    try:
        response = await client.get(settings.api_url, params=params, timeout=timeout)
    except httpx.HTTPError as e:
        raise TransportException(
            f"Failed to fetch weather data: {e}",
            details={"error_type": type(e).__name__, "city": city},
        ) from e

    log_with_context(
        logger,
        "info",
        "Weather provider responded",
        city=city,
        status_code=response.status_code,
        event_type="weather_response",
    )
    return response


def parse_weather(response: httpx.Response) -> WeatherResponse:
    """Deserialize a provider response.

    Args:
        response: Response returned by fetch_current_weather

    Returns:
        WeatherResponse for a successful status

    Raises:
        ProviderReportedException: If the status is not successful and the body is JSON
        DeserializationException: If the body does not have the expected shape
    """
    if not response.is_success:
        try:
            payload = response.json()
        except ValueError as e:
            raise DeserializationException(
                f"Weather provider returned HTTP {response.status_code} with a non-JSON body",
                details={"status_code": response.status_code, "body": response.text},
            ) from e
        raise ProviderReportedException(response.status_code, payload)

    try:
        return WeatherResponse.model_validate_json(response.content)
    except ValidationError as e:
        raise DeserializationException(
            f"Failed to process weather data: {e}",
            details={"error_type": "parsing_error", "errors": e.errors(include_url=False, include_input=False)},
        ) from e
