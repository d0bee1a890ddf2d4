"""Custom exceptions for the weather CLI with process exit codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured diagnostics."""

    # Generic errors
    WEATHER_CLI_ERROR = "WEATHER_CLI_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_WRITE_ERROR = "CONFIG_WRITE_ERROR"

    # Weather errors
    WEATHER_ERROR = "WEATHER_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"


class WeatherCliException(Exception):
    """Base exception for weather CLI errors with exit code support.

    All custom exceptions inherit from this class so that ``main`` can
    turn any of them into a diagnostic and a process exit code.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_CLI_ERROR,
        exit_code: int = 1,
        details: dict[str, Any] | None = None,
    ):
        """Initialize weather CLI exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            exit_code: Process exit code (default 1)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.exit_code = exit_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationException(WeatherCliException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        exit_code: int = 1,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, exit_code, details)


class ConfigWriteException(ConfigurationException):
    """Config file could not be written."""

    def __init__(self, message: str = "Unable to write to config file", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CONFIG_WRITE_ERROR,
            details=details,
        )


class WeatherException(WeatherCliException):
    """Weather lookup errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        exit_code: int = 1,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, exit_code, details)


class TransportException(WeatherException):
    """Request never produced an HTTP response (DNS, connection, timeout)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TRANSPORT_ERROR,
            details=details,
        )


class DeserializationException(WeatherException):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.DESERIALIZATION_ERROR,
            details=details,
        )


class ProviderReportedException(WeatherException):
    """Provider answered with a non-success status and a JSON error body.

    This ends the run without weather data but is not a crash: the payload
    is printed and the process exits with status 0.
    """

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload
        super().__init__(
            f"Weather provider returned HTTP {status_code}",
            code=ErrorCode.PROVIDER_ERROR,
            exit_code=0,
            details={"status_code": status_code, "payload": payload},
        )
