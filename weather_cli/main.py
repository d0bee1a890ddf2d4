"""Command-line entry point."""

import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

from weather_cli.cli import run
from weather_cli.config import get_settings
from weather_cli.exceptions import WeatherCliException
from weather_cli.logging_config import get_logger, log_with_context, setup_logging

logger = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the weather CLI.

    Args:
        argv: Arguments after the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    err_console = Console(stderr=True, highlight=False)

    # Load environment variables from .env file in the working directory
    load_dotenv(Path.cwd() / ".env")

    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"error: invalid settings: {e}", markup=False, soft_wrap=True)
        return 2

    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError as e:
        err_console.print(f"error: cannot open log file {settings.log_file}: {e}", markup=False, soft_wrap=True)
        return 2

    try:
        return asyncio.run(run(argv, settings, Console()))
    except WeatherCliException as e:
        log_with_context(
            logger,
            "error",
            e.message,
            error_code=e.code.value,
            event_type="run_failed",
        )
        err_console.print(f"error: {e.message}", markup=False, soft_wrap=True)
        return e.exit_code
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
