"""Weather CLI"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weather-cli")
except PackageNotFoundError:
    __version__ = "dev"
