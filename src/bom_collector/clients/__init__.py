"""HTTP clients for weather data sources."""

from .bom import BoMClient, format_interval

__all__ = [
    "BoMClient",
    "format_interval",
]
