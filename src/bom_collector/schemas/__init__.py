"""BoM feed and time-series point schemas.

Pydantic models for decoding the observation feed and describing the points
written to InfluxDB.
"""

from .point import MEASUREMENT, WeatherPoint
from .source import (
    Header,
    Notice,
    RawObservation,
    SourceDocument,
    Unparsed,
    decode_document,
)

__all__ = [
    "MEASUREMENT",
    "Header",
    "Notice",
    "RawObservation",
    "SourceDocument",
    "Unparsed",
    "WeatherPoint",
    "decode_document",
]
