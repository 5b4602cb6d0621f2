"""BoM Data Collector - Bureau of Meteorology observations to InfluxDB.

Periodically fetches a BoM station observation document, translates each
observation into a time-series point and writes the batch to InfluxDB.

Usage:
    from bom_collector import BoMClient, BoMCollector, InfluxDBSink, Scheduler
    from bom_collector.translator import translate
"""

__version__ = "0.1.0"

from .clients import BoMClient
from .collector import BoMCollector, RunSummary
from .config import Settings, get_settings
from .exceptions import CollectorError, DecodeError, FetchError, TimestampParseError
from .scheduler import Scheduler
from .schemas import Header, Notice, RawObservation, SourceDocument, WeatherPoint
from .sinks import InfluxDBSink, MetricsSink

__all__ = [
    "BoMClient",
    "BoMCollector",
    "CollectorError",
    "DecodeError",
    "FetchError",
    "Header",
    "InfluxDBSink",
    "MetricsSink",
    "Notice",
    "RawObservation",
    "RunSummary",
    "Scheduler",
    "Settings",
    "SourceDocument",
    "TimestampParseError",
    "WeatherPoint",
    "get_settings",
]
