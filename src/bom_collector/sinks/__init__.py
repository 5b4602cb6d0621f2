"""Sinks for writing observation points."""

from .influxdb import InfluxDBSink
from .protocols import MetricsSink

__all__ = ["InfluxDBSink", "MetricsSink"]
