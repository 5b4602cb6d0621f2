"""Protocols for metrics sinks."""

from typing import Protocol, Sequence

from ..schemas import WeatherPoint


class MetricsSink(Protocol):
    """Protocol for time-series stores."""

    def write(self, points: Sequence[WeatherPoint]) -> None:
        """Write a batch of points."""
        ...

    def close(self) -> None:
        """Close the sink and clean up resources."""
        ...
