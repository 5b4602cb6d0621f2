"""Time-series point written to InfluxDB."""

from datetime import datetime, timezone
from typing import Literal

from influxdb_client import Point, WritePrecision
from pydantic import BaseModel, ConfigDict, field_validator

MEASUREMENT = "weather-data"

FieldValue = float | int | str | None


class WeatherPoint(BaseModel):
    """A single observation ready to be written.

    Every point carries the full field set. Missing readings are kept as
    ``None`` so that all points of a run share the same keys.
    """

    model_config = ConfigDict(frozen=True)

    measurement: str = MEASUREMENT
    tags: dict[str, str]
    fields: dict[str, FieldValue]
    timestamp: datetime
    precision: Literal["s"] = "s"

    @field_validator("timestamp")
    @classmethod
    def validate_utc_timezone(cls, v: datetime) -> datetime:
        """Ensure the timestamp is in UTC."""
        if v.tzinfo is None:
            raise ValueError("datetime must have UTC timezone")
        if v.utcoffset() != timezone.utc.utcoffset(None):
            raise ValueError("datetime must be in UTC timezone")
        return v

    def to_influx(self) -> Point:
        """Convert to an influxdb-client Point.

        Line protocol has no null, so ``None`` fields are left out here.
        """
        point = Point(self.measurement)
        for key, value in self.tags.items():
            point.tag(key, value)
        for key, value in self.fields.items():
            if value is not None:
                point.field(key, value)
        point.time(self.timestamp, WritePrecision.S)
        return point
