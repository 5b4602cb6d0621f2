"""Translation of BoM observations into InfluxDB points."""

import math
import re
from datetime import datetime, timezone

from .exceptions import TimestampParseError
from .schemas import Header, RawObservation, WeatherPoint

SOURCE_TAG = "Bureau of Meteorology"

# Fixed-width UTC, e.g. 20240115063000
_AIFSTIME_PATTERN = re.compile(r"\d{14}", re.ASCII)
_AIFSTIME_FORMAT = "%Y%m%d%H%M%S"


def parse_aifstime(value: str) -> datetime:
    """Parse a ``YYYYMMDDHHMMSS`` UTC timestamp.

    Args:
        value: Timestamp string from the observation.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        TimestampParseError: If the value is not exactly 14 digits forming a valid date.
    """
    if not _AIFSTIME_PATTERN.fullmatch(value):
        raise TimestampParseError(value)
    try:
        parsed = datetime.strptime(value, _AIFSTIME_FORMAT)
    except ValueError as e:
        raise TimestampParseError(value) from e
    return parsed.replace(tzinfo=timezone.utc)


def parse_rain_trace(value: str) -> float | None:
    """Parse the rain trace reading.

    ``"-"`` (or anything else non-numeric) means no reading and maps to None.
    ``"0.0"`` is a measured trace amount and stays 0.0.
    """
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def translate(observation: RawObservation, header: Header | None = None) -> WeatherPoint:
    """Convert one observation into a point.

    Args:
        observation: Observation from the feed.
        header: First header of the document, if the feed returned one.

    Returns:
        WeatherPoint with the full field set.

    Raises:
        TimestampParseError: If aifstime_utc is malformed.
    """
    timestamp = parse_aifstime(observation.aifstime_utc)

    tags = {"source": SOURCE_TAG}
    if header is not None:
        tags["ID"] = header.location_id
        tags["main_ID"] = header.main_location_id

    fields = {
        "air_temp": observation.air_temp,
        "apparent_t": observation.apparent_temp,
        "delta_t": observation.delta_t,
        "rel_hum": observation.relative_humidity,
        "rain_trace": parse_rain_trace(observation.rain_trace),
        "press": observation.pressure,
        "press_msl": observation.pressure_msl,
        "press_qnh": observation.pressure_qnh,
        "wind_dir": observation.wind_direction,
        "wind_spd_kmh": observation.wind_speed_kmh,
        "gust_kmh": observation.gust_kmh,
        "dewpt": observation.dew_point,
    }

    return WeatherPoint(tags=tags, fields=fields, timestamp=timestamp)
