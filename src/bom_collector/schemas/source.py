"""Models for the Bureau of Meteorology observation feed.

The feed wraps everything in an ``observations`` envelope::

    {"observations": {"notice": [...], "header": [...], "data": [...]}}

Decoding is lenient: missing keys fall back to empty values and unknown keys
are ignored. Only malformed JSON, a wrong envelope, or a value that cannot be
coerced to its declared type is rejected.
"""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    JsonValue,
    RootModel,
    ValidationError,
)

from ..exceptions import DecodeError


def _empty_if_none(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _empty_list_if_none(value: Any) -> Any:
    return [] if value is None else value


Text = Annotated[str, BeforeValidator(_empty_if_none)]


class _SourceModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Unparsed(RootModel[JsonValue]):
    """Raw JSON value for a field that is carried but never interpreted.

    The feed types these inconsistently (numbers, ``"-"``, null), so they are
    kept verbatim rather than coerced.
    """

    model_config = ConfigDict(frozen=True)


class Notice(_SourceModel):
    """Copyright and attribution block."""

    copyright: Text = ""
    copyright_url: Text = ""
    disclaimer_url: Text = ""
    feedback_url: Text = ""


class Header(_SourceModel):
    """Per-station metadata accompanying the observations."""

    refresh_message: Text = ""
    location_id: Text = Field(default="", alias="ID")
    main_location_id: Text = Field(default="", alias="main_ID")
    name: Text = ""
    state_time_zone: Text = ""
    time_zone: Text = ""
    product_name: Text = ""
    state: Text = ""


class RawObservation(_SourceModel):
    """One half-hourly reading for a station."""

    # Identification
    sort_order: int | None = None
    wmo: int | None = None
    name: Text = ""
    history_product: Text = ""
    local_date_time: Text = ""
    local_date_time_full: Text = ""
    aifstime_utc: Text = ""
    lat: float | None = None
    lon: float | None = None

    # Temperature & humidity
    air_temp: float | None = None
    apparent_temp: float | None = Field(default=None, alias="apparent_t")
    delta_t: float | None = None  # wet bulb depression
    dew_point: float | None = Field(default=None, alias="dewpt")
    relative_humidity: int | None = Field(default=None, alias="rel_hum")

    # Pressure
    pressure: float | None = Field(default=None, alias="press")
    pressure_msl: float | None = Field(default=None, alias="press_msl")
    pressure_qnh: float | None = Field(default=None, alias="press_qnh")
    pressure_tendency: Text = Field(default="", alias="press_tend")

    # Rain: numeric string, or "-" for no reading
    rain_trace: Text = ""

    # Wind
    wind_direction: Text = Field(default="", alias="wind_dir")
    wind_speed_kmh: int | None = Field(default=None, alias="wind_spd_kmh")
    wind_speed_kt: int | None = Field(default=None, alias="wind_spd_kt")
    gust_kmh: int | None = None
    gust_kt: int | None = None

    # Sky & sea state
    cloud: Text = ""
    cloud_type: Text = ""
    sea_state: Text = ""
    swell_dir_worded: Text = ""
    vis_km: Text = ""
    weather: Text = ""

    # Reserved for future use
    cloud_base_m: Unparsed | None = None
    cloud_oktas: Unparsed | None = None
    cloud_type_id: Unparsed | None = None
    swell_height: Unparsed | None = None
    swell_period: Unparsed | None = None


class SourceDocument(_SourceModel):
    """Notices, headers and observations from a single fetch."""

    notices: Annotated[list[Notice], BeforeValidator(_empty_list_if_none)] = Field(
        default_factory=list, alias="notice"
    )
    headers: Annotated[list[Header], BeforeValidator(_empty_list_if_none)] = Field(
        default_factory=list, alias="header"
    )
    observations: Annotated[list[RawObservation], BeforeValidator(_empty_list_if_none)] = Field(
        default_factory=list, alias="data"
    )

    @property
    def notice(self) -> Notice | None:
        """First notice, if any."""
        return self.notices[0] if self.notices else None

    @property
    def header(self) -> Header | None:
        """First header, if any."""
        return self.headers[0] if self.headers else None


class _Payload(_SourceModel):
    observations: SourceDocument


def decode_document(payload: bytes | str) -> SourceDocument:
    """Decode a feed payload into a SourceDocument.

    Args:
        payload: Raw JSON text as returned by the feed.

    Returns:
        Decoded document.

    Raises:
        DecodeError: If the payload is not JSON or lacks the observations envelope.
    """
    try:
        return _Payload.model_validate_json(payload).observations
    except ValidationError as e:
        raise DecodeError(f"Invalid observation document: {e}") from e
