"""Exceptions raised while collecting and translating observations."""


class CollectorError(Exception):
    """Base class for collection failures."""


class FetchError(CollectorError):
    """The source document could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DecodeError(CollectorError):
    """The source document is not valid JSON or has the wrong shape."""


class TimestampParseError(CollectorError, ValueError):
    """An observation timestamp does not match YYYYMMDDHHMMSS."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid aifstime_utc value: {value!r}")
