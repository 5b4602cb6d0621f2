"""InfluxDB sink for observation points."""

import logging
from typing import Sequence

from influxdb_client import InfluxDBClient, WritePrecision  # type: ignore[attr-defined]
from influxdb_client.client.write_api import SYNCHRONOUS

from ..config import InfluxDBConfig
from ..schemas import WeatherPoint

logger = logging.getLogger(__name__)


class InfluxDBSink:
    """Writes batches of weather points to a single bucket.

    The client is created on first use and reused for every batch.
    """

    def __init__(
        self,
        config: InfluxDBConfig,
        client: InfluxDBClient | None = None,
    ) -> None:
        """Initialize InfluxDB sink.

        Args:
            config: InfluxDB connection settings.
            client: Optional pre-built client for testing.
        """
        self.config = config
        self._client = client

    @property
    def client(self) -> InfluxDBClient:
        """Lazy-initialize InfluxDB client."""
        if self._client is None:
            self._client = InfluxDBClient(
                url=self.config.url,
                token=self.config.token,
                org=self.config.org,
            )
        return self._client

    def write(self, points: Sequence[WeatherPoint]) -> None:
        """Write all points in one request.

        Args:
            points: Points to write.
        """
        if not points:
            return

        write_api = self.client.write_api(write_options=SYNCHRONOUS)
        write_api.write(
            bucket=self.config.bucket,
            org=self.config.org,
            record=[point.to_influx() for point in points],
            write_precision=WritePrecision.S,
        )
        logger.debug(
            "Wrote %d points to %s/%s", len(points), self.config.org, self.config.bucket
        )

    def close(self) -> None:
        """Close InfluxDB client."""
        if self._client:
            self._client.close()  # type: ignore[no-untyped-call]
            self._client = None
