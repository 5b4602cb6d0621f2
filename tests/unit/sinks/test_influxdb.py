"""Unit tests for the InfluxDB sink."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from influxdb_client import WritePrecision  # type: ignore[attr-defined]

from bom_collector.config import InfluxDBConfig
from bom_collector.schemas import WeatherPoint
from bom_collector.sinks import InfluxDBSink


@pytest.fixture
def influxdb_config() -> InfluxDBConfig:
    """InfluxDB configuration for testing."""
    return InfluxDBConfig(
        url="http://influx.test:8086",
        token="test-token",
        org="test-org",
        bucket="test-bucket",
    )


@pytest.fixture
def mock_influx_client() -> MagicMock:
    """Mock InfluxDB client whose write API records calls."""
    client = MagicMock()
    client.write_api.return_value = MagicMock()
    return client


@pytest.fixture
def sample_points() -> list[WeatherPoint]:
    """Two points from one run."""
    return [
        WeatherPoint(
            tags={"source": "Bureau of Meteorology"},
            fields={"air_temp": 25.3, "rain_trace": None},
            timestamp=datetime(2024, 1, 15, 6, 30, tzinfo=timezone.utc),
        ),
        WeatherPoint(
            tags={"source": "Bureau of Meteorology"},
            fields={"air_temp": 25.0, "rain_trace": 0.2},
            timestamp=datetime(2024, 1, 15, 6, 0, tzinfo=timezone.utc),
        ),
    ]


class TestInfluxDBSinkWrite:
    def test_write_batch(
        self,
        influxdb_config: InfluxDBConfig,
        mock_influx_client: MagicMock,
        sample_points: list[WeatherPoint],
    ):
        """Test all points are written in one call to the configured bucket."""
        sink = InfluxDBSink(influxdb_config, client=mock_influx_client)

        sink.write(sample_points)

        write_api = mock_influx_client.write_api.return_value
        write_api.write.assert_called_once()
        kwargs = write_api.write.call_args.kwargs
        assert kwargs["bucket"] == "test-bucket"
        assert kwargs["org"] == "test-org"
        assert kwargs["write_precision"] == WritePrecision.S
        assert len(kwargs["record"]) == 2

    def test_written_records_are_line_protocol_ready(
        self,
        influxdb_config: InfluxDBConfig,
        mock_influx_client: MagicMock,
        sample_points: list[WeatherPoint],
    ):
        """Test records are influxdb-client points at second precision."""
        sink = InfluxDBSink(influxdb_config, client=mock_influx_client)

        sink.write(sample_points)

        records = mock_influx_client.write_api.return_value.write.call_args.kwargs["record"]
        first, second = (record.to_line_protocol() for record in records)
        assert "rain_trace" not in first
        assert "rain_trace=0.2" in second
        assert first.endswith(" 1705300200")

    def test_empty_batch_skips_write(
        self, influxdb_config: InfluxDBConfig, mock_influx_client: MagicMock
    ):
        """Test an empty batch makes no request."""
        sink = InfluxDBSink(influxdb_config, client=mock_influx_client)

        sink.write([])

        mock_influx_client.write_api.assert_not_called()


class TestInfluxDBSinkClient:
    def test_client_lazily_created(self, influxdb_config: InfluxDBConfig):
        """Test the client is built from configuration on first use."""
        with patch("bom_collector.sinks.influxdb.InfluxDBClient") as client_cls:
            sink = InfluxDBSink(influxdb_config)
            client_cls.assert_not_called()

            _ = sink.client
            _ = sink.client

        client_cls.assert_called_once_with(
            url="http://influx.test:8086",
            token="test-token",
            org="test-org",
        )

    def test_close(self, influxdb_config: InfluxDBConfig, mock_influx_client: MagicMock):
        """Test close releases the client."""
        sink = InfluxDBSink(influxdb_config, client=mock_influx_client)

        sink.close()

        mock_influx_client.close.assert_called_once()
        assert sink._client is None
