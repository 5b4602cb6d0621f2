"""Fixtures for schema unit tests."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def minimal_document_data() -> dict:
    """Smallest payload accepted by decode_document."""
    return {"observations": {}}


@pytest.fixture
def valid_point_data() -> dict:
    """Valid WeatherPoint data."""
    return {
        "tags": {"source": "Bureau of Meteorology", "ID": "IDN60901", "main_ID": "IDN60902"},
        "fields": {
            "air_temp": 25.3,
            "rel_hum": 57,
            "rain_trace": None,
            "wind_dir": "NE",
        },
        "timestamp": datetime(2024, 1, 15, 6, 30, 0, tzinfo=timezone.utc),
    }
