"""Unit test fixtures - mocks and sample data."""

import pytest

from bom_collector.schemas import Header, RawObservation


@pytest.fixture
def sample_observation_data() -> dict:
    """Raw observation as it appears in the feed."""
    return {
        "sort_order": 0,
        "wmo": 94768,
        "name": "Sydney - Observatory Hill",
        "history_product": "IDN60901",
        "local_date_time": "15/05:30pm",
        "local_date_time_full": "20240115173000",
        "aifstime_utc": "20240115063000",
        "lat": -33.9,
        "lon": 151.2,
        "apparent_t": 24.1,
        "cloud": "-",
        "cloud_base_m": None,
        "cloud_oktas": 4,
        "cloud_type_id": "-",
        "cloud_type": "-",
        "delta_t": 5.2,
        "gust_kmh": 30,
        "gust_kt": 16,
        "air_temp": 25.3,
        "dewpt": 16.4,
        "press": 1012.4,
        "press_qnh": 1012.5,
        "press_msl": 1012.3,
        "press_tend": "-",
        "rain_trace": "1.2",
        "rel_hum": 57,
        "sea_state": "-",
        "swell_dir_worded": "-",
        "swell_height": None,
        "swell_period": None,
        "vis_km": "10",
        "weather": "-",
        "wind_dir": "NE",
        "wind_spd_kmh": 20,
        "wind_spd_kt": 11,
    }


@pytest.fixture
def sample_header_data() -> dict:
    """Station header as it appears in the feed."""
    return {
        "refresh_message": "Issued at  5:32 pm EDT Monday 15 January 2024",
        "ID": "IDN60901",
        "main_ID": "IDN60902",
        "name": "Sydney - Observatory Hill",
        "state_time_zone": "NSW",
        "time_zone": "EDT",
        "product_name": "Weather Observations",
        "state": "New South Wales",
    }


@pytest.fixture
def sample_observation(sample_observation_data: dict) -> RawObservation:
    """Decoded observation."""
    return RawObservation.model_validate(sample_observation_data)


@pytest.fixture
def sample_header(sample_header_data: dict) -> Header:
    """Decoded header."""
    return Header.model_validate(sample_header_data)
