"""Configuration settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class BoMConfig(BaseSettings):
    """Bureau of Meteorology data source configuration."""

    data_source_url: str = "http://www.bom.gov.au/fwo/IDN60901/IDN60901.94768.json"
    repeat_interval_seconds: int = 1800  # 30 minutes
    request_timeout_seconds: float = 30.0
    scraper_name: str = "Nulah.BoMDataCollector"
    source_repository: str = "https://github.com/ZacMillionaire/Nulah.BoMDataCollector"
    allow_overlap: bool = False  # Skip a tick while the previous run is in flight
    shutdown_grace_seconds: float = 30.0

    model_config = {"env_prefix": "BOM_"}


class InfluxDBConfig(BaseSettings):
    """InfluxDB connection configuration."""

    url: str = "http://localhost:8086"
    token: str = ""
    org: str = "weather"
    bucket: str = "bom-observations"

    model_config = {"env_prefix": "INFLUXDB_"}


class Settings(BaseSettings):
    """Application settings combining all configs."""

    log_level: str = "INFO"
    bom: BoMConfig = BoMConfig()
    influxdb: InfluxDBConfig = InfluxDBConfig()


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
