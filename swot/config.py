"""Service configuration: store location, report formatting and telemetry."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SWOT_"}

    # Persistence
    redis_url: str = "redis://redis:6379/0"
    store_key: str = "swot-analysis"
    store_socket_timeout: float = 1.0  # seconds, per command
    store_connect_timeout: float = 1.0

    # Reports
    report_date_format: str = "%d/%m/%Y"

    # Telemetry
    log_level: str = "INFO"
    otlp_endpoint: str = ""  # empty disables OTLP export
    service_name: str = "swot-board"
    service_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
