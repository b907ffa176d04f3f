"""Central environment-driven settings for the payment processor.

Loaded once per process at import time. Every key can be overridden through
environment variables or a local `.env` file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProcessorSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-processor"
    log_level: str = "INFO"
    enable_notifications: bool = True
    # Kept for configuration compatibility; the processor performs no retries.
    max_retry_attempts: int = 3
    default_currency: str = "USD"
    repository_backend: str = "memory"
    database_dsn: str = "sqlite:///./payflow.db"
    gateway_latency_seconds: float = 0.5
    gateway_success_rate: float = 0.9
    notification_latency_seconds: float = 0.2
    otel_exporter_otlp_endpoint: str | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = ProcessorSettings()
