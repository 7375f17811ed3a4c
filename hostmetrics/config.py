from __future__ import annotations

from pydantic_settings import BaseSettings

# Fixed sampling cadence; not exposed as a setting.
SAMPLE_INTERVAL_SECONDS: float = 10.0


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "Host Metrics Exporter"
    log_level: str = "info"

    # --- server ---
    host: str = "0.0.0.0"
    port: int = 7080

    model_config = {"env_prefix": "HOSTMETRICS_"}


settings = Settings()
