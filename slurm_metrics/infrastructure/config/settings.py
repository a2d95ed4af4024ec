"""Application settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    prometheus_base_url: str = "http://prometheus.flatironinstitute.org"
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    # Unset means no overall deadline for a fetch cycle
    fetch_deadline_seconds: float | None = Field(default=None, gt=0)
    user_agent: str = "slurm-metrics/0.1"

    # Unset disables pushing fetch metrics after a cycle
    pushgateway_url: str | None = None
    pushgateway_job: str = "slurm_metrics"

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )
