"""
Front service configuration using Pydantic Settings.

All settings can be overridden via environment variables with the
"SERVICE_A_" prefix (e.g., SERVICE_A_BACK_SERVICE_URL) or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Front service settings loaded from environment variables."""

    # =========================================================================
    # Service Settings
    # =========================================================================

    service_name: str = Field(
        default="service-a",
        description="Service name reported to the tracing backend"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Service version"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Bind host"
    )
    port: int = Field(
        default=8080,
        description="Bind port",
        gt=0,
        lt=65536
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    json_logs: bool = Field(
        default=True,
        description="Render logs as JSON"
    )

    # =========================================================================
    # Back Service
    # =========================================================================

    back_service_url: str = Field(
        default="http://service-b:8081",
        description="Base URL of the back (temperature) service"
    )
    http_timeout: Optional[float] = Field(
        default=None,
        description="Back service request timeout in seconds; None waits indefinitely",
        gt=0
    )

    # =========================================================================
    # Tracing
    # =========================================================================

    zipkin_endpoint: str = Field(
        default="http://zipkin:9411/api/v2/spans",
        description="Zipkin span collection endpoint"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_A_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()
