"""
Back service configuration using Pydantic Settings.

Settings use the "SERVICE_B_" environment prefix, except the weather API
key which is read from WEATHERAPI_KEY. A .env file in the working
directory is also loaded.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Back service settings loaded from environment variables."""

    # =========================================================================
    # Service Settings
    # =========================================================================

    service_name: str = Field(
        default="service-b",
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
        default=8081,
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
    # External APIs
    # =========================================================================

    viacep_base_url: str = Field(
        default="https://viacep.com.br",
        description="Postal code directory API base URL"
    )
    weatherapi_base_url: str = Field(
        default="http://api.weatherapi.com",
        description="Weather API base URL"
    )
    weatherapi_key: str = Field(
        default="",
        validation_alias=AliasChoices("WEATHERAPI_KEY", "weatherapi_key"),
        description="Weather API key"
    )
    http_timeout: Optional[float] = Field(
        default=None,
        description="Outbound request timeout in seconds; None waits indefinitely",
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
        env_prefix="SERVICE_B_",
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
