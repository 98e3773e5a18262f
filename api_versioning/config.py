"""
Versioning Configuration Module

Centralized configuration for API version negotiation using Pydantic Settings.
Supports environment variables, .env files, and runtime overrides.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Runtime
    debug: bool = Field(default=True, description="Enable debug mode")

    # API Versioning
    api_base_path: str = Field(default="/api", description="URL prefix for versioned routes")
    api_version_header: str = Field(
        default="x-api-version",
        description="Header carrying the requested version (empty disables header routing)",
    )
    api_version_url_param: str = Field(
        default="version",
        description="Path parameter carrying the requested version (empty disables URL routing)",
    )
    api_last_supported_version: str = Field(default="v1", min_length=1)
    api_latest_version: str = Field(default="v3", min_length=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Server
    api_gateway_host: str = "0.0.0.0"
    api_gateway_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton
    """
    return Settings()


# Convenience exports
settings = get_settings()
