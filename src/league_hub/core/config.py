"""
Configuration management for League Hub.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables prefixed with LEAGUE_HUB_.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Example: LEAGUE_HUB_LEAGUE_ID=25101040 LEAGUE_HUB_EXPORT_PATH=./export.json
    """

    model_config = SettingsConfigDict(
        env_prefix="LEAGUE_HUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "League Hub API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = Field(default="INFO", description="Root log level for the CLI and API")

    # ==========================================================================
    # League Data
    # ==========================================================================
    league_id: Optional[str] = Field(
        default=None,
        description="League whose export is served; overrides the id stored in the export",
    )
    export_path: Path = Field(
        default=Path("league_export.json"),
        description="JSON export produced by the game companion app",
    )

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_prefix: str = "/api/v1"
    cors_allow_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Allowed CORS origins. Set to ['*'] for development.",
    )
    cors_allow_methods: list[str] = ["GET", "HEAD", "OPTIONS"]

    # ==========================================================================
    # Caching Configuration
    # ==========================================================================
    cache_enabled: bool = True
    cache_ttl: int = Field(default=300, ge=1, description="TTL for computed responses (seconds)")

    @computed_field
    @property
    def show_error_detail(self) -> bool:
        """Whether unexpected errors may expose their message to clients."""
        return self.debug and self.environment != "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
