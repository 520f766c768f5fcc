"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # SUPABASE (internal database provider)
    # ===================
    supabase_url: Optional[str] = Field(
        None,
        description="Supabase project URL"
    )
    supabase_key: Optional[str] = Field(
        None,
        description="Supabase anon/public key"
    )
    container_table: str = Field(
        default="cfs_containers",
        description="Table holding internal container records"
    )
    hbl_table: str = Field(
        default="cfs_hbls",
        description="Table mapping house bills to container numbers"
    )

    # ===================
    # LIVE TRACKING API
    # ===================
    live_api_base_url: Optional[str] = Field(
        None,
        description="Base URL of the live tracking API group"
    )
    live_api_token: Optional[str] = Field(
        None,
        description="Bearer token for the live tracking API"
    )
    live_api_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Request timeout for a single live API call"
    )

    # ===================
    # TRACKING
    # ===================
    tracking_timeout_seconds: Optional[float] = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Overall budget for one tracking lookup across both providers"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    api_port: int = Field(
        default=8000,
        ge=1000,
        le=65535,
        description="API port"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def supabase_configured(self) -> bool:
        """Check if the internal database is configured."""
        return bool(self.supabase_url and self.supabase_key)

    @property
    def live_api_configured(self) -> bool:
        """Check if the live tracking API is configured."""
        return bool(self.live_api_base_url)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


# For convenient imports: from config.settings import settings
settings = get_settings()
