"""
Centralized configuration for the marketplace core.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, FEED_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Freelance Market"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, only used by run_migrations.py

    # Object storage
    storage_bucket: str = "images"
    storage_content_type: str = "image/jpeg"

    # Data loading
    feed_load_timeout_seconds: float = 10.0
    live_query_interval_seconds: float = 2.0
    live_query_max_interval_seconds: float = 8.0  # backoff cap while nothing changes
    home_listing_limit: int = 5
    home_job_limit: int = 3

    # Registration
    min_password_length: int = 6


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
