"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PETAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Petak Fudbal API"
    api_version: str = "0.1.0"
    api_description: str = "Awards, player stats and rivalries for the Friday football group"
    debug: bool = False

    # Supabase (PostgREST) backend
    supabase_url: str = "http://localhost:54321"
    supabase_anon_key: str = ""
    supabase_timeout: float = 30.0

    # Award thresholds (inclusive minimum matches played)
    min_matches_eff: int = 3
    min_matches_form: int = 3

    # Rivalries
    min_duels: int = 3

    # Matches are bucketed into months/years in this zone
    timezone: str = "Europe/Belgrade"

    # QUIET, NORMAL, VERBOSE or DEBUG
    log_level: str = "NORMAL"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
