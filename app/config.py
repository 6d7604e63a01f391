"""
Configuration management for the Asset API.
Uses pydantic-settings for environment-based configuration.
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

    # API Settings
    PROJECT_NAME: str = "Versioned Asset API"
    DEBUG: bool = False

    # Asset store (PostgreSQL via asyncpg, SQLite via aiosqlite for dev)
    DATABASE_URL: str = "sqlite+aiosqlite:///./assets_dev.db"

    # API versioning
    DEFAULT_API_VERSION: str = "2.0"
    ASSUME_DEFAULT_VERSION_WHEN_UNSPECIFIED: bool = True
    API_VERSION_HEADER: str = "x-api-version"
    # Adds api-supported-versions / api-deprecated-versions headers
    REPORT_API_VERSIONS: bool = True

    # Per-version OpenAPI documents under /openapi/{group}.json
    DOCS_ENABLED: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
