"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FETCH_ERROR_MESSAGE = "เกิดข้อผิดพลาดในการโหลดสินค้า"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Catalog service
    catalog_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the catalog REST service",
    )
    catalog_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every catalog request",
    )

    # Copy
    fetch_error_message: str = Field(
        default=DEFAULT_FETCH_ERROR_MESSAGE,
        description="Shown when a catalog failure carries no message of its own",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Path | None = Field(
        default=None,
        description="Write logs to this file (the terminal is owned by the TUI)",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
