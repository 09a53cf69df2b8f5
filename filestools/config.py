"""
Configuration management for filestools.

Uses pydantic-settings for type-safe configuration with environment variable support.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Default chunk size for reading files (8KB)
DEFAULT_CHUNK_SIZE = 8192


class Settings(BaseSettings):
    """Library settings loaded from FILESTOOLS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FILESTOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # -------------------------------------------------------------------------
    # Hashing
    # -------------------------------------------------------------------------
    hash_chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Bytes read per step when streaming a file through a digest"
    )

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------
    text_encoding: str = Field(
        default="utf-8",
        description="Encoding for hashed strings and loaded resources"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Log file path (optional)")
    log_json: bool = Field(default=False, description="Render log lines as JSON")


# Global settings instance, built on first use
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the current settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
