"""Configuration management for mdview."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Remote loading
    request_timeout: float = Field(
        default=10.0,
        alias="MDVIEW_REQUEST_TIMEOUT",
    )
    max_retries: int = Field(
        default=3,
        alias="MDVIEW_MAX_RETRIES",
    )

    # Local files
    encoding: str = Field(
        default="utf-8",
        alias="MDVIEW_ENCODING",
    )
    save_dir: Path = Field(
        default=Path("."),
        alias="MDVIEW_SAVE_DIR",
    )

    log_level: str = Field(
        default="WARNING",
        alias="MDVIEW_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
