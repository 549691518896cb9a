"""
Application configuration using Pydantic Settings.

Centralizes runtime configuration with environment variable support.
Values are read from the environment (prefix ``MEMENTO_``) and ``.env``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="MEMENTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared settings store, read by the interactive and widget surfaces
    database_url: str = "sqlite:///./data/memento_mori.db"
    profile_key: str = "lifeData"

    # Rendered PNGs
    output_dir: str = "~/.memento_mori/renders"

    # Environment
    environment: str = "development"
    log_level: str = "INFO"
    log_to_file: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
