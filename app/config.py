"""
Configuration management using Pydantic Settings.
Challenge: Centralized config, env validation, type safety.
Design: Single source of truth for all environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Furniture Catalog API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Product store (in-memory)
    product_max_records: int = 10000
    # A product stays "new" until more than this many whole days have passed
    new_product_days: int = 30
    # Load the demo furniture catalog on startup
    seed_demo_data: bool = False

    # Catalog client: where browsing state survives between sessions
    catalog_state_path: str = ".catalog-state.json"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request (performance)."""
    return Settings()
