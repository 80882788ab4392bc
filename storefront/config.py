"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # =========================================================================
    # Catalog API
    # =========================================================================
    catalog_api_base: str = Field(
        default="http://localhost:9000",
        description="Base URL of the external catalog REST API",
    )
    catalog_api_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Catalog API request timeout in seconds",
    )

    # =========================================================================
    # Browsing
    # =========================================================================
    default_sort_key: Literal["name", "priceAsc", "priceDesc", "recent"] = Field(
        default="recent",
        description="Sort order used when a browse request does not specify one",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
