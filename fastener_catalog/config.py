"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
Only the CLI and the storage layer's default-path resolution read these
values; the catalog and shipping functions take explicit inputs.
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

    # =========================================================================
    # Catalog artifacts
    # =========================================================================
    catalog_config_path: str = Field(
        default="data/catalog.config.json",
        description="Default catalog config read by `generate`",
    )
    catalog_output_path: str = Field(
        default="data/catalog.generated.json",
        description="Default generated catalog written by `generate` and read by `validate`",
    )
    shipping_rates_path: str = Field(
        default="data/shipping_rates.json",
        description="Default flat shipping price tables (legacy and current)",
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
        description="Output logs as JSON outside dev",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
