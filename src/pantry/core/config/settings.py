"""Pantry configuration using Pydantic Settings with YAML support.

Configuration is organised in nested sections that mirror the YAML files
under ``config/base/``:

- ``app``: application identity
- ``logging``: log level, format and optional file sink
- ``matching``: recipe bucketing thresholds
- ``data``: optional overrides for the static lookup tables
- ``seed``: which packaged seed data to load at start-up
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Pantry Assistant"
    version: str = "0.1.0"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"
    file: Path | None = None


class MatchingSettings(BaseModel):
    """Recipe-to-inventory bucketing configuration."""

    near_match_threshold: float = Field(default=0.7, ge=0.0, le=1.0)


class DataSettings(BaseModel):
    """Locations of the static lookup tables.

    ``None`` selects the table packaged with ``pantry.data``.
    """

    substitutions_path: Path | None = None
    pairing_rules_path: Path | None = None
    shopping_categories_path: Path | None = None


class SeedSettings(BaseModel):
    """Seed data loaded into an empty record store at start-up."""

    load_recipes: bool = True
    load_sample_pantry: bool = False


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Pantry settings with YAML + environment variable support.

    Priority (highest to lowest):
    1. Values passed to ``Settings()``
    2. Environment variables (``MATCHING__NEAR_MATCH_THRESHOLD=0.8``)
    3. ``.env`` file
    4. Environment-specific YAML files (``config/environments/{APP_ENV}/``)
    5. Base YAML files (``config/base/``)
    6. Default values in code
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    logging: LoggingSettings = LoggingSettings()
    matching: MatchingSettings = MatchingSettings()
    data: DataSettings = DataSettings()
    seed: SeedSettings = SeedSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below env and .env values."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
