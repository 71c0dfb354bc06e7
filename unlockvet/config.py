"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file) and composed into a
single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Which bundled data the service loads."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    catalog_states: str = Field(
        default="",
        description="Comma-separated state codes to load (empty = all bundled states)",
    )
    zip_data_path: str = Field(
        default="",
        description="Optional path to a zip location JSON file replacing the bundled table",
    )

    @property
    def states(self) -> list[str] | None:
        """Parse catalog_states into a list of state codes, or None for all."""
        if not self.catalog_states:
            return None
        return [code.strip().upper() for code in self.catalog_states.split(",") if code.strip()]


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.log_level
        settings.catalog.states
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


# Module-level singleton, import this wherever settings are needed.
settings = Settings()
