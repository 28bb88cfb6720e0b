"""
Configuration Management for the Budget Engine

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The engine itself is pure; configuration only selects which tax bracket
table is injected and how results are rounded for presentation.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Computation settings."""

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    tax_year: int = Field(
        default=2024,
        ge=2000,
        le=2100,
        description="Tax year the bracket table applies to (informational)"
    )
    tax_brackets_file: Optional[str] = Field(
        default=None,
        description="Path to a JSON bracket table replacing the built-in 2024 table"
    )
    presentation_decimal_places: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places used when rendering API payloads"
    )
    max_hours_per_week: Decimal = Field(
        default=Decimal("168"),
        gt=0,
        description="Hours per week above which hourly income is flagged"
    )

    @field_validator('tax_brackets_file')
    @classmethod
    def validate_tax_brackets_file(cls, v: Optional[str]) -> Optional[str]:
        """Reject a configured bracket file that does not exist."""
        if v is not None and not Path(v).is_file():
            raise ValueError(f"Tax bracket file not found at {v}")
        return v


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_ENGINE_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Log level for the budget_engine logger"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return v.upper()


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def engine(self) -> EngineSettings:
        return EngineSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    `<name>_error` entry describing each failure.
    Useful for startup checks.
    """
    results: dict[str, object] = {}

    settings = get_settings()

    for name in ("engine", "logging"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
