"""Configuration management for the D&D 5E sheet engine.

This module provides centralized configuration management using
pydantic-settings, supporting environment variables, .env files, and
runtime overrides.

Example:
    >>> from dnd_sheet.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.attunement_slots
    3

Environment Variables:
    DND_SHEET_DEBUG: Enable debug mode
    DND_SHEET_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_SHEET_RULES_ATTUNEMENT_SLOTS: Maximum attuned items per character
    DND_SHEET_RULES_CARRY_CAPACITY_MULTIPLIER: Pounds carried per point of STR
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_sheet.core.constants import (
    CARRY_CAPACITY_MULTIPLIER,
    DEFAULT_CURRENCY_TABLE,
    ENCUMBERED_MULTIPLIER,
    HEAVILY_ENCUMBERED_MULTIPLIER,
    MAX_ATTUNEMENT_SLOTS,
)
from dnd_sheet.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Configuration for table rules that vary between groups.

    Attributes:
        attunement_slots: Maximum number of simultaneously attuned items.
        carry_capacity_multiplier: Carrying capacity in pounds per STR point.
        encumbered_multiplier: Variant encumbrance threshold per STR point.
        heavily_encumbered_multiplier: Heavy encumbrance threshold per STR point.
        currency_rates: Coin code to base-unit (copper) conversion rates.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_SHEET_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    attunement_slots: int = Field(
        default=MAX_ATTUNEMENT_SLOTS,
        ge=1,
        le=10,
        description="Maximum attuned items per character",
    )
    carry_capacity_multiplier: int = Field(
        default=CARRY_CAPACITY_MULTIPLIER,
        gt=0,
        description="Carrying capacity in pounds per point of Strength",
    )
    encumbered_multiplier: int = Field(
        default=ENCUMBERED_MULTIPLIER,
        gt=0,
        description="Encumbered above this many pounds per point of Strength",
    )
    heavily_encumbered_multiplier: int = Field(
        default=HEAVILY_ENCUMBERED_MULTIPLIER,
        gt=0,
        description="Heavily encumbered above this many pounds per point of Strength",
    )
    currency_rates: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_CURRENCY_TABLE),
        description="Coin code to copper-equivalent rate",
    )

    @field_validator("currency_rates", mode="after")
    @classmethod
    def validate_currency_rates(cls, value: dict[str, int]) -> dict[str, int]:
        """Normalize coin codes and ensure the table has a usable base unit.

        Args:
            value: The raw currency table.

        Returns:
            The table with lower-cased coin codes.

        Raises:
            ConfigurationError: If the table is empty, has a rate below 1,
                or has no coin worth exactly one base unit.
        """
        if not value:
            raise ConfigurationError(
                "currency_rates must define at least one coin",
                config_key="currency_rates",
            )
        rates = {code.strip().lower(): rate for code, rate in value.items()}
        bad = {code: rate for code, rate in rates.items() if rate < 1}
        if bad:
            raise ConfigurationError(
                f"currency rates must be at least 1, got {bad}",
                config_key="currency_rates",
            )
        if 1 not in rates.values():
            raise ConfigurationError(
                "currency_rates must contain a base coin with rate 1",
                config_key="currency_rates",
            )
        return rates

    @model_validator(mode="after")
    def validate_encumbrance_thresholds(self) -> "RulesSettings":
        """Ensure the encumbrance thresholds are ordered.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If heavy encumbrance does not exceed encumbrance.
        """
        if self.heavily_encumbered_multiplier <= self.encumbered_multiplier:
            raise ConfigurationError(
                f"heavily_encumbered_multiplier ({self.heavily_encumbered_multiplier}) "
                f"must be greater than encumbered_multiplier ({self.encumbered_multiplier})",
                config_key="heavily_encumbered_multiplier",
            )
        return self


class Settings(BaseSettings):
    """Main engine settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Engine logging level.
        rules: Table rule settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_SHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D 5E Sheet Engine",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the engine settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    This is primarily useful for testing or when environment variables
    have changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
