"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        SheetEngineError: Base exception for all engine errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Data validation errors.
        RulesError: Base for defects found while deriving sheet state.

    Configuration:
        Settings: Main engine settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up engine logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dnd_sheet.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_sheet.core.exceptions import (
    AttunementError,
    ConfigurationError,
    EquipmentError,
    PrerequisiteError,
    RulesError,
    SheetEngineError,
    ValidationError,
)
from dnd_sheet.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)
from dnd_sheet.core.normalizer import normalize_for_lookup, normalize_many, same_key


__all__ = [
    # Base exception
    "SheetEngineError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Rules exceptions
    "RulesError",
    "PrerequisiteError",
    "EquipmentError",
    "AttunementError",
    # Configuration
    "Settings",
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
    # Normalization
    "normalize_for_lookup",
    "normalize_many",
    "same_key",
]
