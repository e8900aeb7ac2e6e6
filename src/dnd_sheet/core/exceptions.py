"""Custom exception hierarchy for the D&D 5E sheet engine.

Rule violations a player can trigger (a full attunement ledger, an unmet
prerequisite, a missing item) are *not* exceptions: the engine reports them
through boolean returns and rejection reasons. The classes below are reserved
for programmer errors such as malformed prerequisite data or an absent
currency table. All of them inherit from SheetEngineError, enabling unified
error handling at the application boundary.

Example:
    >>> from dnd_sheet.core.exceptions import PrerequisiteError
    >>> raise PrerequisiteError("Clause has no tag", clause={})
"""

from __future__ import annotations

from typing import Any


class SheetEngineError(Exception):
    """Base exception for all sheet engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(SheetEngineError):
    """Raised when engine configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(SheetEngineError):
    """Raised when character or item data fails validation."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Rules Domain Exceptions
# =============================================================================


class RulesError(SheetEngineError):
    """Base exception for defects detected while deriving sheet state."""


class PrerequisiteError(RulesError):
    """Raised when a prerequisite clause is structurally malformed.

    Well-formed clauses with an unknown tag are not errors; they are
    treated as satisfied.
    """

    def __init__(
        self,
        message: str,
        *,
        clause: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize prerequisite error with the offending clause.

        Args:
            message: Human-readable error description.
            clause: The raw clause that could not be parsed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if clause is not None:
            combined_details["clause"] = clause
        super().__init__(message, details=combined_details)


class EquipmentError(RulesError):
    """Raised when equipment aggregation is called with unusable inputs."""

    def __init__(
        self,
        message: str,
        *,
        pack_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize equipment error with pack context.

        Args:
            message: Human-readable error description.
            pack_id: Identifier of the pack being aggregated, if known.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if pack_id:
            combined_details["pack_id"] = pack_id
        super().__init__(message, details=combined_details)


class AttunementError(RulesError):
    """Raised when an attunement ledger is constructed or used incorrectly."""

    def __init__(
        self,
        message: str,
        *,
        item_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize attunement error with item context.

        Args:
            message: Human-readable error description.
            item_id: Identifier of the item involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if item_id:
            combined_details["item_id"] = item_id
        super().__init__(message, details=combined_details)


__all__ = [
    "SheetEngineError",
    "ConfigurationError",
    "ValidationError",
    "RulesError",
    "PrerequisiteError",
    "EquipmentError",
    "AttunementError",
]
