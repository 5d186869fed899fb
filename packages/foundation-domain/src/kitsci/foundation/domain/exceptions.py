"""Settings exception hierarchy for type-safe error handling.

Malformed *external* data (imported configurations, legacy storage blobs)
never raises: it degrades to defaults. The exceptions in this module signal
either a broken settings schema (a programmer error that must fail fast at
construction time) or rejected raw input at the parsing boundary.

Example:
    >>> from kitsci.foundation.domain.exceptions import DuplicateLegacyKeyError
    >>> raise DuplicateLegacyKeyError("toggle-dragons")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DomainKeyMismatchError",
    "DuplicateLegacyKeyError",
    "InvalidSettingValueError",
    "SchemaError",
    "SettingsError",
]


class SettingsError(Exception):
    """Base class for all settings errors.

    Provides error code and structured context for debugging.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (keys, section names).

    Example:
        >>> raise SettingsError("Operation failed", context={"section": "trade"})
        SettingsError: Operation failed (section=trade)
    """

    error_code: str = "SETTINGS_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize settings error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class SchemaError(SettingsError):
    """Raised when a settings schema is constructed inconsistently.

    Indicates a bug in the compiled-in schema, never bad external data.
    """

    error_code: str = "SCHEMA_ERROR"


class DuplicateLegacyKeyError(SchemaError):
    """Raised when two fields claim the same flat legacy key.

    Attributes:
        error_code: "DUPLICATE_LEGACY_KEY" (class constant).
        key: The contested flat key.

    Example:
        >>> raise DuplicateLegacyKeyError("toggle-hydroponics")
        DuplicateLegacyKeyError: Legacy key registered twice: toggle-hydroponics
    """

    error_code: str = "DUPLICATE_LEGACY_KEY"

    def __init__(self, key: str, **extra_context: Any) -> None:
        """Initialize duplicate legacy key error.

        Args:
            key: The flat legacy key that was registered twice.
            **extra_context: Additional debugging context (e.g., attribute names).
        """
        self.key = key
        message = f"Legacy key registered twice: {key}"
        super().__init__(message, {"key": key, **extra_context})


class DomainKeyMismatchError(SchemaError):
    """Raised when an item is stored under a key other than its own domain key.

    Attributes:
        error_code: "DOMAIN_KEY_MISMATCH" (class constant).
        section: Section holding the collection.
        key: Mapping key the item was stored under.
        tagged: Domain key the item carries.
    """

    error_code: str = "DOMAIN_KEY_MISMATCH"

    def __init__(self, section: str, key: str, tagged: str) -> None:
        self.section = section
        self.key = key
        self.tagged = tagged
        message = f"Item '{tagged}' is stored under key '{key}' in '{section}'"
        super().__init__(message, {"section": section, "key": key, "tagged": tagged})


class InvalidSettingValueError(SettingsError):
    """Raised when raw input cannot be turned into a setting value.

    Used by the input-parsing boundary only; the model layer never validates.

    Attributes:
        error_code: "INVALID_SETTING_VALUE" (class constant).
        field: Name of the value being parsed (e.g., "trigger").
        reason: Human-readable failure reason.

    Example:
        >>> raise InvalidSettingValueError("trigger", "'abc' is not a number")
        InvalidSettingValueError: Invalid value for 'trigger': 'abc' is not a number
    """

    error_code: str = "INVALID_SETTING_VALUE"

    def __init__(self, field: str, reason: str, **extra_context: Any) -> None:
        """Initialize invalid setting value error.

        Args:
            field: Name of the value being parsed.
            reason: Human-readable failure reason.
            **extra_context: Additional debugging context (e.g., raw input).
        """
        self.field = field
        self.reason = reason
        message = f"Invalid value for '{field}': {reason}"
        super().__init__(message, {"field": field, "reason": reason, **extra_context})
