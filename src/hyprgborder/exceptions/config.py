"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigValidationError: Config values fail validation
- ColorFormatError: A color string cannot be parsed
"""

from typing import Any, Optional

from .base import HyprGBorderError


class ConfigurationError(HyprGBorderError):
    """Animation configuration is invalid or cannot be accepted."""
    pass


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, source: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            source: Where the configuration came from (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if source:
            recovery += f"\nSource: {source}"

        # Field-specific hints
        if field == "fps":
            recovery += "\nFPS must be between 1 and 120"
        elif field == "speed":
            recovery += "\nSpeed must be between 0.001 and 1.0"
        elif field in ("colors", "animation_type"):
            recovery += "\nPulse and solid need at least one color, gradient needs at least two"
        elif "colors" in field:
            recovery += "\nUse #RRGGBB hex format"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.source = source


class ColorFormatError(ConfigurationError, ValueError):
    """A color string is not in the expected format.

    Also a ValueError so pydantic validators surface it as a validation error.
    """

    def __init__(self, value: str, expected: str = "#RRGGBB"):
        """
        Initialize color format error.

        Args:
            value: The rejected color text
            expected: Description of the accepted format
        """
        super().__init__(
            user_message=f"Invalid color '{value}'. Use {expected} format.",
            technical_message=f"Color parse failed for {value!r} (expected {expected})",
            recoverable=True,
            recovery_hint=f"Colors are written as {expected}, e.g. #FF8000",
        )
        self.value = value
        self.expected = expected
