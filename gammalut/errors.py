"""
Configuration errors for gamma table generation.

Every error is raised before any table computation begins, so a caller
either gets a complete table or one of these exceptions, never a partial
result.
"""

from typing import Optional


class ConfigError(ValueError):
    """Base class for invalid table configurations.

    Attributes:
        rule: Name of the violated rule (the exception class name).
        field: Configuration field that caused the failure, if known.
        message: Human-readable description without the rule prefix.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    @property
    def rule(self) -> str:
        return type(self).__name__

    def __str__(self):
        if self.field:
            return f"{self.rule} ({self.field}): {self.message}"
        return f"{self.rule}: {self.message}"


class InvalidGamma(ConfigError):
    """Gamma is zero, negative or not finite."""


class SizeTooSmall(ConfigError):
    """Table has fewer than 3 positions."""


class MaxValueOverflow(ConfigError):
    """max_value does not fit the unsigned entry type."""


class InvalidSteps(ConfigError):
    """steps is outside ``1 .. size``."""


class UnsupportedEntryType(ConfigError):
    """Entry width is not one of 8, 16, 32 or 64 bits."""


class MissingRequiredField(ConfigError):
    """A mandatory configuration field is absent."""


class InvalidFieldType(ConfigError):
    """A configuration field has the wrong type."""


class UnknownParameter(ConfigError):
    """The configuration names a parameter that does not exist."""


__all__ = [
    "ConfigError",
    "InvalidGamma",
    "SizeTooSmall",
    "MaxValueOverflow",
    "InvalidSteps",
    "UnsupportedEntryType",
    "MissingRequiredField",
    "InvalidFieldType",
    "UnknownParameter",
]
