"""
Validation utilities for gamma table configurations.

This module provides the per-field checks and ``validate_config``, which
runs them in a fixed order and raises the first violated rule.
"""

import math
import numbers
import warnings
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..core.config import SUPPORTED_WIDTHS, GammaTableConfig, entry_type_max
from ..errors import (
    ConfigError,
    InvalidFieldType,
    InvalidGamma,
    InvalidSteps,
    MaxValueOverflow,
    MissingRequiredField,
    SizeTooSmall,
    UnsupportedEntryType,
)

__all__ = ["validate_config"]


@dataclass
class _ValidationResult:
    """Outcome of a validation check, carrying errors and warnings.

    Attributes:
        is_valid: ``True`` if no errors were found.
        errors: Errors in the order they were detected (empty when valid).
        warnings: List of non-fatal warning messages.
    """

    is_valid: bool
    errors: List[ConfigError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def raise_if_invalid(self):
        """Raise the first recorded error if the validation failed."""
        if not self.is_valid:
            raise self.errors[0]


def _ok(warnings_: Optional[List[str]] = None) -> _ValidationResult:
    return _ValidationResult(True, [], warnings_ or [])


def _fail(error: ConfigError) -> _ValidationResult:
    return _ValidationResult(False, [error], [])


class _Validator:
    """Static helpers for type checks used by all validators."""

    @staticmethod
    def _check_type(value: Any, expected_types: tuple, name: str) -> Optional[InvalidFieldType]:
        """Check if value has expected type. ``bool`` never counts as a number."""
        if isinstance(value, bool) and bool not in expected_types:
            return InvalidFieldType(f"{name} must be {_describe(expected_types)}, got bool", field=name)
        if not isinstance(value, expected_types):
            actual_type = type(value).__name__
            return InvalidFieldType(f"{name} must be {_describe(expected_types)}, got {actual_type}", field=name)
        return None


def _describe(expected_types: tuple) -> str:
    names = {numbers.Integral: "an integer", numbers.Real: "a number", str: "a string", bool: "a boolean"}
    return " or ".join(names.get(t, t.__name__) for t in expected_types)


_validator = _Validator()


def _validate_fields_present(config: GammaTableConfig) -> _ValidationResult:
    """Check that every required field carries a value."""
    for name in GammaTableConfig.REQUIRED_FIELDS:
        if getattr(config, name) is None:
            label = "entry_type" if name == "entry_type_width" else name
            return _fail(MissingRequiredField(f"Missing required parameter: {label}", field=label))
    return _ok()


def _validate_field_types(config: GammaTableConfig) -> _ValidationResult:
    """Check the Python types of all fields."""
    checks: List[Tuple[Any, tuple, str]] = [
        (config.name, (str,), "name"),
        (config.entry_type_width, (numbers.Integral,), "entry_type_width"),
        (config.gamma, (numbers.Real,), "gamma"),
        (config.size, (numbers.Integral,), "size"),
        (config.decoding, (bool,), "decoding"),
    ]
    if config.max_value is not None:
        checks.append((config.max_value, (numbers.Integral,), "max_value"))
    if config.steps is not None:
        checks.append((config.steps, (numbers.Integral,), "steps"))

    for value, expected_types, name in checks:
        error = _validator._check_type(value, expected_types, name)
        if error:
            return _fail(error)

    if not config.name.strip():
        return _fail(InvalidFieldType("name cannot be empty", field="name"))

    return _ok()


def _validate_gamma(gamma: float) -> _ValidationResult:
    """Gamma must be a positive finite number."""
    if not math.isfinite(gamma) or gamma <= 0:
        return _fail(InvalidGamma(f"Gamma value must be positive, got {gamma}", field="gamma"))
    return _ok()


def _validate_size(size: int) -> _ValidationResult:
    """Require at least 3 positions: both endpoints plus one interior sample."""
    if size < 3:
        return _fail(
            SizeTooSmall(
                f"Size must be at least 3 to create a meaningful gamma table, got {size}. "
                "Smaller sizes only have min and max values.",
                field="size",
            )
        )
    return _ok()


def _validate_max_value(max_value: int, width: int) -> _ValidationResult:
    """Check that ``max_value`` fits an unsigned entry of ``width`` bits.

    Unsupported widths are skipped here and reported by
    ``_validate_entry_type``.
    """
    if width not in SUPPORTED_WIDTHS:
        return _ok()

    type_max = entry_type_max(width)
    if max_value < 0:
        return _fail(
            MaxValueOverflow(f"max_value ({max_value}) cannot be negative for unsigned entry_type u{width}", field="max_value")
        )
    if max_value > type_max:
        return _fail(
            MaxValueOverflow(
                f"max_value ({max_value}) exceeds the maximum value ({type_max}) that can be stored in entry_type u{width}",
                field="max_value",
            )
        )
    return _ok()


def _validate_steps(steps: Optional[int], size: int, max_value: int) -> _ValidationResult:
    """Validate the optional quantization level count."""
    if steps is None:
        return _ok()

    if steps < 1 or steps > size:
        return _fail(InvalidSteps(f"steps must be between 1 and size ({size}), got {steps}", field="steps"))

    warnings_ = []
    if steps > max_value + 1:
        warnings_.append(
            f"steps ({steps}) exceeds the {max_value + 1} distinct output values available up to "
            f"max_value ({max_value}); some levels will round to the same value"
        )
    return _ok(warnings_)


def _validate_entry_type(width: int) -> _ValidationResult:
    """Only 8, 16, 32 and 64 bit unsigned entries are supported."""
    if width not in SUPPORTED_WIDTHS:
        return _fail(
            UnsupportedEntryType(
                f"Unsupported entry_type: u{width}. Supported types are: u8, u16, u32, u64",
                field="entry_type",
            )
        )
    return _ok()


def _check_config(config: GammaTableConfig) -> _ValidationResult:
    """Run every check in order and stop at the first failure."""
    collected: List[str] = []

    structural = (
        lambda: _validate_fields_present(config),
        lambda: _validate_field_types(config),
    )
    for check in structural:
        result = check()
        if not result.is_valid:
            return result

    max_value = int(config.resolved_max_value)
    ranged = (
        lambda: _validate_gamma(config.gamma),
        lambda: _validate_size(config.size),
        lambda: _validate_max_value(max_value, config.entry_type_width),
        lambda: _validate_steps(config.steps, config.size, max_value),
        lambda: _validate_entry_type(config.entry_type_width),
    )
    for check in ranged:
        result = check()
        if not result.is_valid:
            return result
        collected.extend(result.warnings)

    return _ok(collected)


def validate_config(config: GammaTableConfig, stacklevel: int = 1) -> GammaTableConfig:
    """Validate ``config`` and return it unchanged.

    Checks, in order: required fields, field types, gamma > 0, size >= 3,
    max_value within the entry type, 1 <= steps <= size, supported entry
    width. Non-fatal findings are issued as ``UserWarning``.

    Args:
        config: Configuration to check.
        stacklevel: Frame the warnings are attributed to, counted from the
            caller of this function (1 = the caller itself).

    Raises:
        ConfigError: The first violated rule (a subclass such as
            ``InvalidGamma`` or ``SizeTooSmall``).
    """
    result = _check_config(config)
    result.raise_if_invalid()

    for message in result.warnings:
        warnings.warn(message, UserWarning, stacklevel=stacklevel + 1)

    return config
