"""
Tests for configuration validation.
"""

import math
import warnings

import numpy as np
import pytest

from gammalut.core.config import GammaTableConfig
from gammalut.errors import (
    ConfigError,
    InvalidFieldType,
    InvalidGamma,
    InvalidSteps,
    MaxValueOverflow,
    MissingRequiredField,
    SizeTooSmall,
    UnsupportedEntryType,
)
from gammalut.utils.validators import (
    _validate_entry_type,
    _validate_gamma,
    _validate_max_value,
    _validate_size,
    _validate_steps,
    validate_config,
)


def _config(**overrides):
    fields = {"name": "T", "entry_type_width": 8, "gamma": 2.2, "size": 10}
    fields.update(overrides)
    return GammaTableConfig(**fields)


class TestValidateGamma:
    """Test _validate_gamma function."""

    def test_valid_gamma(self):
        assert _validate_gamma(2.2).is_valid

    def test_small_positive_gamma(self):
        assert _validate_gamma(1e-6).is_valid

    def test_integer_gamma(self):
        assert _validate_gamma(2).is_valid

    @pytest.mark.parametrize("gamma", [0.0, -1.0, -0.0001])
    def test_non_positive_gamma(self, gamma):
        result = _validate_gamma(gamma)
        assert not result.is_valid
        assert isinstance(result.errors[0], InvalidGamma)
        assert "Gamma value must be positive" in result.errors[0].message

    @pytest.mark.parametrize("gamma", [math.inf, math.nan])
    def test_non_finite_gamma(self, gamma):
        assert not _validate_gamma(gamma).is_valid


class TestValidateSize:
    """Test _validate_size function."""

    def test_size_three_is_minimum(self):
        assert _validate_size(3).is_valid

    @pytest.mark.parametrize("size", [2, 1, 0, -5])
    def test_too_small(self, size):
        result = _validate_size(size)
        assert not result.is_valid
        assert isinstance(result.errors[0], SizeTooSmall)
        assert "Size must be at least 3" in result.errors[0].message


class TestValidateMaxValue:
    """Test _validate_max_value function."""

    @pytest.mark.parametrize(
        "width, limit",
        [(8, 255), (16, 65535), (32, 4294967295), (64, 18446744073709551615)],
    )
    def test_type_maximum_accepted(self, width, limit):
        assert _validate_max_value(limit, width).is_valid

    @pytest.mark.parametrize(
        "width, value, type_max",
        [(8, 300, 255), (16, 70000, 65535), (32, 5000000000, 4294967295), (64, 2**64, 2**64 - 1)],
    )
    def test_overflow(self, width, value, type_max):
        result = _validate_max_value(value, width)
        assert not result.is_valid
        assert isinstance(result.errors[0], MaxValueOverflow)
        assert f"max_value ({value}) exceeds the maximum value ({type_max})" in result.errors[0].message

    def test_negative_max_value(self):
        result = _validate_max_value(-1, 8)
        assert not result.is_valid
        assert isinstance(result.errors[0], MaxValueOverflow)

    def test_zero_max_value(self):
        assert _validate_max_value(0, 8).is_valid

    def test_unsupported_width_deferred(self):
        # Reported by the entry type check instead
        assert _validate_max_value(10**30, 12).is_valid


class TestValidateSteps:
    """Test _validate_steps function."""

    def test_absent_steps(self):
        assert _validate_steps(None, 10, 9).is_valid

    @pytest.mark.parametrize("steps", [1, 5, 10])
    def test_valid_steps(self, steps):
        assert _validate_steps(steps, 10, 9).is_valid

    @pytest.mark.parametrize("steps", [0, -1, 11])
    def test_out_of_range(self, steps):
        result = _validate_steps(steps, 10, 9)
        assert not result.is_valid
        assert isinstance(result.errors[0], InvalidSteps)

    def test_more_steps_than_output_values_warns(self):
        result = _validate_steps(8, 10, 3)
        assert result.is_valid
        assert len(result.warnings) == 1
        assert "steps (8)" in result.warnings[0]


class TestValidateEntryType:
    """Test _validate_entry_type function."""

    @pytest.mark.parametrize("width", [8, 16, 32, 64])
    def test_supported(self, width):
        assert _validate_entry_type(width).is_valid

    @pytest.mark.parametrize("width", [1, 12, 24, 128])
    def test_unsupported(self, width):
        result = _validate_entry_type(width)
        assert not result.is_valid
        assert isinstance(result.errors[0], UnsupportedEntryType)
        assert "Unsupported entry_type" in result.errors[0].message


class TestValidateConfig:
    """Test validate_config end to end."""

    def test_returns_config_unchanged(self):
        config = _config()
        assert validate_config(config) is config

    def test_missing_field(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_config(_config(name=None))
        assert exc_info.value.field == "name"

    def test_missing_entry_type_reported_by_name(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_config(_config(entry_type_width=None))
        assert exc_info.value.field == "entry_type"

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"gamma": "2.2"}, "gamma"),
            ({"size": 10.5}, "size"),
            ({"size": True}, "size"),
            ({"max_value": 255.0}, "max_value"),
            ({"steps": "4"}, "steps"),
            ({"decoding": 1}, "decoding"),
            ({"name": 123}, "name"),
            ({"name": "   "}, "name"),
        ],
    )
    def test_wrong_types(self, overrides, field):
        with pytest.raises(InvalidFieldType) as exc_info:
            validate_config(_config(**overrides))
        assert exc_info.value.field == field

    def test_numpy_scalars_accepted(self):
        config = _config(gamma=np.float64(2.2), size=np.int64(16), max_value=np.uint8(200))
        assert validate_config(config) is config

    def test_gamma_zero(self):
        with pytest.raises(InvalidGamma):
            validate_config(_config(gamma=0))

    def test_size_two(self):
        with pytest.raises(SizeTooSmall):
            validate_config(_config(size=2))

    def test_steps_zero(self):
        with pytest.raises(InvalidSteps):
            validate_config(_config(steps=0))

    def test_default_max_value_overflows_u8(self):
        with pytest.raises(MaxValueOverflow):
            validate_config(_config(size=1024))

    def test_gamma_checked_before_size(self):
        with pytest.raises(InvalidGamma):
            validate_config(_config(gamma=-1.0, size=2))

    def test_size_checked_before_steps(self):
        with pytest.raises(SizeTooSmall):
            validate_config(_config(size=2, steps=0))

    def test_max_value_checked_before_steps(self):
        with pytest.raises(MaxValueOverflow):
            validate_config(_config(max_value=300, steps=0))

    def test_unsupported_width_reported_over_max_value(self):
        with pytest.raises(UnsupportedEntryType):
            validate_config(_config(entry_type_width=12, max_value=10**30))

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_config(_config(gamma=0))

    def test_error_message_names_rule_and_field(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config(_config(steps=11))
        assert exc_info.value.rule == "InvalidSteps"
        assert str(exc_info.value).startswith("InvalidSteps (steps):")

    def test_collapsing_steps_warn(self):
        with pytest.warns(UserWarning, match="round to the same value"):
            validate_config(_config(max_value=3, steps=8))

    def test_warning_points_at_caller(self):
        with pytest.warns(UserWarning) as record:
            validate_config(_config(max_value=3, steps=8))
        assert record[0].filename == __file__

    def test_numpy_u64_max_value_with_steps(self):
        config = _config(entry_type_width=64, max_value=np.uint64(2**64 - 1), steps=5)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert validate_config(config) is config

    def test_numpy_u64_max_value_below_steps_warns(self):
        with pytest.warns(UserWarning, match="steps \\(8\\)"):
            validate_config(_config(entry_type_width=64, max_value=np.uint64(3), steps=8))

    def test_default_config_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_config(_config())
