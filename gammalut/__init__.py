"""GammaLUT - precomputed gamma lookup tables.

Builds fixed-size unsigned-integer tables approximating the gamma power
law ``(i / (size - 1)) ^ gamma * max_value`` (or ``^ (1 / gamma)`` for
gamma correction), with optional step quantization, for embedding as
constant arrays in LED drivers, image pipelines and display calibration.

Example:
    >>> from gammalut import GammaTable
    >>>
    >>> table = GammaTable("GAMMA_22", "u8", gamma=2.2, size=256)
    >>> table[128]
    56
    >>> print(table.to_source("c"))
"""

from importlib.metadata import version as _get_version

from .core import GammaTableConfig, build_table, generate_table
from .errors import (
    ConfigError,
    InvalidFieldType,
    InvalidGamma,
    InvalidSteps,
    MaxValueOverflow,
    MissingRequiredField,
    SizeTooSmall,
    UnknownParameter,
    UnsupportedEntryType,
)
from .model import GammaTable
from .utils.parsers import parse_config_string
from .utils.validators import validate_config

__version__ = _get_version("GammaLUT")

__all__ = [
    "GammaTable",
    "GammaTableConfig",
    "build_table",
    "generate_table",
    "parse_config_string",
    "validate_config",
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
