"""
Table construction.

Turns a validated ``GammaTableConfig`` into a read-only numpy array of
unsigned integers: quantize (optional), apply the power law, scale to
``max_value``, round half up and clamp.
"""

from typing import Any, List

import numpy as np

from ..utils.validators import validate_config
from .config import GammaTableConfig
from .gamma import gamma_curve
from .quantize import linear_levels, step_levels


def scale_to_entries(values: np.ndarray, max_value: int, width: int) -> np.ndarray:
    """Scale normalized values to unsigned integers in ``[0, max_value]``.

    Rounds half up (all values are non-negative). Anything that reaches
    ``float(max_value)`` is stored as the exact integer ``max_value``, which
    keeps 64-bit tables exact where ``max_value`` has no float64
    representation.

    Args:
        values: Normalized values in ``[0.0, 1.0]``.
        max_value: Largest output value, already known to fit ``width``.
        width: Entry bit width (8, 16, 32 or 64).

    Returns:
        Array of dtype ``uint<width>``.
    """
    dtype = np.dtype(f"uint{width}")
    ceiling = float(max_value)
    scaled = np.asarray(values, dtype=np.float64) * ceiling
    # half up on the exact fraction of the scaled value
    low = np.floor(scaled)
    raw = np.where(scaled - low >= 0.5, low + 1.0, low)
    raw = np.maximum(raw, 0.0)

    capped = raw >= ceiling

    entries = np.zeros(raw.shape, dtype=dtype)
    entries[~capped] = raw[~capped].astype(dtype)
    entries[capped] = max_value
    return entries


def _levels(config: GammaTableConfig) -> np.ndarray:
    if config.is_quantized:
        return step_levels(config.size, config.resolved_steps)
    return linear_levels(config.size)


def build_table(config: GammaTableConfig, stacklevel: int = 1) -> np.ndarray:
    """Validate ``config`` and build its lookup table.

    Args:
        config: Table configuration.
        stacklevel: Frame configuration warnings are attributed to, counted
            from the caller of this function.

    Returns:
        Read-only 1-D array of length ``config.size`` and dtype
        ``uint<entry_type_width>``.

    Raises:
        ConfigError: The configuration is invalid. Nothing is computed.
    """
    validate_config(config, stacklevel=stacklevel + 1)

    values = gamma_curve(_levels(config), config.gamma, config.decoding)
    table = scale_to_entries(values, config.resolved_max_value, config.entry_type_width)
    table.flags.writeable = False
    return table


def generate_table(**fields: Any) -> np.ndarray:
    """Build a table straight from keyword fields.

    Accepts the same keys as ``GammaTableConfig.from_mapping``.

    Example:
        >>> int(generate_table(name="GAMMA", entry_type="u8", gamma=2.2, size=256)[128])
        56
    """
    return build_table(GammaTableConfig.from_mapping(fields), stacklevel=2)


def table_values(config: GammaTableConfig) -> List[int]:
    """Build the table and return it as plain Python integers."""
    return [int(v) for v in build_table(config, stacklevel=2)]
