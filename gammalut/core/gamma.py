"""Gamma power-law on normalized values."""

import numpy as np


def gamma_exponent(gamma: float, decoding: bool = False) -> float:
    """Exponent for encoding (``gamma``) or decoding (``1 / gamma``)."""
    return 1.0 / gamma if decoding else float(gamma)


def gamma_value(level: float, gamma: float, decoding: bool = False) -> float:
    """Apply the power law to one normalized level.

    ``0`` and ``1`` map to themselves exactly regardless of floating-point
    rounding in the exponentiation.

    Args:
        level: Normalized input in ``[0.0, 1.0]``.
        gamma: Positive gamma value.
        decoding: Use ``1 / gamma`` as the exponent.

    Returns:
        Normalized output in ``[0.0, 1.0]``.
    """
    if not 0.0 <= level <= 1.0:
        raise ValueError(f"level must be in [0, 1], got {level}")
    if level == 0.0:
        return 0.0
    if level == 1.0:
        return 1.0
    return level ** gamma_exponent(gamma, decoding)


def gamma_curve(levels: np.ndarray, gamma: float, decoding: bool = False) -> np.ndarray:
    """Vectorized ``gamma_value`` over an array of normalized levels."""
    levels = np.asarray(levels, dtype=np.float64)
    values = np.power(levels, gamma_exponent(gamma, decoding))
    values = np.where(levels == 0.0, 0.0, values)
    return np.where(levels == 1.0, 1.0, values)
