"""
Step quantization of table positions.

Partitions the ``size`` positions of a table into ``steps`` contiguous
buckets of as-equal-as-possible width. Bucket ``b`` covers positions
``floor(b*size/steps) .. floor((b+1)*size/steps) - 1`` and every position
in it shares the normalized level ``b / (steps - 1)``.
"""

import numpy as np


def bucket_index(position: int, size: int, steps: int) -> int:
    """Return the bucket that ``position`` falls into.

    Uses exact integer arithmetic: ``b`` is the largest bucket whose start
    ``floor(b*size/steps)`` does not exceed ``position``.
    """
    if not 0 <= position < size:
        raise ValueError(f"position must be in 0..{size - 1}, got {position}")
    return ((position + 1) * steps - 1) // size


def step_level(position: int, size: int, steps: int) -> float:
    """Normalized quantized level in ``[0.0, 1.0]`` for one position."""
    if steps == 1:
        return 0.0
    return bucket_index(position, size, steps) / (steps - 1)


def bucket_bounds(size: int, steps: int) -> np.ndarray:
    """Start position of each bucket plus a final ``size`` sentinel.

    Returns:
        1-D int64 array of length ``steps + 1``.
    """
    return (np.arange(steps + 1, dtype=np.int64) * size) // steps


def step_levels(size: int, steps: int) -> np.ndarray:
    """Quantized levels for every position of a table.

    When ``steps == size`` this is exactly ``i / (size - 1)``.

    Returns:
        1-D float64 array of length ``size``.
    """
    if steps == 1:
        return np.zeros(size, dtype=np.float64)

    positions = np.arange(size, dtype=np.int64)
    buckets = ((positions + 1) * steps - 1) // size
    return buckets / float(steps - 1)


def linear_levels(size: int) -> np.ndarray:
    """Unquantized levels ``i / (size - 1)``."""
    return np.arange(size, dtype=np.int64) / float(size - 1)
