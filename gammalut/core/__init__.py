"""Core components for gamma table generation.

Re-exports the building blocks of the pipeline:

- ``GammaTableConfig`` — the immutable configuration record.
- ``step_levels`` / ``step_level`` — step quantization of positions.
- ``gamma_curve`` / ``gamma_value`` — the normalized power law.
- ``build_table`` / ``generate_table`` — table construction.
"""

from .config import SUPPORTED_WIDTHS, GammaTableConfig, entry_type_max, parse_entry_type
from .gamma import gamma_curve, gamma_exponent, gamma_value
from .quantize import bucket_bounds, bucket_index, linear_levels, step_level, step_levels
from .builder import build_table, generate_table, scale_to_entries, table_values

__all__ = [
    # Configuration
    "GammaTableConfig",
    "SUPPORTED_WIDTHS",
    "entry_type_max",
    "parse_entry_type",
    # Gamma function
    "gamma_curve",
    "gamma_exponent",
    "gamma_value",
    # Step mapper
    "bucket_bounds",
    "bucket_index",
    "linear_levels",
    "step_level",
    "step_levels",
    # Builder
    "build_table",
    "generate_table",
    "scale_to_entries",
    "table_values",
]
