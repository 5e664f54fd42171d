"""
GammaLUT - precomputed gamma lookup tables.

This module provides the ``GammaTable`` class, an object wrapper around
one validated configuration and its finished table.
"""

from typing import Iterator, List, Optional, Union

import numpy as np

from .core import GammaTableConfig, build_table
from .utils.formatters import _format_summary, render_source
from .utils.parsers import parse_config_string
from .utils.visualization import _create_curve_plot


class GammaTable:
    """A gamma encoding or decoding lookup table.

    The configuration is validated and the table built when the object is
    created; invalid parameters raise a ``ConfigError`` subclass and no
    object is returned. The values never change afterwards.

    Attributes:
        config: The ``GammaTableConfig`` the table was built from.

    Example:
        >>> table = GammaTable("GAMMA_22", "u8", gamma=2.2, size=256)
        >>> table[128]
        56
        >>> print(table.to_source("c"))

        >>> # Gamma correction with 8 brightness levels
        >>> GammaTable("LEVELS", "u16", 2.2, 256, max_value=1000, steps=8, decoding=True)
    """

    def __init__(
        self,
        name: str,
        entry_type: Union[str, int],
        gamma: float,
        size: int,
        max_value: Optional[int] = None,
        steps: Optional[int] = None,
        decoding: bool = False,
    ):
        """Validate the parameters and build the table.

        Args:
            name: Identifier of the table, used in generated source.
            entry_type: Unsigned entry type, ``"u8"``/``"u16"``/``"u32"``/
                ``"u64"`` or the bit width as an integer.
            gamma: Positive gamma value.
            size: Number of entries, at least 3.
            max_value: Largest output value (default ``size - 1``).
            steps: Number of distinct quantized levels (default ``size``).
            decoding: Build a gamma correction table (``x^(1/gamma)``).
        """
        config = GammaTableConfig.from_mapping(
            {
                "name": name,
                "entry_type": entry_type,
                "gamma": gamma,
                "size": size,
                "max_value": max_value,
                "steps": steps,
                "decoding": decoding,
            }
        )
        self._init_from_config(config, stacklevel=2)

    def _init_from_config(self, config: GammaTableConfig, stacklevel: int):
        # stacklevel counts from the public constructor's caller
        self.config = config
        self._values = build_table(config, stacklevel=stacklevel + 1)

    @classmethod
    def from_config(cls, config: GammaTableConfig) -> "GammaTable":
        """Build from an existing configuration record."""
        table = cls.__new__(cls)
        table._init_from_config(config, stacklevel=2)
        return table

    @classmethod
    def from_string(cls, text: str) -> "GammaTable":
        """Build from an assignment string such as
        ``"name: GAMMA, entry_type: u8, gamma: 2.2, size: 256"``."""
        table = cls.__new__(cls)
        table._init_from_config(parse_config_string(text), stacklevel=2)
        return table

    # =========================================================================
    # Table access
    # =========================================================================

    @property
    def values(self) -> np.ndarray:
        """Read-only array of table entries."""
        return self._values

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def max_value(self) -> int:
        return self.config.resolved_max_value

    @property
    def distinct_levels(self) -> int:
        """Number of distinct values in the table."""
        return int(len(np.unique(self._values)))

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [int(v) for v in self._values[index]]
        return int(self._values[index])

    def __iter__(self) -> Iterator[int]:
        return (int(v) for v in self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GammaTable):
            return NotImplemented
        return self.config == other.config and np.array_equal(self._values, other._values)

    __hash__ = None

    def __repr__(self) -> str:
        mode = "decoding" if self.config.decoding else "encoding"
        return f"GammaTable({self.name!r}, {self.config.entry_type}, gamma={self.config.gamma}, size={len(self)}, {mode})"

    def tolist(self) -> List[int]:
        return [int(v) for v in self._values]

    # =========================================================================
    # Output
    # =========================================================================

    def summary(self) -> str:
        """Text summary of the parameters and value statistics."""
        return _format_summary(self.config.to_dict(), self._values)

    def to_source(self, language: str = "c", per_line: Optional[int] = None) -> str:
        """Render as a constant array: ``"c"``, ``"rust"``, ``"python"`` or ``"hex"``."""
        return render_source(self._values, self.name, self.config.entry_type_width, language, per_line)

    def plot(self, show: bool = True):
        """Plot the curve against a linear ramp (requires matplotlib)."""
        mode = "decoding" if self.config.decoding else "encoding"
        title = f"{self.name}: gamma {self.config.gamma} {mode}"
        return _create_curve_plot(self._values, self.max_value, title, show=show)
