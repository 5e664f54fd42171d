"""
Visualization utilities for gamma lookup tables.

This module provides plotting of a finished table against a linear ramp.
"""

import numpy as np

__all__ = []


def _create_curve_plot(table: np.ndarray, max_value: int, title: str, show: bool = True):
    """Plot table values against input position with a linear reference.

    Draws the table as a step line, the identity ramp ``i * max_value /
    (size - 1)`` as a dashed line, and marks the mid-point entry.

    Args:
        table: Finished table values.
        max_value: Output ceiling, used for the y-axis and reference line.
        title: Plot title.
        show: Call ``plt.show()`` when done.

    Returns:
        The matplotlib ``(fig, ax)`` pair.

    Raises:
        ImportError: If ``matplotlib`` is not installed.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for plotting: pip install gammalut[plot]") from None

    size = len(table)
    positions = np.arange(size)
    linear = positions * (max_value / (size - 1))

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.step(positions, table, where="post", color="tab:blue", linewidth=2, label="table")
    ax.plot(positions, linear, "--", color="gray", linewidth=1, label="linear")

    mid = size // 2
    ax.plot(mid, table[mid], "o", color="tab:red", markersize=6)
    ax.annotate(
        f"[{mid}] = {int(table[mid])}",
        xy=(mid, table[mid]),
        xytext=(10, -15),
        textcoords="offset points",
    )

    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Input position", fontsize=12)
    ax.set_ylabel("Output value", fontsize=12)
    ax.set_xlim(0, size - 1)
    ax.set_ylim(0, max_value * 1.05 if max_value > 0 else 1)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")

    plt.tight_layout()
    if show:
        plt.show()
    return fig, ax
