"""
Output formatting for gamma lookup tables.

Renders a finished table as source code for embedding in a host program
(C, Rust, Python or a plain hex listing) and formats the text summary
shown by ``GammaTable.summary()``.
"""

import re
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

__all__ = ["render_source", "SOURCE_FORMATS"]

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _chunk(values: Sequence[str], per_line: int) -> List[str]:
    return [", ".join(values[i : i + per_line]) for i in range(0, len(values), per_line)]


def _check_name(name: str) -> None:
    if not _IDENT_RE.match(name):
        raise ValueError(f"Table name '{name}' is not a valid identifier for generated source")


def _render_c(table: np.ndarray, name: str, width: int, per_line: int) -> str:
    rows = _chunk([str(int(v)) for v in table], per_line)
    body = ",\n".join(f"    {row}" for row in rows)
    return f"#include <stdint.h>\n\nstatic const uint{width}_t {name}[{len(table)}] = {{\n{body},\n}};\n"


def _render_rust(table: np.ndarray, name: str, width: int, per_line: int) -> str:
    rows = _chunk([str(int(v)) for v in table], per_line)
    body = ",\n".join(f"    {row}" for row in rows)
    return f"pub const {name}: [u{width}; {len(table)}] = [\n{body},\n];\n"


def _render_python(table: np.ndarray, name: str, width: int, per_line: int) -> str:
    rows = _chunk([str(int(v)) for v in table], per_line)
    body = ",\n".join(f"    {row}" for row in rows)
    return f"# {len(table)} entries, unsigned {width}-bit\n{name} = (\n{body},\n)\n"


def _render_hex(table: np.ndarray, name: str, width: int, per_line: int) -> str:
    digits = width // 4
    rows = _chunk([f"0x{int(v):0{digits}X}" for v in table], per_line)
    return "\n".join(rows) + "\n"


SOURCE_FORMATS: Dict[str, Callable[[np.ndarray, str, int, int], str]] = {
    "c": _render_c,
    "rust": _render_rust,
    "python": _render_python,
    "hex": _render_hex,
}


def render_source(table: np.ndarray, name: str, width: int, language: str = "c", per_line: Optional[int] = None) -> str:
    """Render a table as a constant array in the requested language.

    Args:
        table: Finished table values.
        name: Identifier of the generated constant.
        width: Entry bit width, used for the element type.
        language: One of ``"c"``, ``"rust"``, ``"python"`` or ``"hex"``.
        per_line: Values per line. Defaults to 16, or 8 for 64-bit hex.

    Returns:
        Source text ending with a newline.
    """
    key = language.lower()
    if key not in SOURCE_FORMATS:
        raise ValueError(f"Unknown source format: {language}. Valid options: {', '.join(SOURCE_FORMATS)}")
    if per_line is None:
        per_line = 8 if (key == "hex" and width == 64) else 16
    if per_line < 1:
        raise ValueError(f"per_line must be a positive integer, got {per_line}")
    if key != "hex":
        _check_name(name)

    return SOURCE_FORMATS[key](table, name, width, per_line)


class _TableFormatter:
    """Plain-text table layout helpers."""

    def _create_table(self, headers: List[str], rows: List[List[str]], col_widths: Optional[List[int]] = None) -> str:
        """Create a left-aligned table with a dashed separator under the header."""
        if col_widths is None:
            col_widths = [max(len(str(h)), *(len(str(r[i])) for r in rows)) for i, h in enumerate(headers)]

        lines = [" ".join(f"{h:<{w}}" for h, w in zip(headers, col_widths))]
        lines.append("-" * (sum(col_widths) + len(col_widths) - 1))
        for row in rows:
            lines.append(" ".join(f"{str(c):<{w}}" for c, w in zip(row, col_widths)))
        return "\n".join(lines)

    def _format_value(self, value, format_spec: Optional[str] = None) -> str:
        """Format a value for display."""
        if format_spec:
            return f"{value:{format_spec}}"
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, float):
            return f"{value:.6f}" if abs(value) < 0.001 and value != 0 else f"{value:.4g}"
        return str(value)


_table_formatter = _TableFormatter()


def _format_summary(config: Dict, table: np.ndarray) -> str:
    """Summary of a table's parameters and value statistics.

    Args:
        config: Resolved configuration from ``GammaTableConfig.to_dict``.
        table: Finished table values.
    """
    tf = _table_formatter
    mode = "decoding (x^(1/gamma))" if config["decoding"] else "encoding (x^gamma)"

    param_rows = [
        ["name", config["name"]],
        ["entry_type", config["entry_type"]],
        ["gamma", tf._format_value(config["gamma"])],
        ["mode", mode],
        ["size", str(config["size"])],
        ["max_value", str(config["max_value"])],
        ["steps", str(config["steps"])],
    ]

    mid = len(table) // 2
    stat_rows = [
        ["distinct values", str(len(np.unique(table)))],
        ["first / last", f"{int(table[0])} / {int(table[-1])}"],
        [f"table[{mid}]", str(int(table[mid]))],
        ["zero entries", str(int(np.count_nonzero(table == 0)))],
    ]

    sections = [
        f"Gamma table {config['name']}",
        "=" * 40,
        tf._create_table(["Parameter", "Value"], param_rows),
        "",
        tf._create_table(["Statistic", "Value"], stat_rows),
    ]
    return "\n".join(sections)
