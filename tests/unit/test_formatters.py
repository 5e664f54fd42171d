"""
Tests for source rendering and summary formatting.
"""

import numpy as np
import pytest

from gammalut.utils.formatters import _format_summary, _TableFormatter, render_source


class TestRenderSource:
    """Constant array rendering per language."""

    def setup_method(self):
        self.table = np.array([0, 1, 2], dtype=np.uint8)

    def test_c(self):
        assert render_source(self.table, "T", 8, "c") == (
            "#include <stdint.h>\n\nstatic const uint8_t T[3] = {\n    0, 1, 2,\n};\n"
        )

    def test_rust(self):
        assert render_source(self.table, "T", 8, "rust") == "pub const T: [u8; 3] = [\n    0, 1, 2,\n];\n"

    def test_python(self):
        assert render_source(self.table, "T", 8, "python") == "# 3 entries, unsigned 8-bit\nT = (\n    0, 1, 2,\n)\n"

    def test_hex_u8(self):
        assert render_source(self.table, "T", 8, "hex") == "0x00, 0x01, 0x02\n"

    def test_hex_u16(self):
        assert render_source(np.array([0, 1000], dtype=np.uint16), "T", 16, "hex") == "0x0000, 0x03E8\n"

    def test_per_line(self):
        assert render_source(self.table, "T", 8, "c", per_line=2).endswith("    0, 1,\n    2,\n};\n")

    def test_default_wraps_at_sixteen(self):
        source = render_source(np.arange(32, dtype=np.uint8), "T", 8, "hex")
        assert source.count("\n") == 2

    def test_u64_values_exact(self):
        table = np.array([0, 2**64 - 1], dtype=np.uint64)
        assert "18446744073709551615" in render_source(table, "T", 64, "rust")
        assert "0xFFFFFFFFFFFFFFFF" in render_source(table, "T", 64, "hex")

    def test_case_insensitive_language(self):
        assert render_source(self.table, "T", 8, "C").startswith("#include")

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unknown source format"):
            render_source(self.table, "T", 8, "fortran")

    def test_invalid_identifier(self):
        with pytest.raises(ValueError, match="not a valid identifier"):
            render_source(self.table, "my table", 8, "c")

    def test_hex_ignores_name(self):
        assert render_source(self.table, "my table", 8, "hex") == "0x00, 0x01, 0x02\n"

    def test_per_line_must_be_positive(self):
        with pytest.raises(ValueError):
            render_source(self.table, "T", 8, "c", per_line=0)


class TestTableFormatter:
    """Test _TableFormatter utility methods."""

    def setup_method(self):
        self.tf = _TableFormatter()

    def test_create_table_basic(self):
        table = self.tf._create_table(["Name", "Value"], [["gamma", "2.2"], ["size", "256"]])
        lines = table.split("\n")
        assert len(lines) == 4
        assert "Name" in lines[0]
        assert set(lines[1]) == {"-"}
        assert "gamma" in lines[2]

    def test_create_table_custom_col_widths(self):
        table = self.tf._create_table(["A", "B"], [["x", "y"]], col_widths=[10, 10])
        assert len(table.split("\n")[0]) == 21

    def test_format_value_float(self):
        assert self.tf._format_value(2.2) == "2.2"

    def test_format_value_small_float(self):
        assert self.tf._format_value(0.00001) == "0.000010"

    def test_format_value_bool(self):
        assert self.tf._format_value(True) == "true"

    def test_format_value_with_spec(self):
        assert self.tf._format_value(3.14159, ".2f") == "3.14"


class TestFormatSummary:
    def test_contains_parameters_and_statistics(self):
        config = {
            "name": "GAMMA",
            "entry_type": "u8",
            "gamma": 2.2,
            "size": 5,
            "max_value": 4,
            "steps": 5,
            "decoding": False,
        }
        summary = _format_summary(config, np.array([0, 0, 1, 2, 4], dtype=np.uint8))
        assert "Gamma table GAMMA" in summary
        assert "encoding (x^gamma)" in summary
        assert "distinct values" in summary
        assert "0 / 4" in summary
