"""
Parsing utilities for gamma table configurations.

This module parses the assignment-string form of a table configuration::

    name: GAMMA_22, entry_type: u8, gamma: 2.2, size: 256, decoding: true

Assignments are separated by commas or newlines and use ``:`` or ``=``
between key and value. The text may be wrapped in braces.
"""

import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..core.config import GammaTableConfig, parse_entry_type
from ..errors import ConfigError, InvalidFieldType, UnknownParameter

__all__ = ["parse_config_string"]

# Unicode-aware identifier pattern: letter or underscore, then word characters
_IDENT = r"[^\W\d]\w*"
_IDENT_RE = re.compile(rf"^{_IDENT}$")
_INT_RE = re.compile(r"^[+-]?\d+(_\d+)*$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+(?:_\d+)*(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


class _AssignmentParser:
    """Parses ``key: value`` assignment strings into configuration fields.

    Each known key has a value handler returning ``(value, error_message)``.
    A module-level singleton ``_parser`` is used by ``parse_config_string``.
    """

    def __init__(self):
        self.handlers: Dict[str, Callable[[str], Tuple[Any, Optional[str]]]] = {
            "name": self._parse_name_value,
            "entry_type": self._parse_entry_type_value,
            "gamma": self._parse_float_value,
            "size": self._parse_int_value,
            "max_value": self._parse_int_value,
            "steps": self._parse_int_value,
            "decoding": self._parse_bool_value,
        }

    def _parse(self, input_string: str) -> Tuple[Dict[str, Any], List[ConfigError]]:
        """Parse an assignment string.

        Args:
            input_string: Raw configuration text.

        Returns:
            Tuple of ``(parsed_fields, error_list)``. Parsing continues past
            bad assignments so every problem is reported.
        """
        parsed_items: Dict[str, Any] = {}
        errors: List[ConfigError] = []

        for assignment in self._split_assignments(input_string):
            try:
                name, value = self._parse_assignment(assignment)
            except ConfigError as e:
                errors.append(e)
                continue

            if name not in self.handlers:
                errors.append(UnknownParameter(f"Unknown parameter: {name}", field=name))
                continue

            if name in parsed_items:
                errors.append(InvalidFieldType(f"{name} is specified more than once", field=name))
                continue

            try:
                parsed_value, error = self.handlers[name](value)
            except ConfigError as e:
                errors.append(e)
                continue

            if error:
                errors.append(InvalidFieldType(f"{name}: {error}", field=name))
                continue

            parsed_items[name] = parsed_value

        return parsed_items, errors

    def _split_assignments(self, input_string: str) -> List[str]:
        """Split on commas and newlines, dropping surrounding braces."""
        text = input_string.strip()
        if text.startswith("{") and text.endswith("}"):
            text = text[1:-1]
        return [part.strip() for part in re.split(r"[,\n]", text) if part.strip()]

    def _parse_assignment(self, assignment: str) -> Tuple[str, str]:
        """Parse single assignment into key and value parts."""
        match = re.match(rf"^({_IDENT})\s*[:=]\s*(.*)$", assignment)
        if match is None or not match.group(2).strip():
            raise InvalidFieldType(f"Invalid format: '{assignment}'. Expected 'name: value'")
        return match.group(1), match.group(2).strip()

    def _parse_name_value(self, value: str) -> Tuple[Optional[str], Optional[str]]:
        if not _IDENT_RE.match(value):
            return None, f"Invalid identifier '{value}'"
        return value, None

    def _parse_entry_type_value(self, value: str) -> Tuple[Optional[int], Optional[str]]:
        if _INT_RE.match(value):
            return int(value), None
        return parse_entry_type(value), None

    def _parse_float_value(self, value: str) -> Tuple[Optional[float], Optional[str]]:
        if not _FLOAT_RE.match(value):
            return None, f"Invalid number '{value}'"
        return float(value.replace("_", "")), None

    def _parse_int_value(self, value: str) -> Tuple[Optional[int], Optional[str]]:
        if not _INT_RE.match(value):
            return None, f"Invalid integer '{value}'"
        return int(value.replace("_", "")), None

    def _parse_bool_value(self, value: str) -> Tuple[Optional[bool], Optional[str]]:
        lowered = value.lower()
        if lowered not in ("true", "false"):
            return None, f"Invalid boolean '{value}'. Expected true or false"
        return lowered == "true", None


_parser = _AssignmentParser()


def parse_config_string(text: str) -> GammaTableConfig:
    """Parse an assignment string into a ``GammaTableConfig``.

    The result is not range-validated; pass it to ``build_table``.

    Raises:
        ConfigError: The first parse error, or a missing required field.
    """
    if not isinstance(text, str):
        raise InvalidFieldType(f"configuration must be a string, got {type(text).__name__}")

    fields, errors = _parser._parse(text)
    if errors:
        raise errors[0]

    return GammaTableConfig.from_mapping(fields)
