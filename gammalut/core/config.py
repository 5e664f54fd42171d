"""
Configuration record for gamma lookup tables.

``GammaTableConfig`` is an immutable description of one table. It can be
built directly with keywords or from a plain mapping (for example a parsed
assignment string or a JSON document) via ``from_mapping``.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidFieldType, MissingRequiredField, UnknownParameter, UnsupportedEntryType

SUPPORTED_WIDTHS = (8, 16, 32, 64)

# u8, uint8, uint8_t
_ENTRY_TYPE_RE = re.compile(r"^u(?:int)?(\d+)(?:_t)?$")


def entry_type_max(width: int) -> int:
    """Largest value an unsigned integer of ``width`` bits can hold."""
    return (1 << width) - 1


def parse_entry_type(entry_type: Any) -> int:
    """Convert an entry type spelling to its bit width.

    Accepts integer widths (``8``) and unsigned type names (``"u8"``,
    ``"uint16"``, ``"uint32_t"``). The width itself is not range-checked
    here; unsupported widths are reported by the validator.

    Raises:
        UnsupportedEntryType: Name is not an unsigned integer type.
        InvalidFieldType: Value is neither a string nor an integer.
    """
    if isinstance(entry_type, bool):
        raise InvalidFieldType(f"entry_type must be a type name or bit width, got {entry_type!r}", field="entry_type")
    if isinstance(entry_type, int):
        return entry_type
    if not isinstance(entry_type, str):
        raise InvalidFieldType(
            f"entry_type must be a type name or bit width, got {type(entry_type).__name__}",
            field="entry_type",
        )

    match = _ENTRY_TYPE_RE.match(entry_type.strip().lower())
    if match is None:
        raise UnsupportedEntryType(
            f"Unsupported entry_type: {entry_type}. Supported types are: u8, u16, u32, u64",
            field="entry_type",
        )
    return int(match.group(1))


@dataclass(frozen=True)
class GammaTableConfig:
    """Parameters of a single gamma lookup table.

    Attributes:
        name: Identifier for the generated table. Only used when rendering
            source code.
        entry_type_width: Bit width of each unsigned entry (8, 16, 32, 64).
        gamma: Positive exponent of the power law.
        size: Number of table positions (at least 3).
        max_value: Largest output value. ``None`` means ``size - 1``.
        steps: Number of distinct quantized levels. ``None`` means ``size``.
        decoding: Use ``1 / gamma`` as the exponent (gamma correction)
            instead of ``gamma`` (gamma encoding).
    """

    name: str
    entry_type_width: int
    gamma: float
    size: int
    max_value: Optional[int] = None
    steps: Optional[int] = None
    decoding: bool = False

    REQUIRED_FIELDS = ("name", "entry_type_width", "gamma", "size")
    OPTIONAL_FIELDS = ("max_value", "steps", "decoding")

    @property
    def resolved_max_value(self) -> int:
        return self.size - 1 if self.max_value is None else self.max_value

    @property
    def resolved_steps(self) -> int:
        return self.size if self.steps is None else self.steps

    @property
    def is_quantized(self) -> bool:
        return self.resolved_steps != self.size

    @property
    def exponent(self) -> float:
        """Exponent actually applied to normalized input."""
        return 1.0 / self.gamma if self.decoding else self.gamma

    @property
    def entry_type(self) -> str:
        """Rust-style unsigned type name, e.g. ``"u8"``."""
        return f"u{self.entry_type_width}"

    @property
    def dtype_name(self) -> str:
        """numpy dtype name for the table entries, e.g. ``"uint8"``."""
        return f"uint{self.entry_type_width}"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "GammaTableConfig":
        """Build a configuration from a plain mapping.

        The entry type may be given as ``entry_type`` (name or width) or as
        ``entry_type_width``. Optional fields that are absent or ``None``
        take their defaults.

        Raises:
            UnknownParameter: The mapping contains an unrecognised key.
            MissingRequiredField: A required key is absent.
        """
        known = set(cls.REQUIRED_FIELDS) | set(cls.OPTIONAL_FIELDS) | {"entry_type"}
        for key in mapping:
            if key not in known:
                raise UnknownParameter(f"Unknown parameter: {key}", field=key)

        if "entry_type" in mapping and "entry_type_width" in mapping:
            raise InvalidFieldType("Specify either entry_type or entry_type_width, not both", field="entry_type")

        fields: Dict[str, Any] = {}
        if mapping.get("entry_type") is not None:
            fields["entry_type_width"] = parse_entry_type(mapping["entry_type"])
        elif mapping.get("entry_type_width") is not None:
            fields["entry_type_width"] = mapping["entry_type_width"]

        for key in ("name", "gamma", "size"):
            if mapping.get(key) is not None:
                fields[key] = mapping[key]

        for key in cls.REQUIRED_FIELDS:
            if key not in fields:
                label = "entry_type" if key == "entry_type_width" else key
                raise MissingRequiredField(f"Missing required parameter: {label}", field=label)

        for key in cls.OPTIONAL_FIELDS:
            if mapping.get(key) is not None:
                fields[key] = mapping[key]

        return cls(**fields)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration with defaults resolved."""
        return {
            "name": self.name,
            "entry_type": self.entry_type,
            "gamma": self.gamma,
            "size": self.size,
            "max_value": self.resolved_max_value,
            "steps": self.resolved_steps,
            "decoding": self.decoding,
        }
