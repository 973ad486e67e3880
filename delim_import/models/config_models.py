from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..config.errors import ConfigError
from ..delim.encoding import normalize_encoding_name
from ..delim.headers import parse_hint_list

"""Import options model.

Validated on construction so that configuration errors surface before any
row processing.
"""

__all__ = [
    "ImportOptions",
]

_OPTION_KEYS = ("delimiter", "encoding", "field_types", "export_delimiter")


def _check_delimiter(value: str | None, key: str) -> None:
    if value is None:
        return
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError(f"{key} must be a single character, got {value!r}")
    if value in ('"', "\r", "\n"):
        raise ConfigError(f"{key} cannot be {value!r}")


@dataclass(frozen=True)
class ImportOptions:
    """Options for one import call.

    Attributes:
        delimiter: explicit delimiter (None = guess)
        encoding: encoding hint for byte input (None = BOM / UTF-8)
        field_types: ``name:type`` hints merged first-wins ahead of header hints
        export_delimiter: delimiter used when re-serializing (None = from filename)
    """
    delimiter: str | None = None
    encoding: str | None = None
    field_types: tuple[str, ...] = field(default_factory=tuple)
    export_delimiter: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.field_types, str):
            # "a:str,b:num" 形式も許容
            object.__setattr__(self, "field_types", tuple(s.strip() for s in self.field_types.split(",") if s.strip()))
        elif not isinstance(self.field_types, tuple):
            object.__setattr__(self, "field_types", tuple(self.field_types or ()))
        _check_delimiter(self.delimiter, "delimiter")
        _check_delimiter(self.export_delimiter, "export_delimiter")
        if self.encoding is not None:
            normalize_encoding_name(self.encoding)
        parse_hint_list(self.field_types)

    @property
    def type_hints(self) -> dict[str, str]:
        return parse_hint_list(self.field_types)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ImportOptions:
        data = dict(data or {})
        unknown = set(data) - set(_OPTION_KEYS)
        if unknown:
            raise ConfigError(f"unknown import options: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if v is not None})

    def merged(self, **overrides: Any) -> ImportOptions:
        """Return a copy with non-None overrides applied (CLI flags over config)."""
        values = {k: getattr(self, k) for k in _OPTION_KEYS}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ImportOptions.from_mapping(values)
