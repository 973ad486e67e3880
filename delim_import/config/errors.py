from __future__ import annotations

"""Configuration error types.

Raised before any row processing starts; always fatal for the import.
"""

__all__ = [
    "ConfigError",
    "UnsupportedEncodingError",
    "TypeHintError",
]


class ConfigError(Exception):
    pass


class UnsupportedEncodingError(ConfigError):
    """Raised when an encoding name is not one of the recognized spellings."""


class TypeHintError(ConfigError):
    """Raised when a ``name:type`` hint is malformed or names an unknown type."""
