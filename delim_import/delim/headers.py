from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping, Sequence

from ..config.errors import TypeHintError

"""Field header resolution with inline type hints.

Header grammar (per cell, surrounding whitespace ignored):
- ``name``          -> no hint (type inferred later)
- ``name:type``     -> ``type`` alias, case-insensitive:
                       str / string / s  -> "string"
                       n / num / number  -> "number"
- ``+name``         -> "number"
- blank             -> column dropped (name resolves to "")

Type hints bind first-wins: once a name is in the index, later hints for the
same name (from any column or option) are ignored.
"""

__all__ = [
    "STRING",
    "NUMBER",
    "normalize_field_type",
    "parse_type_hint",
    "parse_field_headers",
    "parse_hint_list",
    "resolve_headers",
]

logger = logging.getLogger(__name__)

STRING = "string"
NUMBER = "number"

_TYPE_ALIASES: dict[str, str] = {
    "s": STRING,
    "str": STRING,
    "string": STRING,
    "n": NUMBER,
    "num": NUMBER,
    "number": NUMBER,
}


def normalize_field_type(name: str) -> str | None:
    """Return "string" / "number" for a recognized alias, else None."""
    return _TYPE_ALIASES.get(name.strip().lower())


def parse_type_hint(raw: str, *, strict: bool = True) -> tuple[str, str | None]:
    """Split one header cell / hint string into ``(name, type)``.

    Args:
        raw: header cell such as ``"fips:str"`` or ``"+count"``
        strict: raise on an unknown type alias instead of keeping the cell as the name

    Raises:
        TypeHintError: unknown alias or empty name (strict mode only)
    """
    cell = raw.strip()
    if cell.startswith("+"):
        cell = cell[1:].strip()
        forced: str | None = NUMBER
    else:
        forced = None
    if ":" in cell:
        name, _, alias = cell.rpartition(":")
        field_type = normalize_field_type(alias)
        if field_type is None:
            if strict:
                raise TypeHintError(f"invalid type hint (expected :str or :num) [{raw}]")
            logger.warning("invalid type hint (expected :str or :num) [%s]; keeping as field name", raw)
            return cell, forced
        name = name.strip()
        if strict and not name:
            raise TypeHintError(f"type hint without a field name [{raw}]")
        return name, field_type
    return cell, forced


def parse_field_headers(
    fields: Iterable[str],
    index: MutableMapping[str, str] | None = None,
    *,
    strict: bool = False,
) -> list[str]:
    """Resolve raw header cells into field names, recording hints in ``index``.

    Names are returned positionally (one per input cell, duplicates kept);
    blank cells resolve to "". ``index`` is updated insert-only-if-absent.
    """
    if index is None:
        index = {}
    names: list[str] = []
    for raw in fields:
        name, field_type = parse_type_hint(raw, strict=strict)
        if field_type is not None and name and name not in index:
            index[name] = field_type
        names.append(name)
    return names


def parse_hint_list(hints: Iterable[str]) -> dict[str, str]:
    """Validate ``name:type`` option strings and bind them first-wins.

    Raises:
        TypeHintError: an entry without a name or without a recognized type
    """
    index: dict[str, str] = {}
    for raw in hints:
        name, field_type = parse_type_hint(raw, strict=True)
        if not name or field_type is None:
            raise TypeHintError(f"expected name:str or name:num [{raw}]")
        index.setdefault(name, field_type)
    return index


def resolve_headers(
    raw_fields: Sequence[str],
    hints: Iterable[str] = (),
) -> tuple[list[str], dict[str, str]]:
    """Return ``(field_names, type_hint_index)`` for a header row.

    ``hints`` are ``name:type`` strings (e.g. from the field_types option);
    they are validated strictly and bound before the header cells.
    """
    index = parse_hint_list(hints)
    names = parse_field_headers(raw_fields, index)
    return names, index
