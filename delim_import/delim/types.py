from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping, Sequence
from typing import Any, Callable

from ..models.record_set import FieldSpec
from .headers import NUMBER, STRING, parse_type_hint
from .numbers import is_blank, parse_number

"""Value type inference and conversion.

Two phases per field:
1. decide the type once (declared hint, else ``detect_field_type``)
2. convert every cell of that field in place

Inference looks at non-empty cells in row order. The first one decides; up to
``NUMERIC_SAMPLE_SIZE`` numeric cells are sampled and a non-numeric cell inside
that sample turns the field into a string field. Cells after the sample that do
not parse become None. A field with no non-empty cells is a string field.
"""

__all__ = [
    "NUMERIC_SAMPLE_SIZE",
    "detect_field_type",
    "convert_string",
    "adjust_record_types",
]

logger = logging.getLogger(__name__)

NUMERIC_SAMPLE_SIZE = 10

Record = MutableMapping[str, Any]


def detect_field_type(values: Iterable[Any]) -> str:
    numeric = 0
    for raw in values:
        if is_blank(raw):
            continue
        if parse_number(raw) is None:
            return STRING
        numeric += 1
        if numeric >= NUMERIC_SAMPLE_SIZE:
            break
    return NUMBER if numeric > 0 else STRING


def convert_string(raw: Any) -> Any:
    """String fields keep text verbatim; None and native numbers pass through."""
    if raw is None or isinstance(raw, (str, int, float)):
        return raw
    return str(raw)


def _field_hints(fields: Sequence[str | FieldSpec]) -> tuple[list[str], dict[str, str]]:
    names: list[str] = []
    index: dict[str, str] = {}
    for f in fields:
        if isinstance(f, FieldSpec):
            name, field_type = f.name, f.type
        else:
            name, field_type = parse_type_hint(f, strict=False)
        if not name:
            continue
        if field_type is not None:
            index.setdefault(name, field_type)
        if name not in names:
            names.append(name)
    return names, index


def adjust_record_types(
    records: list[Record],
    fields: Sequence[str | FieldSpec],
) -> dict[str, str]:
    """Convert record values in place and return the resolved type of each field.

    Args:
        records: records keyed by field name; values are raw strings or
            already-typed values (re-running the conversion is a no-op)
        fields: field names, optionally with ``name:type`` hints, or FieldSpecs
    """
    names, index = _field_hints(fields)
    resolved: dict[str, str] = {}
    for name in names:
        field_type = index.get(name)
        if field_type is None:
            field_type = detect_field_type(rec.get(name) for rec in records)
            logger.debug("field %r inferred as %s", name, field_type)
        converter: Callable[[Any], Any] = parse_number if field_type == NUMBER else convert_string
        for rec in records:
            if name in rec:
                rec[name] = converter(rec[name])
        resolved[name] = field_type
    return resolved
