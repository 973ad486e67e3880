from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models.config_models import ImportOptions
from ..models.record_set import FieldSpec, TypedRecordSet
from .delimiter import guess_delimiter
from .encoding import decode_content
from .headers import parse_field_headers, parse_hint_list
from .tokenizer import tokenize
from .types import adjust_record_types

"""Delimited text import: bytes / text + options -> TypedRecordSet.

bytes -> decode -> guess delimiter (unless given) -> tokenize -> header row
-> field specs -> records -> type conversion.

Degenerate input (empty, blank lines, no usable header names) yields exactly
one empty record.
"""

__all__ = [
    "build_field_specs",
    "import_delim",
    "import_delim_table",
    "import_records",
]

logger = logging.getLogger(__name__)

OptionsLike = ImportOptions | Mapping[str, Any] | None


def _coerce_options(options: OptionsLike, overrides: dict[str, Any]) -> ImportOptions:
    if options is None:
        options = ImportOptions()
    elif not isinstance(options, ImportOptions):
        options = ImportOptions.from_mapping(options)
    if any(v is not None for v in overrides.values()):
        options = options.merged(**overrides)
    return options


def build_field_specs(header: list[str], hints: tuple[str, ...] = ()) -> tuple[FieldSpec, ...]:
    """Create FieldSpecs for the usable (non-blank) header columns."""
    index = parse_hint_list(hints)
    names = parse_field_headers(header, index)
    specs = tuple(
        FieldSpec(name=name, index=i, type=index.get(name))
        for i, name in enumerate(names)
        if name
    )
    dropped = len(names) - len(specs)
    if dropped:
        logger.debug("dropped %d unnamed column(s)", dropped)
    return specs


def import_delim_table(
    text: str,
    delimiter: str = ",",
    options: OptionsLike = None,
    *,
    encoding: str | None = None,
) -> TypedRecordSet:
    """Tokenize already-decoded text with a known delimiter and type the records."""
    opts = _coerce_options(options, {})
    rows = tokenize(text, delimiter)
    header = rows[0] if rows else []
    fields = build_field_specs(header, opts.field_types)

    if not fields:
        # 有効な列名が無い場合でもレコードは 1 件返す
        return TypedRecordSet(records=[{}], fields=(), delimiter=delimiter, encoding=encoding)

    width = len(header)
    records: list[dict[str, Any]] = []
    ragged = 0
    for row in rows[1:]:
        if len(row) != width:
            ragged += 1
        records.append({f.name: row[f.index] if f.index < len(row) else "" for f in fields})
    if ragged:
        logger.debug("%d row(s) differ from the header width %d", ragged, width)

    field_types = adjust_record_types(records, fields)
    return TypedRecordSet(
        records=records,
        fields=fields,
        field_types=field_types,
        delimiter=delimiter,
        encoding=encoding,
    )


def import_delim(
    content: bytes | str,
    options: OptionsLike = None,
    *,
    delimiter: str | None = None,
    encoding: str | None = None,
    field_types: list[str] | tuple[str, ...] | str | None = None,
) -> TypedRecordSet:
    """Import a delimited text payload.

    Args:
        content: raw bytes (decoded per ``encoding`` / BOM) or text
        options: ImportOptions or a mapping with the same keys
        delimiter, encoding, field_types: keyword overrides for ``options``

    Raises:
        ConfigError: invalid options (unknown encoding, malformed type hint, bad delimiter)
    """
    opts = _coerce_options(
        options, {"delimiter": delimiter, "encoding": encoding, "field_types": field_types}
    )
    text, used_encoding = decode_content(content, opts.encoding)
    delim = opts.delimiter or guess_delimiter(text)
    result = import_delim_table(
        text,
        delim,
        opts,
        encoding=used_encoding.value if used_encoding is not None else None,
    )
    logger.debug(
        "imported %d record(s) delimiter=%r encoding=%s types=%s",
        len(result.records),
        delim,
        result.encoding,
        result.field_types,
    )
    return result


def import_records(content: bytes | str, options: OptionsLike = None, **kwargs: Any) -> list[dict[str, Any]]:
    """Shortcut returning only the records of ``import_delim``."""
    return import_delim(content, options, **kwargs).records
