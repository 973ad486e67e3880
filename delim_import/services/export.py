from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.record_set import TypedRecordSet

"""Delimited text export of imported records.

Export delimiter resolution:
1. explicit ``delimiter`` argument
2. output filename extension (.csv -> comma, .tsv / .tab -> tab)
3. the delimiter the data was imported with
4. comma
"""

__all__ = [
    "EXTENSION_DELIMITERS",
    "guess_export_delimiter",
    "export_delim",
]

logger = logging.getLogger(__name__)

EXTENSION_DELIMITERS: dict[str, str] = {
    ".csv": ",",
    ".tsv": "\t",
    ".tab": "\t",
}


def _export_value(value: Any) -> Any:
    # -2000000.0 -> -2000000 (1e21 以上は指数表記のまま)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def guess_export_delimiter(filename: str | Path | None, input_delimiter: str | None = None) -> str:
    if filename is not None:
        delim = EXTENSION_DELIMITERS.get(Path(filename).suffix.lower())
        if delim is not None:
            return delim
    return input_delimiter or ","


def export_delim(
    record_set: TypedRecordSet,
    path: str | Path | None = None,
    delimiter: str | None = None,
) -> str | None:
    """Serialize ``record_set`` as delimited text.

    Returns the text when ``path`` is None, otherwise writes the file (UTF-8)
    and returns None. Null values are written as empty cells and integral
    floats lose their trailing ``.0``.
    """
    delim = delimiter or guess_export_delimiter(path, record_set.delimiter)
    # dtype=object: 整数が float 化されないように
    df = pd.DataFrame(record_set.records, columns=record_set.field_names, dtype=object)
    df = df.map(_export_value)
    logger.debug("exporting %d record(s) delimiter=%r path=%s", len(df), delim, path)
    if path is None:
        return df.to_csv(sep=delim, index=False, na_rep="", lineterminator="\n")
    df.to_csv(Path(path), sep=delim, index=False, na_rep="", lineterminator="\n", encoding="utf-8")
    return None
