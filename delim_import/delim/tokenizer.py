from __future__ import annotations

import enum

"""Row tokenizer: delimited text -> rows of raw string cells.

A small state machine over the character stream:

    FIELD_START --'"'--> QUOTED --'"'--> QUOTE_PENDING --'"'--> QUOTED (literal quote)
         |                                   |
         +--other--> UNQUOTED                +--delimiter / line break--> field ends

Line breaks may be ``\\n``, ``\\r\\n`` or ``\\r`` (mixed within one input).
Delimiters and line breaks inside quotes are literal. Cell text is never
trimmed here; whitespace handling belongs to numeric parsing.
"""

__all__ = [
    "RawTable",
    "tokenize",
]

RawTable = list[list[str]]


class _State(enum.Enum):
    FIELD_START = 0
    UNQUOTED = 1
    QUOTED = 2
    QUOTE_PENDING = 3


def tokenize(text: str, delimiter: str = ",") -> RawTable:
    """Split ``text`` into rows and fields.

    A trailing line break does not produce an extra empty row; empty input
    produces no rows.
    """
    rows: RawTable = []
    row: list[str] = []
    field: list[str] = []
    state = _State.FIELD_START
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        i += 1
        if state is _State.QUOTED:
            if c == '"':
                state = _State.QUOTE_PENDING
            else:
                field.append(c)
            continue
        if state is _State.QUOTE_PENDING and c == '"':
            # "" -> "
            field.append('"')
            state = _State.QUOTED
            continue
        if c == delimiter:
            row.append("".join(field))
            field = []
            state = _State.FIELD_START
        elif c == "\n" or c == "\r":
            if c == "\r" and i < n and text[i] == "\n":
                i += 1
            row.append("".join(field))
            rows.append(row)
            row, field = [], []
            state = _State.FIELD_START
        elif c == '"' and state is _State.FIELD_START:
            state = _State.QUOTED
        else:
            # text after a closing quote is kept as-is
            field.append(c)
            state = _State.UNQUOTED

    if row or field or state is not _State.FIELD_START:
        row.append("".join(field))
        rows.append(row)
    return rows
