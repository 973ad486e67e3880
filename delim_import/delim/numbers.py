from __future__ import annotations

import math
import numbers
import re
from typing import Any

"""Numeric literal parser used by type inference.

Accepted forms (after trimming surrounding whitespace):
- plain / signed decimals: ``43.2``, ``-2``, ``+43.2``, ``.5``
- thousands separators: ``3,211``, ``-2,000,000.0``
- scientific notation: ``1e3``, ``1.3e3``
- hexadecimal: ``0xcc``, ``0XFF``

Only ASCII digits count. Anything else (addresses, dates, words, fullwidth
digits) is rejected as a whole; no leading numeric substring is ever extracted.
"""

__all__ = [
    "parse_number",
    "is_blank",
]

_DECIMAL_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?   # integer part, optional thousands groups
      | \.\d+
    )
    (?:[eE][+-]?\d+)?
    """,
    re.VERBOSE | re.ASCII,
)
_HEX_RE = re.compile(r"[+-]?0[xX][0-9a-fA-F]+", re.ASCII)


def is_blank(raw: Any) -> bool:
    """True for None and for strings that are empty or whitespace-only."""
    if raw is None:
        return True
    return isinstance(raw, str) and raw.strip() == ""


def parse_number(raw: Any) -> int | float | None:
    """Convert a single cell to a number, or None when it is not one.

    Native numbers pass through unchanged (non-finite floats become None).
    Literals without a fraction or exponent come back as ``int``.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Real):
        if isinstance(raw, float) and not math.isfinite(raw):
            return None
        return raw
    if not isinstance(raw, str):
        return None
    s = raw.strip()
    if not s:
        return None
    if _HEX_RE.fullmatch(s):
        return int(s, 16)
    if not _DECIMAL_RE.fullmatch(s):
        return None
    cleaned = s.replace(",", "")
    if "." in cleaned or "e" in cleaned or "E" in cleaned:
        value = float(cleaned)
        # 1e999 など
        return value if math.isfinite(value) else None
    try:
        return int(cleaned)
    except ValueError:
        # int の桁数上限を超える
        value = float(cleaned)
        return value if math.isfinite(value) else None
