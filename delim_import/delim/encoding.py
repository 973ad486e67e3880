from __future__ import annotations

import codecs
import logging
import re
from enum import Enum

from ..config.errors import UnsupportedEncodingError

"""Encoding detection for raw delimited-text payloads.

Two independent steps:
1. ``detect_bom`` classifies the byte prefix (UTF-8 / UTF-16LE / UTF-16BE / UNKNOWN).
2. ``decode_bytes`` combines that tag with an optional caller hint, strips the
   BOM and decodes.

Hint resolution:
- no hint            -> BOM, else UTF-8
- ambiguous "utf16"  -> BOM byte order when a UTF-16 BOM is present, else big endian
- explicit hint      -> the hint (a matching BOM is still stripped)
"""

__all__ = [
    "Encoding",
    "detect_bom",
    "normalize_encoding_name",
    "resolve_encoding",
    "decode_bytes",
    "decode_content",
]

logger = logging.getLogger(__name__)


class Encoding(Enum):
    UTF8 = "utf-8"
    UTF16LE = "utf-16-le"
    UTF16BE = "utf-16-be"
    UNKNOWN = "unknown"


_BOMS: tuple[tuple[bytes, Encoding], ...] = (
    (codecs.BOM_UTF8, Encoding.UTF8),
    (codecs.BOM_UTF16_LE, Encoding.UTF16LE),
    (codecs.BOM_UTF16_BE, Encoding.UTF16BE),
)

_BOM_LENGTHS = {encoding: len(bom) for bom, encoding in _BOMS}

# 正規化後の表記 -> Encoding (None はバイト順が曖昧な utf16)
_ENCODING_ALIASES: dict[str, Encoding | None] = {
    "utf8": Encoding.UTF8,
    "utf8sig": Encoding.UTF8,
    "utf16": None,
    "utf16le": Encoding.UTF16LE,
    "utf16be": Encoding.UTF16BE,
}

_NAME_NOISE_RE = re.compile(r"[\s_\-]")


def detect_bom(content: bytes) -> Encoding:
    """Classify the byte-order mark at the start of ``content``."""
    for bom, encoding in _BOMS:
        if content.startswith(bom):
            return encoding
    return Encoding.UNKNOWN


def normalize_encoding_name(name: str) -> Encoding | None:
    """Map a user supplied encoding spelling to an Encoding.

    Returns None for the byte-order-ambiguous "utf16" family.

    Raises:
        UnsupportedEncodingError: if the name is not recognized
    """
    key = _NAME_NOISE_RE.sub("", str(name)).lower()
    if key not in _ENCODING_ALIASES:
        raise UnsupportedEncodingError(
            f"unsupported encoding: {name!r} (expected one of utf8, utf16, utf16le, utf16be)"
        )
    return _ENCODING_ALIASES[key]


def resolve_encoding(bom: Encoding, hint: str | None = None) -> Encoding:
    if hint is None:
        return Encoding.UTF8 if bom is Encoding.UNKNOWN else bom
    hinted = normalize_encoding_name(hint)
    if hinted is None:
        if bom in (Encoding.UTF16LE, Encoding.UTF16BE):
            return bom
        return Encoding.UTF16BE
    if bom is not Encoding.UNKNOWN and bom is not hinted:
        logger.debug("BOM %s ignored in favour of explicit encoding %s", bom.value, hinted.value)
    return hinted


def decode_bytes(content: bytes, encoding: str | None = None) -> tuple[str, Encoding]:
    """Decode a raw buffer, returning the text (BOM stripped) and the encoding used.

    Args:
        content: raw file bytes
        encoding: optional encoding hint (see ``normalize_encoding_name``)

    Raises:
        UnsupportedEncodingError: for an unrecognized hint
    """
    bom = detect_bom(content)
    resolved = resolve_encoding(bom, encoding)
    if bom is resolved:
        content = content[_BOM_LENGTHS[bom]:]
    try:
        text = content.decode(resolved.value)
    except UnicodeDecodeError as e:
        logger.warning("invalid %s byte sequence (%s); using replacement characters", resolved.value, e.reason)
        text = content.decode(resolved.value, errors="replace")
    logger.debug("decoded %d bytes as %s (bom=%s)", len(content), resolved.value, bom.value)
    return text, resolved


def decode_content(content: bytes | str, encoding: str | None = None) -> tuple[str, Encoding | None]:
    """Accept either a raw buffer or already-decoded text.

    Text input is returned as-is apart from a leading U+FEFF; its encoding is
    reported as None. The hint is still validated.
    """
    if isinstance(content, (bytes, bytearray, memoryview)):
        return decode_bytes(bytes(content), encoding)
    if encoding is not None:
        normalize_encoding_name(encoding)
    if content.startswith("\ufeff"):
        content = content[1:]
    return content, None
