from __future__ import annotations

import codecs

import pytest

from delim_import.config.errors import ConfigError, UnsupportedEncodingError
from delim_import.delim.encoding import (
    Encoding,
    decode_bytes,
    decode_content,
    detect_bom,
    normalize_encoding_name,
)

NAME = "NAME\n国语國語\n"


def test_detect_bom():
    assert detect_bom(codecs.BOM_UTF8 + b"a") is Encoding.UTF8
    assert detect_bom(b"\xff\xfea\x00") is Encoding.UTF16LE
    assert detect_bom(b"\xfe\xff\x00a") is Encoding.UTF16BE
    assert detect_bom(b"abc") is Encoding.UNKNOWN
    assert detect_bom(b"") is Encoding.UNKNOWN


@pytest.mark.parametrize(
    "name,expected",
    [
        ("utf8", Encoding.UTF8),
        ("UTF-8", Encoding.UTF8),
        ("utf-16be", Encoding.UTF16BE),
        ("UTF16LE", Encoding.UTF16LE),
        ("utf_16_le", Encoding.UTF16LE),
        ("utf16", None),
        ("utf-16", None),
    ],
)
def test_normalize_encoding_name(name: str, expected: Encoding | None):
    assert normalize_encoding_name(name) is expected


def test_unknown_encoding_is_config_error():
    with pytest.raises(UnsupportedEncodingError):
        normalize_encoding_name("latin1")
    with pytest.raises(ConfigError):
        decode_bytes(b"a", "shift_jis")


def test_default_is_utf8():
    text, enc = decode_bytes(NAME.encode("utf-8"))
    assert text == NAME
    assert enc is Encoding.UTF8


def test_utf8_bom_is_stripped(encode_with_bom):
    text, enc = decode_bytes(encode_with_bom(NAME, "utf-8"))
    assert text == NAME
    assert enc is Encoding.UTF8


def test_utf16be_without_bom_with_ambiguous_hint():
    text, enc = decode_bytes(NAME.encode("utf-16-be"), "utf16")
    assert text == NAME
    assert enc is Encoding.UTF16BE


def test_utf16be_bom_with_ambiguous_hint(encode_with_bom):
    text, enc = decode_bytes(encode_with_bom(NAME, "utf-16-be"), "utf16")
    assert text == NAME
    assert not text.startswith("\ufeff")
    assert enc is Encoding.UTF16BE


def test_utf16le_bom_with_ambiguous_hint(encode_with_bom):
    text, enc = decode_bytes(encode_with_bom(NAME, "utf-16-le"), "utf16")
    assert text == NAME
    assert enc is Encoding.UTF16LE


def test_utf16_bom_without_hint(encode_with_bom):
    assert decode_bytes(encode_with_bom(NAME, "utf-16-le"))[0] == NAME
    assert decode_bytes(encode_with_bom(NAME, "utf-16-be"))[0] == NAME


def test_explicit_hints_with_bom(encode_with_bom):
    assert decode_bytes(encode_with_bom(NAME, "utf-16-be"), "utf-16be") == (NAME, Encoding.UTF16BE)
    assert decode_bytes(encode_with_bom(NAME, "utf-16-le"), "utf16le") == (NAME, Encoding.UTF16LE)


def test_invalid_bytes_are_replaced():
    text, enc = decode_bytes(b"a,b\n1,\xc3\x28\n")
    assert enc is Encoding.UTF8
    assert "\ufffd" in text


def test_decode_content_accepts_text():
    assert decode_content("\ufeffa,b\n1,2") == ("a,b\n1,2", None)
    with pytest.raises(UnsupportedEncodingError):
        decode_content("a", "klingon")
