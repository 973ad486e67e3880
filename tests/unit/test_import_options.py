from __future__ import annotations

import pytest

from delim_import.config.errors import ConfigError, TypeHintError, UnsupportedEncodingError
from delim_import.models.config_models import ImportOptions


def test_defaults():
    opts = ImportOptions()
    assert opts.delimiter is None
    assert opts.encoding is None
    assert opts.field_types == ()
    assert opts.type_hints == {}


def test_field_types_from_comma_string():
    opts = ImportOptions(field_types="fips:str, count:num")
    assert opts.field_types == ("fips:str", "count:num")
    assert opts.type_hints == {"fips": "string", "count": "number"}


def test_field_types_first_wins():
    assert ImportOptions(field_types=["a:str", "a:num"]).type_hints == {"a": "string"}


@pytest.mark.parametrize("delimiter", ["", ";;", '"', "\n"])
def test_invalid_delimiter(delimiter: str):
    with pytest.raises(ConfigError):
        ImportOptions(delimiter=delimiter)


def test_invalid_encoding():
    with pytest.raises(UnsupportedEncodingError):
        ImportOptions(encoding="cp1252")


def test_invalid_field_type():
    with pytest.raises(TypeHintError):
        ImportOptions(field_types=["a:bool"])


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigError):
        ImportOptions.from_mapping({"delimiter": ",", "quote": "'"})


def test_merged_overrides_only_given_values():
    base = ImportOptions(delimiter=";", encoding="utf8")
    merged = base.merged(delimiter=None, encoding="utf16le", field_types="a:num")
    assert merged.delimiter == ";"
    assert merged.encoding == "utf16le"
    assert merged.field_types == ("a:num",)
    # 元オブジェクトは不変
    assert base.encoding == "utf8"
