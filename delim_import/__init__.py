"""Delimited text (CSV / TSV / pipe / semicolon) importer producing typed records."""

from .config.errors import ConfigError, TypeHintError, UnsupportedEncodingError
from .delim.delimiter import guess_delimiter
from .delim.encoding import Encoding, decode_bytes, detect_bom
from .delim.headers import parse_field_headers, resolve_headers
from .delim.numbers import parse_number
from .delim.reader import import_delim, import_delim_table, import_records
from .delim.tokenizer import tokenize
from .delim.types import adjust_record_types, detect_field_type
from .models import FieldSpec, ImportOptions, TypedRecordSet
from .services.export import export_delim, guess_export_delimiter

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ConfigError",
    "TypeHintError",
    "UnsupportedEncodingError",
    # Import pipeline
    "Encoding",
    "decode_bytes",
    "detect_bom",
    "guess_delimiter",
    "tokenize",
    "parse_field_headers",
    "resolve_headers",
    "parse_number",
    "detect_field_type",
    "adjust_record_types",
    "import_delim",
    "import_delim_table",
    "import_records",
    # Models
    "FieldSpec",
    "ImportOptions",
    "TypedRecordSet",
    # Export
    "export_delim",
    "guess_export_delimiter",
]
