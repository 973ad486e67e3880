"""Domain models for the delimited text importer."""

from .config_models import ImportOptions
from .error_record import ErrorRecord
from .processing_result import FileStat, ProcessingResult
from .record_set import FieldSpec, TypedRecordSet

__all__ = [
    # Options
    "ImportOptions",
    # Import results
    "FieldSpec",
    "TypedRecordSet",
    # Run bookkeeping
    "ErrorRecord",
    "FileStat",
    "ProcessingResult",
]
