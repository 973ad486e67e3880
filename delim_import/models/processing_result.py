from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .record_set import TypedRecordSet

"""Processing result models for multi-file imports.

Aggregates per-file statistics into the numbers printed on the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file import statistics."""
    file_name: str
    status: str  # success / failed
    records: int
    elapsed_seconds: float
    delimiter: str | None = None
    encoding: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    success_files: int
    failed_files: int
    total_records: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float
    file_stats: list[FileStat] = field(default_factory=list)
    record_sets: dict[str, TypedRecordSet] = field(default_factory=dict)  # ファイル名 -> 取込結果

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
