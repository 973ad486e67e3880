from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..config.errors import ConfigError
from ..delim.reader import import_delim
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import ImportOptions
from ..models.processing_result import FileStat, ProcessingResult
from ..models.record_set import TypedRecordSet
from .export import export_delim
from .progress import ProgressTracker

"""Multi-file import orchestration.

For each input path: read bytes -> import_delim -> optional export. A failing
file is recorded (FileStat + ErrorRecord) and the run continues with the next
one; only a run without any input is fatal.
"""

__all__ = [
    "ProcessingError",
    "import_file",
    "process_all",
    "resolve_output_path",
]

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Base exception for fatal run-level errors."""
    pass


def import_file(path: Path, options: ImportOptions) -> TypedRecordSet:
    """Read ``path`` and import its content.

    Raises:
        OSError: the file cannot be read
        ConfigError: the options are invalid for this payload
    """
    return import_delim(path.read_bytes(), options)


def resolve_output_path(output: Path, source: Path, multiple: bool) -> Path:
    """Single input: ``output`` is the target file unless it is a directory.
    Multiple inputs: ``output`` is a directory receiving one file per input."""
    if multiple or output.is_dir():
        output.mkdir(parents=True, exist_ok=True)
        return output / source.name
    return output


def process_all(
    paths: Sequence[Path],
    options: ImportOptions | None = None,
    *,
    output: Path | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> ProcessingResult:
    """Import every file in ``paths``.

    Args:
        paths: input files
        options: options shared by all files
        output: optional export target (file for one input, directory for several)
        error_log: buffer receiving per-file errors (flushed by the caller)

    Returns:
        ProcessingResult with per-file stats and the imported record sets

    Raises:
        ProcessingError: no input paths were given
    """
    if not paths:
        raise ProcessingError("no input files given")
    options = options or ImportOptions()
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    start_time = datetime.now(UTC)

    file_stats: list[FileStat] = []
    record_sets: dict[str, TypedRecordSet] = {}
    total_records = 0
    success = failed = 0

    with ProgressTracker(len(paths)) as progress:
        for path in paths:
            path = Path(path)
            progress.start_file(path)
            t0 = time.perf_counter()
            error_type: str | None = None
            error: str | None = None
            result: TypedRecordSet | None = None
            try:
                result = import_file(path, options)
            except OSError as e:
                error_type, error = "FILE_READ_ERROR", str(e)
            except ConfigError as e:
                error_type, error = "CONFIG_ERROR", str(e)
            except Exception as e:
                # 想定外の例外でも残りのファイルは処理を続ける
                logger.debug("unexpected error while importing %s", path, exc_info=True)
                error_type, error = "UNEXPECTED_ERROR", f"{type(e).__name__}: {e}"

            if result is not None and output is not None:
                target = resolve_output_path(output, path, multiple=len(paths) > 1)
                try:
                    export_delim(result, target, options.export_delimiter)
                    logger.info(f"wrote {target}")
                except OSError as e:
                    error_type, error = "EXPORT_ERROR", str(e)

            elapsed = time.perf_counter() - t0
            if error is None and result is not None:
                success += 1
                total_records += len(result.records)
                record_sets[path.name] = result
                file_stats.append(
                    FileStat(
                        file_name=path.name,
                        status="success",
                        records=len(result.records),
                        elapsed_seconds=elapsed,
                        delimiter=result.delimiter,
                        encoding=result.encoding,
                    )
                )
                logger.info(
                    f"file={path.name} records={len(result.records)} "
                    f"delimiter={result.delimiter!r} encoding={result.encoding}"
                )
            else:
                failed += 1
                file_stats.append(
                    FileStat(
                        file_name=path.name,
                        status="failed",
                        records=0,
                        elapsed_seconds=elapsed,
                        error=error,
                    )
                )
                error_log.append(ErrorRecord.create(path.name, -1, error_type or "UNKNOWN", error or ""))
                logger.error(f"file={path.name} {error_type}: {error}")
            progress.finish_file(len(result.records) if result is not None else 0, success=error is None)

    end_time = datetime.now(UTC)
    elapsed_total = (end_time - start_time).total_seconds()
    throughput = total_records / elapsed_total if elapsed_total > 0 else 0.0
    return ProcessingResult(
        success_files=success,
        failed_files=failed,
        total_records=total_records,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_total,
        throughput_rows_per_sec=throughput,
        file_stats=file_stats,
        record_sets=record_sets,
    )
