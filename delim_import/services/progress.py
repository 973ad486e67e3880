from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""File-level progress bar for multi-file imports.

The bar only exists when stdout is a TTY; under CI or a pipe every method is a
no-op and the log lines stay free of control sequences. Running totals
(records imported, files failed) are kept either way and shown as the bar
postfix.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


def _create_bar(total_files: int, description: str) -> TqdmType[Any]:
    return tqdm(
        total=total_files,
        desc=description,
        unit="file",
        leave=True,
        ncols=80,
        ascii=True,
    )


class ProgressTracker:
    def __init__(self, total_files: int, *, description: str = "Importing files") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.records = 0
        self.failed = 0
        self.pbar: TqdmType[Any] | None = _create_bar(total_files, description) if is_tty_enabled() else None

    @property
    def enabled(self) -> bool:
        return self.pbar is not None

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} [{self.current_file}/{self.total_files}] {file_path.name}")

    def finish_file(self, records: int = 0, *, success: bool = True) -> None:
        """Advance the bar by one file and fold ``records`` into the totals."""
        if success:
            self.records += records
        else:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)
            self.pbar.set_postfix(records=self.records, failed=self.failed)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
