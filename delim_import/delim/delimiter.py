from __future__ import annotations

import logging
import re

"""Delimiter guessing for delimited text.

Scoring (deterministic, no side effects):
- sample up to ``SAMPLE_LINES`` lines, skipping empty or space-only ones
- a candidate qualifies only if it occurs (outside quotes) in the first line
- score = (later sampled lines with the same count, first-line count)
- ties keep the earlier candidate in ``CANDIDATE_DELIMITERS``
- nothing qualifies -> comma
"""

__all__ = [
    "CANDIDATE_DELIMITERS",
    "DEFAULT_DELIMITER",
    "guess_delimiter",
    "count_delimiter",
]

logger = logging.getLogger(__name__)

CANDIDATE_DELIMITERS: tuple[str, ...] = (",", "\t", "|", ";")
DEFAULT_DELIMITER = ","
SAMPLE_LINES = 10

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def count_delimiter(line: str, delimiter: str) -> int:
    """Count occurrences of ``delimiter`` in ``line`` that are not inside quotes."""
    count = 0
    quoted = False
    for c in line:
        if c == '"':
            quoted = not quoted
        elif c == delimiter and not quoted:
            count += 1
    return count


def _sample_lines(text: str) -> list[str]:
    parts = _LINE_BREAK_RE.split(text, maxsplit=SAMPLE_LINES)
    if len(parts) > SAMPLE_LINES:
        parts = parts[:SAMPLE_LINES]  # 最後の要素は未分割の残り
    # タブだけの行は空レコードの行として数える
    return [p for p in parts if p.strip(" ")]


def guess_delimiter(text: str) -> str:
    lines = _sample_lines(text)
    if not lines:
        return DEFAULT_DELIMITER
    best: str | None = None
    best_score: tuple[int, int] = (-1, -1)
    for delim in CANDIDATE_DELIMITERS:
        counts = [count_delimiter(line, delim) for line in lines]
        if counts[0] == 0:
            continue
        score = (sum(1 for c in counts[1:] if c == counts[0]), counts[0])
        if score > best_score:
            best, best_score = delim, score
    if best is None:
        logger.debug("no candidate delimiter found; defaulting to %r", DEFAULT_DELIMITER)
        return DEFAULT_DELIMITER
    logger.debug("guessed delimiter %r (score=%s)", best, best_score)
    return best
