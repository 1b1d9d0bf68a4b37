from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from config import TOP_ERRORS_LIMIT
from engine.enums import LevelClass
from engine.logs.parser import parse_line

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogStats:
    total_lines: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    top_errors: Dict[str, int] = field(default_factory=dict)
    time_range: Optional[Tuple[str, str]] = None


def analyze(lines: Iterable[str]) -> LogStats:
    """Fold a sequence of terminator-stripped lines into a :class:`LogStats`.

    Lines are consumed one at a time, so ``lines`` may be an open file or any
    other lazy iterable. Only the error message table grows with the input.
    """
    total = 0
    counts: Dict[LevelClass, int] = {
        LevelClass.error: 0,
        LevelClass.warning: 0,
        LevelClass.info: 0,
    }
    error_messages: Counter = Counter()
    first_ts: Optional[str] = None
    last_ts: Optional[str] = None

    for line in lines:
        total += 1
        entry = parse_line(line)
        if entry is None:
            continue

        if entry.timestamp:
            if first_ts is None:
                first_ts = entry.timestamp
            last_ts = entry.timestamp

        level_class = LevelClass.from_level(entry.level)
        if not level_class.is_counted():
            continue
        counts[level_class] += 1
        if level_class is LevelClass.error:
            error_messages[entry.message] += 1

    # most_common keeps first-seen order among equal counts
    top_errors = dict(error_messages.most_common(TOP_ERRORS_LIMIT))
    time_range = (first_ts, last_ts) if first_ts is not None and last_ts is not None else None

    log.debug(
        "analyze: lines=%d errors=%d warnings=%d info=%d distinct_errors=%d",
        total,
        counts[LevelClass.error],
        counts[LevelClass.warning],
        counts[LevelClass.info],
        len(error_messages),
    )

    return LogStats(
        total_lines=total,
        error_count=counts[LevelClass.error],
        warning_count=counts[LevelClass.warning],
        info_count=counts[LevelClass.info],
        top_errors=top_errors,
        time_range=time_range,
    )
