from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from config import UNKNOWN_LEVEL

_LINE_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2}[T\s]\d{2}:\d{2}:\d{2}[.,]?\d*)"  # timestamp
    r"\s*\[?(\w+)\]?"                                     # level, optionally bracketed
    r"\s*(.*)",                                           # message
    re.ASCII,
)


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: str
    message: str


def parse_line(line: str) -> Optional[LogEntry]:
    """Classify one terminator-stripped line.

    Returns ``None`` for blank lines. Lines without a leading
    ``timestamp level`` prefix become ``UNKNOWN`` entries carrying the whole
    trimmed line as their message.
    """
    text = line.strip()
    if not text:
        return None
    m = _LINE_RE.fullmatch(text)
    if m is None:
        return LogEntry(timestamp="", level=UNKNOWN_LEVEL, message=text)
    ts, level, message = m.groups()
    return LogEntry(
        timestamp=ts.strip(),
        level=level.upper().strip(),
        message=message.strip(),
    )
