from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Iterator, TextIO, Union

from engine.logs.exceptions import LogDecodeError
from engine.logs.stats import LogStats, analyze

log = logging.getLogger(__name__)

ENCODING = "utf-8"


def iter_lines(stream: TextIO) -> Iterator[str]:
    # the stream must be opened with newline=None so that \r\n and \r are
    # already folded into \n
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def _decode_failure(exc: UnicodeDecodeError, source: str) -> LogDecodeError:
    return LogDecodeError(
        f"{source} is not valid UTF-8: {exc.reason} "
        f"(bytes {exc.object[exc.start:exc.end].hex()})"
    )


def analyze_text(text: str) -> LogStats:
    return analyze(iter_lines(io.StringIO(text, newline=None)))


def analyze_bytes(data: bytes) -> LogStats:
    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise _decode_failure(exc, "request body") from exc
    return analyze_text(text)


def analyze_stream(binary: BinaryIO, source: str = "stream") -> LogStats:
    """Decode ``binary`` as UTF-8 while folding it line by line.

    The caller keeps ownership of ``binary``; it is left open.
    """
    reader = io.TextIOWrapper(binary, encoding=ENCODING, errors="strict", newline=None)
    try:
        return analyze(iter_lines(reader))
    except UnicodeDecodeError as exc:
        raise _decode_failure(exc, source) from exc
    finally:
        reader.detach()


def analyze_file(path: Union[str, os.PathLike]) -> LogStats:
    with open(path, "r", encoding=ENCODING, errors="strict", newline=None) as fh:
        try:
            return analyze(iter_lines(fh))
        except UnicodeDecodeError as exc:
            log.debug("analyze_file path=%s decode failed: %s", path, exc)
            raise _decode_failure(exc, "uploaded file") from exc
