"""
Log line classification and streaming statistics, including the structured
line parser, the single-pass aggregator and helpers that feed it from text,
byte streams and files.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.logs.exceptions import LogAnalysisError, LogDecodeError
from engine.logs.parser import LogEntry, parse_line
from engine.logs.sources import analyze_bytes, analyze_file, analyze_stream, analyze_text, iter_lines
from engine.logs.stats import LogStats, analyze

__all__ = [
    "LogAnalysisError",
    "LogDecodeError",
    "LogEntry",
    "LogStats",
    "analyze",
    "analyze_bytes",
    "analyze_file",
    "analyze_stream",
    "analyze_text",
    "iter_lines",
    "parse_line",
]
