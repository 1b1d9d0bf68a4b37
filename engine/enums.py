"""
Enumerations for log level classes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import ERROR_LEVELS, INFO_LEVELS, WARNING_LEVELS


class LevelClass(str, Enum):
    error = "error"
    warning = "warning"
    info = "info"
    other = "other"

    @classmethod
    def from_level(cls, level: str) -> LevelClass:
        # levels arrive upper-cased from the parser; anything outside the
        # fixed vocabulary (UNKNOWN, DEBUG, TRACE, ...) is not counted
        if level in ERROR_LEVELS:
            return cls.error
        if level in WARNING_LEVELS:
            return cls.warning
        if level in INFO_LEVELS:
            return cls.info
        return cls.other

    def is_counted(self) -> bool:
        return self is not LevelClass.other
