"""
Constants and configuration for the log analyzer service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Tuple

from pydantic_settings import BaseSettings


LOGANALYZER_HOST = os.getenv("LOGANALYZER_HOST", "0.0.0.0")
LOGANALYZER_PORT = int(os.getenv("LOGANALYZER_PORT", "8080"))
LOGANALYZER_LOG_LEVEL = os.getenv("LOGANALYZER_LOG_LEVEL", "info").lower()

LOGANALYZER_MAX_UPLOAD_BYTES = int(os.getenv("LOGANALYZER_MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))
LOGANALYZER_ANALYSIS_TIMEOUT = float(os.getenv("LOGANALYZER_ANALYSIS_TIMEOUT", "60"))

# severity vocabulary is fixed; these are not exposed through Settings
ERROR_LEVELS: Tuple[str, ...] = ("ERROR", "ERR", "FATAL")
WARNING_LEVELS: Tuple[str, ...] = ("WARN", "WARNING")
INFO_LEVELS: Tuple[str, ...] = ("INFO",)
UNKNOWN_LEVEL = "UNKNOWN"

TOP_ERRORS_LIMIT = 10

# bytes read per chunk when spooling an upload
UPLOAD_CHUNK_BYTES = 64 * 1024


class Settings(BaseSettings):
    host: str = LOGANALYZER_HOST
    port: int = LOGANALYZER_PORT
    log_level: str = LOGANALYZER_LOG_LEVEL

    max_upload_bytes: int = LOGANALYZER_MAX_UPLOAD_BYTES
    analysis_timeout_seconds: float = LOGANALYZER_ANALYSIS_TIMEOUT

    cors_allow_origins: List[str] = ["*"]

    model_config = {
        "env_prefix": "LOGANALYZER_",
        "extra": "ignore",
    }


settings = Settings()
