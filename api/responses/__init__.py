"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engine.logs import LogStats


class CamelModel(BaseModel):

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LogStatsResponse(CamelModel):

    total_lines: int = Field(ge=0)
    error_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    info_count: int = Field(ge=0)
    top_errors: Dict[str, int] = Field(default_factory=dict)
    time_range: Optional[Tuple[str, str]] = None

    @classmethod
    def from_stats(cls, stats: LogStats) -> LogStatsResponse:
        return cls(
            total_lines=stats.total_lines,
            error_count=stats.error_count,
            warning_count=stats.warning_count,
            info_count=stats.info_count,
            top_errors=dict(stats.top_errors),
            time_range=stats.time_range,
        )


class HealthResponse(BaseModel):

    status: str = "ok"
