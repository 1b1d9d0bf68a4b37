"""
Health check route.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.responses import HealthResponse
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
@handle_exceptions
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
