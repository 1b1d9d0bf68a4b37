"""
Shared helpers for API route modules.

Provides bounded reading of request payloads, spooling of uploads to a
transient file and the timeout wrapper every analysis runs under. This keeps
individual route files thin and avoids repeating boilerplate logic.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request, UploadFile, status

from config import UPLOAD_CHUNK_BYTES, settings

_T = TypeVar("_T")

log = logging.getLogger(__name__)


def _too_large(limit: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail=f"Payload exceeds {limit} bytes",
    )


def _check_declared_length(request: Request, limit: int) -> None:
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        log.warning("rejecting %s: declared length %s > %d", request.url.path, declared, limit)
        raise _too_large(limit)


async def read_body(request: Request, limit: int | None = None) -> bytes:
    limit = settings.max_upload_bytes if limit is None else limit
    _check_declared_length(request, limit)

    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            log.warning("rejecting %s: body exceeded %d bytes", request.url.path, limit)
            raise _too_large(limit)
        chunks.append(chunk)
    return b"".join(chunks)


async def spool_upload(upload: UploadFile, limit: int | None = None) -> str:
    """Copy ``upload`` into a named temporary file and return its path.

    The caller must remove the file with :func:`discard_spool`.
    """
    limit = settings.max_upload_bytes if limit is None else limit
    fd, path = tempfile.mkstemp(prefix="log-", suffix=".tmp")
    size = 0
    try:
        with os.fdopen(fd, "wb") as out:
            while True:
                chunk = await upload.read(UPLOAD_CHUNK_BYTES)
                if not chunk:
                    break
                size += len(chunk)
                if size > limit:
                    log.warning("rejecting upload %s: exceeded %d bytes", upload.filename, limit)
                    raise _too_large(limit)
                out.write(chunk)
    except BaseException:
        discard_spool(path)
        raise
    log.debug("spooled upload %s (%d bytes) to %s", upload.filename, size, path)
    return path


def discard_spool(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


async def run_bounded(func: Callable[..., _T], *args: Any, timeout: float | None = None) -> _T:
    # the worker thread cannot be interrupted; on timeout its result is dropped
    timeout = settings.analysis_timeout_seconds if timeout is None else timeout
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=timeout)
    except asyncio.TimeoutError as exc:
        log.warning("%s timed out after %.1fs", getattr(func, "__name__", func), timeout)
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"Analysis did not finish within {timeout:g}s",
        ) from exc
