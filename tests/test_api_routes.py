"""
Route-level tests for the analyze, health and index endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import os

import httpx
import pytest
import pytest_asyncio

import main as app_main
from api.routes import common


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app_main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_index_page(client):
    for path in ("/", "/index.html"):
        resp = await client.get(path)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "/api/analyze/text" in resp.text


@pytest.mark.asyncio
async def test_unknown_path_is_404(client):
    resp = await client.get("/nope")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_analyze_text(client, sample_log):
    resp = await client.post("/api/analyze/text", content=sample_log.encode("utf-8"))
    assert resp.status_code == 200
    assert resp.json() == {
        "totalLines": 3,
        "errorCount": 2,
        "warningCount": 0,
        "infoCount": 1,
        "topErrors": {"disk full": 2},
        "timeRange": ["2024-01-01T10:00:00", "2024-01-01T10:00:10"],
    }


@pytest.mark.asyncio
async def test_analyze_text_empty_body(client):
    resp = await client.post("/api/analyze/text", content=b"")
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalLines"] == 0
    assert body["topErrors"] == {}
    assert body["timeRange"] is None


@pytest.mark.asyncio
async def test_analyze_text_invalid_utf8(client):
    resp = await client.post("/api/analyze/text", content=b"ok\n\xff\xfe\n")
    assert resp.status_code == 400
    assert "UTF-8" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_analyze_text_wrong_method(client):
    resp = await client.get("/api/analyze/text")
    assert resp.status_code == 405


@pytest.mark.asyncio
async def test_analyze_text_too_large(client, monkeypatch):
    monkeypatch.setattr(common.settings, "max_upload_bytes", 8)
    resp = await client.post("/api/analyze/text", content=b"0123456789")
    assert resp.status_code == 413


@pytest.mark.asyncio
async def test_analyze_file(client, sample_log):
    files = {"file": ("app.log", (sample_log + "\n   \n").encode("utf-8"), "text/plain")}
    resp = await client.post("/api/analyze/file", files=files)
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalLines"] == 4
    assert body["errorCount"] == 2
    assert body["topErrors"] == {"disk full": 2}


@pytest.mark.asyncio
async def test_analyze_file_removes_spooled_copy(client, monkeypatch, sample_log):
    spooled = []
    real_spool = common.spool_upload

    async def tracking_spool(upload, limit=None):
        path = await real_spool(upload, limit)
        spooled.append(path)
        return path

    from api.routes import analyze as analyze_route
    monkeypatch.setattr(analyze_route, "spool_upload", tracking_spool)

    files = {"file": ("app.log", sample_log.encode("utf-8"), "text/plain")}
    resp = await client.post("/api/analyze/file", files=files)
    assert resp.status_code == 200
    assert len(spooled) == 1
    assert not os.path.exists(spooled[0])


@pytest.mark.asyncio
async def test_analyze_file_invalid_utf8(client):
    files = {"file": ("bad.log", b"\xc3\x28\n", "text/plain")}
    resp = await client.post("/api/analyze/file", files=files)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_analyze_file_too_large(client, monkeypatch):
    monkeypatch.setattr(common.settings, "max_upload_bytes", 4)
    files = {"file": ("big.log", b"0123456789", "text/plain")}
    resp = await client.post("/api/analyze/file", files=files)
    assert resp.status_code == 413


@pytest.mark.asyncio
async def test_analyze_file_missing_field(client):
    resp = await client.post("/api/analyze/file")
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_cors_header_present(client):
    resp = await client.get("/api/health", headers={"Origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent(client):
    bodies = [f"2024-01-01T10:00:00 ERROR e{i}\n" * (i + 1) for i in range(8)]
    responses = await asyncio.gather(*[
        client.post("/api/analyze/text", content=b.encode("utf-8")) for b in bodies
    ])
    for i, resp in enumerate(responses):
        assert resp.status_code == 200
        assert resp.json()["topErrors"] == {f"e{i}": i + 1}
