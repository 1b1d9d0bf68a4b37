#!/usr/bin/env python3

"""
Smoke test runner for a live Log Analyzer API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

BASE_URL = os.getenv("LOGANALYZER_BASE_URL", "http://localhost:8080")

SAMPLE_LOG = (
    "2024-01-01T10:00:00 [ERROR] disk full\n"
    "2024-01-01T10:00:05 [ERROR] disk full\n"
    "2024-01-01T10:00:07,250 WARN cache miss ratio high\n"
    "2024-01-01 10:00:10 INFO ok\n"
    "\n"
    "plain unstructured line\n"
)


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    content: Optional[bytes] = None
    files: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    expect_json: Dict[str, Any] = field(default_factory=dict)
    section: str = ""


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/api/health", section="Health", expect_json={"status": "ok"}),
    Case("index page", "GET", "/", section="Health"),

    # ── Text ──────────────────────────────────────────────
    Case("empty body", "POST", "/api/analyze/text", section="Text", content=b"",
         expect_json={"totalLines": 0, "errorCount": 0, "topErrors": {}, "timeRange": None}),
    Case("sample log", "POST", "/api/analyze/text", section="Text", content=SAMPLE_LOG.encode(),
         expect_json={"totalLines": 6, "errorCount": 2, "warningCount": 1, "infoCount": 1,
                      "topErrors": {"disk full": 2},
                      "timeRange": ["2024-01-01T10:00:00", "2024-01-01 10:00:10"]}),
    Case("blank lines only", "POST", "/api/analyze/text", section="Text", content=b"   \n\n",
         expect_json={"totalLines": 2, "errorCount": 0}),
    Case("invalid utf-8", "POST", "/api/analyze/text", section="Text",
         content=b"ok\n\xff\xfe broken\n", expect=400),
    Case("wrong method", "GET", "/api/analyze/text", section="Text", expect=405),

    # ── File ──────────────────────────────────────────────
    Case("upload sample", "POST", "/api/analyze/file", section="File",
         files={"file": ("app.log", SAMPLE_LOG.encode(), "text/plain")},
         expect_json={"totalLines": 6, "errorCount": 2}),
    Case("upload invalid utf-8", "POST", "/api/analyze/file", section="File",
         files={"file": ("bad.log", b"\xc3\x28\n", "text/plain")}, expect=400),
    Case("missing file field", "POST", "/api/analyze/file", section="File", expect=422),
]


def _mismatches(body: Any, expected: Dict[str, Any]) -> list[str]:
    if not expected:
        return []
    if not isinstance(body, dict):
        return [f"expected object, got {type(body).__name__}"]
    return [
        f"{key}: expected {value!r}, got {body.get(key)!r}"
        for key, value in expected.items()
        if body.get(key) != value
    ]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Exception | None = None
    while attempt < 2:
        try:
            r = await client.request(
                case.method,
                case.path,
                content=case.content,
                files=case.files or None,
            )
            body: Any = None
            try:
                body = r.json()
            except Exception:
                body = r.text
            if r.status_code != case.expect:
                return False, f"{r.status_code} {r.reason_phrase}: {body}", body
            problems = _mismatches(body, case.expect_json)
            if problems:
                return False, "; ".join(problems), body
            return True, "", body
        except httpx.TransportError as exc:
            last_exc = exc
            attempt += 1
            if attempt < 2:
                await asyncio.sleep(0.1)
                continue
            return False, f"transport error: {exc}", None
        except Exception as e:
            return False, str(e), None
    return False, str(last_exc), None


async def main():
    import json
    import argparse

    parser = argparse.ArgumentParser(description="Run API smoke cases")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    parser.add_argument("--base-url", default=BASE_URL, help="server root, default %(default)s")
    args = parser.parse_args()
    selected: list[Case] = []
    for c in CASES:
        if args.section and c.section != args.section:
            continue
        if args.label and c.label != args.label:
            continue
        selected.append(c)
    if not selected:
        print("no matching cases (check --section or --label)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=args.base_url, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            if isinstance(body, (dict, list)):
                pretty = json.dumps(body, indent=2)
            elif body is not None:
                pretty = str(body)[:200]
            else:
                pretty = "<no response>"

            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} — {case.label}")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} — {case.label} (expected {case.expect})")
                if detail:
                    print(f"         {detail}")
                print(f"         response:\n{pretty}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"  {'All cases passed ✓' if failed == 0 else f'{failed} case(s) failed ✗'}")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
