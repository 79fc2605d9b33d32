"""
tests.api.test_health

Purpose:
    Smoke tests for root/health/info endpoints. Every payload carries the request's traceId.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import pytest


def _assert_traced(r) -> dict:
    data = r.json()
    assert data["traceId"]
    assert data["traceId"] == r.headers["x-trace-id"]
    return data


def test_health_root_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert _assert_traced(r)["data"] == {"ok": True}


def test_health_v1_ok(client) -> None:
    r = client.get("/v1/health")
    assert r.status_code == 200
    assert _assert_traced(r)["data"] == {"status": "ok"}


def test_service_root_ok(client) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert _assert_traced(r)["data"]["status"] == "ok"


def test_info_exposes_trace_names(client) -> None:
    r = client.get("/v1/info")
    assert r.status_code == 200

    tracing = _assert_traced(r)["data"]["tracing"]
    assert tracing == {
        "log_key": "TRACE_ID",
        "response_field": "traceId",
        "response_header": "X-Trace-Id",
    }


@pytest.mark.parametrize("path", ["/", "/health", "/v1/health", "/v1/info", "/v1/trace"])
def test_every_payload_carries_trace_id(client, path: str) -> None:
    r = client.get(path)
    assert r.status_code == 200
    _assert_traced(r)
