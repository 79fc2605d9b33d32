"""
reqtrace.api.routes.v1.info

Purpose:
    Versioned info endpoint that exposes API metadata and the names clients use to
    correlate responses with server logs.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from fastapi import APIRouter

from reqtrace.api.contracts.api_paths import ApiPaths
from reqtrace.api.contracts.api_tags import ApiTags
from reqtrace.api.contracts.envelope import ApiResponse
from reqtrace.api.contracts.trace_policy import TracePolicy
from reqtrace.api.logging.trace_context import TRACE_ID_KEY
from reqtrace.api.settings import get_settings

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().info])


@router.get(_paths.info, response_model=ApiResponse[dict])
def info() -> ApiResponse[dict]:
    settings = get_settings()
    policy = TracePolicy()
    # Keep this as stable contract; safe for clients to depend on.
    return ApiResponse[dict](
        data={
            "api_version": "v1",
            "service": settings.service_name,
            "version": settings.service_version,
            "endpoints": {
                "health": f"{_paths.v1_prefix}{_paths.health}",
                "trace": f"{_paths.v1_prefix}{_paths.trace}",
                "tasks": f"{_paths.v1_prefix}{_paths.tasks}",
            },
            "tracing": {
                "log_key": TRACE_ID_KEY,
                "response_field": policy.envelope_field,
                "response_header": policy.response_header,
            },
        }
    )
