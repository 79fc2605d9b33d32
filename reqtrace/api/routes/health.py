"""
reqtrace.api.routes.health

Purpose:
    Health endpoints for container/orchestrator checks.

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

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get(_paths.health, response_model=ApiResponse[dict])
def health() -> ApiResponse[dict]:
    return ApiResponse[dict](data={"ok": True})
