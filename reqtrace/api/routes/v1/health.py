"""
reqtrace.api.routes.v1.health

Purpose:
    Versioned health endpoint for API clients.

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

router = APIRouter(tags=[ApiTags().health])


@router.get(ApiPaths().health, response_model=ApiResponse[dict])
def health() -> ApiResponse[dict]:
    return ApiResponse[dict](data={"status": "ok"})
