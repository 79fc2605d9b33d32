"""
reqtrace.api.contracts.error_contract

Purpose:
    Stable error contract for the API (codes + response model).
    Used by global exception handlers to ensure consistent client responses.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from reqtrace.api.contracts.envelope import TraceEnvelope


class ApiErrorCode(str, Enum):
    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"

    # Worker tasks
    TASK_FAILED = "TASK_FAILED"
    TASK_TIMEOUT = "TASK_TIMEOUT"


class ErrorResponse(TraceEnvelope):
    error_code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
