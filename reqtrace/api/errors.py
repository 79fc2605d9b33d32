"""
reqtrace.api.errors

Purpose:
    Internal exception types for API error handling.
    Routes raise ApiError; global handler converts to ErrorResponse.
    Not frozen: context managers on the way out assign __traceback__ to in-flight exceptions.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reqtrace.api.contracts.error_contract import ApiErrorCode


@dataclass(eq=False)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"
