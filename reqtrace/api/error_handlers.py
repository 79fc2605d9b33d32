"""
reqtrace.api.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures the traceId field is always present (null only when no trace context existed).

Notes:
    - The catch-all Exception handler runs outside TraceIdMiddleware, after the trace
      context has been cleared, so the trace id is read from request.state first.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reqtrace.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from reqtrace.api.contracts.trace_policy import TracePolicy
from reqtrace.api.errors import ApiError
from reqtrace.api.logging.trace_context import current_trace_id

logger = logging.getLogger(__name__)


def _get_trace_id(request: Request) -> str | None:
    tid = getattr(getattr(request, "state", None), "trace_id", None)
    if isinstance(tid, str) and tid:
        return tid

    return current_trace_id()


def _clean_validation_errors(errors: Any) -> Any:
    """
    Clean Pydantic/FastAPI validation errors for stable client-facing responses.

    - Strip "Value error, " prefix
    - Rewrite missing required into "Missing required field: <field>."
    - Rewrite extra forbidden into "Unknown field: <field>."
    - Drop ctx entirely for minimal/stable payloads
    """
    if not isinstance(errors, list):
        return errors

    for err in errors:
        if not isinstance(err, dict):
            continue

        err_type = err.get("type")
        loc = err.get("loc", [])
        msg = err.get("msg")

        if isinstance(msg, str):
            msg = re.sub(r"^Value error,\s*", "", msg)
            err["msg"] = msg

        field_name = None
        if isinstance(loc, list) and len(loc) >= 2:
            field_name = loc[-1]

        if err_type == "missing" and field_name:
            err["msg"] = f"Missing required field: {field_name}."

        if err_type == "extra_forbidden" and field_name:
            err["msg"] = f"Unknown field: {field_name}."

        err.pop("ctx", None)

    return errors


def _error_json(status_code: int, payload: ErrorResponse) -> JSONResponse:
    # Unhandled errors are rendered outside TraceIdMiddleware, which never sees this response.
    headers = None
    if payload.trace_id:
        headers = {TracePolicy().response_header: payload.trace_id}
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        safe_errors = jsonable_encoder(exc.errors())
        safe_errors = _clean_validation_errors(safe_errors)

        payload = ErrorResponse(
            trace_id=_get_trace_id(request),
            error_code=ApiErrorCode.BAD_REQUEST,
            message="Request validation failed",
            details={"errors": safe_errors},
        )
        return _error_json(422, payload)

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning("API error %s (status=%d): %s", exc.error_code.value, exc.status_code, exc.message)
        payload = ErrorResponse(
            trace_id=_get_trace_id(request),
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return _error_json(exc.status_code, payload)

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)

        payload = ErrorResponse(
            trace_id=_get_trace_id(request),
            error_code=ApiErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return _error_json(500, payload)
