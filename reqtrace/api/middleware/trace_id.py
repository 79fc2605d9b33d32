"""
reqtrace.api.middleware.trace_id

Purpose:
    Middleware that assigns each request a trace id, keeps it bound while the request is
    handled, and echoes it back in a response header.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from reqtrace.api.contracts.trace_policy import TracePolicy
from reqtrace.api.middleware.request_boundary import RequestBoundary, request_scope


class TraceIdMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        policy: TracePolicy | None = None,
        boundary: RequestBoundary | None = None,
    ) -> None:
        super().__init__(app)
        self._policy = policy or TracePolicy()
        self._boundary = boundary

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        with request_scope(self._boundary) as trace_id:
            # Outer exception handlers run after the context is cleared; they read this.
            request.state.trace_id = trace_id

            response: Response = await call_next(request)

        response.headers[self._policy.response_header] = trace_id
        return response
