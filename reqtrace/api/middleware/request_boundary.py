"""
reqtrace.api.middleware.request_boundary

Purpose:
    Bind a fresh trace id to the current thread / task for the lifetime of one inbound
    request, and clear the trace context when the request ends on any exit path.

Usage:
    - TraceIdMiddleware wraps every HTTP request in request_scope().
    - Other entry points (queue consumers, CLI commands, tests) can call
      RequestBoundary.on_request_start()/on_request_end() directly as pre/post hooks.

Notes:
    - The boundary never catches, logs-and-drops, or rewraps the handler's error.
      The outcome is only used for a DEBUG line.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from reqtrace.api.logging import trace_context
from reqtrace.api.logging.trace_context import TRACE_ID_KEY
from reqtrace.api.logging.trace_ids import new_trace_id

logger = logging.getLogger(__name__)


class RequestBoundary:
    def __init__(self, id_factory: Callable[[], str] = new_trace_id) -> None:
        self._id_factory = id_factory

    def on_request_start(self) -> str:
        trace_id = self._id_factory()
        trace_context.set(TRACE_ID_KEY, trace_id)
        return trace_id

    def on_request_end(self, error: BaseException | None = None) -> None:
        if error is None:
            logger.debug("Request finished")
        else:
            logger.debug("Request finished with %s", type(error).__name__)
        trace_context.clear()


_default_boundary = RequestBoundary()


@contextmanager
def request_scope(boundary: RequestBoundary | None = None) -> Iterator[str]:
    """
    Yield the trace id bound for this request; the trace context is cleared on exit
    (normal return, exception, or cancellation).
    """
    boundary = boundary or _default_boundary
    trace_id = boundary.on_request_start()
    error: BaseException | None = None
    try:
        yield trace_id
    except BaseException as exc:
        error = exc
        raise
    finally:
        boundary.on_request_end(error)
