"""
reqtrace.api.logging.trace_context

Purpose:
    Request-scoped trace context storage using contextvars.
    Holds a small str -> str mapping (the trace id lives under TRACE_ID_KEY) that is
    visible to any code running in the current thread / asyncio task without passing it.

Notes:
    - The stored dict is never mutated in place. Every write installs a new dict, so
      contexts copied into child tasks (asyncio, anyio threadpool) cannot see each
      other's writes.
    - Worker-pool threads keep their context between tasks; callers that run work on
      a pool must clear() when done (see reqtrace.api.workers.propagation).

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import contextvars
from typing import Mapping

# Single well-known key shared by the middleware, the task adapter, the log filter
# and the response envelope. Also the logging format token: %(TRACE_ID)s
TRACE_ID_KEY = "TRACE_ID"

_EMPTY: dict[str, str] = {}

trace_ctx_var: contextvars.ContextVar[dict[str, str]] = contextvars.ContextVar(
    "trace_context",
    default=_EMPTY,
)


def set(key: str, value: str) -> None:  # noqa: A001
    updated = dict(trace_ctx_var.get())
    updated[key] = value
    trace_ctx_var.set(updated)


def get(key: str) -> str | None:
    return trace_ctx_var.get().get(key)


def snapshot() -> dict[str, str]:
    """
    Return an independent copy of the current mapping.
    Values are plain strings, so a shallow dict copy is already a deep copy.
    """
    return dict(trace_ctx_var.get())


def restore(mapping: Mapping[str, str]) -> None:
    """Replace the current mapping wholesale with a copy of `mapping`."""
    trace_ctx_var.set(dict(mapping))


def clear() -> None:
    trace_ctx_var.set(_EMPTY)


def current_trace_id() -> str | None:
    """Trace id for the current thread / task, or None outside any traced work."""
    return get(TRACE_ID_KEY)
