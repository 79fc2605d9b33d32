"""
reqtrace.api.workers.propagation

Purpose:
    Carry the submitting thread's trace context into work that runs later on a pool thread.

Contract of wrap(fn):
    - At wrap time (on the submitting thread) snapshot the trace context.
    - When the wrapper runs, restore that snapshot onto the executing thread. If it has no
      trace id (work submitted outside any request), generate one for this unit of work only.
    - Run fn; whatever it returns or raises passes through untouched.
    - Always clear the executing thread's trace context afterwards, so the next task the pool
      runs on that thread starts empty.

Usage:
    executor.submit(wrap(fn), *args)
    WorkerPool(..., task_decorator=wrap)

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from reqtrace.api.logging import trace_context
from reqtrace.api.logging.trace_context import TRACE_ID_KEY
from reqtrace.api.logging.trace_ids import new_trace_id

logger = logging.getLogger(__name__)

R = TypeVar("R")


def wrap(fn: Callable[..., R]) -> Callable[..., R]:
    captured = trace_context.snapshot()

    @functools.wraps(fn)
    def _run_with_trace_context(*args: Any, **kwargs: Any) -> R:
        trace_context.restore(captured)
        try:
            if trace_context.get(TRACE_ID_KEY) is None:
                trace_context.set(TRACE_ID_KEY, new_trace_id())
                logger.debug("No trace id propagated; generated one for %s", _task_name(fn))
            return fn(*args, **kwargs)
        finally:
            trace_context.clear()

    return _run_with_trace_context


def _task_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
