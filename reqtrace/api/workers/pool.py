"""
reqtrace.api.workers.pool

Purpose:
    Bounded thread pool used by request handlers for background work.

Behavior:
    - At most `max_workers` tasks run at once and at most `queue_capacity` more wait.
    - When both are full the pool is saturated and the task runs on the submitting
      thread instead (caller-runs), which slows the producer down rather than rejecting.
    - `task_decorator` is applied to every submitted callable before it is scheduled,
      on both paths. The app passes reqtrace.api.workers.propagation.wrap.

Notes:
    - Caller-runs executions happen inside a copy of the submitter's contextvars, so
      anything the task does to context (including clearing it) stays in that copy.
    - The pool only schedules; it does not look at trace context itself.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import contextvars
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable

logger = logging.getLogger(__name__)

TaskDecorator = Callable[[Callable[..., Any]], Callable[..., Any]]


class WorkerPool(Executor):
    def __init__(
        self,
        max_workers: int,
        queue_capacity: int = 0,
        *,
        task_decorator: TaskDecorator | None = None,
        thread_name_prefix: str = "reqtrace-worker",
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if queue_capacity < 0:
            raise ValueError("queue_capacity must be >= 0")

        self.max_workers = max_workers
        self.queue_capacity = queue_capacity
        self._task_decorator = task_decorator
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=thread_name_prefix,
        )
        self._slots = threading.BoundedSemaphore(max_workers + queue_capacity)
        self._shutdown = False
        self._shutdown_lock = threading.Lock()

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        with self._shutdown_lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new futures after shutdown")

        if self._task_decorator is not None:
            fn = self._task_decorator(fn)

        if not self._slots.acquire(blocking=False):
            return self._run_on_caller(fn, args, kwargs)

        try:
            future = self._executor.submit(self._run_and_release, fn, *args, **kwargs)
        except BaseException:
            self._slots.release()
            raise

        # Work cancelled before it started never reaches _run_and_release.
        future.add_done_callback(self._release_if_cancelled)
        return future

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        with self._shutdown_lock:
            self._shutdown = True
        self._executor.shutdown(wait=wait, cancel_futures=cancel_futures)

    def _run_and_release(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
        # Released before the future resolves, so a caller that waited on it can reuse the slot.
        try:
            return fn(*args, **kwargs)
        finally:
            self._slots.release()

    def _release_if_cancelled(self, future: Future) -> None:
        if future.cancelled():
            self._slots.release()

    def _run_on_caller(
        self, fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Future:
        logger.debug(
            "Worker pool saturated (workers=%d, queue=%d); running task on caller thread",
            self.max_workers,
            self.queue_capacity,
        )
        future: Future = Future()
        future.set_running_or_notify_cancel()

        ctx = contextvars.copy_context()
        try:
            result = ctx.run(fn, *args, **kwargs)
        except BaseException as exc:
            # Same contract as ThreadPoolExecutor: the error is delivered through the future.
            future.set_exception(exc)
        else:
            future.set_result(result)
        return future
