"""
reqtrace.api.routes.v1.tasks

Purpose:
    FastAPI route that fans work out onto the app's worker pool (POST /v1/tasks).
    Every task runs on a pool thread, logs, and reports the trace id it observed; with the
    pool's task decorator in place that is the submitting request's trace id.

Notes:
    - Sync handler: FastAPI runs it in its threadpool with the request's contextvars copied in,
      so submissions snapshot the request's trace context.
    - A task that raises surfaces as 500 TASK_FAILED; tasks still running at the deadline are
      cancelled and surface as 504 TASK_TIMEOUT.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, wait

from fastapi import APIRouter, Request, status

from reqtrace.api.contracts.api_paths import ApiPaths
from reqtrace.api.contracts.api_tags import ApiTags
from reqtrace.api.contracts.envelope import ApiResponse
from reqtrace.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from reqtrace.api.errors import ApiError
from reqtrace.api.logging.trace_context import current_trace_id
from reqtrace.api.schemas.tasks import TaskResult, TasksRequest, TasksResult
from reqtrace.api.settings import get_settings
from reqtrace.api.workers.pool import WorkerPool

logger = logging.getLogger(__name__)

router = APIRouter(tags=[ApiTags().tasks])


class TaskFailure(RuntimeError):
    """Raised by a task when the caller asked for it to fail."""


def run_task(index: int, delay_ms: int = 0, fail: bool = False) -> TaskResult:
    logger.info("Task %d started", index)
    if delay_ms:
        time.sleep(delay_ms / 1000.0)
    if fail:
        raise TaskFailure(f"task {index} failed on request")
    logger.info("Task %d finished", index)
    return TaskResult(
        index=index,
        trace_id=current_trace_id(),
        thread=threading.current_thread().name,
    )


def _get_pool(request: Request) -> WorkerPool:
    return request.app.state.worker_pool


@router.post(
    ApiPaths().tasks,
    response_model=ApiResponse[TasksResult],
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
def submit_tasks(body: TasksRequest, request: Request) -> ApiResponse[TasksResult]:
    settings = get_settings()

    if body.count > settings.max_tasks_per_request:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ApiErrorCode.BAD_REQUEST,
            message=f"count must be <= {settings.max_tasks_per_request}",
            details={"count": body.count},
        )

    pool = _get_pool(request)
    logger.info("Submitting %d task(s) to worker pool", body.count)

    futures: list[Future] = [
        pool.submit(run_task, i, body.delay_ms, i == body.fail_index)
        for i in range(body.count)
    ]

    _done, not_done = wait(futures, timeout=settings.task_timeout_s)
    if not_done:
        for f in not_done:
            f.cancel()
        raise ApiError(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            error_code=ApiErrorCode.TASK_TIMEOUT,
            message="Worker tasks did not finish in time",
            details={"pending": len(not_done), "timeout_s": settings.task_timeout_s},
        )

    results: list[TaskResult] = []
    for i, f in enumerate(futures):
        exc = f.exception()
        if exc is not None:
            raise ApiError(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error_code=ApiErrorCode.TASK_FAILED,
                message="Worker task failed",
                details={"index": i, "error": str(exc)},
            ) from exc
        results.append(f.result())

    logger.info("All %d task(s) finished", body.count)
    return ApiResponse[TasksResult](data=TasksResult(submitted=body.count, results=results))
