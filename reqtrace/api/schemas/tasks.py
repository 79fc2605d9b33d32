"""
reqtrace.api.schemas.tasks

Purpose:
    Request/response schemas for the /v1/trace and /v1/tasks endpoints.

Notes:
    - extra="forbid" prevents silent client typos (e.g., "cuont").
    - Upper bound on `count` is enforced by the route against settings.max_tasks_per_request.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TraceInfo(BaseModel):
    trace_id: Optional[str] = Field(default=None, description="Trace id seen by the request handler.")
    thread: str = Field(..., description="Name of the thread that handled the request.")


class TasksRequest(BaseModel):
    """
    Request payload for /v1/tasks.

    Fans out `count` units of work onto the worker pool. Each one reports the trace id it
    observed, which should equal the request's traceId.
    """

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=1, ge=1, description="Number of tasks to submit.", examples=[4])

    fail_index: Optional[int] = Field(
        default=None,
        ge=0,
        description="If set, the task with this index raises instead of returning.",
        examples=[None],
    )

    delay_ms: int = Field(
        default=0,
        ge=0,
        le=1000,
        description="Simulated work per task, in milliseconds.",
        examples=[10],
    )


class TaskResult(BaseModel):
    index: int
    trace_id: Optional[str] = None
    thread: str


class TasksResult(BaseModel):
    submitted: int
    results: List[TaskResult] = Field(default_factory=list)
