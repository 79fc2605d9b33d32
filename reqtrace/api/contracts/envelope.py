"""
reqtrace.api.contracts.envelope

Purpose:
    Response envelope carrying the request's trace id back to the caller.

Notes:
    - `trace_id` is serialized as "traceId" and defaults to the trace id active when the
      envelope is constructed (read from the trace context, never passed around).
    - None is a valid value (rendered as null) when no trace context was ever established.
    - Serialize with model_dump(by_alias=True); FastAPI does this for response_model.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from reqtrace.api.contracts.trace_policy import TracePolicy
from reqtrace.api.logging.trace_context import current_trace_id

T = TypeVar("T")

_policy = TracePolicy()


class TraceEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trace_id: str | None = Field(
        default_factory=current_trace_id,
        alias=_policy.envelope_field,
        description="Trace id correlating this response with server-side logs",
    )


class ApiResponse(TraceEnvelope, Generic[T]):
    data: T | None = Field(default=None, description="Endpoint-specific payload")
