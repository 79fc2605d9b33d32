"""
reqtrace.api.routes.v1.trace

Purpose:
    Return the trace id bound to the current request, as seen from inside the handler.
    Handy for checking that log lines, the response header and the envelope agree.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging
import threading

from fastapi import APIRouter

from reqtrace.api.contracts.api_paths import ApiPaths
from reqtrace.api.contracts.api_tags import ApiTags
from reqtrace.api.contracts.envelope import ApiResponse
from reqtrace.api.logging.trace_context import current_trace_id
from reqtrace.api.schemas.tasks import TraceInfo

logger = logging.getLogger(__name__)

router = APIRouter(tags=[ApiTags().trace])


@router.get(ApiPaths().trace, response_model=ApiResponse[TraceInfo])
def get_trace() -> ApiResponse[TraceInfo]:
    logger.info("Trace lookup")
    info = TraceInfo(trace_id=current_trace_id(), thread=threading.current_thread().name)
    return ApiResponse[TraceInfo](data=info)
