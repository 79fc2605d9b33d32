"""
reqtrace.api.logging.trace_id_filter

Purpose:
    Logging filter that injects the current trace id from contextvars into log records.
    Runs on the handler, i.e. on the emitting thread at the moment the record is handled.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging

from reqtrace.api.logging.trace_context import TRACE_ID_KEY, current_trace_id


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, TRACE_ID_KEY, current_trace_id() or "")
        return True
