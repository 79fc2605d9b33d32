"""
reqtrace.api.contracts.trace_policy

Purpose:
    Central policy for how the trace id is surfaced to clients (header + envelope field names).

Notes:
    - Incoming correlation headers are deliberately not read: every request gets a fresh
      trace id generated in-process.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TracePolicy:
    response_header: str = "X-Trace-Id"
    envelope_field: str = "traceId"
