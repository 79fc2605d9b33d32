"""
reqtrace.api.logging.trace_ids

Purpose:
    Trace identifier generation (random UUID4, 36 chars, safe from any thread).

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import uuid


def new_trace_id() -> str:
    return str(uuid.uuid4())
