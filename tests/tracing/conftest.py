"""
tests.tracing.conftest

Purpose:
    Keep the test thread's trace context empty between tests (pytest runs every test on
    the same thread, so anything left behind would leak into the next test).
"""

from __future__ import annotations

import pytest

from reqtrace.api.logging import trace_context


@pytest.fixture(autouse=True)
def _clean_trace_context():
    trace_context.clear()
    yield
    trace_context.clear()
