"""
tests.tracing.test_worker_pool

Purpose:
    WorkerPool scheduling (bounded queue, caller-runs when saturated) composed with the
    trace propagation decorator.
"""

from __future__ import annotations

import threading

import pytest

from reqtrace.api.logging import trace_context
from reqtrace.api.logging.trace_context import current_trace_id
from reqtrace.api.middleware.request_boundary import request_scope
from reqtrace.api.workers.pool import WorkerPool
from reqtrace.api.workers.propagation import wrap


def _observe() -> tuple[str | None, str]:
    return current_trace_id(), threading.current_thread().name


@pytest.fixture()
def pool():
    p = WorkerPool(max_workers=1, queue_capacity=0, task_decorator=wrap, thread_name_prefix="pool-test")
    yield p
    p.shutdown(wait=True)


def test_rejects_invalid_sizes() -> None:
    with pytest.raises(ValueError):
        WorkerPool(max_workers=0)
    with pytest.raises(ValueError):
        WorkerPool(max_workers=1, queue_capacity=-1)


def test_decorator_applied_on_pool_thread(pool) -> None:
    with request_scope() as trace_id:
        seen, thread_name = pool.submit(_observe).result(timeout=5)

    assert seen == trace_id
    assert thread_name.startswith("pool-test")


def test_saturated_pool_runs_on_caller_with_same_trace_id(pool) -> None:
    gate = threading.Event()
    started = threading.Event()

    def _block() -> None:
        started.set()
        gate.wait(5)

    with request_scope() as trace_id:
        blocker = pool.submit(_block)
        assert started.wait(5)

        inline = pool.submit(_observe)
        seen, thread_name = inline.result(timeout=0)

        # Ran on this thread, saw the request id, and did not wipe the request's context.
        assert seen == trace_id
        assert thread_name == threading.current_thread().name
        assert current_trace_id() == trace_id

    gate.set()
    blocker.result(timeout=5)


def test_caller_runs_delivers_exception_through_future(pool) -> None:
    gate = threading.Event()
    started = threading.Event()

    def _block() -> None:
        started.set()
        gate.wait(5)

    def _fail() -> None:
        raise KeyError("missing")

    blocker = pool.submit(_block)
    assert started.wait(5)
    try:
        future = pool.submit(_fail)
        with pytest.raises(KeyError):
            future.result(timeout=0)
    finally:
        gate.set()
    blocker.result(timeout=5)


def test_slot_released_after_completion(pool) -> None:
    pool.submit(_observe).result(timeout=5)
    _, thread_name = pool.submit(_observe).result(timeout=5)

    assert thread_name.startswith("pool-test")


def test_map_uses_decorator(pool) -> None:
    with request_scope() as trace_id:
        seen = list(pool.map(lambda _i: current_trace_id(), range(3)))

    assert seen == [trace_id] * 3


def test_submit_after_shutdown_raises() -> None:
    p = WorkerPool(max_workers=1)
    p.shutdown(wait=True)

    with pytest.raises(RuntimeError):
        p.submit(_observe)


def _blocked_pool(queue_capacity: int = 1):
    p = WorkerPool(
        max_workers=1,
        queue_capacity=queue_capacity,
        task_decorator=wrap,
        thread_name_prefix="pool-test",
    )
    gate = threading.Event()
    started = threading.Event()

    def _block() -> None:
        started.set()
        gate.wait(5)

    blocker = p.submit(_block)
    assert started.wait(5)
    return p, gate, blocker


def test_cancelled_queued_task_frees_its_slot() -> None:
    p, gate, blocker = _blocked_pool(queue_capacity=1)
    calls: list[str | None] = []
    try:
        queued = p.submit(lambda: calls.append(current_trace_id()))
        assert queued.cancel() is True

        # With the slot back the next task is queued for the pool thread, not run inline.
        follow_up = p.submit(_observe)
        assert not follow_up.done()

        gate.set()
        blocker.result(timeout=5)
        _, thread_name = follow_up.result(timeout=5)

        assert thread_name.startswith("pool-test")
        assert calls == []
    finally:
        gate.set()
        p.shutdown(wait=True)


def test_shutdown_cancels_queued_tasks() -> None:
    p, gate, blocker = _blocked_pool(queue_capacity=2)
    try:
        queued = [p.submit(_observe) for _ in range(2)]

        p.shutdown(wait=False, cancel_futures=True)

        assert all(f.cancelled() for f in queued)
        with pytest.raises(RuntimeError):
            p.submit(_observe)
    finally:
        gate.set()
    blocker.result(timeout=5)
    p.shutdown(wait=True)
