"""
reqtrace.api.main

Purpose:
    FastAPI application entrypoint for the reqtrace API.
    Wires trace-id middleware, logging, error handlers, the worker pool and routes.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from reqtrace.api.contracts.envelope import ApiResponse
from reqtrace.api.contracts.trace_policy import TracePolicy
from reqtrace.api.error_handlers import register_error_handlers
from reqtrace.api.logging.logging_config import configure_logging
from reqtrace.api.middleware.trace_id import TraceIdMiddleware
from reqtrace.api.routes.health import router as health_router
from reqtrace.api.routes.v1 import v1_router
from reqtrace.api.settings import Settings, get_settings
from reqtrace.api.workers.pool import WorkerPool
from reqtrace.api.workers.propagation import wrap

logger = logging.getLogger(__name__)


def create_worker_pool(settings: Settings) -> WorkerPool:
    return WorkerPool(
        max_workers=settings.worker_max_workers,
        queue_capacity=settings.worker_queue_capacity,
        task_decorator=wrap,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s started", app.title)
    yield
    app.state.worker_pool.shutdown(wait=True, cancel_futures=True)
    logger.info("%s shutdown complete", app.title)


def create_app() -> FastAPI:
    settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version, lifespan=lifespan)

    # Created here rather than in lifespan so apps used without lifespan events still have it.
    app.state.worker_pool = create_worker_pool(settings)

    @app.get("/", response_model=ApiResponse[dict])
    def root() -> ApiResponse[dict]:
        return ApiResponse[dict](data={"status": "ok", "service": settings.service_name})

    app.add_middleware(TraceIdMiddleware, policy=TracePolicy())

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
