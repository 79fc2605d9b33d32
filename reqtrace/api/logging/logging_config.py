"""
reqtrace.api.logging.logging_config

Purpose:
    Central logging configuration for the API.
    Ensures the trace id is present in every log line (including uvicorn.access and uvicorn.error)
    and in lines emitted from worker-pool threads.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import logging

from reqtrace.api.logging.trace_id_filter import TraceIdFilter

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | trace_id=%(TRACE_ID)s | %(threadName)s | %(name)s | %(message)s"
)


def make_handler(level: int = logging.INFO) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(TraceIdFilter())
    return handler


def _configure_logger(
    logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool
) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = make_handler(level)

    # Root/app logs (don’t clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(
        any(isinstance(f, TraceIdFilter) for f in h.filters) for h in root.handlers
    ):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, level, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, level, clear_handlers=True)
