# reqtrace/api/settings.py
"""
reqtrace.api.settings

Purpose:
    Centralized configuration for the FastAPI service.
    Values load from REQTRACE_* environment variables (or a local .env file).

Notes:
    - The trace context key is a constant (reqtrace.api.logging.trace_context.TRACE_ID_KEY),
      not a setting.

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REQTRACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = Field(default="reqtrace-api")
    service_version: str = Field(default="0.1.0")

    log_level: str = Field(default="INFO")

    # Worker pool used by request handlers for background fan-out.
    worker_max_workers: int = Field(default=4, ge=1)
    worker_queue_capacity: int = Field(default=16, ge=0)

    task_timeout_s: float = Field(default=30.0, gt=0)
    max_tasks_per_request: int = Field(default=32, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
