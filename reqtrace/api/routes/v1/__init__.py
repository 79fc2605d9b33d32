from fastapi import APIRouter

from reqtrace.api.contracts.api_paths import ApiPaths
from reqtrace.api.routes.v1.health import router as health_router
from reqtrace.api.routes.v1.info import router as info_router
from reqtrace.api.routes.v1.tasks import router as tasks_router
from reqtrace.api.routes.v1.trace import router as trace_router

v1_router = APIRouter(prefix=ApiPaths().v1_prefix)

v1_router.include_router(health_router)
v1_router.include_router(info_router)
v1_router.include_router(trace_router)
v1_router.include_router(tasks_router)
