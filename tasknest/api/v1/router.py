"""API v1 router aggregation.

All routes use dependencies from tasknest.api.v1.dependencies.
"""

from fastapi import APIRouter

from tasknest.api.v1.endpoints import health, tasks

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
