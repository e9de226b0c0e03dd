"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from pressurepath.api import health, path_edit, pressure

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(pressure.router)
api_router.include_router(path_edit.router)
