"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from strokesense.api import health, recognize

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(recognize.router)
