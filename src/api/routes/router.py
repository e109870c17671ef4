"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.schedule.router import router as schedule_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health check (/health na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Data alvo de release (GET/OPTIONS em /)
    api_router.include_router(schedule_router, tags=["schedule"])

    return api_router
