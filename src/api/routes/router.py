"""Agregador de rotas: registra todos os sub-routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.notifications.router import router as notifications_router
from api.routes.surfaces.router import router as surfaces_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health check sem prefixo (/health na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        notifications_router,
        prefix="/v1/notifications",
        tags=["notifications"],
    )
    api_router.include_router(
        surfaces_router,
        prefix="/v1",
        tags=["surfaces"],
    )

    return api_router
