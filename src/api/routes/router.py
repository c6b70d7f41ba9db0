"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.entrypoints.router import router as entrypoints_router
from api.routes.health.router import router as health_router
from api.routes.manifest.router import router as manifest_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks na raiz (/health, /ready)
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(manifest_router, tags=["manifest"])
    api_router.include_router(entrypoints_router, prefix="/entrypoints", tags=["entrypoints"])

    return api_router
