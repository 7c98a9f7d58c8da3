"""Agregador de rotas: registra health e clientes.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.customers.router import router as customers_router
from api.routes.health.router import router as health_router

CUSTOMERS_PREFIX = "/bhd/api/v1/personales/clientes"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks na raiz (/health, /ready)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        customers_router,
        prefix=CUSTOMERS_PREFIX,
        tags=["clientes"],
    )

    return api_router
