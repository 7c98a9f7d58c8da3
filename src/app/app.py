"""Entrypoint do gateway de clientes.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from api.routes import create_api_router
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_customer_api_http_client, create_oauth_http_client
from app.bootstrap.dependencies import create_customer_request_handler
from config.logging import get_logger
from config.settings import get_base_settings, get_customer_api_settings, get_oauth_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria clientes HTTP (token endpoint e API de clientes)

    Shutdown:
    - Fecha os clientes HTTP
    """
    logger.info("app_starting", extra={"service": SERVICE_NAME})
    validate_runtime_settings()

    oauth_settings = get_oauth_settings()
    oauth_http_client = create_oauth_http_client(oauth_settings)
    customer_api_http_client = create_customer_api_http_client(get_customer_api_settings())
    app.state.customer_handler = create_customer_request_handler(
        oauth_http_client=oauth_http_client,
        customer_api_http_client=customer_api_http_client,
        oauth_settings=oauth_settings,
    )

    try:
        yield
    finally:
        logger.info("app_shutting_down", extra={"service": SERVICE_NAME})
        await oauth_http_client.aclose()
        await customer_api_http_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Swagger UI e OpenAPI só ficam expostos em desenvolvimento.
    """
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Customer Gateway",
        description="Gateway de consulta e criação de clientes",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        debug=settings.debug,
    )

    if settings.https_redirect:
        fastapi_app.add_middleware(HTTPSRedirectMiddleware)

    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={
            "service": SERVICE_NAME,
            "environment": settings.environment,
            "docs_enabled": settings.docs_enabled,
            "https_redirect": settings.https_redirect,
        },
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting customer gateway in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
