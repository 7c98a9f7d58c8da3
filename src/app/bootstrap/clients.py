"""Factories dos clientes HTTP externos: token endpoint e API de clientes.

Os clientes são infraestrutura de transporte (pool de conexões, timeouts);
não guardam credenciais. Criados no startup e fechados no shutdown.
Redirects são seguidos, então só o status final chega ao handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from config.settings import CustomerApiSettings, OAuthSettings

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def create_oauth_http_client(
    settings: OAuthSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Cria cliente HTTP sem base_url para o token endpoint."""
    client = httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        follow_redirects=True,
        transport=transport,
    )
    logger.info(
        "oauth_http_client_created",
        extra={"timeout_seconds": settings.request_timeout_seconds},
    )
    return client


def create_customer_api_http_client(
    settings: CustomerApiSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Cria cliente HTTP da API de clientes.

    base_url e Accept JSON são fixos para todas as chamadas. O httpx
    garante a barra final da base_url, então `info` é resolvido sob ela.

    Args:
        settings: Settings da API de clientes
        transport: Transporte alternativo (ex: httpx.MockTransport em testes)
    """
    client = httpx.AsyncClient(
        base_url=settings.base_url,
        headers={"Accept": JSON_MEDIA_TYPE},
        timeout=settings.request_timeout_seconds,
        follow_redirects=True,
        transport=transport,
    )
    logger.info(
        "customer_api_http_client_created",
        extra={
            "base_url": settings.base_url,
            "timeout_seconds": settings.request_timeout_seconds,
        },
    )
    return client
