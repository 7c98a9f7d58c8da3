"""Wiring do CustomerRequestHandler a partir dos clientes HTTP."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.coordinators.customers import CustomerRequestHandler
from app.infra.customers import CustomerApiClient
from app.infra.oauth import OAuthTokenClient
from config.settings import get_oauth_settings

if TYPE_CHECKING:
    import httpx

    from config.settings import OAuthSettings


def create_customer_request_handler(
    *,
    oauth_http_client: httpx.AsyncClient,
    customer_api_http_client: httpx.AsyncClient,
    oauth_settings: OAuthSettings | None = None,
) -> CustomerRequestHandler:
    """Monta o handler com as implementações concretas.

    Args:
        oauth_http_client: Cliente para o token endpoint
        customer_api_http_client: Cliente com base_url da API de clientes
        oauth_settings: Settings OAuth2; carrega do ambiente se None

    Returns:
        CustomerRequestHandler pronto para uso.
    """
    token_provider = OAuthTokenClient(
        http_client=oauth_http_client,
        settings=oauth_settings or get_oauth_settings(),
    )
    customer_api = CustomerApiClient(http_client=customer_api_http_client)
    return CustomerRequestHandler(token_provider=token_provider, customer_api=customer_api)
