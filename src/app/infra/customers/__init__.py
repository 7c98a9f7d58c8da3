"""Cliente HTTP da API de clientes."""

from app.infra.customers.customer_api_client import CustomerApiClient

__all__ = ["CustomerApiClient"]
