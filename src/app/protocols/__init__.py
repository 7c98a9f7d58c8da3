"""Protocolos (contratos) usados pelo coordinator de clientes."""

from app.protocols.customer_api import CustomerApiProtocol
from app.protocols.token_provider import TokenProviderProtocol

__all__ = ["CustomerApiProtocol", "TokenProviderProtocol"]
