"""Coordenador do fluxo de clientes (validação → token → upstream → máscara)."""

from app.coordinators.customers.handler import (
    CREDENTIAL_FAILURE_MESSAGE,
    CustomerRequestHandler,
    GatewayResult,
)

__all__ = ["CREDENTIAL_FAILURE_MESSAGE", "CustomerRequestHandler", "GatewayResult"]
