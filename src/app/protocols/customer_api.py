"""Protocolo do cliente da API de clientes (upstream)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.customer import (
        CreateCustomerRequest,
        Credential,
        CustomerResponse,
        LookupQuery,
    )


class CustomerApiProtocol(Protocol):
    """Contrato das chamadas autenticadas ao upstream."""

    async def get_customer_info(
        self,
        query: LookupQuery,
        credential: Credential,
    ) -> CustomerResponse: ...

    async def create_customer(
        self,
        request: CreateCustomerRequest,
        credential: Credential,
    ) -> None: ...
