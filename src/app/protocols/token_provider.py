"""Protocolo do provedor de credenciais OAuth2."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.customer import Credential


class TokenProviderProtocol(Protocol):
    """Contrato mínimo para obtenção de token por requisição.

    Retorna None em qualquer falha; nunca levanta exceção para o chamador.
    """

    async def request_credential(self) -> Credential | None: ...
