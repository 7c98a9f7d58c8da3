"""Orquestrador das requisições de consulta e criação de clientes.

Fluxo por requisição (terminal na primeira falha):
    Received → Validated → CredentialAcquired → UpstreamCalled → (Shaped) → Completed

Mapeamento de resultados:
- Validação inválida: 400 com mensagem do campo
- Token não obtido: 500 "Failed to retrieve OAuth token."
- Upstream não-2xx: mesmo status, mensagem genérica
- Consulta 2xx: 200 com e-mail mascarado
- Criação 2xx: 201 sem body

Nenhuma exceção escapa de `lookup`/`create`: toda falha vira GatewayResult.
Cada chamada obtém seu próprio token; nada é compartilhado entre requisições.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id, record_outcome
from app.services.customer_validator import validate_create_request, validate_lookup_query
from app.services.email_masking import mask_customer_response
from utils.errors import CredentialError, GatewayError, InvalidRequestBody, ValidationError

if TYPE_CHECKING:
    from app.domain.customer import Credential
    from app.protocols.customer_api import CustomerApiProtocol
    from app.protocols.token_provider import TokenProviderProtocol

logger = logging.getLogger(__name__)

CREDENTIAL_FAILURE_MESSAGE = CredentialError.public_message
UNEXPECTED_FAILURE_MESSAGE = "Internal server error."


@dataclass(frozen=True, slots=True)
class GatewayResult:
    """Resultado de protocolo entregue à camada HTTP.

    Attributes:
        status_code: Status HTTP final
        body: Objeto JSON, mensagem em texto ou None (sem body)
    """

    status_code: int
    body: dict[str, Any] | str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class CustomerRequestHandler:
    """Sequencia validador, provedor de token, upstream e máscara."""

    __slots__ = ("_customer_api", "_token_provider")

    def __init__(
        self,
        *,
        token_provider: TokenProviderProtocol,
        customer_api: CustomerApiProtocol,
    ) -> None:
        self._token_provider = token_provider
        self._customer_api = customer_api

    async def lookup(
        self,
        transaction_id: str | None,
        channel: str | None,
        document_number: str | None,
    ) -> GatewayResult:
        """Consulta um cliente e devolve os dados com e-mail mascarado."""
        try:
            query = validate_lookup_query(transaction_id, channel, document_number)
            credential = await self._acquire_credential()
            customer = await self._customer_api.get_customer_info(query, credential)
            shaped = mask_customer_response(customer)
            result = GatewayResult(status_code=200, body=shaped.model_dump())
        except GatewayError as exc:
            result = self._failure_result("lookup", exc)
        except Exception:
            result = self._unexpected_result("lookup")
        record_outcome("lookup", result.status_code)
        return result

    async def create(self, payload: object) -> GatewayResult:
        """Cria um cliente no upstream; 201 sem body em caso de sucesso."""
        try:
            if not isinstance(payload, Mapping):
                raise InvalidRequestBody()
            request = validate_create_request(payload)
            credential = await self._acquire_credential()
            await self._customer_api.create_customer(request, credential)
            result = GatewayResult(status_code=201)
        except GatewayError as exc:
            result = self._failure_result("create", exc)
        except Exception:
            result = self._unexpected_result("create")
        record_outcome("create", result.status_code)
        return result

    async def _acquire_credential(self) -> Credential:
        credential = await self._token_provider.request_credential()
        if credential is None or not credential.access_token:
            raise CredentialError()
        return credential

    def _failure_result(self, operation: str, exc: GatewayError) -> GatewayResult:
        # Erros de validação são input do cliente, não falha operacional
        if isinstance(exc, ValidationError):
            logger.info(
                "customer_request_rejected",
                extra={
                    "operation": operation,
                    "reason": type(exc).__name__,
                    "field": getattr(exc, "field_name", None),
                    "correlation_id": get_correlation_id(),
                },
            )
        else:
            logger.warning(
                "customer_request_failed",
                extra={
                    "operation": operation,
                    "reason": type(exc).__name__,
                    "status_code": exc.status_code,
                    "correlation_id": get_correlation_id(),
                },
            )
        return GatewayResult(status_code=exc.status_code, body=exc.public_message)

    def _unexpected_result(self, operation: str) -> GatewayResult:
        logger.exception(
            "customer_request_unexpected_error",
            extra={"operation": operation, "correlation_id": get_correlation_id()},
        )
        return GatewayResult(status_code=500, body=UNEXPECTED_FAILURE_MESSAGE)
