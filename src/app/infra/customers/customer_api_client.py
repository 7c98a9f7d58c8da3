"""Cliente concreto da API de clientes (upstream único).

O `httpx.AsyncClient` recebido já traz base_url, Accept JSON e timeout
(ver app/bootstrap/clients.py). O bearer token é anexado por chamada,
nunca aos headers default do cliente.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.domain.customer import CustomerResponse
from app.observability import get_correlation_id, record_latency
from config.settings import CUSTOMER_INFO_PATH
from utils.errors import (
    MalformedUpstreamResponse,
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

if TYPE_CHECKING:
    from app.domain.customer import CreateCustomerRequest, Credential, LookupQuery

logger = logging.getLogger(__name__)

_COMPONENT = "customer_api"
_MAX_LOGGED_BODY_CHARS = 2000


def _auth_headers(credential: Credential) -> dict[str, str]:
    return {"Authorization": f"Bearer {credential.access_token}"}


class CustomerApiClient:
    """Implementação de CustomerApiProtocol sobre httpx."""

    __slots__ = ("_http_client",)

    def __init__(self, *, http_client: httpx.AsyncClient) -> None:
        self._http_client = http_client

    async def get_customer_info(
        self,
        query: LookupQuery,
        credential: Credential,
    ) -> CustomerResponse:
        """GET `info` com os identificadores do cliente.

        Raises:
            UpstreamError: Status não-2xx (status repassado), timeout ou falha de transporte.
            MalformedUpstreamResponse: 2xx com body que não é um objeto JSON válido.
        """
        response = await self._send(
            "lookup",
            "GET",
            params=query.as_query_params(),
            headers=_auth_headers(credential),
        )
        try:
            return CustomerResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            logger.error(
                "customer_api_response_malformed",
                extra={
                    "component": _COMPONENT,
                    "operation": "lookup",
                    "status_code": response.status_code,
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise MalformedUpstreamResponse() from exc

    async def create_customer(
        self,
        request: CreateCustomerRequest,
        credential: Credential,
    ) -> None:
        """POST `info` com o payload completo de criação.

        Raises:
            UpstreamError: Status não-2xx (status repassado), timeout ou falha de transporte.
        """
        await self._send(
            "create",
            "POST",
            json=request.as_payload(),
            headers=_auth_headers(credential),
        )

    async def _send(self, operation: str, method: str, **kwargs: Any) -> httpx.Response:
        started_at = time.perf_counter()
        try:
            response = await self._http_client.request(method, CUSTOMER_INFO_PATH, **kwargs)
        except httpx.TimeoutException as exc:
            self._log_transport_error(operation, "customer_api_timeout", exc)
            raise UpstreamTimeoutError() from exc
        except httpx.HTTPError as exc:
            self._log_transport_error(operation, "customer_api_transport_error", exc)
            raise UpstreamUnavailableError() from exc
        finally:
            record_latency(_COMPONENT, operation, (time.perf_counter() - started_at) * 1000)

        if not response.is_success:
            logger.error(
                "customer_api_call_failed",
                extra={
                    "component": _COMPONENT,
                    "operation": operation,
                    "status_code": response.status_code,
                    "response_body": response.text[:_MAX_LOGGED_BODY_CHARS],
                    "correlation_id": get_correlation_id(),
                },
            )
            raise UpstreamError(response.status_code)
        return response

    def _log_transport_error(self, operation: str, event: str, exc: httpx.HTTPError) -> None:
        logger.error(
            event,
            extra={
                "component": _COMPONENT,
                "operation": operation,
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
