"""Troca de client credentials por bearer token.

Uma tentativa por requisição, sem cache e sem retry. Qualquer falha
(status não-2xx, timeout, body inválido) vira None + log de erro;
o chamador decide o resultado HTTP.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from app.domain.customer import Credential
from app.observability import get_correlation_id, record_latency

if TYPE_CHECKING:
    from config.settings import OAuthSettings

logger = logging.getLogger(__name__)

_COMPONENT = "oauth_token"
CLIENT_CREDENTIALS_GRANT = "client_credentials"

# Limite do body logado em erros, para não inundar o log
_MAX_LOGGED_BODY_CHARS = 2000


class OAuthTokenClient:
    """Implementação de TokenProviderProtocol via grant client_credentials."""

    __slots__ = ("_http_client", "_settings")

    def __init__(self, *, http_client: httpx.AsyncClient, settings: OAuthSettings) -> None:
        self._http_client = http_client
        self._settings = settings

    async def request_credential(self) -> Credential | None:
        """Solicita um token novo ao servidor de autorização.

        Returns:
            Credential com access_token não vazio, ou None em falha.
        """
        form = {
            "grant_type": CLIENT_CREDENTIALS_GRANT,
            "client_id": self._settings.client_id,
            "client_secret": self._settings.client_secret,
            "scope": self._settings.scope,
        }
        started_at = time.perf_counter()
        try:
            response = await self._http_client.post(
                self._settings.token_url,
                data=form,
                headers={"Accept": "application/json"},
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.TimeoutException:
            self._log_failure("oauth_token_request_timeout")
            return None
        except httpx.HTTPError as exc:
            self._log_failure("oauth_token_request_error", error_type=type(exc).__name__)
            return None
        finally:
            record_latency(
                _COMPONENT,
                CLIENT_CREDENTIALS_GRANT,
                (time.perf_counter() - started_at) * 1000,
            )

        if not response.is_success:
            self._log_failure(
                "oauth_token_request_failed",
                status_code=response.status_code,
                response_body=response.text[:_MAX_LOGGED_BODY_CHARS],
            )
            return None

        try:
            data = response.json()
        except ValueError:
            self._log_failure("oauth_token_response_invalid_json", status_code=response.status_code)
            return None

        credential = parse_token_response(data)
        if credential is None:
            self._log_failure("oauth_token_missing_access_token", status_code=response.status_code)
            return None

        logger.debug(
            "oauth_token_acquired",
            extra={
                "component": _COMPONENT,
                "token_type": credential.token_type,
                "expires_in": credential.expires_in,
                "correlation_id": get_correlation_id(),
            },
        )
        return credential

    def _log_failure(self, event: str, **fields: Any) -> None:
        logger.error(
            event,
            extra={
                "component": _COMPONENT,
                "token_url": self._settings.token_url,
                "correlation_id": get_correlation_id(),
                **fields,
            },
        )


def parse_token_response(data: object) -> Credential | None:
    """Converte o JSON do token endpoint em Credential.

    Returns:
        Credential ou None se `access_token` ausente/vazio.
    """
    if not isinstance(data, dict):
        return None
    access_token = data.get("access_token")
    if not isinstance(access_token, str) or not access_token:
        return None

    token_type = data.get("token_type")
    expires_in = data.get("expires_in")
    return Credential(
        access_token=access_token,
        token_type=token_type if isinstance(token_type, str) and token_type else "Bearer",
        expires_in=expires_in if isinstance(expires_in, int) else 0,
    )
