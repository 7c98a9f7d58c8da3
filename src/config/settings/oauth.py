"""Settings do servidor de autorização OAuth2 (client credentials)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_OAUTH_SCOPE: str = "customers"


@dataclass(frozen=True)
class OAuthSettings:
    """Configurações do token endpoint.

    Attributes:
        token_url: URL do token endpoint
        client_id: Client ID registrado no servidor de autorização
        client_secret: Client secret (nunca logado)
        scope: Escopo solicitado no grant
        request_timeout_seconds: Timeout da troca de token
    """

    token_url: str = ""
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    scope: str = DEFAULT_OAUTH_SCOPE
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do OAuth2.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.token_url:
            errors.append("OAUTH2_TOKEN_URL não configurado")
        elif not self.token_url.startswith(("http://", "https://")):
            errors.append("OAUTH2_TOKEN_URL deve ser uma URL http(s)")

        if not self.client_id:
            errors.append("OAUTH2_CLIENT_ID não configurado")

        if not self.client_secret:
            errors.append("OAUTH2_CLIENT_SECRET não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("OAUTH2_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> OAuthSettings:
    """Carrega OAuthSettings a partir de variáveis de ambiente."""
    return OAuthSettings(
        token_url=os.getenv("OAUTH2_TOKEN_URL", ""),
        client_id=os.getenv("OAUTH2_CLIENT_ID", ""),
        client_secret=os.getenv("OAUTH2_CLIENT_SECRET", ""),
        scope=os.getenv("OAUTH2_SCOPE", DEFAULT_OAUTH_SCOPE),
        request_timeout_seconds=float(os.getenv("OAUTH2_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_oauth_settings() -> OAuthSettings:
    """Retorna instância cacheada de OAuthSettings."""
    return _load_from_env()
