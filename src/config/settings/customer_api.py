"""Settings da API de clientes (upstream único)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

CUSTOMER_API_BASE_URL: str = "https://api-dev.bhdleon.com.do/bhd/api/v1.3/personal/customers/"
CUSTOMER_INFO_PATH: str = "info"


@dataclass(frozen=True)
class CustomerApiSettings:
    """Configurações do cliente HTTP da API de clientes.

    Attributes:
        base_url: URL base; o httpx acrescenta a barra final se faltar
        request_timeout_seconds: Timeout das chamadas GET/POST
    """

    base_url: str = CUSTOMER_API_BASE_URL
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("CUSTOMER_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("CUSTOMER_API_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> CustomerApiSettings:
    return CustomerApiSettings(
        base_url=os.getenv("CUSTOMER_API_BASE_URL", CUSTOMER_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("CUSTOMER_API_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_customer_api_settings() -> CustomerApiSettings:
    """Retorna instância cacheada de CustomerApiSettings."""
    return _load_from_env()
