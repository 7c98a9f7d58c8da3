"""Filters de logging para injeção de contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: customer_gateway)

Campos redigidos (quando passados via `extra`):
- client_secret, access_token, authorization
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

SENSITIVE_LOG_KEYS = frozenset(
    {
        "access_token",
        "authorization",
        "client_secret",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveDataFilter(logging.Filter):
    """Substitui valores de chaves sensíveis por `[REDACTED]`.

    Atua apenas em atributos do record (vindos de `extra`); a mensagem
    em si é responsabilidade de quem loga.
    """

    def __init__(self, sensitive_keys: Iterable[str] = SENSITIVE_LOG_KEYS) -> None:
        super().__init__()
        self._sensitive_keys = frozenset(key.lower() for key in sensitive_keys)

    def filter(self, record: logging.LogRecord) -> bool:
        for key in list(vars(record)):
            if key.lower() in self._sensitive_keys:
                setattr(record, key, REDACTED)
        return True
