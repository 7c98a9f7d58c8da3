"""Métricas via structured logging.

Registradas como logs `metric_*` para agregação posterior
(Cloud Logging, BigQuery, etc.).

Uso:
    start = time.perf_counter()
    response = await client.get(...)
    record_latency("customer_api", "lookup", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de uma chamada externa.

    Args:
        component: Nome do componente (ex: "oauth_token", "customer_api")
        operation: Nome da operação (ex: "client_credentials", "lookup")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação; usa o do contexto se None
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_outcome(
    operation: str,
    status_code: int,
    correlation_id: str | None = None,
) -> None:
    """Registra o status final de uma requisição ao gateway."""
    logger.info(
        "metric_outcome",
        extra={
            "metric_type": "outcome",
            "component": "customer_gateway",
            "operation": operation,
            "status_code": status_code,
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )
