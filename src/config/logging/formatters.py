"""Formatter JSON dos logs do gateway.

Todo record sai com asctime, level, logger, message, correlation_id e
service; campos de `extra` são anexados pelo python-json-logger.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,123", "level": "ERROR",
         "logger": "app.infra.oauth.token_client", "message": "oauth_token_request_failed",
         "correlation_id": "abc-123", "service": "customer_gateway", "status_code": 401}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
