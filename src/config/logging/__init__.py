"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="customer_gateway")
    logger = get_logger(__name__)
    logger.error("customer_api_call_failed", extra={"status_code": 404})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Segredos (client_secret, access_token, authorization) nunca saem em claro.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import REDACTED, CorrelationIdFilter, SensitiveDataFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveDataFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
