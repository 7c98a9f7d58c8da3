"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CredentialError,
    GatewayError,
    InvalidChannel,
    InvalidDocumentNumber,
    InvalidRequestBody,
    InvalidTransactionId,
    MalformedUpstreamResponse,
    MissingRequiredField,
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    ValidationError,
)

__all__ = [
    "CredentialError",
    "GatewayError",
    "InvalidChannel",
    "InvalidDocumentNumber",
    "InvalidRequestBody",
    "InvalidTransactionId",
    "MalformedUpstreamResponse",
    "MissingRequiredField",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
    "ValidationError",
]
