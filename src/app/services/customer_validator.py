"""Validação sintática das requisições de clientes.

Regras aplicadas em ordem fixa, parando na primeira falha:
1. transactionId: UUID canônico (8-4-4-4-12 hex)
2. channel: 3 caracteres, igual à própria versão em maiúsculas
3. documentNumber: exatamente 12 dígitos ASCII

A ordem determina qual mensagem o chamador recebe quando mais de um
campo é inválido. Funções puras: nenhuma chamada de rede acontece aqui.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from app.domain.customer import CreateCustomerRequest, LookupQuery
from utils.errors import (
    InvalidChannel,
    InvalidDocumentNumber,
    InvalidTransactionId,
    MissingRequiredField,
)

_UUID_REGEX = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_DOCUMENT_NUMBER_REGEX = re.compile(r"^[0-9]{12}$")

CHANNEL_LENGTH = 3
DOCUMENT_NUMBER_LENGTH = 12

# Campos extras exigidos na criação, na ordem em que são checados
CREATE_REQUIRED_FIELDS = ("name", "lastName", "phone", "email")


def validate_transaction_id(value: str | None) -> UUID:
    if not value or not _UUID_REGEX.fullmatch(value):
        raise InvalidTransactionId()
    return UUID(value)


def validate_channel(value: str | None) -> str:
    if not value or len(value) != CHANNEL_LENGTH or value != value.upper():
        raise InvalidChannel()
    return value


def validate_document_number(value: str | None) -> str:
    if (
        not value
        or len(value) != DOCUMENT_NUMBER_LENGTH
        or not _DOCUMENT_NUMBER_REGEX.fullmatch(value)
    ):
        raise InvalidDocumentNumber()
    return value


def validate_lookup_query(
    transaction_id: str | None,
    channel: str | None,
    document_number: str | None,
) -> LookupQuery:
    """Valida os três campos identificadores de uma consulta.

    Args:
        transaction_id: Valor de `id_transaccion`
        channel: Valor de `canal`
        document_number: Valor de `num_doc`

    Returns:
        LookupQuery com o transactionId já convertido para UUID.

    Raises:
        InvalidTransactionId, InvalidChannel, InvalidDocumentNumber
    """
    return LookupQuery(
        transaction_id=validate_transaction_id(transaction_id),
        channel=validate_channel(channel),
        document_number=validate_document_number(document_number),
    )


def validate_create_request(payload: Mapping[str, Any]) -> CreateCustomerRequest:
    """Valida o body de criação de cliente.

    Os identificadores são checados primeiro (mesma ordem da consulta);
    depois, a presença de name, lastName, phone e email.

    Raises:
        ValidationError: Subclasse específica do primeiro campo inválido.
    """
    transaction_id = _as_optional_str(payload.get("transactionId"))
    channel = _as_optional_str(payload.get("channel"))
    document_number = _as_optional_str(payload.get("documentNumber"))

    validate_transaction_id(transaction_id)
    validate_channel(channel)
    validate_document_number(document_number)

    extra_fields: dict[str, str] = {}
    for field_name in CREATE_REQUIRED_FIELDS:
        value = payload.get(field_name)
        if not isinstance(value, str) or not value.strip():
            raise MissingRequiredField(field_name)
        extra_fields[field_name] = value

    return CreateCustomerRequest.model_validate(
        {
            "transactionId": transaction_id,
            "channel": channel,
            "documentNumber": document_number,
            **extra_fields,
        }
    )


def _as_optional_str(value: object) -> str | None:
    # Valores não-string (números, listas) são tratados como ausentes
    return value if isinstance(value, str) else None
