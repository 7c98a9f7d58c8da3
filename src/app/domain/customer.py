"""Modelos do domínio de clientes.

LookupQuery e CreateCustomerRequest são construídos pelo validador a partir
do input já parseado; CustomerResponse espelha o contrato do upstream.
Nenhum destes modelos é persistido.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True, slots=True)
class LookupQuery:
    """Consulta de cliente já validada."""

    transaction_id: UUID
    channel: str
    document_number: str

    def as_query_params(self) -> dict[str, str]:
        """Parâmetros do GET `info` no formato esperado pelo upstream."""
        return {
            "transactionId": str(self.transaction_id),
            "channel": self.channel,
            "documentNumber": self.document_number,
        }


class CreateCustomerRequest(BaseModel):
    """Payload de criação de cliente (repassado ao upstream como JSON)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    transaction_id: str
    channel: str
    document_number: str
    name: str
    last_name: str
    phone: str
    email: str

    def as_payload(self) -> dict[str, Any]:
        """Body JSON com as chaves camelCase do contrato upstream."""
        return self.model_dump(by_alias=True)


class CustomerResponse(BaseModel):
    """Dados de cliente retornados pelo upstream.

    Campos desconhecidos são descartados; apenas name/email/phone
    chegam ao chamador.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class Credential:
    """Token OAuth de curta duração, válido para uma única chamada."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 0

    def __repr__(self) -> str:
        return f"Credential(token_type={self.token_type!r}, expires_in={self.expires_in})"
