"""Mascaramento de e-mail nas respostas de consulta."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.customer import CustomerResponse

VISIBLE_PREFIX_LENGTH = 3
MASK_CHAR = "*"


def _mask_part(part: str) -> str:
    if len(part) <= VISIBLE_PREFIX_LENGTH:
        return part
    hidden = len(part) - VISIBLE_PREFIX_LENGTH
    return part[:VISIBLE_PREFIX_LENGTH] + MASK_CHAR * hidden


def mask_email(email: str) -> str:
    """Mascara local e domínio, mantendo os 3 primeiros caracteres de cada.

    O domínio é mascarado por inteiro após o 3º caractere, pontos incluídos:
    `johndoe@example.com` vira `joh****@exa********`.
    E-mails sem exatamente um `@` são devolvidos sem alteração.
    """
    parts = email.split("@")
    if len(parts) != 2:
        return email
    local_part, domain_part = parts
    return f"{_mask_part(local_part)}@{_mask_part(domain_part)}"


def mask_customer_response(response: CustomerResponse) -> CustomerResponse:
    """Mascara o e-mail in-place e devolve a mesma instância."""
    if response.email is not None:
        response.email = mask_email(response.email)
    return response
