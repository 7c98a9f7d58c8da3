"""Exceções do gateway de clientes.

Cada exceção carrega o status HTTP e a mensagem segura para o chamador.
Detalhes do upstream (body, headers) nunca entram em `public_message`.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base para falhas terminais do pipeline de clientes."""

    status_code: int = 500
    public_message: str = "Internal server error."

    def __init__(
        self,
        public_message: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        if public_message is not None:
            self.public_message = public_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.public_message)


# ──────────────────────────────────────────────────────────────────────────────
# Validação (400, nunca logado como erro operacional)
# ──────────────────────────────────────────────────────────────────────────────


class ValidationError(GatewayError):
    """Input do cliente mal formado."""

    status_code = 400


class InvalidTransactionId(ValidationError):
    public_message = "id_transaccion no valido. Debe ser un Guid valido."
    field_name = "transactionId"


class InvalidChannel(ValidationError):
    public_message = "Formato de canal no valido. Deben tener 3 caracteres en mayúscula."
    field_name = "channel"


class InvalidDocumentNumber(ValidationError):
    public_message = "Formato num_doc no válido. Debe tener 12 dígitos."
    field_name = "documentNumber"


class MissingRequiredField(ValidationError):
    """Campo obrigatório ausente ou vazio no payload de criação."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"El campo {field_name} es requerido.")


class InvalidRequestBody(ValidationError):
    public_message = "Cuerpo de la solicitud no valido."


# ──────────────────────────────────────────────────────────────────────────────
# Falhas de infraestrutura
# ──────────────────────────────────────────────────────────────────────────────


class CredentialError(GatewayError):
    """Token OAuth não obtido."""

    status_code = 500
    public_message = "Failed to retrieve OAuth token."


class UpstreamError(GatewayError):
    """API de clientes respondeu fora de 2xx (status repassado)."""

    public_message = "Error calling external API."

    def __init__(self, status_code: int) -> None:
        super().__init__(status_code=status_code)


class UpstreamTimeoutError(UpstreamError):
    """Timeout na chamada à API de clientes."""

    def __init__(self) -> None:
        super().__init__(status_code=504)


class UpstreamUnavailableError(UpstreamError):
    """Falha de transporte (conexão, DNS, TLS) na API de clientes."""

    def __init__(self) -> None:
        super().__init__(status_code=502)


class MalformedUpstreamResponse(GatewayError):
    """Resposta 2xx do upstream que não pôde ser desserializada."""

    status_code = 500
    public_message = "Invalid response from external API."
