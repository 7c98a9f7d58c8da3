"""Endpoints de consulta e criação de clientes.

Endpoints:
- GET  /bhd/api/v1/personales/clientes?id_transaccion=&canal=&num_doc=
- POST /bhd/api/v1/personales/clientes (JSON)

A rota só adapta HTTP ↔ CustomerRequestHandler: lê query/body, define
o correlation_id e converte GatewayResult em Response.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from app.coordinators.customers import CustomerRequestHandler, GatewayResult
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_customer_handler(request: Request) -> CustomerRequestHandler:
    """Obtém o handler criado no lifespan da aplicação."""
    return request.app.state.customer_handler


HandlerDep = Annotated[CustomerRequestHandler, Depends(get_customer_handler)]


def to_response(result: GatewayResult) -> Response:
    """Converte GatewayResult em Response HTTP."""
    headers = {CORRELATION_ID_HEADER: get_correlation_id()}
    if isinstance(result.body, dict):
        return JSONResponse(content=result.body, status_code=result.status_code, headers=headers)
    if isinstance(result.body, str):
        return PlainTextResponse(content=result.body, status_code=result.status_code, headers=headers)
    return Response(status_code=result.status_code, headers=headers)


@router.get("", response_model=None)
async def get_customer(
    request: Request,
    handler: HandlerDep,
    id_transaccion: Annotated[str | None, Query()] = None,
    canal: Annotated[str | None, Query()] = None,
    num_doc: Annotated[str | None, Query()] = None,
) -> Response:
    """Consulta um cliente no upstream e retorna nome, e-mail mascarado e telefone."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        result = await handler.lookup(id_transaccion, canal, num_doc)
        return to_response(result)
    finally:
        reset_correlation_id(token)


@router.post("", response_model=None)
async def create_customer(request: Request, handler: HandlerDep) -> Response:
    """Cria um cliente no upstream. Retorna 201 sem body em caso de sucesso."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        raw_body = await request.body()
        try:
            payload: object = json.loads(raw_body)
        except (ValueError, RecursionError):
            # RecursionError: body com aninhamento excessivo
            logger.info(
                "customer_create_body_invalid_json",
                extra={"payload_size": len(raw_body), "correlation_id": get_correlation_id()},
            )
            payload = None
        result = await handler.create(payload)
        return to_response(result)
    finally:
        reset_correlation_id(token)
