"""Endpoints de listagem e invocação de entrypoints.

Endpoints:
- GET /entrypoints: entrypoints registrados (ordem de registro)
- POST /entrypoints/{key}/invoke: valida `input`, chama a timeapi.io e
  devolve o output normalizado

Mapeamento de falhas:
- chave desconhecida → 404
- ValidationFailure → 422
- falha de rede/status/corpo do upstream → 502
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request, status
from fastapi.responses import JSONResponse

from api.connectors.timeapi import TimeApiError, ValidationFailure
from app.entrypoints import EntrypointNotFound
from app.observability import CORRELATION_HEADER, correlation_scope
from config.settings import get_payment_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def describe_entrypoints(registry: Any) -> list[dict[str, Any]]:
    """Descrição pública dos entrypoints (sem handlers)."""
    price = get_payment_settings().default_price
    return [
        {
            "key": definition.key,
            "description": definition.description,
            "inputSchema": definition.input_schema(),
            "price": price,
            "streaming": False,
        }
        for definition in registry.definitions()
    ]


@router.get("")
async def list_entrypoints(request: Request) -> dict[str, Any]:
    """Lista entrypoints registrados."""
    return {"entrypoints": describe_entrypoints(request.app.state.registry)}


@router.post("/{key}/invoke")
async def invoke_entrypoint(
    key: str,
    request: Request,
    body: dict[str, Any] | None = Body(default=None),  # noqa: B008
) -> JSONResponse:
    """Invoca um entrypoint com o `input` do corpo."""
    registry = request.app.state.registry
    client = request.app.state.timeapi_client
    raw_input = (body or {}).get("input")

    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        try:
            output = await registry.invoke(key, raw_input, client)
        except EntrypointNotFound:
            logger.info("entrypoint_not_found", extra={"entrypoint": key})
            return JSONResponse(
                content={"status": "failed", "error": {"kind": "not_found", "label": key}},
                status_code=status.HTTP_404_NOT_FOUND,
                headers={CORRELATION_HEADER: correlation_id},
            )
        except ValidationFailure as exc:
            return _failure_response(exc, status.HTTP_422_UNPROCESSABLE_ENTITY, correlation_id)
        except TimeApiError as exc:
            logger.warning(
                "entrypoint_upstream_failed",
                extra={"entrypoint": key, "kind": str(exc.kind)},
            )
            return _failure_response(exc, status.HTTP_502_BAD_GATEWAY, correlation_id)

        logger.info("entrypoint_invoked", extra={"entrypoint": key, "result": "ok"})
        return JSONResponse(
            content={"status": "succeeded", "output": output},
            headers={CORRELATION_HEADER: correlation_id},
        )


def _failure_response(exc: TimeApiError, status_code: int, correlation_id: str) -> JSONResponse:
    return JSONResponse(
        content={"status": "failed", "error": exc.as_dict()},
        status_code=status_code,
        headers={CORRELATION_HEADER: correlation_id},
    )
