"""Classificação de status e decodificação JSON de respostas timeapi.io."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from api.connectors.timeapi.errors import (
    EmptyBodyFailure,
    HttpStatusFailure,
    JsonParseFailure,
    build_body_preview,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Resposta já lida por completo (corpo consumido uma única vez)."""

    status_code: int
    text: str
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def ensure_success(envelope: ResponseEnvelope, label: str) -> ResponseEnvelope:
    """Garante status 2xx antes de qualquer parse.

    Raises:
        HttpStatusFailure: Status fora da faixa de sucesso
    """
    if envelope.ok:
        return envelope
    preview = build_body_preview(envelope.text)
    logger.warning(
        "timeapi_http_error",
        extra={"label": label, "status_code": envelope.status_code, "url": envelope.url},
    )
    raise HttpStatusFailure(label, envelope.status_code, preview)


def decode_json_body(text: str, label: str) -> Any:
    """Decodifica corpo JSON de resposta já classificada como ok.

    Raises:
        EmptyBodyFailure: Corpo vazio após trim
        JsonParseFailure: Corpo presente mas inválido
    """
    trimmed = text.strip()
    if not trimmed:
        logger.warning("timeapi_empty_body", extra={"label": label})
        raise EmptyBodyFailure(label)
    try:
        return json.loads(trimmed, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.warning(
            "timeapi_invalid_json",
            extra={"label": label, "error_type": type(exc).__name__},
        )
        raise JsonParseFailure(label, str(exc), build_body_preview(text)) from exc


def _reject_constant(token: str) -> Any:
    # NaN e Infinity não são JSON válido
    raise ValueError(f"invalid JSON constant: {token}")
