"""Falhas classificadas do pipeline timeapi.io.

Cada chamada externa termina em exatamente um resultado: um output
normalizado ou uma destas falhas. Todas carregam o `label` (chave do
entrypoint de origem) e um `kind` para discriminação sem comparar mensagens.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

# Limite do preview de corpo usado em mensagens de erro
BODY_PREVIEW_LIMIT = 500
ELLIPSIS_MARKER = "…"
EMPTY_BODY_MARKER = "<empty response body>"


class FailureKind(StrEnum):
    """Tipos de falha do pipeline."""

    VALIDATION = "validation"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    EMPTY_BODY = "empty_body"
    JSON_PARSE = "json_parse"


def build_body_preview(body: str, limit: int = BODY_PREVIEW_LIMIT) -> str:
    """Retorna trecho limitado do corpo para mensagens de erro.

    Corpo vazio vira marcador fixo; corpo maior que `limit` é truncado
    e recebe o marcador de reticências.
    """
    if not body:
        return EMPTY_BODY_MARKER
    if len(body) > limit:
        return f"{body[:limit]}{ELLIPSIS_MARKER}"
    return body


class TimeApiError(Exception):
    """Base das falhas classificadas (sem dados sensíveis)."""

    kind: FailureKind

    def __init__(self, label: str, message: str) -> None:
        super().__init__(f"[{label}] {message}")
        self.label = label

    def as_dict(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "label": self.label, "message": str(self)}


class ValidationFailure(TimeApiError):
    """Input não respeita o contrato do entrypoint (antes de qualquer IO)."""

    kind = FailureKind.VALIDATION

    def __init__(self, label: str, errors: list[dict[str, Any]]) -> None:
        fields = ", ".join(
            ".".join(str(part) for part in error.get("loc", ())) or "input"
            for error in errors
        )
        super().__init__(label, f"invalid input: {fields or 'input'}")
        self.errors = errors

    def as_dict(self) -> dict[str, Any]:
        return {**super().as_dict(), "errors": self.errors}


class NetworkFailure(TimeApiError):
    """Chamada não obteve resposta (DNS, conexão, timeout de transporte)."""

    kind = FailureKind.NETWORK

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(label, f"network request failed: {reason}")
        self.reason = reason


class HttpStatusFailure(TimeApiError):
    """Resposta com status fora da faixa 2xx."""

    kind = FailureKind.HTTP_STATUS

    def __init__(self, label: str, status_code: int, body_preview: str) -> None:
        super().__init__(label, f"timeapi.io responded with {status_code}: {body_preview}")
        self.status_code = status_code
        self.body_preview = body_preview

    def as_dict(self) -> dict[str, Any]:
        return {
            **super().as_dict(),
            "statusCode": self.status_code,
            "bodyPreview": self.body_preview,
        }


class EmptyBodyFailure(TimeApiError):
    """Resposta 2xx sem corpo onde JSON era esperado."""

    kind = FailureKind.EMPTY_BODY

    def __init__(self, label: str) -> None:
        super().__init__(label, "timeapi.io returned an empty response body")


class JsonParseFailure(TimeApiError):
    """Resposta 2xx cujo corpo não é JSON válido."""

    kind = FailureKind.JSON_PARSE

    def __init__(self, label: str, reason: str, body_preview: str) -> None:
        super().__init__(
            label,
            f"failed to parse timeapi.io response as JSON: {reason}. Body preview: {body_preview}",
        )
        self.reason = reason
        self.body_preview = body_preview

    def as_dict(self) -> dict[str, Any]:
        return {
            **super().as_dict(),
            "reason": self.reason,
            "bodyPreview": self.body_preview,
        }
