"""Builders de corpo JSON para as rotas POST da timeapi.io.

Campos seguem o formato camelCase esperado pela API.
"""

from __future__ import annotations

from typing import Any


def normalize_dst_ambiguity(value: str | None) -> str | None:
    """Retorna o campo de desambiguação normalizado ou None.

    String vazia (ou só espaços) significa "não informado".
    """
    if value is None:
        return None
    normalized = value.strip().lower()
    return normalized or None


def _with_dst_ambiguity(body: dict[str, Any], dst_ambiguity: str | None) -> dict[str, Any]:
    normalized = normalize_dst_ambiguity(dst_ambiguity)
    if normalized is not None:
        body["dstAmbiguity"] = normalized
    return body


def build_conversion_body(
    *,
    from_time_zone: str,
    date_time: str,
    to_time_zone: str,
    dst_ambiguity: str | None = None,
) -> dict[str, Any]:
    """Corpo de `/api/conversion/converttimezone`."""
    body: dict[str, Any] = {
        "fromTimeZone": from_time_zone,
        "dateTime": date_time,
        "toTimeZone": to_time_zone,
    }
    return _with_dst_ambiguity(body, dst_ambiguity)


def build_translation_body(*, date_time: str, language_code: str) -> dict[str, Any]:
    """Corpo de `/api/conversion/translate`."""
    return {"dateTime": date_time, "languageCode": language_code}


def build_calculation_body(
    *,
    time_zone: str,
    time_span: str,
    date_time: str | None = None,
    dst_ambiguity: str | None = None,
) -> dict[str, Any]:
    """Corpo das rotas de incremento/decremento (atual ou customizado).

    `dateTime` só é enviado no cálculo customizado.
    """
    body: dict[str, Any] = {"timeZone": time_zone}
    if date_time is not None:
        body["dateTime"] = date_time
    body["timeSpan"] = time_span
    return _with_dst_ambiguity(body, dst_ambiguity)
