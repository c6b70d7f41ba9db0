"""Montagem de URLs para a API timeapi.io."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

TIMEAPI_BASE_URL = "https://timeapi.io"

QueryValue = str | int | float | bool | None


def stringify_value(value: str | int | float | bool) -> str:
    """Converte valor primitivo para texto (booleans em minúsculas)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(
    path: str,
    query: Mapping[str, QueryValue] | None = None,
    *,
    base_url: str = TIMEAPI_BASE_URL,
) -> httpx.URL:
    """Monta URL absoluta com query string.

    Entradas com valor None são omitidas. As demais substituem qualquer
    valor existente da mesma chave (última escrita vence).

    Args:
        path: Caminho absoluto ou relativo à base
        query: Parâmetros opcionais
        base_url: Origem usada para caminhos relativos

    Returns:
        URL pronta para a requisição
    """
    url = httpx.URL(base_url).join(path)
    for key, value in (query or {}).items():
        if value is None:
            continue
        url = url.copy_set_param(key, stringify_value(value))
    return url
