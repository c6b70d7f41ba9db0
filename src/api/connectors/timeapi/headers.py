"""Merge de headers para chamadas timeapi.io.

Aceita três formatos de headers extras:
- `httpx.Headers` (conjunto canônico)
- sequência de pares (chave, valor)
- mapeamento chave -> str | número | bool | None | list[str]

Em todos os formatos a última escrita vence por chave.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import httpx

from api.connectors.timeapi.urls import stringify_value

HeaderValue = str | int | float | bool | None | list[str]
HeaderPairs = Sequence[tuple[str, str]]
HeadersInit = httpx.Headers | HeaderPairs | Mapping[str, HeaderValue]

DEFAULT_ACCEPT = "application/json"


def default_headers() -> httpx.Headers:
    """Conjunto base, sempre com `accept: application/json`."""
    return httpx.Headers({"accept": DEFAULT_ACCEPT})


def merge_headers(base: httpx.Headers, extra: HeadersInit | None = None) -> httpx.Headers:
    """Aplica `extra` sobre `base` e retorna `base` modificado.

    Raises:
        TypeError: Se `extra` não estiver em nenhum dos formatos aceitos
    """
    if extra is None:
        return base
    # Headers primeiro: também é um Mapping
    if isinstance(extra, httpx.Headers):
        _merge_canonical(base, extra)
    elif isinstance(extra, Mapping):
        _merge_record(base, extra)
    elif isinstance(extra, Sequence) and not isinstance(extra, str | bytes):
        _merge_pairs(base, extra)
    else:
        raise TypeError(f"unsupported headers type: {type(extra).__name__}")
    return base


def _merge_canonical(base: httpx.Headers, extra: httpx.Headers) -> None:
    for key, value in extra.items():
        base[key] = value


def _merge_pairs(base: httpx.Headers, pairs: HeaderPairs) -> None:
    for key, value in pairs:
        base[key] = value


def _merge_record(base: httpx.Headers, record: Mapping[str, HeaderValue]) -> None:
    for key, value in record.items():
        if value is None:
            continue
        if isinstance(value, list):
            base[key] = ", ".join(value)
        else:
            base[key] = stringify_value(value)
