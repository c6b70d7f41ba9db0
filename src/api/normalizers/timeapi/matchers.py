"""Matchers tipados para respostas de formato não uniforme.

Uma lista ordenada de matchers é tentada em sequência; o primeiro que
reconhece o payload define o output. A ordem da lista é parte do contrato.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

Extractor = Callable[[Any], dict[str, Any] | None]


@dataclass(frozen=True, slots=True)
class PayloadMatcher:
    """Reconhece um formato de payload e extrai o output correspondente."""

    name: str
    extract: Extractor


def is_number(value: Any) -> bool:
    # bool é subclasse de int e não conta como número aqui
    return isinstance(value, int | float) and not isinstance(value, bool)


def number_matcher(field_name: str) -> PayloadMatcher:
    """Payload numérico puro vira `{field_name: payload}`."""
    return PayloadMatcher(
        name="number",
        extract=lambda payload: {field_name: payload} if is_number(payload) else None,
    )


def text_matcher(field_name: str) -> PayloadMatcher:
    """Payload textual puro vira `{field_name: payload}`."""
    return PayloadMatcher(
        name="text",
        extract=lambda payload: {field_name: payload} if isinstance(payload, str) else None,
    )


def field_matcher(field_name: str, predicate: Callable[[Any], bool]) -> PayloadMatcher:
    """Objeto com `field_name` aceito por `predicate` tem o campo extraído."""

    def _extract(payload: Any) -> dict[str, Any] | None:
        if isinstance(payload, dict) and predicate(payload.get(field_name)):
            return {field_name: payload[field_name]}
        return None

    return PayloadMatcher(name=f"field:{field_name}", extract=_extract)


RAW_MATCHER = PayloadMatcher(name="raw", extract=lambda payload: {"data": payload})


def match_payload(payload: Any, matchers: Sequence[PayloadMatcher]) -> tuple[str, dict[str, Any]]:
    """Retorna nome e output do primeiro matcher que reconhece o payload.

    Raises:
        LookupError: Nenhum matcher reconheceu (lista sem fallback)
    """
    for matcher in matchers:
        output = matcher.extract(payload)
        if output is not None:
            return matcher.name, output
    raise LookupError("no matcher accepted the payload")
