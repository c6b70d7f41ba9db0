"""Normalização das consultas de dia da semana e dia do ano.

O formato de resposta dessas rotas não é documentado de forma uniforme;
o payload é detectado por uma lista ordenada de matchers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.timeapi.matchers import (
    RAW_MATCHER,
    field_matcher,
    is_number,
    match_payload,
    number_matcher,
    text_matcher,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.normalizers.timeapi.matchers import PayloadMatcher

logger = logging.getLogger(__name__)

DAY_OF_YEAR_MATCHERS = (
    number_matcher("dayOfYear"),
    field_matcher("dayOfYear", is_number),
    RAW_MATCHER,
)

DAY_OF_WEEK_MATCHERS = (
    text_matcher("dayOfWeek"),
    field_matcher("dayOfWeek", lambda value: isinstance(value, str)),
    RAW_MATCHER,
)


def _normalize(
    component: str,
    payload: Any,
    matchers: Sequence[PayloadMatcher],
    source: str,
) -> dict[str, Any]:
    matched, output = match_payload(payload, matchers)
    if matched == RAW_MATCHER.name:
        log_fallback(logger, component, reason="unrecognized_payload")
    return {**output, "source": source}


def normalize_day_of_year(payload: Any, *, source: str) -> dict[str, Any]:
    """Número puro, objeto com `dayOfYear` numérico ou payload bruto em `data`."""
    return _normalize("day_of_year", payload, DAY_OF_YEAR_MATCHERS, source)


def normalize_day_of_week(payload: Any, *, source: str) -> dict[str, Any]:
    """Texto puro, objeto com `dayOfWeek` textual ou payload bruto em `data`."""
    return _normalize("day_of_week", payload, DAY_OF_WEEK_MATCHERS, source)
