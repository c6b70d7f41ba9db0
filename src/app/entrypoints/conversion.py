"""Handlers de conversão, tradução e consulta de dia (semana/ano)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.normalizers.timeapi import normalize_day_of_week, normalize_day_of_year, with_source
from api.payload_builders.timeapi import build_conversion_body, build_translation_body

if TYPE_CHECKING:
    from app.domain.entrypoint_inputs import ConversionInput, DateInput, TranslationInput
    from app.entrypoints.registry import EntrypointContext

CONVERT_TIMEZONE_PATH = "/api/conversion/converttimezone"
TRANSLATE_PATH = "/api/conversion/translate"
DAY_OF_WEEK_PATH = "/api/conversion/dayoftheweek/{date}"
DAY_OF_YEAR_PATH = "/api/conversion/dayoftheyear/{date}"


def _date_path(template: str, date: str) -> str:
    # A data vai direto no segmento do path
    return template.format(date=quote(date, safe=""))


async def convert_timezone(payload: ConversionInput, ctx: EntrypointContext) -> dict[str, Any]:
    body = build_conversion_body(
        from_time_zone=payload.from_time_zone,
        date_time=payload.date_time,
        to_time_zone=payload.to_time_zone,
        dst_ambiguity=payload.dst_ambiguity,
    )
    result = await ctx.post_json(CONVERT_TIMEZONE_PATH, body)
    return with_source(result.data, source=result.source)


async def translate_datetime(payload: TranslationInput, ctx: EntrypointContext) -> dict[str, Any]:
    body = build_translation_body(date_time=payload.date_time, language_code=payload.language_code)
    result = await ctx.post_json(TRANSLATE_PATH, body)
    return with_source(result.data, source=result.source)


async def day_of_week(payload: DateInput, ctx: EntrypointContext) -> dict[str, Any]:
    result = await ctx.get_json(_date_path(DAY_OF_WEEK_PATH, payload.date))
    return normalize_day_of_week(result.data, source=result.source)


async def day_of_year(payload: DateInput, ctx: EntrypointContext) -> dict[str, Any]:
    result = await ctx.get_json(_date_path(DAY_OF_YEAR_PATH, payload.date))
    return normalize_day_of_year(result.data, source=result.source)
