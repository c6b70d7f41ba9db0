"""Handlers de incremento/decremento de hora (atual ou customizada)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.timeapi import with_source
from api.payload_builders.timeapi import build_calculation_body

if TYPE_CHECKING:
    from app.domain.entrypoint_inputs import CurrentCalculationInput, CustomCalculationInput
    from app.entrypoints.registry import EntrypointContext, Handler

CURRENT_INCREMENT_PATH = "/api/calculation/current/increment"
CURRENT_DECREMENT_PATH = "/api/calculation/current/decrement"
CUSTOM_INCREMENT_PATH = "/api/calculation/custom/increment"
CUSTOM_DECREMENT_PATH = "/api/calculation/custom/decrement"


def current_calculation(path: str) -> Handler:
    """Cria handler de cálculo sobre a hora atual para `path`."""

    async def _handler(payload: CurrentCalculationInput, ctx: EntrypointContext) -> dict[str, Any]:
        body = build_calculation_body(
            time_zone=payload.time_zone,
            time_span=payload.time_span,
            dst_ambiguity=payload.dst_ambiguity,
        )
        result = await ctx.post_json(path, body)
        return with_source(result.data, source=result.source)

    return _handler


def custom_calculation(path: str) -> Handler:
    """Cria handler de cálculo sobre data/hora informada para `path`."""

    async def _handler(payload: CustomCalculationInput, ctx: EntrypointContext) -> dict[str, Any]:
        body = build_calculation_body(
            time_zone=payload.time_zone,
            date_time=payload.date_time,
            time_span=payload.time_span,
            dst_ambiguity=payload.dst_ambiguity,
        )
        result = await ctx.post_json(path, body)
        return with_source(result.data, source=result.source)

    return _handler


increment_current_time = current_calculation(CURRENT_INCREMENT_PATH)
decrement_current_time = current_calculation(CURRENT_DECREMENT_PATH)
increment_custom_time = custom_calculation(CUSTOM_INCREMENT_PATH)
decrement_custom_time = custom_calculation(CUSTOM_DECREMENT_PATH)
