"""Handler do health check da timeapi.io (resposta em texto puro)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.timeapi import text_status

if TYPE_CHECKING:
    from app.domain.entrypoint_inputs import EmptyInput
    from app.entrypoints.registry import EntrypointContext

HEALTH_CHECK_PATH = "/api/health/check"


async def health_check(payload: EmptyInput, ctx: EntrypointContext) -> dict[str, Any]:
    _ = payload
    result = await ctx.get_text(HEALTH_CHECK_PATH)
    return text_status(result.data, source=result.source)
