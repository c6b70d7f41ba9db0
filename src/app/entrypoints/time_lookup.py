"""Handlers de hora atual (por zona, coordenada ou IP)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.timeapi import normalize_current_time

if TYPE_CHECKING:
    from app.domain.entrypoint_inputs import CoordinateInput, IpAddressInput, TimeZoneInput
    from app.entrypoints.registry import EntrypointContext

CURRENT_TIME_BY_ZONE_PATH = "/api/time/current/zone"
CURRENT_TIME_BY_COORDINATE_PATH = "/api/time/current/coordinate"
CURRENT_TIME_BY_IP_PATH = "/api/time/current/ip"


async def current_time(payload: TimeZoneInput, ctx: EntrypointContext) -> dict[str, Any]:
    result = await ctx.get_json(CURRENT_TIME_BY_ZONE_PATH, {"timeZone": payload.time_zone})
    return normalize_current_time(
        result.data,
        source=result.source,
        fallback_time_zone=payload.time_zone,
    )


async def current_time_by_coordinate(
    payload: CoordinateInput, ctx: EntrypointContext
) -> dict[str, Any]:
    result = await ctx.get_json(
        CURRENT_TIME_BY_COORDINATE_PATH,
        {"latitude": payload.latitude, "longitude": payload.longitude},
    )
    return normalize_current_time(result.data, source=result.source)


async def current_time_by_ip(payload: IpAddressInput, ctx: EntrypointContext) -> dict[str, Any]:
    result = await ctx.get_json(CURRENT_TIME_BY_IP_PATH, {"ipAddress": payload.ip_address})
    return normalize_current_time(result.data, source=result.source)
