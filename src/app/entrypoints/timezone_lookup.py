"""Handlers de metadados de timezone e listagem de zonas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.timeapi import list_with_count, with_source

if TYPE_CHECKING:
    from app.domain.entrypoint_inputs import (
        CoordinateInput,
        EmptyInput,
        IpAddressInput,
        TimeZoneInput,
    )
    from app.entrypoints.registry import EntrypointContext

TIMEZONE_BY_ZONE_PATH = "/api/timezone/zone"
TIMEZONE_BY_COORDINATE_PATH = "/api/timezone/coordinate"
TIMEZONE_BY_IP_PATH = "/api/timezone/ip"
AVAILABLE_TIMEZONES_PATH = "/api/timezone/availabletimezones"


async def timezone_info(payload: TimeZoneInput, ctx: EntrypointContext) -> dict[str, Any]:
    result = await ctx.get_json(TIMEZONE_BY_ZONE_PATH, {"timeZone": payload.time_zone})
    return with_source(result.data, source=result.source)


async def timezone_info_by_coordinate(
    payload: CoordinateInput, ctx: EntrypointContext
) -> dict[str, Any]:
    result = await ctx.get_json(
        TIMEZONE_BY_COORDINATE_PATH,
        {"latitude": payload.latitude, "longitude": payload.longitude},
    )
    return with_source(result.data, source=result.source)


async def timezone_info_by_ip(payload: IpAddressInput, ctx: EntrypointContext) -> dict[str, Any]:
    result = await ctx.get_json(TIMEZONE_BY_IP_PATH, {"ipAddress": payload.ip_address})
    return with_source(result.data, source=result.source)


async def available_timezones(payload: EmptyInput, ctx: EntrypointContext) -> dict[str, Any]:
    _ = payload
    result = await ctx.get_json(AVAILABLE_TIMEZONES_PATH)
    return list_with_count(result.data, source=result.source)
