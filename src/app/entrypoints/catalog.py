"""Catálogo de entrypoints do agente.

`build_entrypoint_registry` é chamado uma vez no startup e devolve o
registro populado; quem emite o resumo de startup recebe esse valor.
"""

from __future__ import annotations

from app.domain.entrypoint_inputs import (
    ConversionInput,
    CoordinateInput,
    CurrentCalculationInput,
    CustomCalculationInput,
    DateInput,
    EmptyInput,
    IpAddressInput,
    TimeZoneInput,
    TranslationInput,
)
from app.entrypoints import calculation, conversion, health, time_lookup, timezone_lookup
from app.entrypoints.registry import EntrypointRegistry


def build_entrypoint_registry() -> EntrypointRegistry:
    """Registra todos os entrypoints na ordem de exposição."""
    registry = EntrypointRegistry()

    registry.add(
        "current-time",
        description="Fetches the current date and time for the requested timezone via timeapi.io.",
        input_model=TimeZoneInput,
        handler=time_lookup.current_time,
    )
    registry.add(
        "current-time-by-coordinate",
        description="Fetches the current date and time for a latitude/longitude pair.",
        input_model=CoordinateInput,
        handler=time_lookup.current_time_by_coordinate,
    )
    registry.add(
        "current-time-by-ip",
        description="Fetches the current date and time for the location of an IPv4 address.",
        input_model=IpAddressInput,
        handler=time_lookup.current_time_by_ip,
    )
    registry.add(
        "timezone-info",
        description="Returns timezone metadata (offsets, DST interval) for an IANA timezone.",
        input_model=TimeZoneInput,
        handler=timezone_lookup.timezone_info,
    )
    registry.add(
        "timezone-info-by-coordinate",
        description="Returns timezone metadata for a latitude/longitude pair.",
        input_model=CoordinateInput,
        handler=timezone_lookup.timezone_info_by_coordinate,
    )
    registry.add(
        "timezone-info-by-ip",
        description="Returns timezone metadata for the location of an IPv4 address.",
        input_model=IpAddressInput,
        handler=timezone_lookup.timezone_info_by_ip,
    )
    registry.add(
        "available-timezones",
        description="Lists every IANA timezone known to timeapi.io.",
        input_model=EmptyInput,
        handler=timezone_lookup.available_timezones,
    )
    registry.add(
        "convert-timezone",
        description="Converts a local date and time from one timezone to another.",
        input_model=ConversionInput,
        handler=conversion.convert_timezone,
    )
    registry.add(
        "translate-datetime",
        description="Translates a date and time into a human-readable phrase in another language.",
        input_model=TranslationInput,
        handler=conversion.translate_datetime,
    )
    registry.add(
        "day-of-week",
        description="Resolves the day of the week for a calendar date.",
        input_model=DateInput,
        handler=conversion.day_of_week,
    )
    registry.add(
        "day-of-year",
        description="Resolves the day of the year for a calendar date.",
        input_model=DateInput,
        handler=conversion.day_of_year,
    )
    registry.add(
        "increment-current-time",
        description="Adds a time span to the current time of a timezone.",
        input_model=CurrentCalculationInput,
        handler=calculation.increment_current_time,
    )
    registry.add(
        "decrement-current-time",
        description="Subtracts a time span from the current time of a timezone.",
        input_model=CurrentCalculationInput,
        handler=calculation.decrement_current_time,
    )
    registry.add(
        "increment-custom-time",
        description="Adds a time span to a given local date and time.",
        input_model=CustomCalculationInput,
        handler=calculation.increment_custom_time,
    )
    registry.add(
        "decrement-custom-time",
        description="Subtracts a time span from a given local date and time.",
        input_model=CustomCalculationInput,
        handler=calculation.decrement_custom_time,
    )
    registry.add(
        "health-check",
        description="Checks whether timeapi.io is reachable and healthy.",
        input_model=EmptyInput,
        handler=health.health_check,
    )

    return registry
