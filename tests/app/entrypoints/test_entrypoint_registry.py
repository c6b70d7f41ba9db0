"""Testes do registro de entrypoints."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from api.connectors.timeapi import TimeApiClient, ValidationFailure
from app.domain.entrypoint_inputs import CoordinateInput, TimeZoneInput
from app.entrypoints import (
    EntrypointContext,
    EntrypointNotFound,
    EntrypointRegistry,
    build_entrypoint_registry,
)

EXPECTED_KEYS = [
    "current-time",
    "current-time-by-coordinate",
    "current-time-by-ip",
    "timezone-info",
    "timezone-info-by-coordinate",
    "timezone-info-by-ip",
    "available-timezones",
    "convert-timezone",
    "translate-datetime",
    "day-of-week",
    "day-of-year",
    "increment-current-time",
    "decrement-current-time",
    "increment-custom-time",
    "decrement-custom-time",
    "health-check",
]


def _offline_client(calls: list[httpx.Request]) -> TimeApiClient:
    def _handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"ok": True})

    return TimeApiClient(transport=httpx.MockTransport(_handler))


async def _echo_handler(payload: TimeZoneInput, ctx: EntrypointContext) -> dict[str, Any]:
    return {"timeZone": payload.time_zone, "label": ctx.key}


class TestRegistration:
    def test_keys_follow_registration_order(self) -> None:
        registry = EntrypointRegistry()
        registry.add("b", description="", input_model=TimeZoneInput, handler=_echo_handler)
        registry.add("a", description="", input_model=TimeZoneInput, handler=_echo_handler)

        assert registry.keys == ["b", "a"]
        assert len(registry) == 2
        assert "a" in registry

    def test_duplicates_are_not_deduplicated(self) -> None:
        registry = EntrypointRegistry()
        registry.add("x", description="first", input_model=TimeZoneInput, handler=_echo_handler)
        registry.add("x", description="second", input_model=TimeZoneInput, handler=_echo_handler)

        assert registry.keys == ["x", "x"]
        assert registry.get("x").description == "second"  # type: ignore[union-attr]
        assert len(registry.definitions()) == 1

    def test_keys_returns_a_copy(self) -> None:
        registry = EntrypointRegistry()
        registry.add("x", description="", input_model=TimeZoneInput, handler=_echo_handler)

        registry.keys.append("tampered")

        assert registry.keys == ["x"]

    def test_definition_is_immutable(self) -> None:
        registry = EntrypointRegistry()
        definition = registry.add(
            "x", description="", input_model=TimeZoneInput, handler=_echo_handler
        )

        with pytest.raises(AttributeError):
            definition.key = "y"  # type: ignore[misc]

    def test_input_schema_uses_aliases(self) -> None:
        registry = EntrypointRegistry()
        definition = registry.add(
            "x", description="", input_model=TimeZoneInput, handler=_echo_handler
        )

        schema = definition.input_schema()

        assert "timeZone" in schema["properties"]
        assert schema["required"] == ["timeZone"]


class TestCatalog:
    def test_catalog_registers_every_entrypoint_once(self) -> None:
        registry = build_entrypoint_registry()

        assert registry.keys == EXPECTED_KEYS

    def test_each_call_returns_a_new_registry(self) -> None:
        assert build_entrypoint_registry() is not build_entrypoint_registry()

    def test_every_definition_has_description(self) -> None:
        registry = build_entrypoint_registry()

        assert all(definition.description for definition in registry.definitions())


class TestInvoke:
    @pytest.mark.asyncio
    async def test_invokes_handler_with_validated_input(self) -> None:
        registry = EntrypointRegistry()
        registry.add("echo", description="", input_model=TimeZoneInput, handler=_echo_handler)

        output = await registry.invoke("echo", {"timeZone": "UTC"}, _offline_client([]))

        assert output == {"timeZone": "UTC", "label": "echo"}

    @pytest.mark.asyncio
    async def test_unknown_key_raises(self) -> None:
        with pytest.raises(EntrypointNotFound) as exc_info:
            await EntrypointRegistry().invoke("missing", {}, _offline_client([]))

        assert exc_info.value.key == "missing"

    @pytest.mark.asyncio
    async def test_invalid_input_fails_before_network(self) -> None:
        calls: list[httpx.Request] = []
        registry = build_entrypoint_registry()

        with pytest.raises(ValidationFailure) as exc_info:
            await registry.invoke(
                "current-time-by-coordinate",
                {"latitude": 120, "longitude": 0},
                _offline_client(calls),
            )

        assert calls == []
        assert exc_info.value.label == "current-time-by-coordinate"
        assert exc_info.value.errors[0]["loc"] == ("latitude",)

    @pytest.mark.asyncio
    async def test_missing_input_is_validated_as_empty(self) -> None:
        registry = EntrypointRegistry()
        registry.add("coords", description="", input_model=CoordinateInput, handler=_echo_handler)

        with pytest.raises(ValidationFailure):
            await registry.invoke("coords", None, _offline_client([]))
