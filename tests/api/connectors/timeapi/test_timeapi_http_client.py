"""Testes do transporte do cliente timeapi.io (httpx.MockTransport)."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable

import httpx
import pytest

from api.connectors.timeapi import (
    EmptyBodyFailure,
    HttpStatusFailure,
    JsonParseFailure,
    NetworkFailure,
    TimeApiClient,
    TimeApiClientConfig,
    create_timeapi_client,
)
from config.settings import TimeApiSettings

RequestHandler = Callable[[httpx.Request], httpx.Response]


class _FailingStream(httpx.AsyncByteStream):
    """Stream cujo corpo falha na leitura."""

    async def __aiter__(self) -> AsyncIterator[bytes]:
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


def _build_client(handler: RequestHandler, **config: object) -> TimeApiClient:
    return TimeApiClient(
        config=TimeApiClientConfig(**config),  # type: ignore[arg-type]
        transport=httpx.MockTransport(handler),
    )


class TestExecute:
    @pytest.mark.asyncio
    async def test_returns_envelope_with_full_text(self) -> None:
        client = _build_client(lambda request: httpx.Response(200, text='{"ok": true}'))

        envelope = await client.execute(client.build_url("/api/x"), label="x")

        assert envelope.status_code == 200
        assert envelope.ok is True
        assert envelope.text == '{"ok": true}'

    @pytest.mark.asyncio
    async def test_error_status_is_returned_not_raised(self) -> None:
        client = _build_client(lambda request: httpx.Response(503, text="unavailable"))

        envelope = await client.execute(client.build_url("/api/x"), label="x")

        assert envelope.ok is False
        assert envelope.text == "unavailable"

    @pytest.mark.asyncio
    async def test_connection_error_becomes_network_failure(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _build_client(_handler)

        with pytest.raises(NetworkFailure) as exc_info:
            await client.execute(client.build_url("/api/x"), label="current-time")

        assert exc_info.value.label == "current-time"
        assert exc_info.value.reason == "connection refused"
        assert str(exc_info.value) == "[current-time] network request failed: connection refused"

    @pytest.mark.asyncio
    async def test_timeout_becomes_network_failure(self) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        client = _build_client(_handler)

        with pytest.raises(NetworkFailure, match="timed out"):
            await client.execute(client.build_url("/api/x"), label="x")

    @pytest.mark.asyncio
    async def test_body_read_failure_becomes_empty_body(self) -> None:
        client = _build_client(lambda request: httpx.Response(200, stream=_FailingStream()))

        envelope = await client.execute(client.build_url("/api/x"), label="x")

        assert envelope.status_code == 200
        assert envelope.text == ""

    @pytest.mark.asyncio
    async def test_default_and_extra_headers_are_merged(self) -> None:
        seen: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="{}")

        client = _build_client(_handler, default_headers={"user-agent": "timezone-agent"})

        await client.execute(
            client.build_url("/api/x"),
            label="x",
            headers={"x-tags": ["a", "b"], "accept": "application/json"},
        )

        request = seen[0]
        assert request.headers["accept"] == "application/json"
        assert request.headers["user-agent"] == "timezone-agent"
        assert request.headers["x-tags"] == "a, b"


class TestFetchJson:
    @pytest.mark.asyncio
    async def test_get_with_query_returns_data_and_source(self) -> None:
        seen: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"timeZone": "UTC"})

        client = _build_client(_handler)

        result = await client.fetch_json(
            "timezone-info", "/api/timezone/zone", query={"timeZone": "UTC", "skip": None}
        )

        assert result.data == {"timeZone": "UTC"}
        assert result.source == str(seen[0].url)
        assert seen[0].method == "GET"
        assert "skip" not in seen[0].url.params

    @pytest.mark.asyncio
    async def test_post_sends_json_body_with_content_type(self) -> None:
        seen: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"result": "ok"})

        client = _build_client(_handler)
        body = {"timeZone": "UTC", "timeSpan": "0:01:00:00"}

        await client.fetch_json(
            "increment-current-time",
            "/api/calculation/current/increment",
            method="POST",
            json_body=body,
        )

        request = seen[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == body

    @pytest.mark.asyncio
    async def test_error_status_with_valid_json_is_never_decoded(self) -> None:
        client = _build_client(lambda request: httpx.Response(500, json={"dayOfYear": 7}))

        with pytest.raises(HttpStatusFailure) as exc_info:
            await client.fetch_json("day-of-year", "/api/conversion/dayoftheyear/2026-01-07")

        assert exc_info.value.status_code == 500
        assert "dayOfYear" in exc_info.value.body_preview

    @pytest.mark.asyncio
    async def test_empty_body_with_success_status(self) -> None:
        client = _build_client(lambda request: httpx.Response(200, text=""))

        with pytest.raises(EmptyBodyFailure):
            await client.fetch_json("current-time", "/api/time/current/zone")

    @pytest.mark.asyncio
    async def test_invalid_json_with_success_status(self) -> None:
        client = _build_client(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(JsonParseFailure) as exc_info:
            await client.fetch_json("current-time", "/api/time/current/zone")

        assert "not json" in exc_info.value.body_preview

    @pytest.mark.asyncio
    async def test_body_read_failure_surfaces_as_empty_body(self) -> None:
        client = _build_client(lambda request: httpx.Response(200, stream=_FailingStream()))

        with pytest.raises(EmptyBodyFailure):
            await client.fetch_json("x", "/api/x")

    @pytest.mark.asyncio
    async def test_relative_paths_use_configured_base(self) -> None:
        seen: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        client = _build_client(_handler, base_url="https://mirror.example")

        result = await client.fetch_json("available-timezones", "/api/timezone/availabletimezones")

        assert seen[0].url.host == "mirror.example"
        assert result.source.startswith("https://mirror.example/")

    @pytest.mark.asyncio
    async def test_redirect_is_followed_and_source_keeps_built_url(self) -> None:
        seen: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.scheme == "http":
                return httpx.Response(
                    301, headers={"location": str(request.url.copy_with(scheme="https"))}
                )
            return httpx.Response(200, json={"timeZone": "UTC"})

        client = _build_client(_handler, base_url="http://timeapi.io")

        result = await client.fetch_json(
            "timezone-info", "/api/timezone/zone", query={"timeZone": "UTC"}
        )

        assert result.data == {"timeZone": "UTC"}
        assert [request.url.scheme for request in seen] == ["http", "https"]
        assert result.source == "http://timeapi.io/api/timezone/zone?timeZone=UTC"


class TestFetchText:
    @pytest.mark.asyncio
    async def test_plain_text_is_returned_without_parsing(self) -> None:
        client = _build_client(lambda request: httpx.Response(200, text="Healthy"))

        result = await client.fetch_text("health-check", "/api/health/check")

        assert result.data == "Healthy"
        assert result.source == "https://timeapi.io/api/health/check"

    @pytest.mark.asyncio
    async def test_error_status_raises(self) -> None:
        client = _build_client(lambda request: httpx.Response(500, text="Unhealthy"))

        with pytest.raises(HttpStatusFailure):
            await client.fetch_text("health-check", "/api/health/check")


def test_factory_uses_settings() -> None:
    client = create_timeapi_client(
        TimeApiSettings(base_url="https://mirror.example", request_timeout_seconds=5.0)
    )

    assert client.base_url == "https://mirror.example"


def test_config_exposes_only_settings_backed_fields() -> None:
    config = TimeApiClientConfig(base_url="https://mirror.example", timeout_seconds=5.0)

    assert not hasattr(config, "verify_ssl")
    assert config.default_headers == {}
