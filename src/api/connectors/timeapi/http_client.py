"""Cliente HTTP para a API timeapi.io.

Responsabilidades:
- Montar URL e headers de cada chamada
- Distinguir falha de transporte de resposta (mesmo de erro)
- Ler o corpo inteiro uma única vez e classificar o status
- Decodificar JSON com falhas distintas para corpo vazio e inválido

Sem retry e sem cache: cada chamada é independente e falha rápido.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.timeapi.errors import NetworkFailure
from api.connectors.timeapi.headers import HeadersInit, default_headers, merge_headers
from api.connectors.timeapi.response import ResponseEnvelope, decode_json_body, ensure_success
from api.connectors.timeapi.urls import TIMEAPI_BASE_URL, QueryValue, build_url

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import TimeApiSettings

logger = logging.getLogger(__name__)


@dataclass
class TimeApiClientConfig:
    """Configuração do cliente timeapi.io."""

    base_url: str = TIMEAPI_BASE_URL
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Dado decodificado e URL exata invocada."""

    data: Any
    source: str


class TimeApiClient:
    """Cliente assíncrono para timeapi.io.

    Um `httpx.AsyncClient` novo é aberto por chamada; nenhuma
    informação é compartilhada entre invocações.
    """

    def __init__(
        self,
        config: TimeApiClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or TimeApiClientConfig()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def build_url(self, path: str, query: Mapping[str, QueryValue] | None = None) -> httpx.URL:
        return build_url(path, query, base_url=self._config.base_url)

    async def execute(
        self,
        url: httpx.URL,
        *,
        label: str,
        method: str = "GET",
        headers: HeadersInit | None = None,
        body: str | None = None,
    ) -> ResponseEnvelope:
        """Executa a requisição e lê o corpo inteiro como texto.

        Raises:
            NetworkFailure: Nenhuma resposta obtida
        """
        merged = merge_headers(default_headers(), self._config.default_headers)
        merge_headers(merged, headers)
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream(method, url, headers=merged, content=body) as response:
                    text = await _read_text(response, label)
        except httpx.TransportError as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning(
                "timeapi_request_failed",
                extra={"label": label, "method": method, "error_type": type(exc).__name__},
            )
            raise NetworkFailure(label, reason) from exc

        logger.debug(
            "timeapi_response_received",
            extra={"label": label, "method": method, "status_code": response.status_code},
        )
        return ResponseEnvelope(status_code=response.status_code, text=text, url=str(url))

    async def fetch_json(
        self,
        label: str,
        path: str,
        *,
        query: Mapping[str, QueryValue] | None = None,
        method: str = "GET",
        json_body: Any = None,
        headers: HeadersInit | None = None,
    ) -> FetchResult:
        """Executa chamada e retorna o JSON decodificado junto com a URL.

        Quando `json_body` é informado o corpo é serializado e enviado
        com `Content-Type: application/json`.
        """
        url = self.build_url(path, query)
        body: str | None = None
        request_headers = merge_headers(httpx.Headers(), headers)
        if json_body is not None:
            body = json.dumps(json_body)
            merge_headers(request_headers, {"content-type": "application/json"})
        envelope = await self.execute(
            url, label=label, method=method, headers=request_headers, body=body
        )
        ensure_success(envelope, label)
        return FetchResult(data=decode_json_body(envelope.text, label), source=str(url))

    async def fetch_text(
        self,
        label: str,
        path: str,
        *,
        query: Mapping[str, QueryValue] | None = None,
        headers: HeadersInit | None = None,
    ) -> FetchResult:
        """Executa GET e retorna o corpo textual (sem parse JSON)."""
        url = self.build_url(path, query)
        envelope = await self.execute(url, label=label, headers=headers)
        ensure_success(envelope, label)
        return FetchResult(data=envelope.text, source=str(url))


async def _read_text(response: httpx.Response, label: str) -> str:
    """Lê corpo como texto; falha de leitura vira corpo vazio."""
    try:
        await response.aread()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        logger.warning(
            "timeapi_body_read_failed",
            extra={"label": label, "error_type": type(exc).__name__},
        )
        return ""
    return response.text


def create_timeapi_client(settings: TimeApiSettings | None = None) -> TimeApiClient:
    """Factory do cliente com config carregada do ambiente."""
    # Import local para evitar dependência circular
    from config.settings import get_timeapi_settings

    timeapi = settings or get_timeapi_settings()
    config = TimeApiClientConfig(
        base_url=timeapi.base_url,
        timeout_seconds=timeapi.request_timeout_seconds,
    )
    return TimeApiClient(config=config)
