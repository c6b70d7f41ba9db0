"""Registro de entrypoints.

Cada entrypoint liga uma chave única a uma descrição, um contrato de
input (modelo pydantic) e um handler assíncrono. O registro é construído
uma vez no startup e apenas lido depois disso.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from api.connectors.timeapi.errors import ValidationFailure

if TYPE_CHECKING:
    from api.connectors.timeapi import FetchResult, TimeApiClient
    from api.connectors.timeapi.urls import QueryValue

logger = logging.getLogger(__name__)


class EntrypointNotFound(KeyError):
    """Chave de entrypoint não registrada."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


@dataclass(frozen=True, slots=True)
class EntrypointContext:
    """Contexto de uma invocação: chave (label) e cliente timeapi.io."""

    key: str
    client: TimeApiClient

    async def get_json(
        self,
        path: str,
        query: dict[str, QueryValue] | None = None,
    ) -> FetchResult:
        return await self.client.fetch_json(self.key, path, query=query)

    async def post_json(self, path: str, body: dict[str, Any]) -> FetchResult:
        return await self.client.fetch_json(self.key, path, method="POST", json_body=body)

    async def get_text(self, path: str) -> FetchResult:
        return await self.client.fetch_text(self.key, path)


Handler = Callable[[Any, EntrypointContext], Awaitable[dict[str, Any]]]


@dataclass(frozen=True, slots=True)
class EntrypointDefinition:
    """Definição imutável de um entrypoint."""

    key: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


class EntrypointRegistry:
    """Registro append-only de entrypoints.

    `register` anota a chave na lista ordenada usada em diagnósticos de
    startup e então grava a definição na tabela consultada por `invoke`.
    Não deduplica nem reordena.
    """

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._definitions: dict[str, EntrypointDefinition] = {}

    def register(self, definition: EntrypointDefinition) -> EntrypointDefinition:
        self._keys.append(definition.key)
        self._definitions[definition.key] = definition
        return definition

    def add(
        self,
        key: str,
        *,
        description: str,
        input_model: type[BaseModel],
        handler: Handler,
    ) -> EntrypointDefinition:
        return self.register(
            EntrypointDefinition(
                key=key,
                description=description,
                input_model=input_model,
                handler=handler,
            )
        )

    @property
    def keys(self) -> list[str]:
        """Chaves na ordem de registro."""
        return list(self._keys)

    def get(self, key: str) -> EntrypointDefinition | None:
        return self._definitions.get(key)

    def definitions(self) -> list[EntrypointDefinition]:
        return [self._definitions[key] for key in dict.fromkeys(self._keys)]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    async def invoke(
        self,
        key: str,
        raw_input: dict[str, Any] | None,
        client: TimeApiClient,
    ) -> dict[str, Any]:
        """Valida o input e executa o handler do entrypoint.

        Raises:
            EntrypointNotFound: Chave não registrada
            ValidationFailure: Input fora do contrato (nenhum IO feito)
            TimeApiError: Falha classificada da chamada externa
        """
        definition = self._definitions.get(key)
        if definition is None:
            raise EntrypointNotFound(key)

        try:
            payload = definition.input_model.model_validate(raw_input or {})
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False, include_input=False)
            logger.info(
                "entrypoint_input_invalid",
                extra={"entrypoint": key, "error_count": len(errors)},
            )
            raise ValidationFailure(key, errors) from exc

        return await definition.handler(payload, EntrypointContext(key=key, client=client))
