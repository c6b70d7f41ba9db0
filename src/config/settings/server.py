"""Settings do servidor HTTP (host e porta)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PORT: int = 3000
DEFAULT_HOST: str = "0.0.0.0"  # noqa: S104


def resolve_port(candidate: str | None, fallback: int = DEFAULT_PORT) -> int:
    """Converte a porta da env; ausente ou não numérica usa `fallback`."""
    if not candidate or not candidate.strip():
        return fallback
    try:
        return int(candidate.strip(), 10)
    except ValueError:
        return fallback


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do servidor.

    Attributes:
        host: Interface de bind
        port: Porta HTTP
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def _load_server_from_env() -> ServerSettings:
    """Carrega ServerSettings de variáveis de ambiente."""
    return ServerSettings(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=resolve_port(os.getenv("PORT")),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_server_from_env()


__all__ = ["ServerSettings", "get_server_settings", "resolve_port"]
