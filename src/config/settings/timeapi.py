"""Settings da integração com timeapi.io."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TIMEAPI_DEFAULT_BASE_URL: str = "https://timeapi.io"
TIMEAPI_DEFAULT_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True)
class TimeApiSettings:
    """Configurações do cliente timeapi.io.

    Attributes:
        base_url: Origem da API
        request_timeout_seconds: Timeout de transporte por chamada
    """

    base_url: str = TIMEAPI_DEFAULT_BASE_URL
    request_timeout_seconds: float = TIMEAPI_DEFAULT_TIMEOUT_SECONDS

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.base_url.startswith(("http://", "https://")):
            errors.append(f"TIMEAPI_BASE_URL inválida: {self.base_url}")
        return errors


def _parse_timeout(raw_value: str | None) -> float:
    """Timeout positivo da env; valor ausente ou inválido usa o padrão."""
    if not raw_value:
        return TIMEAPI_DEFAULT_TIMEOUT_SECONDS
    try:
        parsed = float(raw_value)
    except ValueError:
        return TIMEAPI_DEFAULT_TIMEOUT_SECONDS
    return parsed if parsed > 0 else TIMEAPI_DEFAULT_TIMEOUT_SECONDS


def _load_timeapi_from_env() -> TimeApiSettings:
    """Carrega TimeApiSettings de variáveis de ambiente."""
    return TimeApiSettings(
        base_url=os.getenv("TIMEAPI_BASE_URL", TIMEAPI_DEFAULT_BASE_URL).rstrip("/"),
        request_timeout_seconds=_parse_timeout(os.getenv("TIMEAPI_TIMEOUT_SECONDS")),
    )


@lru_cache(maxsize=1)
def get_timeapi_settings() -> TimeApiSettings:
    """Retorna instância cacheada de TimeApiSettings."""
    return _load_timeapi_from_env()


__all__ = ["TimeApiSettings", "get_timeapi_settings"]
