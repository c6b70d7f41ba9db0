"""Agregador de settings do timezone-agent.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Payments (anunciado no manifesto, não aplicado)
from config.settings.payments import (
    PaymentSettings,
    get_payment_settings,
)

# Servidor HTTP
from config.settings.server import (
    ServerSettings,
    get_server_settings,
    resolve_port,
)

# Upstream timeapi.io
from config.settings.timeapi import (
    TimeApiSettings,
    get_timeapi_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "PaymentSettings",
    "ServerSettings",
    "TimeApiSettings",
    "get_base_settings",
    "get_payment_settings",
    "get_server_settings",
    "get_timeapi_settings",
    "resolve_port",
]
