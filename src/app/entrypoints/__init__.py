"""Entrypoints do agente — contrato de input + handler por chave.

Uso:
    from app.entrypoints import build_entrypoint_registry

    registry = build_entrypoint_registry()
    output = await registry.invoke("current-time", {"timeZone": "UTC"}, client)
"""

from app.entrypoints.catalog import build_entrypoint_registry
from app.entrypoints.registry import (
    EntrypointContext,
    EntrypointDefinition,
    EntrypointNotFound,
    EntrypointRegistry,
)

__all__ = [
    "EntrypointContext",
    "EntrypointDefinition",
    "EntrypointNotFound",
    "EntrypointRegistry",
    "build_entrypoint_registry",
]
