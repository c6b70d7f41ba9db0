"""Rotas HTTP do agente.

Estrutura:
- routes/health/: liveness e readiness (checa a timeapi.io)
- routes/entrypoints/: listagem e invocação de entrypoints
- routes/manifest/: manifesto `/.well-known/agent.json`

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
