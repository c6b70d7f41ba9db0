"""Manifesto público do agente (`/.well-known/agent.json`)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from api.routes.entrypoints.router import describe_entrypoints
from app.constants import AGENT_DESCRIPTION, AGENT_NAME, AGENT_VERSION
from config.settings import get_payment_settings

router = APIRouter()


@router.get("/.well-known/agent.json")
async def agent_manifest(request: Request) -> dict[str, Any]:
    """Identidade, pagamentos anunciados e entrypoints do agente."""
    return {
        "name": AGENT_NAME,
        "version": AGENT_VERSION,
        "description": AGENT_DESCRIPTION,
        "payments": get_payment_settings().as_dict(),
        "entrypoints": describe_entrypoints(request.app.state.registry),
    }
