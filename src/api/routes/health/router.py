"""Endpoints de liveness e readiness."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.connectors.timeapi import TimeApiError
from app.constants import AGENT_NAME, AGENT_VERSION

logger = logging.getLogger(__name__)

router = APIRouter()

UPSTREAM_HEALTH_PATH = "/api/health/check"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = AGENT_VERSION


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=AGENT_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — confirma que a timeapi.io responde."""
    timeapi_check = await _check_timeapi(getattr(request.app.state, "timeapi_client", None))
    ready = timeapi_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"timeapi": timeapi_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_timeapi(timeapi_client: Any | None) -> DependencyCheck:
    if timeapi_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await timeapi_client.fetch_text("readiness", UPSTREAM_HEALTH_PATH)
    except TimeApiError as exc:
        logger.warning("readiness_timeapi_check_failed", extra={"kind": str(exc.kind)})
        return DependencyCheck(status="failed", error=str(exc.kind))
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))
