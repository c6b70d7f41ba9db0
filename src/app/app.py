"""Entrypoint da aplicação timezone-agent.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app   # porta lida de PORT (padrão 3000)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.connectors.timeapi import create_timeapi_client
from api.routes import create_api_router
from app.bootstrap import initialize_app, log_startup_summary, validate_runtime_settings
from app.constants import AGENT_DESCRIPTION, AGENT_NAME, AGENT_VERSION
from app.entrypoints import build_entrypoint_registry
from config.logging import get_logger
from config.settings import get_server_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from api.connectors.timeapi import TimeApiClient
    from app.entrypoints import EntrypointRegistry

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: valida settings e loga o resumo de entrypoints."""
    logger.info("app_starting", extra={"service": AGENT_NAME})
    validate_runtime_settings()
    log_startup_summary(app.state.registry, port=get_server_settings().port)

    yield

    logger.info("app_shutting_down", extra={"service": AGENT_NAME})


def create_app(
    *,
    registry: EntrypointRegistry | None = None,
    timeapi_client: TimeApiClient | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        registry: Registro de entrypoints (padrão: catálogo completo)
        timeapi_client: Cliente timeapi.io (padrão: config do ambiente)
    """
    fastapi_app = FastAPI(
        title=AGENT_NAME,
        description=AGENT_DESCRIPTION,
        version=AGENT_VERSION,
        lifespan=lifespan,
    )
    if registry is None:
        registry = build_entrypoint_registry()
    fastapi_app.state.registry = registry
    fastapi_app.state.timeapi_client = timeapi_client or create_timeapi_client()

    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={"service": AGENT_NAME, "entrypoint_count": len(fastapi_app.state.registry)},
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    server = get_server_settings()
    uvicorn.run(app, host=server.host, port=server.port, log_config=None)


if __name__ == "__main__":
    main()
