"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings,
monta o registro de entrypoints e emite o resumo de startup.

Uso:
    from app.bootstrap import initialize_app, log_startup_summary

    initialize_app()
    registry = build_entrypoint_registry()
    log_startup_summary(registry, port=3000)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_payment_settings,
    get_timeapi_settings,
)

if TYPE_CHECKING:
    from app.entrypoints import EntrypointRegistry
    from config.settings import PaymentSettings

# Nome do serviço para logs
SERVICE_NAME = "timezone_agent"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço. Em desenvolvimento com
    DEBUG ativo o log sai em texto de uma linha.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        json_format=not (base.is_development and base.debug),
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG, texto)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
        json_format=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"timeapi: {error}" for error in get_timeapi_settings().validate())
    errors.extend(f"payments: {error}" for error in get_payment_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def log_startup_summary(
    registry: EntrypointRegistry,
    *,
    port: int,
    payments: PaymentSettings | None = None,
) -> list[str]:
    """Loga endereço, preço padrão e cada entrypoint registrado.

    Returns:
        Linhas emitidas, na ordem de registro dos entrypoints.
    """
    payment_settings = payments or get_payment_settings()
    lines = [
        f"[agent-kit] ready on http://localhost:{port} "
        f"(defaultPrice={payment_settings.default_price or 'unset'})"
    ]
    lines.extend(f"[agent-kit] entrypoint registered: {key} (invoke)" for key in registry.keys)

    for line in lines:
        logger.info(line, extra={"component": "bootstrap", "entrypoint_count": len(registry)})
    return lines
