"""Configuração do pytest para o projeto timezone-agent."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True, scope="session")
def _test_logging():
    """Logging em texto e DEBUG durante a suíte."""
    from app.bootstrap import initialize_test_app

    initialize_test_app()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste lê o ambiente de novo."""
    from config.settings import (
        get_base_settings,
        get_payment_settings,
        get_server_settings,
        get_timeapi_settings,
    )

    getters = (get_base_settings, get_payment_settings, get_server_settings, get_timeapi_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
