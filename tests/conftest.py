"""Configuração do pytest para o gateway de clientes."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Limpa o cache das settings para que monkeypatch.setenv tenha efeito."""
    from config.settings import (
        get_base_settings,
        get_customer_api_settings,
        get_oauth_settings,
    )

    for getter in (get_base_settings, get_customer_api_settings, get_oauth_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_customer_api_settings, get_oauth_settings):
        getter.cache_clear()
