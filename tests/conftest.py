"""Configuração do pytest para o cliente Dragon Ball."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    """Settings e instâncias compartilhadas são recriadas a cada teste."""
    from app.bootstrap import reset_shared_instances
    from config.settings import get_api_settings, get_base_settings

    get_api_settings.cache_clear()
    get_base_settings.cache_clear()
    reset_shared_instances()
    yield
    get_api_settings.cache_clear()
    get_base_settings.cache_clear()
    reset_shared_instances()
