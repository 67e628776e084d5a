"""Configuração do pytest para o projeto record_fsm."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (pacotes) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config.settings import get_engine_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_engine_settings():
    """Settings são cacheadas; cada teste parte do ambiente corrente."""
    get_engine_settings.cache_clear()
    yield
    get_engine_settings.cache_clear()
