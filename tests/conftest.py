"""Configuração do pytest para o projeto forja."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz do repositório ao PYTHONPATH para imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas com lru_cache; cada teste lê o env do zero."""
    from config.settings import (
        get_base_settings,
        get_deploy_settings,
        get_deployer_settings,
        get_registry_settings,
        get_workspace_settings,
    )

    getters = (
        get_base_settings,
        get_deploy_settings,
        get_deployer_settings,
        get_registry_settings,
        get_workspace_settings,
    )
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()


@pytest.fixture
def harness():
    """Orquestrador com todos os colaboradores falsos."""
    from tests.fakes.fake_collaborators import Harness

    return Harness.create()
