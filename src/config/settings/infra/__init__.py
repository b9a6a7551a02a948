"""Agregador de settings de infraestrutura."""

from __future__ import annotations

from config.settings.infra.deployer import (
    DeployerSettings,
    get_deployer_settings,
)
from config.settings.infra.firestore import (
    RegistryBackend,
    RegistrySettings,
    get_registry_settings,
)

__all__ = [
    "DeployerSettings",
    "RegistryBackend",
    "RegistrySettings",
    "get_deployer_settings",
    "get_registry_settings",
]
