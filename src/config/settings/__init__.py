"""Agregador de settings do forja.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Deploy settings
from config.settings.deploy import (
    DEFAULT_ENVIRONMENT_NAME,
    ConfirmFailurePolicy,
    DeploySettings,
    get_deploy_settings,
)

# Infrastructure settings
from config.settings.infra import (
    DeployerSettings,
    RegistryBackend,
    RegistrySettings,
    get_deployer_settings,
    get_registry_settings,
)

# Workspace settings
from config.settings.workspace import (
    DEFAULT_WORKSPACE_DIR_NAME,
    WorkspaceSettings,
    get_workspace_settings,
)

__all__ = [
    # Constants
    "DEFAULT_ENVIRONMENT_NAME",
    "DEFAULT_WORKSPACE_DIR_NAME",
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    # Deploy
    "ConfirmFailurePolicy",
    "DeploySettings",
    # Infrastructure
    "DeployerSettings",
    "Environment",
    "RegistryBackend",
    "RegistrySettings",
    # Workspace
    "WorkspaceSettings",
    "get_base_settings",
    "get_deploy_settings",
    "get_deployer_settings",
    "get_registry_settings",
    "get_workspace_settings",
]
